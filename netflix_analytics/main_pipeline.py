import argparse
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd
import yaml

from netflix_analytics.adapters.netflix_adapter import NetflixCsvAdapter
from netflix_analytics.loaders.csv_loader import CsvLoader
from netflix_analytics.model.catalog import Catalog
from netflix_analytics.queries.registry import QUERY_REGISTRY, run_query
from netflix_analytics.reporting.summary_report import write_summary_report
from netflix_analytics.transform.classify import DEFAULT_KEYWORDS


class AnalyticsPipeline:
    """
    Lädt den Netflix-Katalog einmal, führt alle (oder ausgewählte)
    registrierten Analysen darauf aus und speichert jede Ergebnistabelle
    als CSV plus einen Textbericht.
    """

    def __init__(self, config_filename: str | Path = 'config.yaml'):
        """
        Initialisiert die Pipeline.

        Liest die Konfigurationsdatei ein und initialisiert das Logging.

        Args:
            config_filename: Pfad zur YAML-Konfigurationsdatei. Relative Pfade
                             werden zuerst im Arbeitsverzeichnis, dann neben
                             diesem Skript gesucht.

        Raises:
            FileNotFoundError: Wenn die Konfigurationsdatei nicht gefunden wird.
            yaml.YAMLError: Wenn die Konfigurationsdatei nicht gültig ist.
        """
        self.script_dir: Path = Path(__file__).resolve().parent
        config_path = Path(config_filename)
        if not config_path.is_absolute() and not config_path.exists():
            config_path = self.script_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {config_path}")
        # relative Pfade in der Config beziehen sich auf ihr Verzeichnis
        self.base_dir: Path = config_path.resolve().parent

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config: dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logging.error(
                f"Fehler beim Parsen der Konfigurationsdatei {config_path}: {e}"
            )
            raise

        if self.config is None:  # yaml.safe_load liefert None bei leerer Datei
            self.config = {}
            logging.warning(
                f"Konfigurationsdatei {config_path} ist leer oder enthält keine gültige YAML-Struktur."
            )

        log_config: dict = self.config.get('logging', {})
        level_name = str(log_config.get('level', 'INFO')).upper()
        level_value = getattr(logging, level_name, logging.INFO)
        logging.basicConfig(
            level=level_value,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')
        logging.getLogger().setLevel(level_value)
        self.logger = logging.getLogger(__name__)

    def _resolve_path(self, path_value: str | Path) -> Path:
        """
        Konvertiert einen Pfadwert aus der Konfiguration in ein absolutes Path-Objekt.

        Raises:
            ValueError: Wenn der path_value weder ein String noch ein Path-Objekt ist.
        """
        if isinstance(path_value, Path):
            path_obj = path_value
        elif isinstance(path_value, str):
            path_obj = Path(path_value)
        else:
            self.logger.error(
                f"Ungültiger Pfadwert in Config: {path_value} (Typ: {type(path_value)})"
            )
            raise ValueError(
                f"Pfadwert muss ein String oder Path-Objekt sein: {path_value}")

        if path_obj.is_absolute():
            return path_obj
        return (self.base_dir / path_obj).resolve()

    def _load_catalog(self) -> Catalog | None:
        input_cfg = self.config.get("input", {})
        file_path = input_cfg.get("file_path")
        if not file_path:
            self.logger.error("Kein 'input.file_path' in der Konfiguration gefunden.")
            return None

        adapter_cfg = {**input_cfg, "file_path": self._resolve_path(file_path)}
        keywords = self.config.get("classification", {}).get("keywords", list(DEFAULT_KEYWORDS))
        validation_dir = self._resolve_path(
            self.config.get("output", {}).get("validation_dir", "data/validation_reports"))
        try:
            frame = NetflixCsvAdapter(adapter_cfg).load_frame()
            catalog = Catalog(
                frame,
                keywords=keywords,
                name="Netflix-Katalog",
                error_report_path=validation_dir / "catalog_report.txt",
                invalid_rows_path=validation_dir / "catalog_invalid_rows.csv",
            )
        except Exception as e:
            self.logger.error(f"Fehler beim Laden des Katalogs: {e}", exc_info=True)
            return None
        return catalog

    def _selected_queries(self, only: Sequence[str] | None) -> list[str]:
        names = list(only) if only else self.config.get("queries", {}).get("enabled") or list(QUERY_REGISTRY)
        unknown = [n for n in names if n not in QUERY_REGISTRY]
        if unknown:
            self.logger.warning(f"Unbekannte Analysen werden übersprungen: {unknown}")
        return [n for n in names if n in QUERY_REGISTRY]

    def _run_queries(self, catalog: Catalog, names: list[str]) -> dict[str, pd.DataFrame]:
        params_cfg: dict = self.config.get("queries", {}).get("params", {}) or {}
        fold_accents = bool(self.config.get("search", {}).get("fold_accents", False))
        results: dict[str, pd.DataFrame] = {}
        for name in names:
            try:
                result = run_query(catalog, name, params_cfg.get(name), fold_accents=fold_accents)
            except Exception as e:
                # eine fehlerhafte Analyse bricht den Lauf nicht ab
                self.logger.error(f"Fehler in Analyse '{name}': {e}", exc_info=True)
                continue
            results[name] = result
            self.logger.info(f"Analyse '{name}' abgeschlossen: {len(result)} Zeile(n).")
        return results

    def _save_results(self, catalog: Catalog, results: dict[str, pd.DataFrame]) -> None:
        output_cfg = self.config.get("output", {})
        if not output_cfg.get("save_results", True):
            self.logger.info("Speichern der Ergebnisse deaktiviert (output.save_results=false).")
            return

        results_dir = self._resolve_path(output_cfg.get("results_dir", "data/results"))
        for name, df in results.items():
            try:
                CsvLoader(results_dir / f"{name}.csv").load(df)
            except OSError as e:
                self.logger.error(
                    f"Fehler beim Speichern der Analyse '{name}' nach {results_dir}: {e}",
                    exc_info=True)

        report_path_str = output_cfg.get("report_path")
        if report_path_str:
            try:
                write_summary_report(catalog, results, self._resolve_path(report_path_str))
            except OSError as e:
                self.logger.error(f"Fehler beim Speichern des Analyseberichts: {e}", exc_info=True)

    def run(self, only: Sequence[str] | None = None) -> dict[str, pd.DataFrame]:
        """Führt die gesamte Analyse aus und gibt die Ergebnistabellen zurück."""
        self.logger.info("Starte Katalog-Analyse...")

        catalog = self._load_catalog()
        if catalog is None:
            self.logger.error("Kein Katalog geladen. Analyse wird beendet.")
            return {}

        names = self._selected_queries(only)
        results = self._run_queries(catalog, names)
        self._save_results(catalog, results)

        failed = len(names) - len(results)
        self.logger.info(
            f"Analyse abgeschlossen: {len(results)} erfolgreich, {failed} fehlgeschlagen.")
        return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analysen über den Netflix-Titelkatalog")
    parser.add_argument("--config", default="config.yaml",
                        help="YAML-Konfiguration (Standard: config.yaml neben diesem Skript)")
    parser.add_argument("--only", nargs="+", metavar="NAME",
                        help="nur diese Analysen ausführen")
    parser.add_argument("--list", action="store_true",
                        help="registrierte Analysen auflisten und beenden")
    args = parser.parse_args(argv)

    if args.list:
        for name in QUERY_REGISTRY:
            print(name)
        return 0

    pipeline = AnalyticsPipeline(config_filename=args.config)
    results = pipeline.run(only=args.only)
    return 0 if results else 1


if __name__ == '__main__':
    raise SystemExit(main())
