# netflix_analytics/reporting/summary_report.py
import logging
from pathlib import Path

import pandas as pd

from netflix_analytics.model.catalog import Catalog


def _first_value(results: dict[str, pd.DataFrame], name: str, col: str):
    df = results.get(name)
    if df is None or df.empty or col not in df.columns:
        return None
    return df[col].iloc[0]


def build_summary_lines(
    catalog: Catalog,
    results: dict[str, pd.DataFrame],
    max_rows: int = 10,
) -> list[str]:
    report_lines = []
    report_lines.append("======================================")
    report_lines.append("     Netflix-Katalog: Analysebericht     ")
    report_lines.append("======================================")
    report_lines.append(f"Datum der Analyse: {pd.Timestamp.now().strftime('%Y-%m-%d %H:%M:%S')}\n")

    report_lines.append("--- Allgemeine Statistiken ---")
    report_lines.append(f"Gesamtzahl der Titel: {len(catalog)}")

    by_type = results.get("count_by_type")
    if by_type is not None and not by_type.empty:
        for _, row in by_type.iterrows():
            report_lines.append(f"  - {row['type']}: {row['total_content']}")

    earliest = _first_value(results, "earliest_release_year", "earliest_release_year")
    if earliest is not None and pd.notna(earliest):
        report_lines.append(f"Frühestes Erscheinungsjahr: {earliest}")

    missing = results.get("missing_metadata_summary")
    if missing is not None and not missing.empty:
        report_lines.append("\n--- Vollständigkeit ---")
        for _, row in missing.iterrows():
            report_lines.append(
                f"  - {row['field']}: {row['missing_titles']} fehlend ({row['percent_missing']:.2f}%)"
            )

    report_lines.append("\n--- Ergebnistabellen ---")
    for name, df in results.items():
        report_lines.append(f"\n[{name}] {len(df)} Zeile(n), Spalten: {', '.join(map(str, df.columns))}")
        if df.empty:
            report_lines.append("  (leer)")
            continue
        preview = df.head(max_rows).to_string(index=False)
        report_lines.extend("  " + line for line in preview.splitlines())
        if len(df) > max_rows:
            report_lines.append(f"  ... {len(df) - max_rows} weitere Zeile(n)")

    return report_lines


def write_summary_report(
    catalog: Catalog,
    results: dict[str, pd.DataFrame],
    report_path: Path,
    max_rows: int = 10,
) -> Path:
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    lines = build_summary_lines(catalog, results, max_rows=max_rows)
    report_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logging.info(f"Analysebericht gespeichert unter: {report_path}")
    return report_path
