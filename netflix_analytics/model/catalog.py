# netflix_analytics/model/catalog.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

import pandas as pd

from netflix_analytics.model.title import TITLE_COLUMNS, ContentType, Title
from netflix_analytics.transform.classify import DEFAULT_KEYWORDS, enrich_titles
from netflix_analytics.transform.expand import explode_field
from netflix_analytics.utils.schema_check import drop_invalid_rows


class Catalog:
    """
    Unveränderlicher Datensatz-Handle, der explizit an jede Analyse
    übergeben wird.

    Die Rohdaten werden beim Erzeugen einmal geprüft (drop_invalid_rows):
    Vertragsfehler brechen ab, einzelne ungültige Zeilen werden verworfen.
    Danach wird nichts mehr verändert. Abgeleitete Sichten (angereicherte Spalten,
    explodierte mehrwertige Felder) werden beim ersten Zugriff berechnet und
    zwischengespeichert; herausgegeben werden immer Kopien.
    """

    def __init__(
        self,
        frame: pd.DataFrame,
        *,
        keywords: Sequence[str] = DEFAULT_KEYWORDS,
        name: str = "Katalog",
        error_report_path: str | Path | None = None,
        invalid_rows_path: str | Path | None = None,
    ):
        df = frame.copy()
        # fehlende optionale Spalten als leer ergänzen
        for col in TITLE_COLUMNS:
            if col not in df.columns and col not in ("show_id", "type", "title", "release_year"):
                df[col] = None
        df = drop_invalid_rows(
            df,
            df_name=name,
            error_report_path=error_report_path,
            invalid_rows_output_path=invalid_rows_path,
        )

        df = df[TITLE_COLUMNS + [c for c in df.columns if c not in TITLE_COLUMNS]].copy()
        df["show_id"] = df["show_id"].astype(str)
        df["release_year"] = pd.to_numeric(df["release_year"]).astype("int64")
        self._frame: pd.DataFrame = df.reset_index(drop=True)
        self.name = name
        self.keywords: tuple[str, ...] = tuple(keywords)
        self._enriched: pd.DataFrame | None = None
        self._expanded: dict[str, pd.DataFrame] = {}
        logging.info(f"{name}: {len(self._frame)} Titel geladen.")

    # ------------------------------------------------------------ #
    # Konstruktoren                                                #
    # ------------------------------------------------------------ #
    @classmethod
    def from_titles(cls, titles: Iterable[Title], **kwargs) -> "Catalog":
        rows = [t.to_row() for t in titles]
        return cls(pd.DataFrame(rows, columns=TITLE_COLUMNS), **kwargs)

    @classmethod
    def from_records(cls, records: Iterable[dict], **kwargs) -> "Catalog":
        return cls(pd.DataFrame(list(records)), **kwargs)

    # ------------------------------------------------------------ #
    # Sichten                                                      #
    # ------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._frame)

    @property
    def frame(self) -> pd.DataFrame:
        """Kopie der Rohdaten (Spalten wie TITLE_COLUMNS)."""
        return self._frame.copy()

    def titles(self) -> Iterator[Title]:
        for row in self._frame.to_dict(orient="records"):
            yield Title.from_mapping(row)

    def enriched(self) -> pd.DataFrame:
        """Rohdaten plus abgeleitete Spalten aus transform.classify."""
        if self._enriched is None:
            self._enriched = enrich_titles(self._frame, keywords=self.keywords)
            logging.debug(f"{self.name}: abgeleitete Spalten berechnet.")
        return self._enriched.copy()

    def expanded(self, field: str) -> pd.DataFrame:
        """
        Eine Zeile pro (Titel, atomarer Wert) für 'genre', 'country',
        'actor' oder 'director'; enthält auch die abgeleiteten Spalten.
        """
        if field not in self._expanded:
            if self._enriched is None:
                self.enriched()
            self._expanded[field] = explode_field(self._enriched, field)
        return self._expanded[field].copy()

    def of_type(self, content_type: ContentType | str) -> pd.DataFrame:
        content_type = ContentType(content_type)
        df = self._frame
        return df[df["type"] == content_type.value].reset_index(drop=True)
