# netflix_analytics/model/title.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Mapping, Optional

import pandas as pd


class ContentType(str, Enum):
    """Die beiden Inhaltstypen des Katalogs (Werte exakt wie in den Rohdaten)."""

    MOVIE = "Movie"
    TV_SHOW = "TV Show"


# Reihenfolge der Spalten im Katalog-DataFrame
TITLE_COLUMNS: list[str] = [
    "show_id",
    "type",
    "title",
    "director",
    "casts",
    "country",
    "date_added",
    "release_year",
    "rating",
    "duration",
    "listed_in",
    "description",
]

OPTIONAL_TEXT_COLUMNS: list[str] = [
    "director",
    "casts",
    "country",
    "date_added",
    "rating",
    "duration",
    "listed_in",
    "description",
]

# Selektor -> Quellspalte der mehrwertigen Felder
MULTI_VALUE_FIELDS: dict[str, str] = {
    "genre": "listed_in",
    "country": "country",
    "actor": "casts",
    "director": "director",
}


def _clean_optional(value: Any) -> Optional[str]:
    # NaN/NA/None aus pandas -> None, Strings bleiben unverändert
    if value is None or pd.isna(value):
        return None
    return str(value)


@dataclass(frozen=True)
class Title:
    """Ein Katalogeintrag (eine Zeile der Titel-Tabelle).

    Mehrwertige Felder (director, casts, country, listed_in) bleiben als
    kommaseparierte Rohstrings erhalten; die Zerlegung übernimmt
    ``transform.expand``.
    """

    show_id: str
    type: ContentType
    title: str
    release_year: int
    director: Optional[str] = None
    casts: Optional[str] = None
    country: Optional[str] = None
    date_added: Optional[str] = None
    rating: Optional[str] = None
    duration: Optional[str] = None
    listed_in: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "Title":
        """Baut einen Title aus einer DataFrame-Zeile oder einem dict."""
        return cls(
            show_id=str(row["show_id"]),
            type=ContentType(row["type"]),
            title=str(row["title"]),
            release_year=int(row["release_year"]),
            **{col: _clean_optional(row.get(col)) for col in OPTIONAL_TEXT_COLUMNS},
        )

    def to_row(self) -> dict[str, Any]:
        row = asdict(self)
        row["type"] = self.type.value
        return {col: row[col] for col in TITLE_COLUMNS}
