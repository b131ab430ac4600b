# netflix_analytics/transform/expand.py
import logging
from typing import Iterable, Iterator, Optional, Tuple

import pandas as pd

from netflix_analytics.model.title import MULTI_VALUE_FIELDS, Title

DELIMITER = ","


def resolve_field(field: str) -> str:
    """Selektor ('genre', 'country', 'actor', 'director') -> Quellspalte."""
    try:
        return MULTI_VALUE_FIELDS[field]
    except KeyError:
        raise KeyError(
            f"Unbekanntes mehrwertiges Feld: {field!r} "
            f"(erlaubt: {', '.join(sorted(MULTI_VALUE_FIELDS))})"
        ) from None


def split_multi_value(value: Optional[str]) -> list[str]:
    """
    Zerlegt ein kommasepariertes Feld in atomare Werte.

    Tokens werden getrimmt, leere Tokens verworfen. None, NaN und ''
    liefern eine leere Liste. Wiederholungen innerhalb des Feldes bleiben
    erhalten; die Zählung pro show_id erfolgt erst in der Aggregation.
    """
    if value is None or not isinstance(value, str):
        return []
    return [tok.strip() for tok in value.split(DELIMITER) if tok.strip()]


def iter_atomic_values(titles: Iterable[Title], field: str) -> Iterator[Tuple[str, str]]:
    """Liefert lazy (show_id, atomarer Wert)-Paare für das gewählte Feld."""
    column = resolve_field(field)
    for title in titles:
        for token in split_multi_value(getattr(title, column)):
            yield title.show_id, token


def explode_field(
    df: pd.DataFrame,
    field: str,
    *,
    value_col: str | None = None,
) -> pd.DataFrame:
    """
    Tabellarische Variante von iter_atomic_values: eine Zeile pro
    (Titel, atomarer Wert). Alle übrigen Spalten des Titels werden
    mitgeführt, damit nachgelagerte Filter (type, release_year, ...) greifen.

    Args:
        df: Katalog-DataFrame (roh oder angereichert).
        field: Selektor aus MULTI_VALUE_FIELDS.
        value_col: Name der Ergebnisspalte, Standard ist der Selektor selbst.
                   Stimmt er mit der Quellspalte überein (z.B. 'country'),
                   wird diese durch den atomaren Wert ersetzt.

    Returns:
        DataFrame mit allen Spalten von df plus value_col. Titel ohne Werte
        tauchen nicht auf.
    """
    column = resolve_field(field)
    value_col = value_col or field
    if column not in df.columns:
        raise KeyError(f"Spalte {column!r} fehlt im DataFrame.")

    out = df.copy()
    out[value_col] = out[column].map(split_multi_value)
    out = out.explode(value_col, ignore_index=True)
    # leere Listen werden von explode zu NaN
    out = out[out[value_col].notna()].reset_index(drop=True)
    out[value_col] = out[value_col].astype(str)
    logging.debug(
        f"explode_field: {len(df)} Titel -> {len(out)} Paare für Feld '{field}' ({column})."
    )
    return out
