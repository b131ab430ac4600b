# netflix_analytics/transform/classify.py

import logging
import re
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from netflix_analytics.model.title import ContentType

DEFAULT_KEYWORDS: tuple[str, ...] = ("kill", "violence")
BAD_CONTENT = "Bad Content"
GOOD_CONTENT = "Good Content"

LONG, MEDIUM, SHORT = "Long", "Medium", "Short"
MISSING_FLAG_COLUMNS: dict[str, str] = {
    "director": "director_missing",
    "casts": "casts_missing",
    "country": "country_missing",
}

_LEADING_INT_RE = re.compile(r"^\s*(\d+)(?:\s|$)", re.ASCII)


def is_missing(value: Any) -> bool:
    """None, NaN/NA und '' gelten gleichermaßen als fehlend."""
    if isinstance(value, str):
        return value == ""
    return value is None or bool(pd.isna(value))


def _leading_int(duration: Any) -> Optional[int]:
    # "90 min" -> 90, "2 Seasons" -> 2, alles andere -> None
    if not isinstance(duration, str):
        return None
    match = _LEADING_INT_RE.match(duration)
    return int(match.group(1)) if match else None


def minutes(duration: Any, content_type: Any) -> Optional[int]:
    """Laufzeit in Minuten, nur für Filme; sonst oder bei kaputtem Wert None."""
    if content_type != ContentType.MOVIE:
        return None
    return _leading_int(duration)


def seasons(duration: Any, content_type: Any) -> Optional[int]:
    """Anzahl Staffeln, nur für TV-Shows."""
    if content_type != ContentType.TV_SHOW:
        return None
    return _leading_int(duration)


def duration_bucket(minutes_value: Optional[int]) -> Optional[str]:
    """Long > 180, Medium 60..180 (beide Grenzen inklusive), Short < 60."""
    if minutes_value is None or pd.isna(minutes_value):
        return None
    if minutes_value > 180:
        return LONG
    if minutes_value >= 60:
        return MEDIUM
    return SHORT


def parse_date_added(date_added: Any) -> Optional[pd.Timestamp]:
    if is_missing(date_added):
        return None
    parsed = pd.to_datetime(str(date_added).strip(), errors="coerce")
    return None if pd.isna(parsed) else parsed


def year_added(date_added: Any) -> Optional[int]:
    """Jahr aus date_added; fehlend oder nicht parsebar -> None (kein Ersatzjahr)."""
    parsed = parse_date_added(date_added)
    return None if parsed is None else int(parsed.year)


def years_between_add_and_release(date_added: Any, release_year: Any) -> Optional[int]:
    """year_added - release_year. Negative Werte bleiben erhalten."""
    added = year_added(date_added)
    if added is None or release_year is None or pd.isna(release_year):
        return None
    return added - int(release_year)


def content_category(description: Any, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> str:
    """
    Teilstring-Suche ohne Wortgrenzen, unabhängig von Groß-/Kleinschreibung:
    'skill' enthält 'kill' und gilt daher als Bad Content.
    """
    text = description.lower() if isinstance(description, str) else ""
    if any(k.lower() in text for k in keywords if k):
        return BAD_CONTENT
    return GOOD_CONTENT


def _keyword_mask(descriptions: pd.Series, keywords: Iterable[str]) -> pd.Series:
    keywords = [k for k in keywords if k]
    if not keywords:
        return pd.Series(False, index=descriptions.index)
    pattern = "|".join(re.escape(k) for k in keywords)
    return (
        descriptions.astype("string")
        .str.contains(pattern, case=False, regex=True)
        .fillna(False)
        .astype(bool)
    )


def enrich_titles(df: pd.DataFrame, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> pd.DataFrame:
    """
    Ergänzt alle abgeleiteten Spalten (vektorisiert, gleiche Semantik wie die
    Einzelfunktionen oben):

    • minutes, seasons            Int64, NA bei falschem Typ oder kaputtem Wert
    • duration_bucket             Long/Medium/Short, NA ohne Minuten
    • date_added_parsed           datetime64, NaT wenn nicht parsebar
    • year_added                  Int64
    • years_since_release         Int64 (year_added - release_year, auch negativ)
    • director_missing, casts_missing, country_missing   bool
    • content_category            Bad Content / Good Content
    """
    out = df.copy()

    # ---------- Dauer ----------------------------------------------
    lead = pd.Series(out["duration"].map(_leading_int).tolist(), index=out.index, dtype="Int64")
    out["minutes"] = lead.where(out["type"] == ContentType.MOVIE.value)
    out["seasons"] = lead.where(out["type"] == ContentType.TV_SHOW.value)

    m = out["minutes"]
    conditions = [
        (m > 180).fillna(False).to_numpy(dtype=bool),
        (m >= 60).fillna(False).to_numpy(dtype=bool),
        m.notna().to_numpy(dtype=bool),
    ]
    bucket = pd.Series(np.select(conditions, [LONG, MEDIUM, SHORT], default=""), index=out.index)
    out["duration_bucket"] = bucket.where(bucket != "")

    # ---------- Datum ----------------------------------------------
    raw_dates = out["date_added"].astype("string").str.strip()
    out["date_added_parsed"] = pd.to_datetime(raw_dates, format="mixed", errors="coerce")
    out["year_added"] = out["date_added_parsed"].dt.year.astype("Int64")
    release = pd.to_numeric(out["release_year"], errors="coerce").astype("Int64")
    out["years_since_release"] = out["year_added"] - release

    n_bad_dates = int((out["date_added_parsed"].isna() & raw_dates.fillna("").ne("")).sum())
    if n_bad_dates:
        logging.info(f"enrich_titles: {n_bad_dates} nicht parsebare date_added-Werte ignoriert.")

    # ---------- Vollständigkeit ------------------------------------
    for col, flag in MISSING_FLAG_COLUMNS.items():
        out[flag] = out[col].map(is_missing).astype(bool)

    # ---------- Inhaltskategorie -----------------------------------
    out["content_category"] = np.where(
        _keyword_mask(out["description"], keywords), BAD_CONTENT, GOOD_CONTENT
    )
    return out
