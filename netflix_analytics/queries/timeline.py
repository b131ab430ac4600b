# netflix_analytics/queries/timeline.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import TITLE_COLUMNS, ContentType
from netflix_analytics.transform.aggregate import count_distinct


def titles_released_in(
    catalog: Catalog,
    year: int = 2020,
    content_type: ContentType | str | None = ContentType.MOVIE,
) -> pd.DataFrame:
    """Alle Titel eines Erscheinungsjahres, optional nur ein Typ."""
    df = catalog.frame
    mask = df["release_year"] == int(year)
    if content_type is not None:
        mask &= df["type"] == ContentType(content_type).value
    return df.loc[mask, TITLE_COLUMNS].reset_index(drop=True)


def earliest_release_year(catalog: Catalog) -> pd.DataFrame:
    years = catalog.frame["release_year"]
    earliest = int(years.min()) if not years.empty else pd.NA
    return pd.DataFrame({"earliest_release_year": [earliest]}, dtype="Int64")


def count_by_release_year_and_type(catalog: Catalog) -> pd.DataFrame:
    counts = count_distinct(catalog.frame, ["release_year", "type"], sort=False)
    return counts.sort_values(["release_year", "type"], kind="mergesort").reset_index(drop=True)


def oldest_added_titles(catalog: Catalog, n: int = 10) -> pd.DataFrame:
    """
    Die n am frühesten hinzugefügten Titel (nach date_added, dann title).
    Titel ohne parsebares date_added fallen weg.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"oldest_added_titles: n muss eine ganze Zahl >= 1 sein, erhalten: {n!r}")
    df = catalog.enriched()
    df = df[df["date_added_parsed"].notna()]
    df = df.sort_values(["date_added_parsed", "title"], kind="mergesort").head(n)
    return pd.DataFrame({
        "title": df["title"].to_numpy(),
        "netflix_date": df["date_added_parsed"].dt.date.to_numpy(),
    })


def added_long_after_release(catalog: Catalog, min_gap: int = 5) -> pd.DataFrame:
    """Titel, die mehr als min_gap Jahre nach Erscheinen hinzugefügt wurden."""
    df = catalog.enriched()
    mask = (df["years_since_release"] > min_gap).fillna(False).astype(bool)
    return df.loc[mask, ["title", "release_year", "date_added"]].reset_index(drop=True)


def titles_added_per_year(catalog: Catalog) -> pd.DataFrame:
    counts = count_distinct(catalog.enriched(), "year_added", sort=False)
    counts["year_added"] = counts["year_added"].astype("int64")
    return counts.sort_values("year_added").reset_index(drop=True)


def titles_added_since(catalog: Catalog, since: str = "2020-01-01") -> pd.DataFrame:
    """Anzahl Titel mit date_added >= since."""
    cutoff = pd.Timestamp(since)
    added = catalog.enriched()["date_added_parsed"]
    total = int((added >= cutoff).sum())
    return pd.DataFrame({"total_titles_added": [total]})
