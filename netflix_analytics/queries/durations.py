# netflix_analytics/queries/durations.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import TITLE_COLUMNS, ContentType
from netflix_analytics.transform.aggregate import count_distinct


def tv_shows_with_many_seasons(catalog: Catalog, min_seasons: int = 5) -> pd.DataFrame:
    """TV-Shows mit mehr als min_seasons Staffeln."""
    df = catalog.enriched()
    mask = (df["seasons"] > min_seasons).fillna(False).astype(bool)
    return df.loc[mask, TITLE_COLUMNS + ["seasons"]].reset_index(drop=True)


def longest_movies(catalog: Catalog) -> pd.DataFrame:
    """Alle Filme mit der maximalen Laufzeit (bei Gleichstand mehrere)."""
    df = catalog.enriched()
    movies = df[df["minutes"].notna()]
    if movies.empty:
        return movies[TITLE_COLUMNS + ["minutes"]].reset_index(drop=True)
    longest = movies["minutes"].max()
    return movies.loc[movies["minutes"] == longest, TITLE_COLUMNS + ["minutes"]].reset_index(drop=True)


def movie_duration_distribution(catalog: Catalog) -> pd.DataFrame:
    df = catalog.enriched()
    movies = df[df["type"] == ContentType.MOVIE.value]
    return count_distinct(movies, "duration_bucket", name="total_movies")


def season_distribution(catalog: Catalog) -> pd.DataFrame:
    counts = count_distinct(catalog.enriched(), "seasons", name="total_shows", sort=False)
    counts["seasons"] = counts["seasons"].astype("int64")
    return counts.sort_values("seasons").reset_index(drop=True)
