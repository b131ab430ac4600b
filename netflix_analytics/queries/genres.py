# netflix_analytics/queries/genres.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import TITLE_COLUMNS
from netflix_analytics.transform.aggregate import count_distinct, top_n
from netflix_analytics.transform.normalize import contains_text


def count_genre_mentions(catalog: Catalog, term: str = "Drama", fold_accents: bool = False) -> pd.DataFrame:
    """
    Titel, deren Genre-Liste `term` als Teilstring enthält
    ('Drama' trifft also auch 'Dramas' und 'TV Dramas').
    """
    mask = contains_text(catalog.frame["listed_in"], term, fold_accents=fold_accents)
    return pd.DataFrame({"total_titles": [int(mask.sum())]})


def titles_in_genre(catalog: Catalog, term: str = "documentaries", fold_accents: bool = False) -> pd.DataFrame:
    df = catalog.frame
    mask = contains_text(df["listed_in"], term, fold_accents=fold_accents)
    return df.loc[mask, TITLE_COLUMNS].reset_index(drop=True)


def titles_per_genre(catalog: Catalog) -> pd.DataFrame:
    return count_distinct(catalog.expanded("genre"), "genre")


def unique_genres_per_release_year(catalog: Catalog) -> pd.DataFrame:
    exp = catalog.expanded("genre")
    out = (
        exp.groupby("release_year")["genre"]
        .nunique()
        .rename("total_genre")
        .reset_index()
    )
    out["total_genre"] = out["total_genre"].astype("int64")
    return out.sort_values(
        ["total_genre", "release_year"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)


def top_genres_per_year(catalog: Catalog, n: int = 3) -> pd.DataFrame:
    """
    Die stärksten Genres je Erscheinungsjahr. Dense Rank innerhalb des Jahres,
    alle Genres mit rnk <= n (Gleichstand eingeschlossen).
    """
    counts = count_distinct(catalog.expanded("genre"), ["release_year", "genre"], sort=False)
    ranked = top_n(
        counts,
        n,
        "total_titles",
        partition_by="release_year",
        method="dense",
        rank_col="rnk",
        tie_break="genre",
    )
    return ranked[["release_year", "genre", "total_titles", "rnk"]]
