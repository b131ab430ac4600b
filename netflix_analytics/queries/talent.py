# netflix_analytics/queries/talent.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import TITLE_COLUMNS, ContentType
from netflix_analytics.transform.aggregate import count_distinct, percent_of_total, top_n
from netflix_analytics.transform.classify import MISSING_FLAG_COLUMNS
from netflix_analytics.transform.normalize import contains_text


def titles_by_director(catalog: Catalog, name: str = "Rajiv Chilaka", fold_accents: bool = False) -> pd.DataFrame:
    df = catalog.frame
    mask = contains_text(df["director"], name, fold_accents=fold_accents)
    return df.loc[mask, TITLE_COLUMNS].reset_index(drop=True)


def titles_missing_director(catalog: Catalog) -> pd.DataFrame:
    df = catalog.enriched()
    return df.loc[df["director_missing"], TITLE_COLUMNS].reset_index(drop=True)


def percent_missing_director(catalog: Catalog) -> pd.DataFrame:
    df = catalog.enriched()
    share = percent_of_total(int(df["director_missing"].sum()), len(df))
    return pd.DataFrame({"percent_missing_director": [share]})


def missing_metadata_summary(catalog: Catalog) -> pd.DataFrame:
    """Fehlende director/casts/country-Angaben absolut und in Prozent."""
    df = catalog.enriched()
    rows = []
    for field, flag in MISSING_FLAG_COLUMNS.items():
        missing = int(df[flag].sum())
        rows.append({
            "field": field,
            "missing_titles": missing,
            "percent_missing": percent_of_total(missing, len(df)),
        })
    return pd.DataFrame(rows, columns=["field", "missing_titles", "percent_missing"])


def titles_with_actor(catalog: Catalog, name: str = "Salman Khan", fold_accents: bool = False) -> pd.DataFrame:
    df = catalog.frame
    mask = contains_text(df["casts"], name, fold_accents=fold_accents)
    return df.loc[mask, ["title", "casts"]].reset_index(drop=True)


def top_actors(
    catalog: Catalog,
    country: str | None = "India",
    content_type: ContentType | str | None = ContentType.MOVIE,
    n: int = 10,
    fold_accents: bool = False,
) -> pd.DataFrame:
    """
    Häufigste Darsteller, optional eingeschränkt auf Titel, deren
    Länderangabe `country` enthält, und auf einen Inhaltstyp.
    """
    exp = catalog.expanded("actor")
    if country:
        exp = exp[contains_text(exp["country"], country, fold_accents=fold_accents)]
    if content_type is not None:
        exp = exp[exp["type"] == ContentType(content_type).value]
    counts = count_distinct(exp, "actor", name="total_movies")
    return top_n(counts, n, "total_movies", tie_break="actor")[["actor", "total_movies"]]


def top_directors(catalog: Catalog, n: int = 10) -> pd.DataFrame:
    counts = count_distinct(catalog.expanded("director"), "director")
    return top_n(counts, n, "total_titles", tie_break="director")[["director", "total_titles"]]
