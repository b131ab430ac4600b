# netflix_analytics/queries/countries.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import ContentType
from netflix_analytics.transform.aggregate import count_distinct, percent_of_total, top_n


def unique_country_count(catalog: Catalog) -> pd.DataFrame:
    total = catalog.expanded("country")["country"].nunique()
    return pd.DataFrame({"total_countries": [int(total)]})


def top_countries(catalog: Catalog, n: int = 5) -> pd.DataFrame:
    """Länder mit den meisten Titeln; Gleichstand an Rang n wird mitgenommen."""
    counts = count_distinct(catalog.expanded("country"), "country")
    return top_n(counts, n, "total_titles", tie_break="country")[["country", "total_titles"]]


def countries_above_share(catalog: Catalog, threshold: float = 5.0) -> pd.DataFrame:
    """
    Länder mit mehr als `threshold` Prozent Anteil am Gesamtkatalog.
    Bezugsgröße sind alle Titel, auch die ohne Länderangabe.
    """
    total = catalog.frame["show_id"].nunique()
    counts = count_distinct(catalog.expanded("country"), "country", name="country_titles")
    if total == 0:
        return counts.assign(percent_share=pd.Series(dtype=float))
    share = counts["country_titles"] * 100.0 / total
    counts["percent_share"] = percent_of_total(counts["country_titles"], total)
    return counts[share > threshold].reset_index(drop=True)


def country_breakdown(catalog: Catalog) -> pd.DataFrame:
    """Pro Land: alle Titel, davon Filme, davon TV-Shows."""
    return count_distinct(
        catalog.expanded("country"),
        "country",
        filters={
            "total_movies": lambda d: d["type"] == ContentType.MOVIE.value,
            "total_tv_shows": lambda d: d["type"] == ContentType.TV_SHOW.value,
        },
    )
