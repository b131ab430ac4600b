# netflix_analytics/queries/ratings.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.model.title import ContentType
from netflix_analytics.transform.aggregate import count_distinct, top_n
from netflix_analytics.transform.classify import is_missing

TYPE_ORDER: dict[str, int] = {ContentType.MOVIE.value: 1, ContentType.TV_SHOW.value: 2}


def _rated(catalog: Catalog) -> pd.DataFrame:
    # rating wird nicht normalisiert; Platzhalter wie "74 min" zählen mit
    df = catalog.frame
    return df[~df["rating"].map(is_missing).astype(bool)]


def most_frequent_rating(catalog: Catalog) -> pd.DataFrame:
    """Häufigste Altersfreigabe; bei Gleichstand alle gleich häufigen."""
    counts = count_distinct(_rated(catalog), "rating", name="total_ratings")
    return top_n(counts, 1, "total_ratings", tie_break="rating")[["rating", "total_ratings"]]


def rating_counts_by_type(catalog: Catalog) -> pd.DataFrame:
    counts = count_distinct(_rated(catalog), ["type", "rating"], name="total_ratings", sort=False)
    counts["_type_order"] = counts["type"].map(TYPE_ORDER)
    counts = counts.sort_values(
        ["_type_order", "total_ratings", "rating"],
        ascending=[True, False, True],
        kind="mergesort",
    )
    return counts.drop(columns="_type_order").reset_index(drop=True)
