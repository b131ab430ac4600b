# netflix_analytics/queries/overview.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.transform.aggregate import count_distinct


def total_titles(catalog: Catalog) -> pd.DataFrame:
    return pd.DataFrame({"total_titles": [len(catalog)]})


def count_by_type(catalog: Catalog) -> pd.DataFrame:
    """Filme vs. TV-Shows."""
    return count_distinct(catalog.frame, "type", name="total_content")


def distinct_types(catalog: Catalog) -> pd.DataFrame:
    types = sorted(catalog.frame["type"].dropna().unique())
    return pd.DataFrame({"type": types})
