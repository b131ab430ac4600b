# netflix_analytics/queries/classification.py
import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.transform.aggregate import count_distinct


def classify_titles(catalog: Catalog) -> pd.DataFrame:
    df = catalog.enriched()
    return df[["show_id", "title", "content_category"]].rename(
        columns={"content_category": "category"}
    )


def content_category_counts(catalog: Catalog) -> pd.DataFrame:
    """Bad/Good Content nach Schlüsselwörtern in der Beschreibung."""
    counts = count_distinct(catalog.enriched(), "content_category", name="total_content")
    return counts.rename(columns={"content_category": "category"})
