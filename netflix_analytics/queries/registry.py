# netflix_analytics/queries/registry.py
import inspect
import logging
from typing import Any, Callable, Mapping

import pandas as pd

from netflix_analytics.model.catalog import Catalog
from netflix_analytics.queries import (
    classification,
    countries,
    durations,
    genres,
    overview,
    ratings,
    talent,
    timeline,
)

Query = Callable[..., pd.DataFrame]

# Stabiler Name -> Analysefunktion. Reihenfolge = Ausführungsreihenfolge.
QUERY_REGISTRY: dict[str, Query] = {
    # Katalogüberblick
    "total_titles": overview.total_titles,
    "count_by_type": overview.count_by_type,
    "distinct_types": overview.distinct_types,
    # Zeitachse
    "titles_released_in": timeline.titles_released_in,
    "earliest_release_year": timeline.earliest_release_year,
    "count_by_release_year_and_type": timeline.count_by_release_year_and_type,
    "oldest_added_titles": timeline.oldest_added_titles,
    "added_long_after_release": timeline.added_long_after_release,
    "titles_added_per_year": timeline.titles_added_per_year,
    "titles_added_since": timeline.titles_added_since,
    # Genres
    "count_genre_mentions": genres.count_genre_mentions,
    "titles_in_genre": genres.titles_in_genre,
    "titles_per_genre": genres.titles_per_genre,
    "unique_genres_per_release_year": genres.unique_genres_per_release_year,
    "top_genres_per_year": genres.top_genres_per_year,
    # Länder
    "unique_country_count": countries.unique_country_count,
    "top_countries": countries.top_countries,
    "countries_above_share": countries.countries_above_share,
    "country_breakdown": countries.country_breakdown,
    # Ratings
    "most_frequent_rating": ratings.most_frequent_rating,
    "rating_counts_by_type": ratings.rating_counts_by_type,
    # Laufzeit / Staffeln
    "tv_shows_with_many_seasons": durations.tv_shows_with_many_seasons,
    "longest_movies": durations.longest_movies,
    "movie_duration_distribution": durations.movie_duration_distribution,
    "season_distribution": durations.season_distribution,
    # Cast & Regie
    "titles_by_director": talent.titles_by_director,
    "titles_missing_director": talent.titles_missing_director,
    "percent_missing_director": talent.percent_missing_director,
    "missing_metadata_summary": talent.missing_metadata_summary,
    "titles_with_actor": talent.titles_with_actor,
    "top_actors": talent.top_actors,
    "top_directors": talent.top_directors,
    # Klassifikation
    "classify_titles": classification.classify_titles,
    "content_category_counts": classification.content_category_counts,
}


def get_query(name: str) -> Query:
    try:
        return QUERY_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unbekannte Analyse: {name!r}") from None


def run_query(
    catalog: Catalog,
    name: str,
    params: Mapping[str, Any] | None = None,
    *,
    fold_accents: bool | None = None,
) -> pd.DataFrame:
    """
    Führt eine registrierte Analyse aus.

    Unbekannte Parameter sind ein Aufruffehler und werden nicht still
    verworfen. fold_accents wird nur an Analysen weitergereicht, die ihn kennen.
    """
    func = get_query(name)
    kwargs = dict(params or {})
    accepted = inspect.signature(func).parameters
    unknown = sorted(set(kwargs).difference(accepted))
    if unknown:
        raise TypeError(f"{name}: unbekannte Parameter {unknown}")
    if fold_accents is not None and "fold_accents" in accepted:
        kwargs.setdefault("fold_accents", fold_accents)
    logging.debug(f"run_query: {name}({kwargs})")
    return func(catalog, **kwargs)
