# tests/test_classify.py

import math

import pandas as pd
import pytest

from netflix_analytics.model.title import ContentType
from netflix_analytics.transform.classify import (
    BAD_CONTENT,
    GOOD_CONTENT,
    content_category,
    duration_bucket,
    enrich_titles,
    is_missing,
    minutes,
    seasons,
    year_added,
    years_between_add_and_release,
)


# ------------------------ duration --------------------------------------------

@pytest.mark.parametrize(
    "value, expected",
    [(59, "Short"), (60, "Medium"), (180, "Medium"), (181, "Long"), (0, "Short"), (None, None)],
)
def test_duration_bucket_boundaries(value, expected):
    assert duration_bucket(value) == expected


def test_minutes_only_for_movies():
    assert minutes("90 min", ContentType.MOVIE) == 90
    assert minutes("90 min", "Movie") == 90
    assert minutes("2 Seasons", ContentType.TV_SHOW) is None


@pytest.mark.parametrize("raw", [None, "", "min 90", "unknown", "90min", math.nan])
def test_minutes_malformed_returns_none(raw):
    assert minutes(raw, ContentType.MOVIE) is None


def test_seasons_only_for_tv_shows():
    assert seasons("2 Seasons", ContentType.TV_SHOW) == 2
    assert seasons("1 Season", "TV Show") == 1
    assert seasons("90 min", ContentType.MOVIE) is None


# ------------------------ dates -----------------------------------------------

def test_year_added_parses_catalog_format():
    assert year_added("September 25, 2021") == 2021
    assert year_added(" August 4, 2017") == 2017


@pytest.mark.parametrize("raw", [None, "", "not a date", math.nan])
def test_year_added_unknown_for_missing_or_malformed(raw):
    assert year_added(raw) is None


def test_years_between_add_and_release_keeps_negative_values():
    assert years_between_add_and_release("March 10, 2020", 2021) == -1
    assert years_between_add_and_release("September 25, 2021", 2014) == 7
    assert years_between_add_and_release("garbage", 2014) is None


# ------------------------ missing values --------------------------------------

@pytest.mark.parametrize("value, expected", [(None, True), ("", True), (math.nan, True), (pd.NA, True),
                                             ("Jane Doe", False), (" ", False)])
def test_is_missing(value, expected):
    assert is_missing(value) is expected


# ------------------------ content category ------------------------------------

def test_content_category_keywords():
    assert content_category("He wants to kill the villain") == BAD_CONTENT
    assert content_category("A story of VIOLENCE") == BAD_CONTENT
    assert content_category("A quiet family drama") == GOOD_CONTENT
    assert content_category(None) == GOOD_CONTENT


def test_content_category_is_plain_substring_match():
    # "skill" and "skilled" contain "kill"
    assert content_category("A master of every skill") == BAD_CONTENT
    assert content_category("A film about a skilled chef") == BAD_CONTENT


def test_content_category_custom_keywords():
    assert content_category("A heist gone wrong", keywords=["heist"]) == BAD_CONTENT
    assert content_category("He wants to kill", keywords=[]) == GOOD_CONTENT


# ------------------------ enrich_titles ---------------------------------------

def test_enrich_titles_matches_scalar_functions(catalog):
    df = enrich_titles(catalog.frame)
    for row in df.to_dict("records"):
        expected_minutes = minutes(row["duration"], row["type"])
        got = row["minutes"]
        assert (None if pd.isna(got) else int(got)) == expected_minutes

        bucket = row["duration_bucket"]
        assert (None if pd.isna(bucket) else bucket) == duration_bucket(expected_minutes)

        got_year = row["year_added"]
        assert (None if pd.isna(got_year) else int(got_year)) == year_added(row["date_added"])

        assert row["content_category"] == content_category(row["description"])
        assert row["director_missing"] == is_missing(row["director"])


def test_enrich_titles_derived_values(catalog):
    df = enrich_titles(catalog.frame).set_index("show_id")
    assert df.loc["s4", "duration_bucket"] == "Long"
    assert df.loc["s5", "years_since_release"] == -1
    assert pd.isna(df.loc["s3", "minutes"])
    assert pd.isna(df.loc["s3", "year_added"])
    assert df.loc["s2", "seasons"] == 6
    assert pd.isna(df.loc["s2", "minutes"])
    assert bool(df.loc["s3", "director_missing"]) is True
    assert bool(df.loc["s8", "country_missing"]) is False


def test_enrich_titles_does_not_modify_input(catalog):
    raw = catalog.frame
    before = raw.copy()
    enrich_titles(raw)
    pd.testing.assert_frame_equal(raw, before)
