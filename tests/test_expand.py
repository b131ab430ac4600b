# tests/test_expand.py

import math

import pandas as pd
import pytest

from netflix_analytics.model.title import ContentType, Title
from netflix_analytics.transform.expand import (
    explode_field,
    iter_atomic_values,
    resolve_field,
    split_multi_value,
)


def _t(show_id, **kw):
    return Title(show_id=show_id, type=ContentType.MOVIE, title=show_id, release_year=2020, **kw)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Drama, Kids' TV", ["Drama", "Kids' TV"]),
        ("  India ,USA  ", ["India", "USA"]),
        (", United States,", ["United States"]),
        ("Dramas, Dramas", ["Dramas", "Dramas"]),
        ("", []),
        (None, []),
        (math.nan, []),
    ],
)
def test_split_multi_value(raw, expected):
    assert split_multi_value(raw) == expected


def test_iter_atomic_values_genre_pairs():
    titles = [_t("id1", listed_in="Drama, Kids' TV")]
    pairs = list(iter_atomic_values(titles, "genre"))
    assert pairs == [("id1", "Drama"), ("id1", "Kids' TV")]
    assert {v for _, v in pairs} == {"Drama", "Kids' TV"}


def test_iter_atomic_values_skips_missing_and_keeps_cross_record_values():
    titles = [
        _t("a", country="India, USA"),
        _t("b", country=None),
        _t("c", country=""),
        _t("d", country="India"),
    ]
    pairs = list(iter_atomic_values(titles, "country"))
    assert pairs == [("a", "India"), ("a", "USA"), ("d", "India")]


def test_iter_atomic_values_is_restartable():
    titles = [_t("a", casts="X, Y")]
    first = list(iter_atomic_values(titles, "actor"))
    second = list(iter_atomic_values(titles, "actor"))
    assert first == second == [("a", "X"), ("a", "Y")]


def test_unknown_field_is_contract_error():
    with pytest.raises(KeyError):
        resolve_field("studio")
    with pytest.raises(KeyError):
        list(iter_atomic_values([_t("a")], "studio"))


def test_explode_field_keeps_context_columns():
    df = pd.DataFrame({
        "show_id": ["a", "b", "c"],
        "type": ["Movie", "TV Show", "Movie"],
        "listed_in": ["Dramas, Comedies", None, ""],
    })
    out = explode_field(df, "genre")
    assert list(out["show_id"]) == ["a", "a"]
    assert list(out["genre"]) == ["Dramas", "Comedies"]
    assert list(out["type"]) == ["Movie", "Movie"]


def test_explode_field_matches_iterator(catalog):
    from_frame = explode_field(catalog.frame, "country")
    from_iter = list(iter_atomic_values(catalog.titles(), "country"))
    assert list(zip(from_frame["show_id"], from_frame["country"])) == from_iter


def test_explode_field_missing_column():
    with pytest.raises(KeyError):
        explode_field(pd.DataFrame({"show_id": ["a"]}), "genre")
