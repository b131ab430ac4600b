# tests/conftest.py

import pytest

from netflix_analytics.model.catalog import Catalog


def _title(show_id, type_, title, release_year, **kw):
    row = {
        "show_id": show_id,
        "type": type_,
        "title": title,
        "release_year": release_year,
        "director": None,
        "casts": None,
        "country": None,
        "date_added": None,
        "rating": None,
        "duration": None,
        "listed_in": None,
        "description": None,
    }
    row.update(kw)
    return row


# ------------------------ sample catalog ------------------------------------
# 7 movies, 3 TV shows; covers empty/None fields, unparseable dates,
# repeated genres in one record, a rating placeholder ("74 min") and
# the "skill" keyword case.

SAMPLE_RECORDS = [
    _title("s1", "Movie", "Alpha", 2014,
           director="Rajiv Chilaka", casts="Salman Khan, Actor A",
           country="India, United States", date_added="September 25, 2021",
           rating="PG-13", duration="90 min", listed_in="Dramas, International Movies",
           description="He wants to kill the villain"),
    _title("s2", "TV Show", "Beta", 2019,
           casts="Actor A, Actor B", country="India", date_added="January 1, 2019",
           rating="TV-MA", duration="6 Seasons", listed_in="International TV Shows, TV Dramas",
           description="A master of every skill"),
    _title("s3", "Movie", "Gamma", 2010,
           director="", casts="Actor A", country="India", date_added="not a date",
           rating="74 min", listed_in="Documentaries", description="Quiet story"),
    _title("s4", "Movie", "Delta", 2017,
           director="Jane Doe", country="United States", date_added=" August 4, 2017",
           rating="R", duration="181 min", listed_in="Dramas, Dramas",
           description="Scenes of Violence"),
    _title("s5", "Movie", "Epsilon", 2021,
           director="Jane Doe, John Roe", casts="Actor B", country="United Kingdom",
           date_added="March 10, 2020", rating="PG-13", duration="59 min",
           listed_in="Comedies", description="Funny"),
    _title("s6", "TV Show", "Zeta", 2020,
           director="John Roe", casts="Actor C", date_added="May 5, 2020",
           rating="TV-MA", duration="1 Season", listed_in="TV Comedies"),
    _title("s7", "Movie", "Eta", 2012,
           director="Rajiv Chilaka", casts="Actor A, Salman Khan", country="India",
           date_added="December 31, 2019", rating="TV-MA", duration="60 min",
           listed_in="Children & Family Movies", description="Kids"),
    _title("s8", "Movie", "Theta", 2018,
           director="Jane Doe", casts="Actor D", country=", United States,",
           date_added="July 1, 2018", rating="R", duration="180 min",
           listed_in="Dramas", description="Drama"),
    _title("s9", "TV Show", "Iota", 2015,
           country="United States", duration="3 Seasons", listed_in="Docuseries",
           description="Nature"),
    _title("s10", "Movie", "Kappa", 2021,
           director="Jane Doe", casts="Actor A", country="India",
           date_added="June 15, 2021", rating="PG-13", duration="120 min",
           listed_in="Dramas, Documentaries", description="Ordinary"),
]


@pytest.fixture
def records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def catalog(records):
    return Catalog.from_records(records)


@pytest.fixture
def make_title():
    return _title
