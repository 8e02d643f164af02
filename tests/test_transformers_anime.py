from __future__ import annotations

import dataclasses

import pytest

from modules.models import Anime, Credit, ExternalLink, Trailer
from modules.transformers import anime as tf


@pytest.fixture
def anime(anime_payload: dict) -> Anime:
    return Anime.from_dict(anime_payload)


def test_transform_season(anime: Anime) -> None:
    assert tf.transform_season(anime) == "Spring 2013"
    assert tf.transform_season(dataclasses.replace(anime, season=None)) == "2013"
    assert tf.transform_season(dataclasses.replace(anime, season_year=None)) == "Spring"
    assert tf.transform_season(dataclasses.replace(anime, season=None, season_year=None)) == "-"


@pytest.mark.parametrize(("fmt", "expected"), [("TV", "TV"), ("MOVIE", "Movie"), ("TV_SHORT", "Tv_Short"), (None, "-")])
def test_transform_format(anime: Anime, fmt, expected: str) -> None:
    assert tf.transform_format(dataclasses.replace(anime, format=fmt)) == expected


@pytest.mark.parametrize(
    ("status", "expected"),
    [("NOT_YET_RELEASED", "Not Released"), ("RELEASING", "Releasing"), ("FINISHED", "Finished"), (None, "-")],
)
def test_transform_status(anime: Anime, status, expected: str) -> None:
    assert tf.transform_status(dataclasses.replace(anime, status=status)) == expected


def test_numeric_fields(anime: Anime) -> None:
    assert tf.transform_episodes(anime) == "25"
    assert tf.transform_duration(anime) == "24 mins"
    empty = dataclasses.replace(anime, episodes=None, duration=None, source=None)
    assert tf.transform_episodes(empty) == "-"
    assert tf.transform_duration(empty) == "-"
    assert tf.transform_source(empty) == "-"
    assert tf.transform_source(anime) == "Manga"


def test_transform_studios_keeps_main_studios_only(anime: Anime) -> None:
    assert tf.transform_studios(anime) == "`Wit Studio`"

    studios = (Credit("MAPPA", is_main=True), Credit("Aniplex", is_main=False), Credit("kinema citrus", is_main=True))
    assert tf.transform_studios(dataclasses.replace(anime, studios=studios)) == "`Mappa` x `Kinema Citrus`"


def test_transform_studios_placeholder(anime: Anime) -> None:
    assert tf.transform_studios(dataclasses.replace(anime, studios=None)) == "-"
    assert tf.transform_studios(dataclasses.replace(anime, studios=())) == "-"


def test_transform_links_filters_type_and_provider(anime: Anime) -> None:
    links = (
        ExternalLink(url="https://crunchyroll.com/x", type="streaming"),
        ExternalLink(url="https://example.com/y", type="streaming"),
        ExternalLink(url="https://netflix.com/z", type="info"),
    )
    assert tf.transform_links(dataclasses.replace(anime, external_links=links)) == "[Crunchyroll](https://crunchyroll.com/x)"


def test_transform_links_joins_with_space(anime: Anime) -> None:
    links = (
        ExternalLink(url="https://www.Netflix.com/title/1", type="STREAMING"),
        ExternalLink(url="https://play.hbomax.com/a", type="Streaming"),
    )
    assert tf.transform_links(dataclasses.replace(anime, external_links=links)) == (
        "[Netflix](https://www.Netflix.com/title/1) [HBO](https://play.hbomax.com/a)"
    )


@pytest.mark.parametrize("links", [None, ()])
def test_transform_links_placeholder(anime: Anime, links) -> None:
    assert tf.transform_links(dataclasses.replace(anime, external_links=links)) == "-"


def test_transform_trailer(anime: Anime) -> None:
    assert tf.transform_trailer(anime) == "[YouTube](https://www.youtube.com/watch?v=LHtdKWJdif4)"
    other = dataclasses.replace(anime, trailer=Trailer(id="x7abc", site="dailymotion"))
    assert tf.transform_trailer(other) == "[YouTube](https://www.dailymotion.com/watch?v=x7abc)"
    assert tf.transform_trailer(dataclasses.replace(anime, trailer=None)) == "None"
