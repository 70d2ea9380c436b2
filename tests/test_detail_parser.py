"""Tests for the per-field extractors of the detail page."""
from __future__ import annotations

import pytest

from csfd_scraper.core.genres import Genre
from csfd_scraper.core.models import CastType, MetadataRecord
from csfd_scraper.scrapers.csfd.detail_parser import (
    classify_cast_heading,
    extract_cast,
    extract_genres,
    extract_plot,
    extract_poster,
    extract_rating,
    extract_title_year,
    parse_rating,
)
from csfd_scraper.web.request import parse_html

from .conftest import load_fixture


@pytest.fixture
def planeta_doc():
    return parse_html(load_fixture("detail_planeta_opic.html"))


@pytest.fixture
def carodejnice_doc():
    return parse_html(load_fixture("detail_mala_carodejnice.html"))


@pytest.fixture
def broken_doc():
    return parse_html(load_fixture("detail_broken.html"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("86%", 8.6),
        (" 100% ", 10.0),
        ("73,5%", 7.35),
        ("0%", 0.0),
    ],
)
def test_parse_rating(text: str, expected: float) -> None:
    assert parse_rating(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", None, "N/A", "?%"])
def test_parse_rating_rejects_non_numbers(text) -> None:
    assert parse_rating(text) is None


def test_classify_cast_heading() -> None:
    assert classify_cast_heading("Režie:") is CastType.DIRECTOR
    assert classify_cast_heading("Předloha:") is CastType.WRITER
    assert classify_cast_heading("Hrají:") is CastType.ACTOR
    assert classify_cast_heading("Kamera:") is CastType.OTHER
    # matching is exact
    assert classify_cast_heading("Režie") is CastType.OTHER


def test_title_from_og_title(planeta_doc) -> None:
    md = MetadataRecord()
    assert extract_title_year(planeta_doc, md) is None
    assert md.title == "Planeta opic"
    assert md.original_title == "Planet of the Apes"
    assert md.year == "1968"


def test_title_falls_back_to_header_and_origin(carodejnice_doc) -> None:
    md = MetadataRecord()
    assert extract_title_year(carodejnice_doc, md) is None
    assert md.title == "Malá čarodějnice"
    assert md.original_title is None
    assert md.year == "1984"


def test_title_missing_everywhere_reports_issue(broken_doc) -> None:
    md = MetadataRecord()
    issue = extract_title_year(broken_doc, md)
    assert issue is not None
    assert issue.field == "title"
    assert issue.structural
    assert md.title == ""
    assert md.year is None


def test_genres_follow_page_order(planeta_doc, genre_processor) -> None:
    md = MetadataRecord()
    assert extract_genres(planeta_doc, md, genre_processor) is None
    assert md.genres == [Genre.SCIENCE_FICTION, Genre.ADVENTURE]


def test_genres_drop_unmapped_labels(carodejnice_doc, genre_processor) -> None:
    md = MetadataRecord()
    assert extract_genres(carodejnice_doc, md, genre_processor) is None
    assert md.genres == [Genre.ANIMATION, Genre.FAMILY, Genre.FANTASY]


def test_genres_missing_container(broken_doc, genre_processor) -> None:
    md = MetadataRecord()
    issue = extract_genres(broken_doc, md, genre_processor)
    assert issue is not None and issue.field == "genre"
    assert md.genres == []


def test_rating_and_votes(planeta_doc) -> None:
    md = MetadataRecord()
    assert extract_rating(planeta_doc, md) is None
    assert md.rating == pytest.approx(8.6)
    assert md.vote_count == 45123


def test_rating_empty_value_is_not_structural(carodejnice_doc) -> None:
    md = MetadataRecord()
    issue = extract_rating(carodejnice_doc, md)
    assert issue is not None
    assert not issue.structural
    assert md.rating is None
    assert md.vote_count is None


def test_plot(planeta_doc) -> None:
    md = MetadataRecord()
    assert extract_plot(planeta_doc, md) is None
    assert md.plot.startswith("Někde ve vesmíru přece musí být něco")
    assert md.plot.endswith("inteligentní opice.")
    assert "\n" not in md.plot
    # only the first plot block is taken
    assert "Kosmická loď" not in md.plot


def test_plot_without_content_block(carodejnice_doc) -> None:
    md = MetadataRecord()
    issue = extract_plot(carodejnice_doc, md)
    assert issue is not None and issue.field == "plot"
    assert md.plot is None


def test_plot_empty_block_gives_empty_string(broken_doc) -> None:
    md = MetadataRecord()
    assert extract_plot(broken_doc, md) is None
    assert md.plot == ""


def test_poster_protocol_relative_url_is_fixed(planeta_doc) -> None:
    md = MetadataRecord()
    assert extract_poster(planeta_doc, md) is None
    assert md.poster_url == "http://img.csfd.cz/files/images/film/posters/000/069/69587_1d3b4a.jpg"


def test_poster_missing(carodejnice_doc, broken_doc) -> None:
    md = MetadataRecord()
    assert extract_poster(carodejnice_doc, md).structural
    issue = extract_poster(broken_doc, md)
    assert issue is not None and not issue.structural
    assert md.poster_url is None


def test_cast_roles(planeta_doc) -> None:
    md = MetadataRecord()
    assert extract_cast(planeta_doc, md) is None

    assert [m.name for m in md.get_cast_members(CastType.DIRECTOR)] == ["Franklin J. Schaffner"]
    assert [m.name for m in md.get_cast_members(CastType.WRITER)] == ["Pierre Boulle"]
    assert [m.name for m in md.get_cast_members(CastType.ACTOR)] == [
        "Charlton Heston",
        "Roddy McDowall",
        "Kim Hunter",
    ]
    assert [m.name for m in md.get_cast_members(CastType.OTHER)] == ["Leon Shamroy"]
    assert len(md.cast) == 6


def test_cast_missing_container(carodejnice_doc) -> None:
    md = MetadataRecord()
    issue = extract_cast(carodejnice_doc, md)
    assert issue is not None and issue.field == "cast"
    assert md.cast == []
