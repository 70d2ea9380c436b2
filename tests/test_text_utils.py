"""Tests for the text helpers and the similarity score."""
from __future__ import annotations

import pytest

from csfd_scraper.utils.similarity import calculate_score
from csfd_scraper.utils.text_utils import (
    fix_image_url,
    normalize_whitespace,
    remove_common_sortable_name,
    remove_non_search_characters,
    substr,
)


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Matrix, The", "The Matrix"),
        ("Vie en rose, La", "La Vie en rose"),
        ("Boot, Das", "Das Boot"),
        ("Planet of the Apes", "Planet of the Apes"),
        ("  Planeta opic ", "Planeta opic"),
        ("Tom, Dick and Harry", "Tom, Dick and Harry"),
        ("", ""),
        (None, ""),
    ],
)
def test_remove_common_sortable_name(title, expected) -> None:
    assert remove_common_sortable_name(title) == expected


@pytest.mark.parametrize(
    "query, expected",
    [
        ("Krtek.a.autíčko", "Krtek a autíčko"),
        ("Star_Wars #4", "Star Wars 4"),
        ("Kdopak by se vlka bál?", "Kdopak by se vlka bál"),
        ("Spider-Man: Homecoming", "Spider-Man Homecoming"),
        ("Ocean's Eleven", "Ocean's Eleven"),
        ("", ""),
    ],
)
def test_remove_non_search_characters(query, expected) -> None:
    assert remove_non_search_characters(query) == expected


def test_fix_image_url() -> None:
    assert fix_image_url("//img.csfd.cz/a.jpg") == "http://img.csfd.cz/a.jpg"
    assert fix_image_url("https://img.csfd.cz/a.jpg") == "https://img.csfd.cz/a.jpg"
    assert fix_image_url("") is None
    assert fix_image_url(None) is None


def test_fix_image_url_is_idempotent() -> None:
    once = fix_image_url("//img.csfd.cz/a.jpg")
    assert fix_image_url(once) == once


def test_substr() -> None:
    assert substr("/film/19977-planeta-opic/", r"film/(\d+)") == "19977"
    assert substr("/tvurce/3015-charlton-heston/", r"film/(\d+)") == ""
    assert substr(None, r"film/(\d+)") == ""


def test_normalize_whitespace() -> None:
    assert normalize_whitespace("  Planeta \n\t opic (1968) ") == "Planeta opic (1968)"
    assert normalize_whitespace(None) == ""


def test_calculate_score() -> None:
    assert calculate_score("Planeta opic", "planeta  OPIC") == 1.0
    assert calculate_score("", "Planeta opic") == 0.0
    assert 0.0 < calculate_score("Planeta", "Planeta opic") < 1.0
    assert calculate_score("Planeta", "Planeta Yó") > calculate_score("Planeta", "Planeta opic")
