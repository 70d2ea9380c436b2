"""Tests for the gallery parser and the artwork scraper."""
from __future__ import annotations

import pytest

from csfd_scraper.core.models import ArtworkType, ScrapeOptions, SearchCandidate
from csfd_scraper.scrapers.csfd.gallery_parser import parse_gallery
from csfd_scraper.web.exceptions import ResolutionError, UnsupportedMediaTypeError
from csfd_scraper.web.request import parse_html

from .conftest import BASE_URL, load_fixture

GALLERY_URL = f"{BASE_URL}/film/147525/galerie"


def test_parse_gallery() -> None:
    doc = parse_html(load_fixture("gallery.html"))
    artworks = parse_gallery(doc, "csfd-artwork")

    # the photo without a style and the unquoted one are skipped
    assert [a.url for a in artworks] == [
        "http://img.csfd.cz/files/images/film/photos/158/1/158100001_a1b2c3.jpg",
        "http://img.csfd.cz/files/images/film/photos/158/1/158100002_d4e5f6.jpg",
    ]
    for artwork in artworks:
        assert artwork.type is ArtworkType.BACKGROUND
        assert artwork.preview_url == artwork.url
        assert artwork.provider_id == "csfd-artwork"


def test_parse_gallery_without_photos() -> None:
    doc = parse_html(load_fixture("gallery_empty.html"))
    assert parse_gallery(doc) == []


@pytest.mark.parametrize(
    "options",
    [
        ScrapeOptions(ids={"csfd-artwork": "147525"}),
        ScrapeOptions(ids={"csfd": "147525"}),
        ScrapeOptions(ids={"csfd-artwork": "", "csfd": "147525"}),
        ScrapeOptions(result=SearchCandidate(id="147525", title="Malá čarodějnice")),
    ],
)
def test_resolve_id(artwork_scraper, options) -> None:
    assert artwork_scraper.resolve_id(options) == "147525"


def test_resolve_id_ignores_imdb(artwork_scraper) -> None:
    with pytest.raises(ResolutionError):
        artwork_scraper.resolve_id(ScrapeOptions(ids={"imdb": "tt0087699"}))


def test_get_artwork(artwork_scraper, stub_request) -> None:
    stub_request.pages[GALLERY_URL] = load_fixture("gallery.html")

    artworks = artwork_scraper.get_artwork(ScrapeOptions(ids={"csfd": "147525"}))

    assert stub_request.calls == [GALLERY_URL]
    assert len(artworks) == 2
    assert artworks[0].to_dict()["type"] == "background"


def test_get_artwork_empty_gallery(artwork_scraper, stub_request) -> None:
    stub_request.pages[GALLERY_URL] = load_fixture("gallery_empty.html")
    assert artwork_scraper.get_artwork(ScrapeOptions(ids={"csfd": "147525"})) == []


def test_get_artwork_rejects_other_media_types(artwork_scraper, stub_request) -> None:
    with pytest.raises(UnsupportedMediaTypeError):
        artwork_scraper.get_artwork(ScrapeOptions(media_type="tv_show", ids={"csfd": "147525"}))
    assert stub_request.calls == []
