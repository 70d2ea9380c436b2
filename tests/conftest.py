"""Shared fixtures for the csfd_scraper test-suite."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from csfd_scraper.core.config_loader import load_config  # noqa: E402
from csfd_scraper.core.provider_info import (  # noqa: E402
    create_artwork_provider_info,
    create_metadata_provider_info,
)
from csfd_scraper.processors.genre_processor import GenreProcessor  # noqa: E402
from csfd_scraper.scrapers.csfd import CsfdArtworkScraper, CsfdMetadataScraper  # noqa: E402
from csfd_scraper.web.exceptions import FetchError  # noqa: E402
from csfd_scraper.web.request import parse_html  # noqa: E402

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
BASE_URL = "https://www.csfd.cz"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class StubRequest:
    """Stand-in for ``Request`` serving canned pages keyed by URL."""

    def __init__(self, pages: dict[str, object] | None = None) -> None:
        # url -> HTML text or an exception instance to raise
        self.pages = dict(pages or {})
        self.calls: list[str] = []

    def get_html(self, url: str, encoding: str = "utf-8"):
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError(
                f"请求失败 (HTTP 404): {url}",
                f"Request failed (HTTP 404): {url}",
                url,
                404,
            )
        if isinstance(page, Exception):
            raise page
        return parse_html(page, url)


@pytest.fixture
def config() -> dict:
    cfg = load_config(None)
    cfg["logging"]["log_file"] = None
    return cfg


@pytest.fixture
def stub_request() -> StubRequest:
    return StubRequest()


@pytest.fixture(scope="session")
def genre_processor() -> GenreProcessor:
    return GenreProcessor()


@pytest.fixture
def metadata_scraper(config, stub_request, genre_processor) -> CsfdMetadataScraper:
    return CsfdMetadataScraper(
        config,
        create_metadata_provider_info(config, "test"),
        request=stub_request,
        genre_processor=genre_processor,
    )


@pytest.fixture
def artwork_scraper(config, stub_request) -> CsfdArtworkScraper:
    return CsfdArtworkScraper(
        config,
        create_artwork_provider_info(config, "test"),
        request=stub_request,
    )
