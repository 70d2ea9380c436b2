"""Tests for configuration loading."""
from __future__ import annotations

import pytest

from csfd_scraper.core.config_loader import load_config


def test_defaults() -> None:
    config = load_config(None)

    assert config["site"]["base_url"] == "https://www.csfd.cz"
    assert config["search"]["year_penalty"] == 0.01
    assert config["provider"]["metadata_id"] == "csfd"
    assert config["provider"]["artwork_id"] == "csfd-artwork"
    assert config["network"]["use_cloudscraper"] is False


def test_defaults_are_copies() -> None:
    first = load_config(None)
    first["site"]["base_url"] = "http://localhost"
    assert load_config(None)["site"]["base_url"] == "https://www.csfd.cz"


def test_bundled_config_file_loads() -> None:
    config = load_config()
    assert config["provider"]["metadata_id"] == "csfd"
    assert "log_file" in config["logging"]


def test_user_values_merge_over_defaults(tmp_path) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "network:\n"
        "  timeout: 5\n"
        "  proxy_server: http://127.0.0.1:8080\n"
        "search:\n"
        "  year_penalty: 0.05\n",
        encoding="utf-8",
    )

    config = load_config(str(config_file))

    assert config["network"]["timeout"] == 5
    assert config["network"]["proxy_server"] == "http://127.0.0.1:8080"
    # untouched keys keep their defaults
    assert config["network"]["use_cloudscraper"] is False
    assert config["search"]["year_penalty"] == 0.05
    assert config["site"]["base_url"] == "https://www.csfd.cz"


def test_missing_file_gives_defaults(tmp_path) -> None:
    config = load_config(str(tmp_path / "missing.yml"))
    assert config == load_config(None)


def test_empty_file_gives_defaults(tmp_path) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(str(config_file)) == load_config(None)


@pytest.mark.parametrize("content", ["- just\n- a list\n", "site: [unclosed\n"])
def test_malformed_file_raises(tmp_path, content) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(RuntimeError):
        load_config(str(config_file))
