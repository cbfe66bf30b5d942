"""Shared pytest fixtures for the gnudb test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from gnudb.config.config import Config
from gnudb.domain.toc import DiscToc

DIRE_STRAITS_TOC = "1 9 185700 150 18051 42248 57183 75952 89333 114384 142453 163641"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the default configuration file at an empty temp location."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("GNUDB_CONFIG_PATH", str(config_path))
    Config.reset()
    yield config_path
    Config.reset()


@pytest.fixture
def dire_straits_toc() -> DiscToc:
    """TOC of the 1978 Dire Straits album (disc id ``6909aa09``)."""

    return DiscToc.from_toc_string(DIRE_STRAITS_TOC)
