"""Shared pytest fixtures and configuration for the manifest-filter test suite.

Guidelines
----------
* No network access in any test.
* Core tests must be pure — no side effects.
* Playlist fixtures live in ``tests/fixtures`` and are read, never written.
"""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

MASTER_BANDWIDTHS = [600000, 800000, 800000, 1200000, 1500000, 2000000]
MEDIA_SEQUENCE = 320035356
MEDIA_SEGMENTS = 20


@pytest.fixture
def master_path() -> Path:
    return FIXTURES / "master.m3u8"


@pytest.fixture
def media_path() -> Path:
    return FIXTURES / "media.m3u8"


@pytest.fixture
def master_bytes(master_path: Path) -> bytes:
    return master_path.read_bytes()


@pytest.fixture
def media_bytes(media_path: Path) -> bytes:
    return media_path.read_bytes()
