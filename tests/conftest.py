# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from spelltimer.host import MemoryHost
from spelltimer.lookup import parse_lookup
from spelltimer.plugin import SpellTimerPlugin
from spelltimer.registry import SpellRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from spelltimer.lookup import SpellLookup

LOOKUP_TEXT = """Clumsiness||Debuff
Ease Burden|EB|Utility
Manifest Force|MAF|Warding
Osrel Meraud|OM|Cyclic
"""


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Drop logging configuration installed by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def lookup_text() -> str:
    """Sample allspells.txt contents."""
    return LOOKUP_TEXT


@pytest.fixture
def lookup(lookup_text: str) -> SpellLookup:
    return parse_lookup(lookup_text)


@pytest.fixture
def registry(lookup: SpellLookup) -> SpellRegistry:
    return SpellRegistry(lookup)


@pytest.fixture
def host(lookup_text: str) -> MemoryHost:
    """Host serving allspells.txt from memory."""
    return MemoryHost(files={"allspells.txt": lookup_text})


@pytest.fixture
def plugin(host: MemoryHost) -> SpellTimerPlugin:
    """Plugin initialized against the in-memory host."""
    plugin = SpellTimerPlugin()
    plugin.initialize(host)
    return plugin


@pytest.fixture
def tmp_data_root(tmp_path: Path, lookup_text: str) -> Path:
    """Data directory holding an allspells.txt."""
    root = tmp_path / "data"
    root.mkdir()
    (root / "allspells.txt").write_text(lookup_text, encoding="utf-8")
    return root
