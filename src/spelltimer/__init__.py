# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Spell timer tracking for percWindow status streams."""

from __future__ import annotations

from spelltimer.cycle import CycleState, ReconciliationCycle
from spelltimer.host import Host, MemoryHost
from spelltimer.lookup import LookupEntry, LookupLoader, SpellLookup, parse_lookup
from spelltimer.names import normalize
from spelltimer.parsing import SpellMatch, parse_spell_line
from spelltimer.plugin import SpellTimerPlugin, render_listing
from spelltimer.registry import Spell, SpellRegistry
from spelltimer.variables import build_variables

__all__ = [
    "CycleState",
    "Host",
    "LookupEntry",
    "LookupLoader",
    "MemoryHost",
    "ReconciliationCycle",
    "Spell",
    "SpellLookup",
    "SpellMatch",
    "SpellRegistry",
    "SpellTimerPlugin",
    "build_variables",
    "normalize",
    "parse_lookup",
    "parse_spell_line",
    "render_listing",
]
