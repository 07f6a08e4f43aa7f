# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for spelltimer."""

from __future__ import annotations

PLUGIN_NAME = "Spell Timer Plugin"
PLUGIN_BANNER = "SpellTimer Plugin v1"

# Status window carrying the spell lines (compared case-insensitively)
SPELL_WINDOW = "percwindow"

# Stream markers driving the reconciliation cycle
CLEAR_STREAM_MARKER = '<clearStream id="percWindow"/>'
PROMPT_MARKER = "<prompt"

# Listing commands (compared against lower-cased input)
COMMAND_PREFIXES = ("/spelltimer", "/spelltracker")

# Duration handling
INDEFINITE_DURATION = 999
INDEFINITE_LABEL = "Indefinite"
DURATION_UNIT = "roisaen"

# Host variable export
VARIABLE_PREFIX = "SpellTimer."
ACTIVE_SPELLS_VARIABLE = "activespells"
INACTIVE_SPELLS_VARIABLE = "inactivespells"

# Static lookup data
DEFAULT_LOOKUP_FILENAME = "allspells.txt"
LOOKUP_FIELD_SEPARATOR = "|"
