# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Spell timer plugin: binds the registry to a host client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spelltimer.constants import (
    CLEAR_STREAM_MARKER,
    COMMAND_PREFIXES,
    DEFAULT_LOOKUP_FILENAME,
    DURATION_UNIT,
    INDEFINITE_LABEL,
    PLUGIN_BANNER,
    PLUGIN_NAME,
    PROMPT_MARKER,
    SPELL_WINDOW,
)
from spelltimer.cycle import ReconciliationCycle
from spelltimer.logging import get_logger
from spelltimer.lookup import LookupLoader
from spelltimer.parsing import parse_spell_line
from spelltimer.registry import Spell, SpellRegistry
from spelltimer.variables import build_variables

if TYPE_CHECKING:
    from spelltimer.host import Host
    from spelltimer.settings import Settings

logger = get_logger(__name__)


def format_duration(spell: Spell) -> str:
    if spell.indefinite:
        return INDEFINITE_LABEL
    return f"{spell.remaining} {DURATION_UNIT}"


def render_listing(registry: SpellRegistry) -> list[str]:
    """Listing shown for the ``/spelltimer`` command, without ``#echo``."""
    lines = [PLUGIN_BANNER, "Active:"]
    lines.extend(f"  {spell.id} ({format_duration(spell)})" for spell in registry.active())
    lines.append("Inactive:")
    lines.extend(f"  {spell.id} ({spell.remaining} {DURATION_UNIT})" for spell in registry.inactive())
    return lines


class SpellTimerPlugin:
    """Tracks spells from the percWindow stream and exports them as variables."""

    name = PLUGIN_NAME

    def __init__(self, lookup_filename: str = DEFAULT_LOOKUP_FILENAME, prepopulate: bool = False) -> None:
        self.host: Host | None = None
        self.registry = SpellRegistry()
        self.cycle = ReconciliationCycle(self.registry)
        self.loader = LookupLoader(lookup_filename)
        self.prepopulate = prepopulate

    @classmethod
    def from_settings(cls, settings: Settings) -> SpellTimerPlugin:
        return cls(lookup_filename=settings.lookup_filename, prepopulate=settings.prepopulate)

    def initialize(self, host: Host) -> None:
        self.host = host
        self.registry.lookup = self.loader.load(host)
        if self.prepopulate:
            added = self.registry.prepopulate()
            logger.debug("registry_prepopulated", added=added)

    def variable_changed(self, variable: str, value: str) -> None:
        pass

    def parse_input(self, text: str) -> str:
        """Handle the listing command; any other input passes through."""
        command = text.strip().lower()
        if not command.startswith(COMMAND_PREFIXES):
            return text

        if self.host is not None:
            for line in render_listing(self.registry):
                self.host.send(f"#echo {line}")
        return ""

    def parse_xml(self, xml: str) -> str:
        if xml.startswith(CLEAR_STREAM_MARKER):
            self.cycle.clear_stream()

        if self.cycle.is_open and PROMPT_MARKER in xml:
            self.cycle.prompt()
            self.export_variables()

        return xml

    def parse_text(self, text: str, window: str) -> str:
        if window.lower() != SPELL_WINDOW:
            return text
        if not text.strip():
            return text

        match = parse_spell_line(text)
        if match is not None:
            self.registry.record_observation(match.name, match.duration)
        return text

    def export_variables(self) -> dict[str, str]:
        variables = build_variables(self.registry)
        if self.host is not None:
            for name, value in variables.items():
                self.host.set_variable(name, value)
        return variables
