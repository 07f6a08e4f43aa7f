# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Spell registry and per-cycle reconciliation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from spelltimer.constants import INDEFINITE_DURATION
from spelltimer.logging import get_logger
from spelltimer.names import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator

    from spelltimer.lookup import SpellLookup

logger = get_logger(__name__)


class Spell(BaseModel):
    """One tracked spell."""

    id: str
    display_name: str
    alias: str
    category: str = ""
    remaining: int = 0
    active: bool = False

    @property
    def indefinite(self) -> bool:
        return self.remaining == INDEFINITE_DURATION


class SpellRegistry:
    """Owns every spell seen this session plus the current seen-set.

    Spells are never removed; a spell that drops out of the status window
    is only deactivated by ``end_cycle``.
    """

    def __init__(self, lookup: SpellLookup | None = None) -> None:
        self.lookup = lookup
        self._spells: dict[str, Spell] = {}
        self._seen: set[str] = set()

    def __len__(self) -> int:
        return len(self._spells)

    def __contains__(self, spell_id: object) -> bool:
        return spell_id in self._spells

    def __iter__(self) -> Iterator[Spell]:
        return iter(self._spells.values())

    @property
    def seen(self) -> frozenset[str]:
        return frozenset(self._seen)

    def get(self, spell_id: str) -> Spell | None:
        return self._spells.get(spell_id)

    def active(self) -> list[Spell]:
        return [spell for spell in self._spells.values() if spell.active]

    def inactive(self) -> list[Spell]:
        return [spell for spell in self._spells.values() if not spell.active]

    def find_or_create(self, raw_name: str) -> Spell:
        spell_id = normalize(raw_name)
        spell = self._spells.get(spell_id)
        if spell is not None:
            return spell

        entry = self.lookup.get(spell_id) if self.lookup is not None else None
        spell = Spell(
            id=spell_id,
            display_name=raw_name,
            alias=entry.alias if entry else raw_name,
            category=entry.category if entry else "",
        )
        self._spells[spell_id] = spell
        logger.debug("spell_created", spell_id=spell_id, known=entry is not None)
        return spell

    def prepopulate(self) -> int:
        """Add an inactive placeholder for every lookup entry not yet tracked."""
        if self.lookup is None:
            return 0
        added = 0
        for entry in self.lookup.entries():
            if entry.id in self._spells:
                continue
            self._spells[entry.id] = Spell(
                id=entry.id,
                display_name=entry.name,
                alias=entry.alias,
                category=entry.category,
            )
            added += 1
        return added

    def record_observation(self, raw_name: str, duration: int) -> Spell:
        spell = self.find_or_create(raw_name)
        spell.remaining = duration
        spell.active = True
        self._seen.add(spell.id)
        return spell

    def begin_cycle(self) -> None:
        self._seen.clear()

    def end_cycle(self) -> list[str]:
        """Deactivate every spell not observed since ``begin_cycle``.

        Returns the ids that went from active to inactive.
        """
        expired: list[str] = []
        for spell in self._spells.values():
            if spell.id in self._seen:
                continue
            if spell.active:
                expired.append(spell.id)
            spell.active = False
            spell.remaining = 0
        return expired
