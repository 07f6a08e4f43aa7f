# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the spell registry."""

from __future__ import annotations

from spelltimer.registry import SpellRegistry


class TestFindOrCreate:
    def test_new_spell_is_inactive(self) -> None:
        """Test new spells start inactive with no duration."""
        registry = SpellRegistry()

        spell = registry.find_or_create("Shadows")

        assert spell.id == "Shadows"
        assert spell.display_name == "Shadows"
        assert spell.remaining == 0
        assert spell.active is False

    def test_unknown_spell_defaults(self, registry: SpellRegistry) -> None:
        """Test spells missing from the lookup use defaults."""
        spell = registry.find_or_create("Shadow-ling")

        assert spell.id == "Shadowling"
        assert spell.alias == "Shadow-ling"
        assert spell.category == ""

    def test_known_spell_is_enriched(self, registry: SpellRegistry) -> None:
        """Test lookup alias and category are copied onto new spells."""
        spell = registry.find_or_create("Ease Burden")

        assert spell.alias == "EB"
        assert spell.category == "Utility"

    def test_empty_lookup_alias_falls_back_to_name(self, registry: SpellRegistry) -> None:
        spell = registry.find_or_create("Clumsiness")

        assert spell.alias == "Clumsiness"
        assert spell.category == "Debuff"

    def test_same_id_returns_existing_spell(self, registry: SpellRegistry) -> None:
        """Test names with the same id share one spell."""
        first = registry.find_or_create("Ease Burden")
        second = registry.find_or_create("EaseBurden")

        assert first is second
        assert second.display_name == "Ease Burden"


def test_record_observation_activates_and_marks_seen() -> None:
    """Test an observation activates the spell and marks it seen."""
    registry = SpellRegistry()

    spell = registry.record_observation("Clumsiness", 4)

    assert spell.active is True
    assert spell.remaining == 4
    assert "Clumsiness" in registry.seen


def test_end_cycle_without_begin_keeps_seen_spells() -> None:
    """Test spells seen since the last begin survive end_cycle."""
    registry = SpellRegistry()
    registry.record_observation("Foo", 5)

    registry.end_cycle()

    spell = registry.get("Foo")
    assert spell is not None
    assert spell.active is True
    assert spell.remaining == 5


def test_end_cycle_deactivates_unseen_spells() -> None:
    """Test end_cycle deactivates and zeroes unseen spells."""
    registry = SpellRegistry()
    registry.record_observation("Foo", 5)
    registry.begin_cycle()

    expired = registry.end_cycle()

    spell = registry.get("Foo")
    assert spell is not None
    assert spell.active is False
    assert spell.remaining == 0
    assert expired == ["Foo"]


def test_cycle_round_trip() -> None:
    """Test a spell stays active for one cycle and expires in the next."""
    registry = SpellRegistry()

    registry.begin_cycle()
    registry.record_observation("Bar", 10)
    registry.end_cycle()

    bar = registry.get("Bar")
    assert bar is not None
    assert bar.active is True
    assert bar.remaining == 10

    registry.begin_cycle()
    registry.end_cycle()

    assert bar.active is False
    assert bar.remaining == 0
    assert "Bar" in registry


def test_begin_cycle_is_idempotent() -> None:
    """Test repeated begin_cycle calls just clear the seen-set."""
    registry = SpellRegistry()
    registry.record_observation("Foo", 5)

    registry.begin_cycle()
    registry.begin_cycle()

    assert registry.seen == frozenset()


def test_active_and_inactive_keep_insertion_order() -> None:
    """Test listings follow insertion order."""
    registry = SpellRegistry()
    for name in ("Zeta", "Alpha", "Mid"):
        registry.find_or_create(name)
    registry.begin_cycle()
    registry.record_observation("Mid", 3)
    registry.record_observation("Zeta", 7)
    registry.end_cycle()

    assert [spell.id for spell in registry.active()] == ["Zeta", "Mid"]
    assert [spell.id for spell in registry.inactive()] == ["Alpha"]
    assert [spell.id for spell in registry] == ["Zeta", "Alpha", "Mid"]


def test_prepopulate_adds_inactive_placeholders(registry: SpellRegistry) -> None:
    """Test prepopulate fills in lookup spells without touching tracked ones."""
    registry.record_observation("Ease Burden", 8)

    added = registry.prepopulate()

    assert added == 3
    assert len(registry) == 4
    placeholder = registry.get("ManifestForce")
    assert placeholder is not None
    assert placeholder.display_name == "Manifest Force"
    assert placeholder.alias == "MAF"
    assert placeholder.active is False
    ease = registry.get("EaseBurden")
    assert ease is not None
    assert ease.remaining == 8


def test_prepopulate_without_lookup() -> None:
    assert SpellRegistry().prepopulate() == 0
