# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client variables exported after each cycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spelltimer.constants import ACTIVE_SPELLS_VARIABLE, INACTIVE_SPELLS_VARIABLE, VARIABLE_PREFIX

if TYPE_CHECKING:
    from spelltimer.registry import Spell, SpellRegistry


def spell_variables(spell: Spell, prefix: str = VARIABLE_PREFIX) -> dict[str, str]:
    base = f"{prefix}{spell.id}"
    return {
        f"{base}.name": spell.display_name,
        f"{base}.active": "1" if spell.active else "0",
        f"{base}.duration": str(spell.remaining),
        f"{base}.alias": spell.alias,
        f"{base}.type": spell.category,
    }


def build_variables(registry: SpellRegistry, prefix: str = VARIABLE_PREFIX) -> dict[str, str]:
    """Build the full variable map, in registry order.

    Per spell: ``<prefix><id>.name/.active/.duration/.alias/.type``.
    Aggregates: ``activespells`` and ``inactivespells`` as ``|``-joined ids.
    """
    variables: dict[str, str] = {}
    active: list[str] = []
    inactive: list[str] = []
    for spell in registry:
        variables.update(spell_variables(spell, prefix))
        (active if spell.active else inactive).append(spell.id)

    variables[ACTIVE_SPELLS_VARIABLE] = "|".join(active)
    variables[INACTIVE_SPELLS_VARIABLE] = "|".join(inactive)
    return variables
