# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Clear/prompt protocol that decides when stale spells are swept."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from spelltimer.logging import get_logger

if TYPE_CHECKING:
    from spelltimer.registry import SpellRegistry

logger = get_logger(__name__)


class CycleState(StrEnum):
    CLOSED = "closed"
    OPEN = "open"


class ReconciliationCycle:
    """Two-state cycle: a clear-stream marker opens it, the next prompt closes it.

    A second clear while already open re-clears the seen-set, so spells
    recorded between the two clears are swept at the next prompt unless
    they are streamed again.
    """

    def __init__(self, registry: SpellRegistry) -> None:
        self.registry = registry
        self.state = CycleState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is CycleState.OPEN

    def clear_stream(self) -> None:
        if self.is_open:
            logger.debug("cycle_reopened", discarded=len(self.registry.seen))
        self.registry.begin_cycle()
        self.state = CycleState.OPEN

    def prompt(self) -> bool:
        """Close an open cycle. Returns True when a sweep happened."""
        if not self.is_open:
            return False
        expired = self.registry.end_cycle()
        self.state = CycleState.CLOSED
        logger.debug(
            "cycle_closed",
            active=len(self.registry.active()),
            expired=expired,
        )
        return True
