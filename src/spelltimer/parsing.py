# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Spell line parsing for the percWindow stream.

A spell line looks like ``Clumsiness (4 roisaen)``. The payload in
parentheses is resolved to a duration by the first rule that applies:

1. ``Osrel Meraud`` reports a charge percentage (``75%``).
2. ``Indefinite`` and ``OM`` mean the spell does not expire (999).
3. Everything else carries a count of ``roisaen`` (or ``roisan``).

The distinguished name and both markers are compared case-sensitively.
Only the listing command is matched case-insensitively (see plugin.py).
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

from spelltimer.constants import INDEFINITE_DURATION
from spelltimer.logging import get_logger

logger = get_logger(__name__)

DurationRule = Literal["percent", "indefinite", "roisaen", "unparsed"]

OSREL_MERAUD = "Osrel Meraud"
INDEFINITE_MARKERS = frozenset({"Indefinite", "OM"})

_SPELL_RE = re.compile(r"(?P<name>.+?)\s+\((?P<payload>.+)\)")
_ROISAEN_RE = re.compile(r"(?P<count>\d+) roisae?n")
_PERCENT_RE = re.compile(r"(?P<percent>\d+)%")

# Counts that do not fit a signed 64-bit integer are treated as unparsed.
MAX_DURATION = 2**63 - 1


class SpellMatch(BaseModel):
    """A spell name and duration pulled from one status line."""

    name: str
    payload: str
    duration: int
    rule: DurationRule

    model_config = ConfigDict(frozen=True)


def _leading_int(pattern: re.Pattern[str], group: str, payload: str) -> int | None:
    match = pattern.search(payload)
    if not match:
        return None
    try:
        value = int(match[group])
    except ValueError:
        return None
    if value > MAX_DURATION:
        return None
    return value


def resolve_duration(name: str, payload: str) -> tuple[int, DurationRule]:
    """Resolve a payload to ``(duration, rule)`` using the ordered rules."""
    if name == OSREL_MERAUD:
        percent = _leading_int(_PERCENT_RE, "percent", payload)
        if percent is None:
            return 0, "unparsed"
        return percent, "percent"

    if payload in INDEFINITE_MARKERS:
        return INDEFINITE_DURATION, "indefinite"

    count = _leading_int(_ROISAEN_RE, "count", payload)
    if count is None:
        return 0, "unparsed"
    return count, "roisaen"


def parse_spell_line(line: str) -> SpellMatch | None:
    """Extract a spell from a status line.

    Returns None for lines without a parenthesized suffix (blank lines,
    headers, unrelated window text).
    """
    match = _SPELL_RE.search(line)
    if not match:
        return None

    name = match["name"]
    payload = match["payload"]
    duration, rule = resolve_duration(name, payload)
    if rule == "unparsed":
        logger.debug("spell_duration_unparsed", name=name, payload=payload)
    return SpellMatch(name=name, payload=payload, duration=duration, rule=rule)
