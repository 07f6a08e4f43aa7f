# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Spell name normalization."""

from __future__ import annotations

_STRIPPED = str.maketrans("", "", " '-")


def normalize(name: str) -> str:
    """Turn a display name into a stable spell id.

    Removes spaces, apostrophes and hyphens; case is preserved, so
    ``"Ease Burden"`` and ``"EaseBurden"`` share an id but ``"ease burden"``
    does not.
    """
    return name.translate(_STRIPPED)
