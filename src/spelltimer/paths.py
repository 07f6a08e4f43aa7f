# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem paths for plugin data files."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

ENV_DATA_ROOT = "SPELLTIMER_DATA_ROOT"


def default_data_root() -> Path:
    """Get the default directory holding plugin data files."""
    env_root = os.getenv(ENV_DATA_ROOT)
    if env_root:
        return Path(env_root)
    return Path(user_data_dir("spelltimer", "spelltimer"))


def resolve_data_file(data_root: Path, filename: str) -> Path:
    """Resolve *filename* inside *data_root*, refusing paths that escape it."""
    root = data_root.resolve()
    candidate = (root / filename).resolve()
    if candidate != root and root not in candidate.parents:
        raise ValueError(f"Path outside data root: {filename}")
    return candidate
