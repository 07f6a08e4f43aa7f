# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Host application interface used by the plugin."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from spelltimer.logging import get_logger
from spelltimer.paths import resolve_data_file

logger = get_logger(__name__)


class Host(Protocol):
    """Operations the hosting client exposes to plugins."""

    def send(self, text: str) -> None:
        """Send a command line (e.g. ``#echo ...``) to the client."""
        raise NotImplementedError

    def set_variable(self, name: str, value: str) -> None:
        """Set a client variable."""
        raise NotImplementedError

    def load(self, filename: str) -> str | None:
        """Return the contents of a plugin data file, or None if missing or unreadable."""
        raise NotImplementedError


class MemoryHost(BaseModel):
    """In-process host that records everything a plugin does.

    Data files come from ``files`` first, then from ``data_root`` if set.
    """

    files: dict[str, str] = Field(default_factory=dict)
    data_root: Path | None = None
    sent: list[str] = Field(default_factory=list)
    variables: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def send(self, text: str) -> None:
        self.sent.append(text)

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def load(self, filename: str) -> str | None:
        if filename in self.files:
            return self.files[filename]
        if self.data_root is None:
            return None
        try:
            path = resolve_data_file(self.data_root, filename)
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # Unreadable files are reported as missing.
            logger.warning("data_file_unreadable", filename=filename, error=str(e))
            return None

    def echoed(self) -> list[str]:
        """Sent lines with the ``#echo `` prefix removed."""
        return [line.removeprefix("#echo ") for line in self.sent if line.startswith("#echo")]
