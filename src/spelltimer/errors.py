# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for spelltimer tooling."""


class SpellTimerError(Exception):
    """Base exception for spelltimer."""

    pass


class TranscriptError(SpellTimerError):
    """A replay transcript record could not be decoded."""

    def __init__(self, line_no: int, reason: str) -> None:
        super().__init__(f"transcript line {line_no}: {reason}")
        self.line_no = line_no
        self.reason = reason
