# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Replay a recorded JSONL client transcript through the plugin.

Each line is one event::

    {"ts": 1.0, "event": "xml", "data": {"xml": "<clearStream id=\\"percWindow\\"/>"}}
    {"ts": 1.1, "event": "text", "data": {"text": "Clumsiness (4 roisaen)", "window": "percWindow"}}
    {"ts": 1.2, "event": "input", "data": {"input": "/spelltimer"}}

Events of any other kind are skipped.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, ValidationError

from spelltimer.errors import TranscriptError
from spelltimer.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from spelltimer.plugin import SpellTimerPlugin

logger = get_logger(__name__)

EventKind = Literal["xml", "text", "input"]
_KINDS = ("xml", "text", "input")


class TranscriptEvent(BaseModel):
    event: EventKind
    ts: float | None = None
    data: dict[str, Any] = Field(default_factory=dict)


def read_transcript(text: str) -> Iterator[TranscriptEvent]:
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise TranscriptError(line_no, f"invalid JSON ({e.msg})") from e
        if not isinstance(record, dict):
            raise TranscriptError(line_no, "record is not an object")
        if record.get("event") not in _KINDS:
            logger.debug("transcript_event_skipped", line_no=line_no, kind=record.get("event"))
            continue
        try:
            yield TranscriptEvent.model_validate(record)
        except ValidationError as e:
            raise TranscriptError(line_no, str(e)) from e


def apply_event(plugin: SpellTimerPlugin, event: TranscriptEvent) -> str:
    """Feed one event to the plugin and return what it passed through."""
    data = event.data
    match event.event:
        case "xml":
            return plugin.parse_xml(str(data.get("xml", "")))
        case "text":
            return plugin.parse_text(str(data.get("text", "")), str(data.get("window", "")))
        case "input":
            return plugin.parse_input(str(data.get("input", "")))


def replay_transcript(plugin: SpellTimerPlugin, path: Path) -> int:
    """Replay every event in *path*. Returns the number of events applied."""
    count = 0
    for event in read_transcript(path.read_text(encoding="utf-8")):
        apply_event(plugin, event)
        count += 1
    logger.info("transcript_replayed", path=str(path), events=count)
    return count
