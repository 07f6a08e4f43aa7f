# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Static spell lookup table (aliases and categories)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from spelltimer.constants import DEFAULT_LOOKUP_FILENAME, LOOKUP_FIELD_SEPARATOR
from spelltimer.logging import get_logger
from spelltimer.names import normalize

if TYPE_CHECKING:
    from spelltimer.host import Host

logger = get_logger(__name__)


class LookupEntry(BaseModel):
    id: str
    name: str
    alias: str
    category: str

    model_config = ConfigDict(frozen=True)


class SpellLookup(BaseModel):
    """Read-only mapping of spell id to lookup entry."""

    entries_by_id: dict[str, LookupEntry] = Field(default_factory=dict)

    def get(self, spell_id: str) -> LookupEntry | None:
        return self.entries_by_id.get(spell_id)

    def entries(self) -> list[LookupEntry]:
        return list(self.entries_by_id.values())

    def __contains__(self, spell_id: object) -> bool:
        return spell_id in self.entries_by_id

    def __len__(self) -> int:
        return len(self.entries_by_id)


def parse_lookup(text: str) -> SpellLookup:
    """Parse ``name|alias|category`` records, one per line.

    Records with the wrong number of fields are skipped with a warning.
    An empty alias falls back to the spell name.
    """
    entries: dict[str, LookupEntry] = {}
    for line_no, raw in enumerate(text.split("\n"), start=1):
        line = raw.rstrip("\r")
        if not line:
            continue
        fields = line.split(LOOKUP_FIELD_SEPARATOR)
        if len(fields) != 3:
            logger.warning("lookup_record_invalid", line_no=line_no, record=line, fields=len(fields))
            continue

        name, alias, category = fields
        spell_id = normalize(name)
        entries[spell_id] = LookupEntry(id=spell_id, name=name, alias=alias or name, category=category)

    return SpellLookup(entries_by_id=entries)


class LookupLoader:
    """Loads the lookup table from the host at most once."""

    def __init__(self, filename: str = DEFAULT_LOOKUP_FILENAME) -> None:
        self.filename = filename
        self._table: SpellLookup | None = None

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def load(self, host: Host) -> SpellLookup:
        if self._table is not None:
            return self._table

        text = host.load(self.filename)
        if text is None:
            # Not remembered: a later call retries once the file exists.
            logger.info("lookup_source_missing", filename=self.filename)
            return SpellLookup()

        self._table = parse_lookup(text)
        logger.info("lookup_loaded", filename=self.filename, entries=len(self._table))
        return self._table
