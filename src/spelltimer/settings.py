# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spelltimer.constants import DEFAULT_LOOKUP_FILENAME
from spelltimer.paths import default_data_root

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    data_root: Path = Field(default_factory=default_data_root)
    lookup_filename: str = DEFAULT_LOOKUP_FILENAME
    prepopulate: bool = False
    log_level: LogLevel = "WARNING"
    log_format: Literal["console", "json"] = "console"
    log_stream: Literal["stderr", "stdout"] = "stderr"

    model_config = SettingsConfigDict(
        env_prefix="SPELLTIMER_",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
