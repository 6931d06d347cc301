"""Launch defaults.

``DEFAULT_*`` values are fixed and used whenever a descriptor is built without
explicit settings. ``LaunchSettings`` lets a caller opt into overriding them
through ``PROCLAUNCH_*`` environment variables or a ``.env`` file. Nothing here
holds secrets.
"""

from __future__ import annotations

import locale
from datetime import timedelta
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from proclaunch.domain.priority import ProcessPriority

DEFAULT_TIMEOUT = timedelta(minutes=2)
DEFAULT_PRIORITY = ProcessPriority.NORMAL


def platform_text_encoding() -> str:
    """Returns the platform's preferred text encoding."""

    return locale.getpreferredencoding(False)


class LaunchSettings(BaseSettings):
    """Caller-supplied overrides for new process descriptors."""

    model_config = SettingsConfigDict(
        env_prefix="PROCLAUNCH_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT.total_seconds(), gt=0)
    default_stream_encoding: str = Field(default_factory=platform_text_encoding)
    default_priority: ProcessPriority = DEFAULT_PRIORITY

    @field_validator("default_stream_encoding", "default_priority", mode="before")
    @classmethod
    def _normalize_env_string(cls, value: Any) -> Any:
        """Trims whitespace and a single pair of surrounding quotes.

        ``docker --env-file`` keeps quotes verbatim, which would otherwise end up
        in the encoding name.
        """

        if not isinstance(value, str):
            return value
        text = value.strip()
        if len(text) >= 2 and ((text[0] == text[-1] == '"') or (text[0] == text[-1] == "'")):
            text = text[1:-1].strip()
        return text
