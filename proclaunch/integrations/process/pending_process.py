"""Unstarted process handles.

A ``PendingProcess`` carries a frozen ``ProcessStartInfo`` and can translate it
into ``subprocess.Popen`` keyword arguments. It never starts anything itself;
running, streaming and waiting belong to the execution layer.
"""

from __future__ import annotations

import functools
import os
import subprocess
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from proclaunch.domain.priority import ProcessPriority


class ProcessStartInfo(BaseModel):
    """Snapshot of everything needed to start a process."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    arguments: str | None = Field(
        default=None, description="Real (unredacted) argument string, space-joined."
    )
    arguments_argv: tuple[str, ...] = Field(
        default=(), description="Real argument fragments, one element per fragment."
    )
    working_directory: str | None = None
    priority: ProcessPriority = ProcessPriority.NORMAL
    environment: dict[str, str] = Field(default_factory=dict)
    timeout: timedelta = timedelta(minutes=2)
    stream_encoding: str
    standard_input_content: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.file_name, *self.arguments_argv]

    @property
    def timeout_seconds(self) -> float:
        return self.timeout.total_seconds()


class PendingProcess:
    """Process handle that has been configured but not started."""

    def __init__(self, *, start_info: ProcessStartInfo) -> None:
        self._start_info = start_info

    @property
    def start_info(self) -> ProcessStartInfo:
        return self._start_info

    def popen_kwargs(self) -> dict[str, Any]:
        """Builds keyword arguments for ``subprocess.Popen``.

        Environment overrides are merged over the current environment. Output is
        always piped and decoded with the configured encoding; stdin is piped
        only when there is content to send. Priority becomes a Windows
        creation flag, or a nice increment applied in the child elsewhere.

        Returns:
            Keyword arguments, including ``args`` (no shell).
        """

        info = self._start_info
        merged_env = os.environ.copy()
        merged_env.update(info.environment)

        kwargs: dict[str, Any] = {
            "args": info.argv,
            "cwd": info.working_directory,
            "env": merged_env,
            "encoding": info.stream_encoding,
            "stdout": subprocess.PIPE,
            "stderr": subprocess.PIPE,
            "stdin": subprocess.PIPE if info.standard_input_content is not None else None,
        }
        creation_flag = info.priority.creation_flag()
        if creation_flag is not None:
            kwargs["creationflags"] = creation_flag
        elif info.priority.nice_increment != 0:
            # Runs in the child between fork and exec.
            kwargs["preexec_fn"] = functools.partial(os.nice, info.priority.nice_increment)
        return kwargs


class PendingProcessFactory:
    """Default process factory producing ``PendingProcess`` handles."""

    def create(self, start_info: ProcessStartInfo) -> PendingProcess:
        return PendingProcess(start_info=start_info)
