"""Process launch descriptor.

``ProcessInfo`` describes what to launch and how to judge the outcome:

  - the executable, resolved against the working directory when one is set;
  - arguments, where secret fragments stay hidden in every public rendering;
  - scheduling priority, environment, timeout, stream encoding and stdin data;
  - the exit codes that count as success.

``create_process`` validates the working directory and hands the configuration
to a process factory. Nothing is executed here.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from datetime import timedelta

from proclaunch.config import (
    DEFAULT_PRIORITY,
    DEFAULT_TIMEOUT,
    LaunchSettings,
    platform_text_encoding,
)
from proclaunch.domain.priority import ProcessPriority
from proclaunch.errors import MissingDependencyError, WorkingDirectoryNotFoundError
from proclaunch.integrations.process.pending_process import (
    PendingProcessFactory,
    ProcessStartInfo,
)
from proclaunch.ports.file_system import FileSystem
from proclaunch.ports.process import ProcessFactory, ProcessHandle
from proclaunch.security.secure_arguments import SecureArguments


class ProcessInfo:
    """Configuration for a single external process launch."""

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        file_system: FileSystem,
        file_name: str,
        arguments: SecureArguments | None = None,
        working_directory: str | None = None,
        priority: ProcessPriority | None = None,
        success_exit_codes: Sequence[int] | None = None,
        *,
        process_factory: ProcessFactory | None = None,
        settings: LaunchSettings | None = None,
    ) -> None:
        if file_system is None:
            raise MissingDependencyError(param_name="file_system")
        if not file_name:
            raise ValueError("file_name must not be empty.")

        self._file_system = file_system
        self._process_factory = process_factory or PendingProcessFactory()
        self._raw_file_name = file_name
        self._working_directory = working_directory
        self._file_name = self._resolve_file_name()
        if not working_directory:
            self._logger.debug(
                "Process file resolved without working directory: file_name=%s local_file=%s",
                file_name,
                file_system.file_exists(file_name),
            )

        self.arguments = arguments
        self.success_exit_codes: Sequence[int] = (
            success_exit_codes if success_exit_codes is not None else (0,)
        )
        self.environment_variables: dict[str, str] = {}
        self.standard_input_content: str | None = None
        if settings is None:
            self.priority = priority or DEFAULT_PRIORITY
            self.timeout = DEFAULT_TIMEOUT
            self.stream_encoding = platform_text_encoding()
        else:
            self.priority = priority or settings.default_priority
            self.timeout = timedelta(seconds=settings.default_timeout_seconds)
            self.stream_encoding = settings.default_stream_encoding

    @property
    def file_name(self) -> str:
        """Returns the executable path after working-directory resolution."""

        return self._file_name

    @property
    def working_directory(self) -> str | None:
        return self._working_directory

    @working_directory.setter
    def working_directory(self, value: str | None) -> None:
        self._working_directory = value
        self._file_name = self._resolve_file_name()

    @property
    def private_arguments(self) -> str | None:
        """Returns the real argument string. Never log this value."""

        if self.arguments is None:
            return None
        return self.arguments.private_arguments

    @property
    def public_arguments(self) -> str | None:
        """Returns the argument string with secret fragments redacted."""

        if self.arguments is None:
            return None
        return self.arguments.public_arguments

    def check_if_success(self, exit_code: int) -> bool:
        """Returns True if ``exit_code`` is one of the success exit codes."""

        return exit_code in self.success_exit_codes

    def create_process(self) -> ProcessHandle:
        """Creates an unstarted process handle from the current configuration.

        Returns:
            A new handle owned by the caller. Each call yields an independent
            handle with its own configuration snapshot.

        Raises:
            WorkingDirectoryNotFoundError: If a working directory is set and does
                not exist.
        """

        if self._working_directory and not self._file_system.directory_exists(
            self._working_directory
        ):
            raise WorkingDirectoryNotFoundError(path=self._working_directory)

        start_info = ProcessStartInfo(
            file_name=self._file_name,
            arguments=self.private_arguments,
            arguments_argv=tuple(self.arguments.private_argv()) if self.arguments else (),
            working_directory=self._working_directory,
            priority=self.priority,
            environment=dict(self.environment_variables),
            timeout=self.timeout,
            stream_encoding=self.stream_encoding,
            standard_input_content=self.standard_input_content,
        )
        self._logger.debug(
            "Process created: file_name=%s arguments=%s working_directory=%s",
            self._file_name,
            self.public_arguments,
            self._working_directory,
        )
        return self._process_factory.create(start_info)

    def __str__(self) -> str:
        return (
            f"FileName: [{self._file_name}] -- Arguments: [{self.public_arguments or ''}] "
            f"-- WorkingDirectory: [{self._working_directory or ''}]"
        )

    def __repr__(self) -> str:
        return (
            f"ProcessInfo(file_name={self._file_name!r}, arguments={self.public_arguments!r}, "
            f"working_directory={self._working_directory!r})"
        )

    def _resolve_file_name(self) -> str:
        # A working directory always wins, whether or not the file exists.
        if self._working_directory:
            return os.path.join(self._working_directory, self._raw_file_name)
        return self._raw_file_name
