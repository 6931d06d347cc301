"""Process creation port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from proclaunch.integrations.process.pending_process import ProcessStartInfo


class ProcessHandle(Protocol):
    """Caller-owned handle for a process that has not been started yet."""

    @property
    def start_info(self) -> ProcessStartInfo: ...


class ProcessFactory(Protocol):
    """Port that turns a launch snapshot into a process handle."""

    def create(self, start_info: ProcessStartInfo) -> ProcessHandle:
        """Creates an unstarted process handle.

        Args:
            start_info: Complete launch configuration.

        Returns:
            A new handle. Ownership transfers to the caller.
        """
        ...
