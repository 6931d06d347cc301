"""Errors raised while describing or materializing a process launch.

Two conditions are distinguished so callers can branch on "bad setup" versus
"bad environment". Neither is retried or logged here.
"""

from __future__ import annotations


class MissingDependencyError(ValueError):
    """Raised when a mandatory collaborator was not supplied."""

    def __init__(self, *, param_name: str) -> None:
        super().__init__(f"Required dependency is missing: param_name={param_name}")
        self.param_name = param_name


class WorkingDirectoryNotFoundError(FileNotFoundError):
    """Raised when a custom working directory does not exist at launch time."""

    def __init__(self, *, path: str) -> None:
        super().__init__(f"Working directory does not exist: path={path}")
        self.path = path
