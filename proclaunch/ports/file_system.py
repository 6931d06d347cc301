"""File system port used for path checks before a launch."""

from __future__ import annotations

from typing import Protocol


class FileSystem(Protocol):
    """Port for file system existence checks."""

    def file_exists(self, path: str) -> bool:
        """Check if a file exists.

        Consulted when a descriptor is built without a working directory. The
        result is reported in diagnostics only; the file name is kept as given.

        Args:
            path: File path, absolute or relative to the current directory.

        Returns:
            True if the path exists and is a file, False otherwise.
        """
        ...

    def directory_exists(self, path: str) -> bool:
        """Check if a directory exists.

        Args:
            path: Directory path.

        Returns:
            True if the path exists and is a directory, False otherwise.
        """
        ...
