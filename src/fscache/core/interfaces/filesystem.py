"""Filesystem interface."""

from collections.abc import AsyncIterator
from typing import Protocol

from fscache.core.entities.node import Node


class IFilesystem(Protocol):
    """Contract for the asynchronous filesystem a FileCache stores into.

    Failures are raised as ``OSError`` subclasses so that callers can
    tell a missing file or an existing directory apart from other
    errors.
    """

    async def file_exists(self, path: str) -> bool:
        """Check if a regular file exists at path.

        Args:
            path: The file path to check.

        Returns:
            True if the file exists, False otherwise.
        """
        ...

    async def read_file(self, path: str) -> bytes:
        """Read the whole file.

        Args:
            path: The file path to read.

        Returns:
            The file contents.

        Raises:
            OSError: If the file is missing or unreadable.
        """
        ...

    async def write_file(self, path: str, contents: bytes) -> None:
        """Write contents to path, replacing any existing file.

        Args:
            path: The file path to write.
            contents: The bytes to store.

        Raises:
            OSError: If the file cannot be written.
        """
        ...

    async def remove_file(self, path: str) -> None:
        """Remove the file at path.

        Args:
            path: The file path to remove.

        Raises:
            OSError: If the file is missing or cannot be removed.
        """
        ...

    async def create_directory_recursive(self, path: str) -> None:
        """Create a directory and any missing parents.

        Args:
            path: The directory path to create.

        Raises:
            FileExistsError: If the directory already exists.
            OSError: If the directory cannot be created.
        """
        ...

    def list_recursive(self, path: str) -> AsyncIterator[Node]:
        """Stream every node below path.

        Args:
            path: The directory to walk.

        Returns:
            An async iterator of nodes. Listing errors are raised from
            the iterator.
        """
        ...
