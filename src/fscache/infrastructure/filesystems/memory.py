"""In-memory filesystem implementation."""

import errno
import os
from collections.abc import AsyncIterator

from fscache.core.entities.node import Node, NodeKind


class InMemoryFilesystem:
    """Filesystem held in process memory.

    Suitable for tests and throwaway caches. Paths are plain strings
    split on ``os.sep``; writing a file does not require its directory
    to have been created first.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self._directories: set[str] = set()

    async def file_exists(self, path: str) -> bool:
        """Check if a file exists at path."""
        return self._normalize(path) in self._files

    async def read_file(self, path: str) -> bytes:
        """Read the whole file."""
        try:
            return self._files[self._normalize(path)]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from None

    async def write_file(self, path: str, contents: bytes) -> None:
        """Write contents to path, replacing any existing file."""
        normalized = self._normalize(path)
        if normalized in self._directories:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        if self._file_ancestor(normalized) is not None:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        self._files[normalized] = bytes(contents)

    async def remove_file(self, path: str) -> None:
        """Remove the file at path."""
        try:
            del self._files[self._normalize(path)]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from None

    async def create_directory_recursive(self, path: str) -> None:
        """Create a directory and any missing parents.

        Raises:
            FileExistsError: If the path already exists.
            NotADirectoryError: If a parent of the path is a file.
        """
        normalized = self._normalize(path)
        if normalized in self._directories or normalized in self._files:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)
        if self._file_ancestor(normalized) is not None:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

        current = normalized
        while current and current != os.sep and current not in self._directories:
            self._directories.add(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

    async def list_recursive(self, path: str) -> AsyncIterator[Node]:
        """Stream every node below path, directories first."""
        prefix = self._normalize(path).rstrip(os.sep) + os.sep
        for directory in sorted(self._directories):
            if directory.startswith(prefix):
                yield Node(path=directory, kind=NodeKind.DIRECTORY)
        for file_path in sorted(self._files):
            if file_path.startswith(prefix):
                yield Node(path=file_path, kind=NodeKind.FILE)

    def directory_exists(self, path: str) -> bool:
        """Return True if the directory was created."""
        return self._normalize(path) in self._directories

    def __len__(self) -> int:
        """Return the number of stored files."""
        return len(self._files)

    def _file_ancestor(self, normalized: str) -> str | None:
        """Return the first parent of a path that is a file, if any."""
        current = os.path.dirname(normalized)
        while current and current != os.sep:
            if current in self._files:
                return current
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return None

    @staticmethod
    def _normalize(path: str) -> str:
        if len(path) > 1:
            return path.rstrip(os.sep)
        return path
