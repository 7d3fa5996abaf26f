"""Local disk filesystem implementation.

Uses ``aiofiles`` so that file I/O does not block the event loop.
"""

import contextlib
import logging
import uuid
from collections.abc import AsyncIterator

import aiofiles
import aiofiles.os

from fscache.core.entities.node import Node, NodeKind

logger = logging.getLogger(__name__)


class LocalFilesystem:
    """Filesystem backed by the local disk."""

    def __init__(self, directory_mode: int = 0o777) -> None:
        """Initialize the local filesystem.

        Args:
            directory_mode: Mode for directories created on demand.
        """
        self._directory_mode = directory_mode

    async def file_exists(self, path: str) -> bool:
        """Check if a regular file exists at path."""
        return await aiofiles.os.path.isfile(path)

    async def read_file(self, path: str) -> bytes:
        """Read the whole file."""
        async with aiofiles.open(path, mode="rb") as f:
            return await f.read()

    async def write_file(self, path: str, contents: bytes) -> None:
        """Write contents to path, replacing any existing file.

        The contents go to a temporary file in the same directory that
        is then renamed over path, so readers and concurrent writers
        only ever see a complete file.
        """
        tmp_path = f"{path}.{uuid.uuid4().hex}.tmp"
        try:
            async with aiofiles.open(tmp_path, mode="wb") as f:
                await f.write(contents)
            await aiofiles.os.replace(tmp_path, path)
        except OSError:
            with contextlib.suppress(OSError):
                await aiofiles.os.remove(tmp_path)
            raise
        logger.debug("Wrote %d bytes to %s", len(contents), path)

    async def remove_file(self, path: str) -> None:
        """Remove the file at path."""
        await aiofiles.os.remove(path)

    async def create_directory_recursive(self, path: str) -> None:
        """Create a directory and any missing parents.

        Raises:
            FileExistsError: If the directory already exists.
        """
        await aiofiles.os.makedirs(path, mode=self._directory_mode)
        logger.debug("Created directory %s", path)

    async def list_recursive(self, path: str) -> AsyncIterator[Node]:
        """Stream every node below path, parents before children."""
        pending = [path]
        while pending:
            directory = pending.pop()
            with await aiofiles.os.scandir(directory) as entries:
                nodes = [
                    Node(
                        path=entry.path,
                        kind=(
                            NodeKind.DIRECTORY
                            if entry.is_dir(follow_symlinks=False)
                            else NodeKind.FILE
                        ),
                    )
                    for entry in entries
                ]

            for node in nodes:
                if node.kind == NodeKind.DIRECTORY:
                    pending.append(node.path)
                yield node
