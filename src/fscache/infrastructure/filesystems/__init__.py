"""Filesystem implementations."""

from fscache.infrastructure.filesystems.local import LocalFilesystem
from fscache.infrastructure.filesystems.memory import InMemoryFilesystem

__all__ = ["InMemoryFilesystem", "LocalFilesystem"]
