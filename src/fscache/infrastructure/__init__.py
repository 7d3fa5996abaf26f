"""Infrastructure layer implementations for fscache."""

from fscache.infrastructure.filesystems import InMemoryFilesystem, LocalFilesystem
from fscache.infrastructure.serializers import JsonSerializer, PickleSerializer

__all__ = [
    "InMemoryFilesystem",
    "LocalFilesystem",
    "JsonSerializer",
    "PickleSerializer",
]
