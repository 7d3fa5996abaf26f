"""Core interfaces (Protocol classes) for fscache."""

from fscache.core.interfaces.cache import ICache
from fscache.core.interfaces.filesystem import IFilesystem
from fscache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICache",
    "IFilesystem",
    "ISerializer",
]
