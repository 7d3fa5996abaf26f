"""Filesystem node descriptor."""

from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    """Kind of node reported by a recursive listing."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Node:
    """A single entry reported while listing a directory tree."""

    path: str
    kind: NodeKind

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE
