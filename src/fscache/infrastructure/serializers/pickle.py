"""Pickle serializer implementation."""

import pickle
from typing import Any

from fscache.core.exceptions import SerializationError


class PickleSerializer:
    """Pickle serializer for cache entries.

    Round-trips any picklable Python value. Loading a pickle can run
    arbitrary code, so only point a cache using it at a directory
    that nobody else can write to.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        """Initialize the pickle serializer.

        Args:
            protocol: Pickle protocol version to write.
        """
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Raises:
            SerializationError: If the value cannot be pickled.
        """
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except Exception as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Unpickling corrupt data can fail with almost any exception,
        all of them are reported as SerializationError.

        Raises:
            SerializationError: If the data is not a valid pickle.
        """
        try:
            return pickle.loads(data)
        except Exception as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e
