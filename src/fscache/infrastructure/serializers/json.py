"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from fscache.core.exceptions import SerializationError

DATETIME_TAG = "__datetime__"
DATE_TAG = "__date__"
ESCAPED_TAG = "__escaped__"
TAGS = frozenset({DATETIME_TAG, DATE_TAG, ESCAPED_TAG})


class JsonSerializer:
    """JSON serializer for cache entries.

    Human-readable alternative to pickle for JSON-compatible payloads.
    Dates and datetimes are stored as tagged ISO strings and restored
    on load.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(self._escape(value), default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Args:
            data: The bytes to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding)
            return json.loads(json_str, object_hook=self._object_hook)
        except (UnicodeDecodeError, ValueError, TypeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Args:
            obj: The object to encode.

        Returns:
            A JSON-serializable representation of the object.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, datetime):
            return {DATETIME_TAG: obj.isoformat()}
        if isinstance(obj, date):
            return {DATE_TAG: obj.isoformat()}
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _escape(self, value: Any) -> Any:
        """Wrap payload dicts that look like a tagged value.

        A single-key dict whose key is a tag is stored as
        ``{"__escaped__": [key, value]}`` so it loads back as a dict.
        """
        if isinstance(value, dict):
            escaped = {k: self._escape(v) for k, v in value.items()}
            if len(escaped) == 1:
                ((k, v),) = escaped.items()
                if k in TAGS:
                    return {ESCAPED_TAG: [k, v]}
            return escaped
        if isinstance(value, (list, tuple)):
            return [self._escape(v) for v in value]
        return value

    @staticmethod
    def _object_hook(obj: dict[str, Any]) -> Any:
        if len(obj) != 1:
            return obj
        ((tag, value),) = obj.items()
        if tag == DATETIME_TAG:
            return datetime.fromisoformat(value)
        if tag == DATE_TAG:
            return date.fromisoformat(value)
        if tag == ESCAPED_TAG:
            if not isinstance(value, list) or len(value) != 2:
                raise ValueError(f"Malformed escaped object: {value!r}")
            return {value[0]: value[1]}
        return obj
