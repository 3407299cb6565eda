from typing import Any, Protocol

from reserial.core.errors import FailureKind


class Decoder(Protocol):
    """
    Parses a structured document (JSON, property list, ...) into
    generic Python values.

    Implementations wrap an existing parser. They let the parser's
    own exceptions propagate and declare them in `errors`, so the
    serializer can map them to `failure_kind` while keeping the native
    exception as the underlying cause.
    """

    failure_kind: FailureKind
    """Failure reported when the document cannot be parsed."""

    errors: tuple[type[BaseException], ...]
    """Exceptions raised by the parser for malformed input."""

    def deserialize(self, data: bytes) -> Any:
        """Decode a non-empty document into dicts, lists and scalars."""
