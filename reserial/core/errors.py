from enum import StrEnum
from os import PathLike
from typing import Any


class FailureKind(StrEnum):
    """
    Closed set of reasons a response could not be serialized.

    Callers branch on the kind rather than on the type of the
    underlying cause, which is only attached for diagnostics.
    """
    input_data_nil = "input_data_nil"
    """An in-memory body was required but none was supplied."""

    input_data_nil_or_zero_length = "input_data_nil_or_zero_length"
    """A structured document was required but the body was absent or empty."""

    input_file_nil = "input_file_nil"
    """A downloaded file was required but no location was supplied."""

    input_file_read_failed = "input_file_read_failed"
    """The downloaded file could not be read. The OS error is attached."""

    string_serialization_failed = "string_serialization_failed"
    """The bytes are not valid under the resolved text encoding."""

    json_serialization_failed = "json_serialization_failed"
    property_list_serialization_failed = "property_list_serialization_failed"
    msgpack_serialization_failed = "msgpack_serialization_failed"

    decoding_failed = "decoding_failed"
    """The document parsed but does not match the requested shape."""

    invalid_empty_response = "invalid_empty_response"
    """An empty body was allowed but the requested shape cannot represent it."""


class ResponseSerializationError(Exception):
    """
    Failure produced by a response serializer.

    The error is always returned inside a Result; serializers never
    raise it past their call boundary. `underlying` holds the lower
    level cause (upstream transport error, OSError, parser error)
    when there is one and is also chained as `__cause__`.
    """

    def __init__(
        self,
        kind: FailureKind,
        underlying: BaseException | None = None,
        *,
        encoding: str | None = None,
        path: str | PathLike | None = None,
        target: Any = None,
    ) -> None:
        self.kind = kind
        self.underlying = underlying
        self.encoding = encoding
        self.path = path
        self.target = target
        self.__cause__ = underlying
        super().__init__(self._describe())

    def _describe(self) -> str:
        parts = [f"Response could not be serialized: {self.kind}"]
        if self.encoding is not None:
            parts.append(f"encoding={self.encoding}")
        if self.path is not None:
            parts.append(f"path={self.path}")
        if self.target is not None:
            parts.append(f"target={getattr(self.target, '__name__', self.target)}")
        if self.underlying is not None:
            parts.append(f"cause={self.underlying!r}")
        return ", ".join(parts)

    def _identity(self) -> tuple:
        cause = self.underlying
        cause_key = None if cause is None else (type(cause), str(cause))
        return self.kind, self.encoding, self.path, self.target, cause_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseSerializationError):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((self.kind, self.encoding, str(self.path)))

    def __repr__(self) -> str:
        return f"ResponseSerializationError({self.kind!s}, underlying={self.underlying!r})"

    @property
    def is_input_data_nil(self) -> bool:
        return self.kind is FailureKind.input_data_nil

    @property
    def is_input_data_nil_or_zero_length(self) -> bool:
        return self.kind is FailureKind.input_data_nil_or_zero_length

    @property
    def is_input_file_nil(self) -> bool:
        return self.kind is FailureKind.input_file_nil

    @property
    def is_input_file_read_failed(self) -> bool:
        return self.kind is FailureKind.input_file_read_failed

    @property
    def is_string_serialization_failed(self) -> bool:
        return self.kind is FailureKind.string_serialization_failed

    @property
    def is_json_serialization_failed(self) -> bool:
        return self.kind is FailureKind.json_serialization_failed

    @property
    def is_property_list_serialization_failed(self) -> bool:
        return self.kind is FailureKind.property_list_serialization_failed

    @property
    def is_msgpack_serialization_failed(self) -> bool:
        return self.kind is FailureKind.msgpack_serialization_failed

    @property
    def is_decoding_failed(self) -> bool:
        return self.kind is FailureKind.decoding_failed

    @property
    def is_invalid_empty_response(self) -> bool:
        return self.kind is FailureKind.invalid_empty_response
