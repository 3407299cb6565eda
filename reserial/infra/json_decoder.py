import json
from typing import Any

from reserial.core.errors import FailureKind
from reserial.core.ports.decoder import Decoder


class JSONDecoder(Decoder):
    """
    JSON implementation of the Decoder interface.

    The document may be UTF-8, UTF-16 or UTF-32 encoded; the encoding
    is detected from the leading bytes. Undecodable bytes surface as
    UnicodeDecodeError, malformed documents as JSONDecodeError, both
    ValueError subclasses. Documents nested deeper than the interpreter
    recursion limit raise RecursionError.
    """
    failure_kind = FailureKind.json_serialization_failed
    errors = (ValueError, RecursionError)

    def deserialize(self, data: bytes) -> Any:
        return json.loads(data)
