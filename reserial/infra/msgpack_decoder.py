import msgpack
from typing import Any

from reserial.core.errors import FailureKind
from reserial.core.ports.decoder import Decoder


class MsgPackDecoder(Decoder):
    """
    MsgPack-based implementation of the Decoder interface.

    Used for `application/msgpack` bodies. Strings are decoded as
    UTF-8 and binary fields stay bytes.
    """
    failure_kind = FailureKind.msgpack_serialization_failed
    errors = (ValueError, TypeError, msgpack.UnpackException)

    def deserialize(self, data: bytes) -> Any:
        return msgpack.unpackb(data, raw=False)
