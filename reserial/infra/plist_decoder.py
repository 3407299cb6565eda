import plistlib
from typing import Any
from xml.parsers.expat import ExpatError

from reserial.core.errors import FailureKind
from reserial.core.ports.decoder import Decoder


class PropertyListDecoder(Decoder):
    """
    Property list implementation of the Decoder interface.

    Both the XML and the binary (`bplist00`) formats are accepted; the
    format is detected from the header. plistlib lets some malformed
    values escape as AttributeError (e.g. an unparsable <date>), and
    deeply nested binary documents as RecursionError.
    """
    failure_kind = FailureKind.property_list_serialization_failed
    errors = (plistlib.InvalidFileException, ValueError, ExpatError, AttributeError, RecursionError)

    def deserialize(self, data: bytes) -> Any:
        return plistlib.loads(data)
