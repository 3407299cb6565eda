import codecs
import email.message
from collections.abc import Mapping
from dataclasses import dataclass

from reserial.core.models.response import Response

DEFAULT_ENCODING = "utf-8"


def normalize_encoding(name: str) -> str | None:
    """
    Return the canonical codec name for `name`, or None when Python
    has no text codec registered under that name. Bytes-to-bytes codecs
    (base64, hex, zlib, ...) are not text encodings.
    """
    try:
        info = codecs.lookup(name.strip().strip('"').strip("'"))
    except (LookupError, ValueError):
        return None
    if not getattr(info, "_is_text_encoding", True):
        return None
    return info.name


def charset_from_headers(headers: Mapping[str, str] | None) -> str | None:
    """
    Extract the `charset` parameter of the Content-Type header.

    Returns the canonical codec name, or None when the header is
    absent, carries no charset, or names an unknown encoding.
    """
    if not headers:
        return None

    content_type = headers.get("content-type")
    if not content_type:
        return None

    # Same parameter parsing rules as MIME headers (quoting, case, spacing).
    msg = email.message.Message()
    msg["content-type"] = content_type
    charset = msg.get_param("charset")
    if not charset or not isinstance(charset, str):
        return None

    return normalize_encoding(charset)


@dataclass(frozen=True)
class EncodingResolver:
    """
    Chooses the text encoding used to decode a response body.

    Precedence:
        1. the explicit encoding given at construction,
        2. the charset advertised by the response Content-Type header,
        3. the fallback encoding (UTF-8 unless configured otherwise).
    """

    explicit: str | None = None
    fallback: str = DEFAULT_ENCODING

    def __post_init__(self):
        if self.explicit is not None:
            canonical = normalize_encoding(self.explicit)
            if canonical is None:
                raise ValueError(f"Unknown text encoding: {self.explicit!r}")
            object.__setattr__(self, "explicit", canonical)

        fallback = normalize_encoding(self.fallback)
        if fallback is None:
            raise ValueError(f"Unknown fallback encoding: {self.fallback!r}")
        object.__setattr__(self, "fallback", fallback)

    def resolve(self, response: Response | None) -> str:
        if self.explicit is not None:
            return self.explicit

        if response is not None:
            inferred = charset_from_headers(response.headers)
            if inferred is not None:
                return inferred

        return self.fallback
