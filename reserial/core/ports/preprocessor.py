from typing import Protocol


class DataPreprocessor(Protocol):
    """
    Transforms a response body before it reaches a decoder.

    Implementations must be pure and must not raise: they are applied
    inside the serializer call, whose failures are reported only
    through the returned Result.
    """

    def preprocess(self, data: bytes) -> bytes:
        """Return the bytes the decoder should see."""
