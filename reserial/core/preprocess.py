from dataclasses import dataclass

from reserial.core.ports.preprocessor import DataPreprocessor


class PassthroughPreprocessor(DataPreprocessor):
    """Returns the body unchanged."""

    def preprocess(self, data: bytes) -> bytes:
        return data


@dataclass(frozen=True)
class XSSIPreprocessor(DataPreprocessor):
    """
    Strips the anti-JSON-hijacking prefix some APIs put in front of
    their JSON documents, e.g. `)]}',` followed by a newline.

    Bodies that do not start with the prefix are returned unchanged.
    """

    prefix: bytes = b")]}',\n"

    def preprocess(self, data: bytes) -> bytes:
        if data.startswith(self.prefix):
            return data[len(self.prefix):]
        return data
