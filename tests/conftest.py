import json
import plistlib
from dataclasses import dataclass
from pathlib import Path

import pytest

from reserial.bootstrap import deps
from reserial.bootstrap.config.loader import get_configfile
from reserial.core.errors import FailureKind, ResponseSerializationError


@dataclass
class DownloadFiles:
    json_empty: Path
    json_valid: Path
    json_invalid: Path
    plist_empty: Path
    plist_valid: Path
    plist_invalid: Path
    string_empty: Path
    string_utf8: Path
    string_utf32: Path
    missing: Path


@pytest.fixture
def upstream_error() -> ResponseSerializationError:
    return ResponseSerializationError(FailureKind.input_data_nil)


@pytest.fixture
def transport_error() -> ConnectionError:
    return ConnectionError("connection reset by peer")


@pytest.fixture
def files(tmp_path) -> DownloadFiles:
    base = tmp_path / "downloads"
    base.mkdir()

    f = DownloadFiles(
        json_empty=base / "empty_data.json",
        json_valid=base / "valid_data.json",
        json_invalid=base / "invalid_data.json",
        plist_empty=base / "empty.data",
        plist_valid=base / "valid.data",
        plist_invalid=base / "invalid.data",
        string_empty=base / "empty_string.txt",
        string_utf8=base / "utf8_string.txt",
        string_utf32=base / "utf32_string.txt",
        missing=base / "this" / "file" / "does" / "not" / "exist.txt",
    )

    f.json_empty.write_bytes(b"")
    f.json_valid.write_bytes(json.dumps({"foo": "bar", "count": 2}).encode())
    f.json_invalid.write_bytes(b"definitely not valid json")
    f.plist_empty.write_bytes(b"")
    f.plist_valid.write_bytes(plistlib.dumps({"foo": "bar"}))
    f.plist_invalid.write_bytes(b"definitely not a property list")
    f.string_empty.write_bytes(b"")
    f.string_utf8.write_bytes("random data".encode("utf-8"))
    f.string_utf32.write_bytes("random data".encode("utf-32"))

    return f


@pytest.fixture
def reset_deps(monkeypatch, tmp_path):
    """
    Isolate configuration: no config file, no RESERIAL_* variables and
    empty factory caches, before and after the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RESERIALCONFIG", raising=False)
    for name in (
        "RESERIAL_EMPTY_RESPONSE_CODES",
        "RESERIAL_DEFAULT_ENCODING",
        "RESERIAL_STRIP_XSSI_PREFIX",
        "RESERIAL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    def clear():
        get_configfile.cache_clear()
        for factory in (
            deps.get_config,
            deps.get_policy,
            deps.get_preprocessor,
            deps.get_data_serializer,
            deps.get_string_serializer,
            deps.get_json_serializer,
            deps.get_property_list_serializer,
            deps.get_msgpack_serializer,
        ):
            factory.cache_clear()

    clear()
    yield
    clear()
