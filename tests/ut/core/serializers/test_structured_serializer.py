import json
import plistlib
from xml.parsers.expat import ExpatError

import msgpack
import pytest

from reserial.core.errors import FailureKind
from reserial.core.models.empty import NULL
from reserial.core.preprocess import XSSIPreprocessor
from reserial.core.serializers.structured import (
    JSONResponseSerializer,
    MsgPackResponseSerializer,
    PropertyListResponseSerializer,
)
from tests.helpers import response


STRUCTURED = [JSONResponseSerializer, PropertyListResponseSerializer, MsgPackResponseSerializer]


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_fails_when_data_is_none(serializer_cls):
    result = serializer_cls().serialize(None, None, None, None)

    assert result.is_failure
    assert result.error.is_input_data_nil_or_zero_length


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_fails_when_data_is_empty(serializer_cls):
    result = serializer_cls().serialize(None, None, b"", None)

    assert result.is_failure
    assert result.error.is_input_data_nil_or_zero_length


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_fails_when_error_is_not_none(serializer_cls, upstream_error):
    result = serializer_cls().serialize(None, None, None, upstream_error)

    assert result.is_failure
    assert result.error.is_input_data_nil
    assert result.error.underlying is upstream_error


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_empty_data_with_upstream_error_keeps_zero_length_kind(serializer_cls, transport_error):
    result = serializer_cls().serialize(None, None, b"", transport_error)

    assert result.error.is_input_data_nil_or_zero_length
    assert result.error.underlying is transport_error


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_fails_when_data_is_none_with_non_empty_status_code(serializer_cls):
    result = serializer_cls().serialize(None, response(200), None, None)

    assert result.is_failure
    assert result.error.is_input_data_nil_or_zero_length


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
@pytest.mark.parametrize("status_code", [204, 205])
def test_succeeds_when_data_is_none_with_empty_status_code(serializer_cls, status_code):
    result = serializer_cls().serialize(None, response(status_code), None, None)

    assert result.is_success
    assert result.value is NULL


@pytest.mark.ut
@pytest.mark.parametrize("serializer_cls", STRUCTURED)
def test_succeeds_when_data_is_empty_with_empty_status_code(serializer_cls):
    result = serializer_cls().serialize(None, response(204), b"", None)

    assert result.is_success
    assert result.value is NULL


@pytest.mark.ut
def test_json_succeeds_when_data_is_valid_json():
    data = json.dumps({"foo": "bar", "items": [1, 2.5, None, True]}).encode()

    result = JSONResponseSerializer().serialize(None, None, data, None)

    assert result.is_success
    assert result.value == {"foo": "bar", "items": [1, 2.5, None, True]}


@pytest.mark.ut
def test_json_null_document_is_a_success():
    result = JSONResponseSerializer().serialize(None, None, b"null", None)

    assert result.is_success
    assert result.value is None


@pytest.mark.ut
def test_json_accepts_utf16_documents():
    data = json.dumps({"name": "élan"}).encode("utf-16")

    result = JSONResponseSerializer().serialize(None, None, data, None)

    assert result.value == {"name": "élan"}


@pytest.mark.ut
def test_json_fails_when_data_is_invalid_json():
    result = JSONResponseSerializer().serialize(None, None, b"definitely not valid json", None)

    assert result.is_failure
    assert result.error.is_json_serialization_failed
    assert isinstance(result.error.underlying, json.JSONDecodeError)


@pytest.mark.ut
def test_json_non_empty_body_decodes_regardless_of_status_code():
    serializer = JSONResponseSerializer()

    assert serializer.serialize(None, response(204), b"[1]", None).value == [1]
    assert serializer.serialize(None, response(500), b"{}", None).value == {}


@pytest.mark.ut
def test_property_list_succeeds_when_data_is_valid():
    data = plistlib.dumps({"foo": "bar"})

    result = PropertyListResponseSerializer().serialize(None, None, data, None)

    assert result.is_success
    assert result.value == {"foo": "bar"}


@pytest.mark.ut
def test_property_list_accepts_binary_format():
    data = plistlib.dumps({"foo": [1, 2]}, fmt=plistlib.FMT_BINARY)

    result = PropertyListResponseSerializer().serialize(None, None, data, None)

    assert result.value == {"foo": [1, 2]}


@pytest.mark.ut
def test_property_list_fails_when_data_is_invalid():
    result = PropertyListResponseSerializer().serialize(None, None, b"definitely not a property list", None)

    assert result.is_failure
    assert result.error.is_property_list_serialization_failed
    assert isinstance(result.error.underlying, plistlib.InvalidFileException)


@pytest.mark.ut
def test_property_list_fails_on_malformed_xml():
    data = b'<?xml version="1.0" encoding="UTF-8"?><plist version="1.0"><dict>'

    result = PropertyListResponseSerializer().serialize(None, None, data, None)

    assert result.error.kind is FailureKind.property_list_serialization_failed
    assert isinstance(result.error.underlying, ExpatError)


@pytest.mark.ut
def test_msgpack_succeeds_when_data_is_valid():
    data = msgpack.packb({"foo": "bar", "blob": b"\x00\x01"}, use_bin_type=True)

    result = MsgPackResponseSerializer().serialize(None, None, data, None)

    assert result.value == {"foo": "bar", "blob": b"\x00\x01"}


@pytest.mark.ut
def test_msgpack_fails_when_data_is_truncated():
    result = MsgPackResponseSerializer().serialize(None, None, b"\x92\x01", None)

    assert result.is_failure
    assert result.error.is_msgpack_serialization_failed
    assert result.error.underlying is not None


@pytest.mark.ut
def test_xssi_prefix_is_stripped():
    serializer = JSONResponseSerializer(preprocessor=XSSIPreprocessor())

    result = serializer.serialize(None, None, b")]}',\n{\"foo\": 1}", None)

    assert result.value == {"foo": 1}


@pytest.mark.ut
def test_xssi_prefix_only_counts_as_empty():
    serializer = JSONResponseSerializer(preprocessor=XSSIPreprocessor())

    assert serializer.serialize(None, None, b")]}',\n", None).error.is_input_data_nil_or_zero_length
    assert serializer.serialize(None, response(204), b")]}',\n", None).value is NULL


@pytest.mark.ut
def test_is_idempotent():
    serializer = JSONResponseSerializer()
    data = b"definitely not valid json"

    assert serializer.serialize(None, None, data, None) == serializer.serialize(None, None, data, None)
    assert serializer.serialize(None, None, b'{"a": 1}', None) == serializer.serialize(None, None, b'{"a": 1}', None)
    assert serializer.serialize(None, response(204), None, None) == serializer.serialize(None, response(204), None, None)


@pytest.mark.ut
def test_json_fails_when_nesting_is_too_deep():
    result = JSONResponseSerializer().serialize(None, None, b"[" * 200000, None)

    assert result.is_failure
    assert result.error.is_json_serialization_failed
    assert isinstance(result.error.underlying, RecursionError)


@pytest.mark.ut
def test_property_list_fails_on_malformed_date():
    data = b'<?xml version="1.0"?><plist version="1.0"><date>garbage</date></plist>'

    result = PropertyListResponseSerializer().serialize(None, None, data, None)

    assert result.is_failure
    assert result.error.is_property_list_serialization_failed
