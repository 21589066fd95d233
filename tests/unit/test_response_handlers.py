import pytest

from fusionauth.core import JSONResponseHandler, ResponseDecodeError


def test_decodes_json_document():
    handler = JSONResponseHandler()
    assert handler(b'{"user": {"id": "abc", "active": true}}') == {"user": {"id": "abc", "active": True}}


def test_decodes_non_object_documents():
    handler = JSONResponseHandler()
    assert handler(b"[1, 2]") == [1, 2]
    assert handler(b'"text"') == "text"


def test_invalid_json_raises_decode_error():
    with pytest.raises(ResponseDecodeError) as exc_info:
        JSONResponseHandler()(b"<html></html>")
    assert exc_info.value.content == b"<html></html>"
    assert exc_info.value.status is None
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_invalid_utf8_raises_decode_error():
    with pytest.raises(ResponseDecodeError):
        JSONResponseHandler()(b'{"name": "\xff"}')
