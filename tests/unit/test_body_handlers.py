"""Unit tests for the JSON and form request body encoders."""
import json
import uuid
from urllib.parse import parse_qsl

from fusionauth.core import FormDataBodyHandler, JSONBodyHandler
from fusionauth.core.body_handlers import format_value


# ─────────────────────────────────────────────────────────────────────────────
# JSON
# ─────────────────────────────────────────────────────────────────────────────
def test_json_drops_empty_top_level_fields_only():
    request = {
        "user": {"email": "alice@example.com", "middleName": "", "data": {}},
        "sendSetPasswordEmail": False,
        "skipVerification": None,
        "applicationId": "",
        "roles": [],
        "limit": 0,
    }

    document = json.loads(JSONBodyHandler(request).body())

    assert document == {
        "user": {"email": "alice@example.com", "middleName": "", "data": {}},
        "sendSetPasswordEmail": False,
        "limit": 0,
    }


def test_json_body_object_is_the_unfiltered_payload():
    request = {"email": "alice@example.com", "applicationId": None}
    handler = JSONBodyHandler(request)
    assert handler.body_object() is request


def test_json_none_payload_is_an_empty_object():
    assert JSONBodyHandler(None).body() == b"{}"


def test_json_is_compact_utf8():
    body = JSONBodyHandler({"name": "Zoë"}).body()
    assert body == '{"name":"Zoë"}'.encode("utf-8")


def test_json_serializes_uuids():
    user_id = uuid.UUID("00000000-0000-0000-0000-000000000001")
    assert json.loads(JSONBodyHandler({"userId": user_id}).body()) == {"userId": str(user_id)}


def test_json_headers():
    handler = JSONBodyHandler({"a": 1})
    headers = []
    handler.set_headers(headers)
    assert headers == ["Content-Length: 7", "Content-Type: application/json"]


# ─────────────────────────────────────────────────────────────────────────────
# Form
# ─────────────────────────────────────────────────────────────────────────────
def test_form_round_trip():
    data = {
        "grant_type": "authorization_code",
        "code": "a b&c=d",
        "redirect_uri": "https://app.example.com/callback?x=1",
    }
    body = FormDataBodyHandler(data).body()
    assert dict(parse_qsl(body.decode("ascii"))) == data


def test_form_skips_none_and_repeats_sequences():
    body = FormDataBodyHandler({"client_id": None, "scope": ["openid", "offline_access"], "remember": True}).body()
    assert parse_qsl(body.decode("ascii")) == [
        ("scope", "openid"),
        ("scope", "offline_access"),
        ("remember", "true"),
    ]


def test_form_repeats_set_values_like_query_parameters():
    body = FormDataBodyHandler({"scope": frozenset({"openid"}), "ids": {"a"}}).body()
    assert parse_qsl(body.decode("ascii")) == [("scope", "openid"), ("ids", "a")]


def test_form_flattens_nested_mappings():
    body = FormDataBodyHandler(
        {
            "grant_type": "password",
            "metaData": {"device": {"name": "Laptop", "type": "BROWSER"}, "trusted": True, "skip": None},
        }
    ).body()

    assert parse_qsl(body.decode("ascii")) == [
        ("grant_type", "password"),
        ("metaData[device][name]", "Laptop"),
        ("metaData[device][type]", "BROWSER"),
        ("metaData[trusted]", "true"),
    ]


def test_form_headers():
    headers = ["Authorization: key"]
    FormDataBodyHandler({"a": "b"}).set_headers(headers)
    assert headers == ["Authorization: key", "Content-Type: application/x-www-form-urlencoded"]


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(25) == "25"
    assert format_value("text") == "text"
