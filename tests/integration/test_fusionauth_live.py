"""Integration tests against a running FusionAuth instance.

Run with:
    FUSIONAUTH_URL=http://localhost:9011 FUSIONAUTH_API_KEY=... pytest -m integration
"""
import os
import uuid

import pytest

from fusionauth import FusionAuthClient

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (os.environ.get("FUSIONAUTH_URL") and os.environ.get("FUSIONAUTH_API_KEY")),
        reason="FUSIONAUTH_URL and FUSIONAUTH_API_KEY are required for live tests",
    ),
]


@pytest.fixture(scope="module")
def live_client():
    return FusionAuthClient.from_env()


def test_system_status(live_client):
    response = live_client.retrieve_system_status()
    assert response.exception is None
    assert response.status in (200, 500, 503)


def test_tenants_are_listed(live_client):
    response = live_client.retrieve_tenants()
    assert response.was_successful(), response.error_response
    assert isinstance(response.success_response["tenants"], list)


def test_unknown_user_is_not_found(live_client):
    response = live_client.retrieve_user(str(uuid.uuid4()))
    assert response.status == 404
    assert response.exception is None


def test_user_lifecycle(live_client):
    email = f"it-{uuid.uuid4().hex[:12]}@example.com"
    created = live_client.create_user(None, {"user": {"email": email, "password": "Password-12345"}, "skipVerification": True})
    assert created.was_successful(), created.error_response
    user_id = created.success_response["user"]["id"]
    try:
        fetched = live_client.retrieve_user_by_email(email)
        assert fetched.was_successful()
        assert fetched.success_response["user"]["id"] == user_id

        patched = live_client.patch_user(user_id, {"user": {"firstName": "Integration"}})
        assert patched.was_successful(), patched.error_response
        assert patched.success_response["user"]["firstName"] == "Integration"
    finally:
        deleted = live_client.delete_user(user_id)
        assert deleted.was_successful(), deleted.error_response

    assert live_client.retrieve_user(user_id).status == 404


def test_bad_api_key_is_unauthorized():
    client = FusionAuthClient("not-a-valid-key", os.environ["FUSIONAUTH_URL"])
    response = client.retrieve_tenants()
    assert response.status == 401
    assert not response.was_successful()
