"""WebAuthn APIs."""
from __future__ import annotations
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class WebAuthnAPI(BaseClient):
    """WebAuthn APIs."""

    def complete_webauthn_assertion(self, request: Dict[str, Any]) -> ClientResponse:
        """Complete a WebAuthn authentication ceremony by validating the signature against the
        previously generated challenge without logging the user in

        Args:
            request: An object containing data necessary for completing the authentication ceremony
        """
        return (
            self.start_anonymous()
            .uri("/api/webauthn/assert")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def complete_webauthn_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Complete a WebAuthn authentication ceremony by validating the signature against the
        previously generated challenge and then login the user in

        Args:
            request: An object containing data necessary for completing the authentication ceremony
        """
        return (
            self.start_anonymous()
            .uri("/api/webauthn/login")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def complete_webauthn_registration(self, request: Dict[str, Any]) -> ClientResponse:
        """Complete a WebAuthn registration ceremony by validating the client request and saving
        the new credential

        Args:
            request: An object containing data necessary for completing the registration ceremony
        """
        return (
            self.start()
            .uri("/api/webauthn/register/complete")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_webauthn_credential(self, id: str) -> ClientResponse:
        """Deletes the WebAuthn credential for the given Id.

        Args:
            id: The Id of the WebAuthn credential to delete.
        """
        return (
            self.start()
            .uri("/api/webauthn")
            .url_segment(id)
            .delete()
            .go()
        )

    def import_webauthn_credential(self, request: Dict[str, Any]) -> ClientResponse:
        """Import a WebAuthn credential

        Args:
            request: An object containing data necessary for importing the credential
        """
        return (
            self.start()
            .uri("/api/webauthn/import")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_webauthn_credential(self, id: str) -> ClientResponse:
        """Retrieves the WebAuthn credential for the given Id.

        Args:
            id: The Id of the WebAuthn credential.
        """
        return (
            self.start()
            .uri("/api/webauthn")
            .url_segment(id)
            .get()
            .go()
        )

    def retrieve_webauthn_credentials_for_user(self, user_id: str) -> ClientResponse:
        """Retrieves all WebAuthn credentials for the given user.

        Args:
            user_id: The user's ID.
        """
        return (
            self.start()
            .uri("/api/webauthn")
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def start_webauthn_login(self, request: Dict[str, Any]) -> ClientResponse:
        """Start a WebAuthn authentication ceremony by generating a new challenge for the user

        Args:
            request: An object containing data necessary for starting the authentication ceremony
        """
        return (
            self.start()
            .uri("/api/webauthn/start")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def start_webauthn_registration(self, request: Dict[str, Any]) -> ClientResponse:
        """Start a WebAuthn registration ceremony by generating a new challenge for the user

        Args:
            request: An object containing data necessary for starting the registration ceremony
        """
        return (
            self.start()
            .uri("/api/webauthn/register/start")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
