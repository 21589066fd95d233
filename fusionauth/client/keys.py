"""Key master APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class KeysAPI(BaseClient):
    """Key master APIs."""

    def delete_key(self, key_id: str) -> ClientResponse:
        """Deletes the key for the given Id.

        Args:
            key_id: The Id of the key to delete.
        """
        return (
            self.start()
            .uri("/api/key")
            .url_segment(key_id)
            .delete()
            .go()
        )

    def generate_key(self, key_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Generate a new RSA or EC key pair or an HMAC secret.

        Args:
            key_id: (Optional) The Id for the key. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the key.
        """
        return (
            self.start()
            .uri("/api/key/generate")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def import_key(self, key_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Import an existing RSA or EC key pair or an HMAC secret.

        Args:
            key_id: (Optional) The Id for the key. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the key.
        """
        return (
            self.start()
            .uri("/api/key/import")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_jwt_public_key(self, key_id: str) -> ClientResponse:
        """Retrieves the Public Key configured for verifying JSON Web Tokens (JWT) by the key Id
        (kid).

        Args:
            key_id: The Id of the public key (kid).
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/public-key")
            .url_parameter("kid", key_id)
            .get()
            .go()
        )

    def retrieve_jwt_public_key_by_application_id(self, application_id: str) -> ClientResponse:
        """Retrieves the Public Key configured for verifying the JSON Web Tokens (JWT) issued by
        the Login API by the Application Id.

        Args:
            application_id: The Id of the Application for which this key is used.
        """
        return (
            self.start_anonymous()
            .uri("/api/jwt/public-key")
            .url_parameter("applicationId", application_id)
            .get()
            .go()
        )

    def retrieve_jwt_public_keys(self) -> ClientResponse:
        """Retrieves all Public Keys configured for verifying JSON Web Tokens (JWT)."""
        return (
            self.start_anonymous()
            .uri("/api/jwt/public-key")
            .get()
            .go()
        )

    def retrieve_json_web_key_set(self) -> ClientResponse:
        """Returns public keys used by FusionAuth to cryptographically verify JWTs using the JSON
        Web Key format.
        """
        return (
            self.start_anonymous()
            .uri("/.well-known/jwks.json")
            .get()
            .go()
        )

    def retrieve_key(self, key_id: str) -> ClientResponse:
        """Retrieves the key for the given Id.

        Args:
            key_id: The Id of the key.
        """
        return (
            self.start()
            .uri("/api/key")
            .url_segment(key_id)
            .get()
            .go()
        )

    def retrieve_keys(self) -> ClientResponse:
        """Retrieves all the keys."""
        return (
            self.start()
            .uri("/api/key")
            .get()
            .go()
        )

    def search_keys(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches keys with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/key/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_key(self, key_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the key with the given Id.

        Args:
            key_id: The Id of the key to update.
            request: The request that contains all the new key information.
        """
        return (
            self.start()
            .uri("/api/key")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
