"""API key APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class APIKeysAPI(BaseClient):
    """API key APIs."""

    def create_api_key(self, key_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates an API key.

        You can optionally specify a unique Id for the key, if not provided one will be generated.
        an API key can only be created with equal or lesser authority. An API key cannot create
        another API key unless it is granted to that API key.

        If an API key is locked to a tenant, it can only create API Keys for that same tenant.

        Args:
            key_id: (Optional) The unique Id of the API key. If not provided a secure random Id
                will be generated.
            request: The request object that contains all the information needed to create the
                APIKey.
        """
        return (
            self.start()
            .uri("/api/api-key")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_api_key(self, key_id: str) -> ClientResponse:
        """Deletes the API key for the given Id.

        Args:
            key_id: The Id of the authentication API key to delete.
        """
        return (
            self.start()
            .uri("/api/api-key")
            .url_segment(key_id)
            .delete()
            .go()
        )

    def patch_api_key(self, key_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates an API key with the given Id.

        Args:
            key_id: The Id of the API key. If not provided a secure random api key will be
                generated.
            request: The request object that contains all the information needed to create the API
                key.
        """
        return (
            self.start()
            .uri("/api/api-key")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_api_key(self, key_id: str) -> ClientResponse:
        """Retrieves an authentication API key for the given Id.

        Args:
            key_id: The Id of the API key to retrieve.
        """
        return (
            self.start()
            .uri("/api/api-key")
            .url_segment(key_id)
            .get()
            .go()
        )

    def update_api_key(self, key_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates an API key with the given Id.

        Args:
            key_id: The Id of the API key to update.
            request: The request that contains all the new API key information.
        """
        return (
            self.start()
            .uri("/api/api-key")
            .url_segment(key_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
