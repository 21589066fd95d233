"""Connector APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class ConnectorsAPI(BaseClient):
    """Connector APIs."""

    def create_connector(
        self,
        connector_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a connector.

        You can optionally specify an Id for the connector, if not provided one will be generated.

        Args:
            connector_id: (Optional) The Id for the connector. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the
                connector.
        """
        return (
            self.start()
            .uri("/api/connector")
            .url_segment(connector_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_connector(self, connector_id: str) -> ClientResponse:
        """Deletes the connector for the given Id.

        Args:
            connector_id: The Id of the connector to delete.
        """
        return (
            self.start()
            .uri("/api/connector")
            .url_segment(connector_id)
            .delete()
            .go()
        )

    def patch_connector(self, connector_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the connector with the given Id.

        Args:
            connector_id: The Id of the connector to update.
            request: The request that contains just the new connector information.
        """
        return (
            self.start()
            .uri("/api/connector")
            .url_segment(connector_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_connector(self, connector_id: str) -> ClientResponse:
        """Retrieves the connector with the given Id.

        Args:
            connector_id: The Id of the connector.
        """
        return (
            self.start()
            .uri("/api/connector")
            .url_segment(connector_id)
            .get()
            .go()
        )

    def retrieve_connectors(self) -> ClientResponse:
        """Retrieves all the connectors."""
        return (
            self.start()
            .uri("/api/connector")
            .get()
            .go()
        )

    def update_connector(self, connector_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the connector with the given Id.

        Args:
            connector_id: The Id of the connector to update.
            request: The request object that contains all the new connector information.
        """
        return (
            self.start()
            .uri("/api/connector")
            .url_segment(connector_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
