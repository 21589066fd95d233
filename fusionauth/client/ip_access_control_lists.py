"""IP access control list APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class IPAccessControlListsAPI(BaseClient):
    """IP access control list APIs."""

    def create_ip_access_control_list(
        self,
        access_control_list_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates an IP Access Control List.

        You can optionally specify an Id on this create request, if one is not provided one will be
        generated.

        Args:
            access_control_list_id: (Optional) The Id for the IP Access Control List. If not
                provided a secure random UUID will be generated.
            request: The request object that contains all the information used to create the IP
                Access Control List.
        """
        return (
            self.start()
            .uri("/api/ip-acl")
            .url_segment(access_control_list_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_ip_access_control_list(self, ip_access_control_list_id: str) -> ClientResponse:
        """Deletes the IP Access Control List for the given Id.

        Args:
            ip_access_control_list_id: The Id of the IP Access Control List to delete.
        """
        return (
            self.start()
            .uri("/api/ip-acl")
            .url_segment(ip_access_control_list_id)
            .delete()
            .go()
        )

    def patch_ip_access_control_list(
        self,
        access_control_list_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Update the IP Access Control List with the given Id.

        Args:
            access_control_list_id: The Id of the IP Access Control List to patch.
            request: The request that contains the new IP Access Control List information.
        """
        return (
            self.start()
            .uri("/api/ip-acl")
            .url_segment(access_control_list_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_ip_access_control_list(self, ip_access_control_list_id: str) -> ClientResponse:
        """Retrieves the IP Access Control List with the given Id.

        Args:
            ip_access_control_list_id: The Id of the IP Access Control List.
        """
        return (
            self.start()
            .uri("/api/ip-acl")
            .url_segment(ip_access_control_list_id)
            .get()
            .go()
        )

    def search_ip_access_control_lists(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the IP Access Control Lists with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/ip-acl/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_ip_access_control_list(
        self,
        access_control_list_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the IP Access Control List with the given Id.

        Args:
            access_control_list_id: The Id of the IP Access Control List to update.
            request: The request that contains all the new IP Access Control List information.
        """
        return (
            self.start()
            .uri("/api/ip-acl")
            .url_segment(access_control_list_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
