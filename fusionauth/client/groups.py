"""Group and group membership APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class GroupsAPI(BaseClient):
    """Group and group membership APIs."""

    def create_group(self, group_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a group.

        You can optionally specify an Id for the group, if not provided one will be generated.

        Args:
            group_id: (Optional) The Id for the group. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the group.
        """
        return (
            self.start()
            .uri("/api/group")
            .url_segment(group_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_group_members(self, request: Dict[str, Any]) -> ClientResponse:
        """Creates a member in a group.

        Args:
            request: The request object that contains all the information used to create the group
                member(s).
        """
        return (
            self.start()
            .uri("/api/group/member")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_group(self, group_id: str) -> ClientResponse:
        """Deletes the group for the given Id.

        Args:
            group_id: The Id of the group to delete.
        """
        return (
            self.start()
            .uri("/api/group")
            .url_segment(group_id)
            .delete()
            .go()
        )

    def delete_group_members(self, request: Dict[str, Any]) -> ClientResponse:
        """Removes users as members of a group.

        Args:
            request: The member request that contains all the information used to remove members to
                the group.
        """
        return (
            self.start()
            .uri("/api/group/member")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def patch_group(self, group_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the group with the given Id.

        Args:
            group_id: The Id of the group to update.
            request: The request that contains just the new group information.
        """
        return (
            self.start()
            .uri("/api/group")
            .url_segment(group_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_group(self, group_id: str) -> ClientResponse:
        """Retrieves the group for the given Id.

        Args:
            group_id: The Id of the group.
        """
        return (
            self.start()
            .uri("/api/group")
            .url_segment(group_id)
            .get()
            .go()
        )

    def retrieve_groups(self) -> ClientResponse:
        """Retrieves all the groups."""
        return (
            self.start()
            .uri("/api/group")
            .get()
            .go()
        )

    def search_group_members(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches group members with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/group/member/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_groups(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches groups with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/group/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_group(self, group_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the group with the given Id.

        Args:
            group_id: The Id of the group to update.
            request: The request that contains all the new group information.
        """
        return (
            self.start()
            .uri("/api/group")
            .url_segment(group_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_group_members(self, request: Dict[str, Any]) -> ClientResponse:
        """Creates a member in a group.

        Args:
            request: The request object that contains all the information used to create the group
                member(s).
        """
        return (
            self.start()
            .uri("/api/group/member")
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
