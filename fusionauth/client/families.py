"""Family APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class FamiliesAPI(BaseClient):
    """Family APIs."""

    def add_user_to_family(self, family_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Adds a user to an existing family.

        The family Id must be specified.

        Args:
            family_id: The Id of the family.
            request: The request object that contains all the information used to determine which
                user to add to the family.
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_segment(family_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def create_family(self, family_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a family with the user Id in the request as the owner and sole member of the
        family. You can optionally specify an Id for the family, if not provided one will be
        generated.

        Args:
            family_id: (Optional) The Id for the family. If not provided a secure random UUID will
                be generated.
            request: The request object that contains all the information used to create the
                family.
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_segment(family_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def remove_user_from_family(self, family_id: str, user_id: str) -> ClientResponse:
        """Removes a user from the family with the given Id.

        Args:
            family_id: The Id of the family to remove the user from.
            user_id: The Id of the user to remove from the family.
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_segment(family_id)
            .url_segment(user_id)
            .delete()
            .go()
        )

    def retrieve_families(self, user_id: str) -> ClientResponse:
        """Retrieves all the families that a user belongs to.

        Args:
            user_id: The User's id
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_family_members_by_family_id(self, family_id: str) -> ClientResponse:
        """Retrieves all the members of a family by the unique Family Id.

        Args:
            family_id: The unique Id of the Family.
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_segment(family_id)
            .get()
            .go()
        )

    def retrieve_pending_children(self, parent_email: str) -> ClientResponse:
        """Retrieves all the children for the given parent email address.

        Args:
            parent_email: The email of the parent.
        """
        return (
            self.start()
            .uri("/api/user/family/pending")
            .url_parameter("parentEmail", parent_email)
            .get()
            .go()
        )

    def send_family_request_email(self, request: Dict[str, Any]) -> ClientResponse:
        """Sends out an email to a parent that they need to register and create a family or need to
        log in and add a child to their existing family.

        Args:
            request: The request object that contains the parent email.
        """
        return (
            self.start()
            .uri("/api/user/family/request")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_family(self, family_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates a family with a given Id.

        Args:
            family_id: The Id of the family to update.
            request: The request object that contains all the new family information.
        """
        return (
            self.start()
            .uri("/api/user/family")
            .url_segment(family_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
