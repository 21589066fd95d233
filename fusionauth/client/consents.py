"""Consent and user consent APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class ConsentsAPI(BaseClient):
    """Consent and user consent APIs."""

    def create_consent(self, consent_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a user consent type.

        You can optionally specify an Id for the consent type, if not provided one will be
        generated.

        Args:
            consent_id: (Optional) The Id for the consent. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the
                consent.
        """
        return (
            self.start()
            .uri("/api/consent")
            .url_segment(consent_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_user_consent(
        self,
        user_consent_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a single User consent.

        Args:
            user_consent_id: (Optional) The Id for the User consent. If not provided a secure
                random UUID will be generated.
            request: The request that contains the user consent information.
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_segment(user_consent_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_consent(self, consent_id: str) -> ClientResponse:
        """Deletes the consent for the given Id.

        Args:
            consent_id: The Id of the consent to delete.
        """
        return (
            self.start()
            .uri("/api/consent")
            .url_segment(consent_id)
            .delete()
            .go()
        )

    def patch_consent(self, consent_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the consent with the given Id.

        Args:
            consent_id: The Id of the consent to update.
            request: The request that contains just the new consent information.
        """
        return (
            self.start()
            .uri("/api/consent")
            .url_segment(consent_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_user_consent(self, user_consent_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, a single User consent by Id.

        Args:
            user_consent_id: The User Consent Id
            request: The request that contains just the new user consent information.
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_segment(user_consent_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_consent(self, consent_id: str) -> ClientResponse:
        """Retrieves the Consent for the given Id.

        Args:
            consent_id: The Id of the consent.
        """
        return (
            self.start()
            .uri("/api/consent")
            .url_segment(consent_id)
            .get()
            .go()
        )

    def retrieve_consents(self) -> ClientResponse:
        """Retrieves all the consent."""
        return (
            self.start()
            .uri("/api/consent")
            .get()
            .go()
        )

    def retrieve_user_consent(self, user_consent_id: str) -> ClientResponse:
        """Retrieve a single User consent by Id.

        Args:
            user_consent_id: The User consent Id
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_segment(user_consent_id)
            .get()
            .go()
        )

    def retrieve_user_consents(self, user_id: str) -> ClientResponse:
        """Retrieves all the consents for a User.

        Args:
            user_id: The User's Id
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def revoke_user_consent(self, user_consent_id: str) -> ClientResponse:
        """Revokes a single User consent by Id.

        Args:
            user_consent_id: The User Consent Id
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_segment(user_consent_id)
            .delete()
            .go()
        )

    def search_consents(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches consents with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/consent/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_consent(self, consent_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the consent with the given Id.

        Args:
            consent_id: The Id of the consent to update.
            request: The request that contains all the new consent information.
        """
        return (
            self.start()
            .uri("/api/consent")
            .url_segment(consent_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_user_consent(self, user_consent_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates a single User consent by Id.

        Args:
            user_consent_id: The User Consent Id
            request: The request that contains the user consent information.
        """
        return (
            self.start()
            .uri("/api/user/consent")
            .url_segment(user_consent_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
