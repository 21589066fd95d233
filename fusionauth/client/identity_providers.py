"""Identity provider and user link APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class IdentityProvidersAPI(BaseClient):
    """Identity provider and user link APIs."""

    def create_identity_provider(
        self,
        identity_provider_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates an identity provider.

        You can optionally specify an Id for the identity provider, if not provided one will be
        generated.

        Args:
            identity_provider_id: (Optional) The Id of the identity provider. If not provided a
                secure random UUID will be generated.
            request: The request object that contains all the information used to create the
                identity provider.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_segment(identity_provider_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_user_link(self, request: Dict[str, Any]) -> ClientResponse:
        """Link an external user from a 3rd party identity provider to a FusionAuth user.

        Args:
            request: The request object that contains all the information used to link the
                FusionAuth user.
        """
        return (
            self.start()
            .uri("/api/identity-provider/link")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_identity_provider(self, identity_provider_id: str) -> ClientResponse:
        """Deletes the identity provider for the given Id.

        Args:
            identity_provider_id: The Id of the identity provider to delete.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_segment(identity_provider_id)
            .delete()
            .go()
        )

    def delete_user_link(
        self,
        identity_provider_id: str,
        identity_provider_user_id: str,
        user_id: str,
    ) -> ClientResponse:
        """Remove an existing link that has been made from a 3rd party identity provider to a
        FusionAuth user.

        Args:
            identity_provider_id: The unique Id of the identity provider.
            identity_provider_user_id: The unique Id of the user in the 3rd party identity provider
                to unlink.
            user_id: The unique Id of the FusionAuth user to unlink.
        """
        return (
            self.start()
            .uri("/api/identity-provider/link")
            .url_parameter("identityProviderId", identity_provider_id)
            .url_parameter("identityProviderUserId", identity_provider_user_id)
            .url_parameter("userId", user_id)
            .delete()
            .go()
        )

    def lookup_identity_provider(self, domain: str) -> ClientResponse:
        """Retrieves the identity provider for the given domain.

        A 200 response code indicates the domain is managed by a registered identity provider. A
        404 indicates the domain is not managed.

        Args:
            domain: The domain or email address to lookup.
        """
        return (
            self.start()
            .uri("/api/identity-provider/lookup")
            .url_parameter("domain", domain)
            .get()
            .go()
        )

    def patch_identity_provider(
        self,
        identity_provider_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the identity provider with the given Id.

        Args:
            identity_provider_id: The Id of the identity provider to update.
            request: The request object that contains just the updated identity provider
                information.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_segment(identity_provider_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_identity_provider(self, identity_provider_id: str) -> ClientResponse:
        """Retrieves the identity provider for the given Id or all the identity providers if the Id
        is null.

        Args:
            identity_provider_id: The identity provider Id.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_segment(identity_provider_id)
            .get()
            .go()
        )

    def retrieve_identity_provider_by_type(self, type: str) -> ClientResponse:
        """Retrieves one or more identity provider for the given type.

        For types such as Google, Facebook, Twitter and LinkedIn, only a single identity provider
        can exist. For types such as OpenID Connect and SAMLv2 more than one identity provider can
        be configured so this request may return multiple identity providers.

        Args:
            type: The type of the identity provider.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_parameter("type", type)
            .get()
            .go()
        )

    def retrieve_identity_providers(self) -> ClientResponse:
        """Retrieves all the identity providers."""
        return (
            self.start()
            .uri("/api/identity-provider")
            .get()
            .go()
        )

    def retrieve_pending_link(self, pending_link_id: str, user_id: str) -> ClientResponse:
        """Retrieve a pending identity provider link.

        This is useful to validate a pending link and retrieve meta-data about the identity
        provider link.

        Args:
            pending_link_id: The pending link Id.
            user_id: The optional userId. When provided additional meta-data will be provided to
                identify how many links if any the user already has.
        """
        return (
            self.start()
            .uri("/api/identity-provider/link/pending")
            .url_segment(pending_link_id)
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_user_link(
        self,
        identity_provider_id: str,
        identity_provider_user_id: str,
        user_id: str,
    ) -> ClientResponse:
        """Retrieve a single Identity Provider user (link).

        Args:
            identity_provider_id: The unique Id of the identity provider.
            identity_provider_user_id: The unique Id of the user in the 3rd party identity
                provider.
            user_id: The unique Id of the FusionAuth user.
        """
        return (
            self.start()
            .uri("/api/identity-provider/link")
            .url_parameter("identityProviderId", identity_provider_id)
            .url_parameter("identityProviderUserId", identity_provider_user_id)
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_user_links_by_user_id(
        self,
        identity_provider_id: Optional[str],
        user_id: str,
    ) -> ClientResponse:
        """Retrieve all Identity Provider users (links) for the user.

        Specify the optional identityProviderId to retrieve links for a particular IdP.

        Args:
            identity_provider_id: (Optional) The unique Id of the identity provider. Specify this
                value to reduce the links returned to those for a particular IdP.
            user_id: The unique Id of the user.
        """
        return (
            self.start()
            .uri("/api/identity-provider/link")
            .url_parameter("identityProviderId", identity_provider_id)
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def search_identity_providers(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches identity providers with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/identity-provider/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_identity_provider(
        self,
        identity_provider_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the identity provider with the given Id.

        Args:
            identity_provider_id: The Id of the identity provider to update.
            request: The request object that contains the updated identity provider.
        """
        return (
            self.start()
            .uri("/api/identity-provider")
            .url_segment(identity_provider_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
