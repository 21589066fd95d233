"""System configuration, status and search index APIs."""
from __future__ import annotations
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class SystemAPI(BaseClient):
    """System configuration, status and search index APIs."""

    def patch_integrations(self, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the available integrations.

        Args:
            request: The request that contains just the new integration information.
        """
        return (
            self.start()
            .uri("/api/integration")
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_system_configuration(self, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the system configuration.

        Args:
            request: The request that contains just the new system configuration information.
        """
        return (
            self.start()
            .uri("/api/system-configuration")
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def refresh_user_search_index(self) -> ClientResponse:
        """Request a refresh of the User search index.

        This API is not generally necessary and the search index will become consistent in a
        reasonable amount of time. There may be scenarios where you may wish to manually request an
        index refresh. One example may be if you are using the Search API or Delete Tenant API
        immediately following a User Create etc, you may wish to request a refresh to ensure the
        index immediately current before making a query request to the search index.
        """
        return (
            self.start()
            .uri("/api/user/search")
            .put()
            .go()
        )

    def reindex(self, request: Dict[str, Any]) -> ClientResponse:
        """Requests Elasticsearch to delete and rebuild the index for FusionAuth users or entities.

        Be very careful when running this request as it will increase the CPU and I/O load on your
        database until the operation completes. Generally speaking you do not ever need to run this
        operation unless instructed by FusionAuth support, or if you are migrating a database
        another system and you are not brining along the Elasticsearch index.

        You have been warned.

        Args:
            request: The request that contains the index name.
        """
        return (
            self.start()
            .uri("/api/system/reindex")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_integration(self) -> ClientResponse:
        """Retrieves the available integrations."""
        return (
            self.start()
            .uri("/api/integration")
            .get()
            .go()
        )

    def retrieve_reindex_status(self) -> ClientResponse:
        """Retrieve the status of a re-index process.

        A status code of 200 indicates the re-index is in progress, a status code of 404 indicates
        no re-index is in progress.
        """
        return (
            self.start()
            .uri("/api/system/reindex")
            .get()
            .go()
        )

    def retrieve_system_configuration(self) -> ClientResponse:
        """Retrieves the system configuration."""
        return (
            self.start()
            .uri("/api/system-configuration")
            .get()
            .go()
        )

    def retrieve_system_health(self) -> ClientResponse:
        """Retrieves the FusionAuth system health.

        This API will return 200 if the system is healthy, and 500 if the system is un-healthy.
        """
        return (
            self.start_anonymous()
            .uri("/api/health")
            .get()
            .go()
        )

    def retrieve_system_status(self) -> ClientResponse:
        """Retrieves the FusionAuth system status.

        This request is anonymous and does not require an API key. When an API key is not provided
        the response will contain a single value in the JSON response indicating the current health
        check.
        """
        return (
            self.start_anonymous()
            .uri("/api/status")
            .get()
            .go()
        )

    def retrieve_system_status_using_api_key(self) -> ClientResponse:
        """Retrieves the FusionAuth system status using an API key.

        Using an API key will cause the response to include the product version, health checks and
        various runtime metrics.
        """
        return (
            self.start()
            .uri("/api/status")
            .get()
            .go()
        )

    def retrieve_version(self) -> ClientResponse:
        """Retrieves the FusionAuth version string."""
        return (
            self.start()
            .uri("/api/system/version")
            .get()
            .go()
        )

    def update_integrations(self, request: Dict[str, Any]) -> ClientResponse:
        """Updates the available integrations.

        Args:
            request: The request that contains all the new integration information.
        """
        return (
            self.start()
            .uri("/api/integration")
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_system_configuration(self, request: Dict[str, Any]) -> ClientResponse:
        """Updates the system configuration.

        Args:
            request: The request that contains all the new system configuration information.
        """
        return (
            self.start()
            .uri("/api/system-configuration")
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
