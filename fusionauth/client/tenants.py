"""Tenant APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class TenantsAPI(BaseClient):
    """Tenant APIs."""

    def create_tenant(self, tenant_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a tenant.

        You can optionally specify an Id for the tenant, if not provided one will be generated.

        Args:
            tenant_id: (Optional) The Id for the tenant. If not provided a secure random UUID will
                be generated.
            request: The request object that contains all the information used to create the
                tenant.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_tenant(self, tenant_id: str) -> ClientResponse:
        """Deletes the tenant based on the given Id on the URL.

        This permanently deletes all information, metrics, reports and data associated with the
        tenant and everything under the tenant (applications, users, etc).

        Args:
            tenant_id: The Id of the tenant to delete.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .delete()
            .go()
        )

    def delete_tenant_async(self, tenant_id: str) -> ClientResponse:
        """Deletes the tenant for the given Id asynchronously.

        This method is helpful if you do not want to wait for the delete operation to complete.

        Args:
            tenant_id: The Id of the tenant to delete.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .url_parameter("async", True)
            .delete()
            .go()
        )

    def delete_tenant_with_request(self, tenant_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Deletes the tenant based on the given request (sent to the API as JSON).

        This permanently deletes all information, metrics, reports and data associated with the
        tenant and everything under the tenant (applications, users, etc).

        Args:
            tenant_id: The Id of the tenant to delete.
            request: The request object that contains all the information used to delete the user.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def patch_tenant(self, tenant_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the tenant with the given Id.

        Args:
            tenant_id: The Id of the tenant to update.
            request: The request that contains just the new tenant information.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_tenant(self, tenant_id: str) -> ClientResponse:
        """Retrieves the tenant for the given Id.

        Args:
            tenant_id: The Id of the tenant.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .get()
            .go()
        )

    def retrieve_tenants(self) -> ClientResponse:
        """Retrieves all the tenants."""
        return (
            self.start()
            .uri("/api/tenant")
            .get()
            .go()
        )

    def search_tenants(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches tenants with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/tenant/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_tenant(self, tenant_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the tenant with the given Id.

        Args:
            tenant_id: The Id of the tenant to update.
            request: The request that contains all the new tenant information.
        """
        return (
            self.start()
            .uri("/api/tenant")
            .url_segment(tenant_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
