"""Entity, entity type and entity grant APIs."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class EntitiesAPI(BaseClient):
    """Entity, entity type and entity grant APIs."""

    def create_entity(self, entity_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates an Entity.

        You can optionally specify an Id for the Entity. If not provided one will be generated.

        Args:
            entity_id: (Optional) The Id for the Entity. If not provided a secure random UUID will
                be generated.
            request: The request object that contains all the information used to create the
                Entity.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_entity_type(
        self,
        entity_type_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a Entity Type.

        You can optionally specify an Id for the Entity Type, if not provided one will be
        generated.

        Args:
            entity_type_id: (Optional) The Id for the Entity Type. If not provided a secure random
                UUID will be generated.
            request: The request object that contains all the information used to create the Entity
                Type.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_entity_type_permission(
        self,
        entity_type_id: str,
        permission_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a new permission for an entity type.

        You must specify the Id of the entity type you are creating the permission for. You can
        optionally specify an Id for the permission inside the EntityTypePermission object itself,
        if not provided one will be generated.

        Args:
            entity_type_id: The Id of the entity type to create the permission on.
            permission_id: (Optional) The Id of the permission. If not provided a secure random
                UUID will be generated.
            request: The request object that contains all the information used to create the
                permission.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .url_segment("permission")
            .url_segment(permission_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_entity(self, entity_id: str) -> ClientResponse:
        """Deletes the Entity for the given Id.

        Args:
            entity_id: The Id of the Entity to delete.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .delete()
            .go()
        )

    def delete_entity_grant(
        self,
        entity_id: str,
        recipient_entity_id: Optional[str],
        user_id: Optional[str] = None,
    ) -> ClientResponse:
        """Deletes an Entity Grant for the given User or Entity.

        Args:
            entity_id: The Id of the Entity that the Entity Grant is being deleted for.
            recipient_entity_id: (Optional) The Id of the Entity that the Entity Grant is for.
            user_id: (Optional) The Id of the User that the Entity Grant is for.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .url_segment("grant")
            .url_parameter("recipientEntityId", recipient_entity_id)
            .url_parameter("userId", user_id)
            .delete()
            .go()
        )

    def delete_entity_type(self, entity_type_id: str) -> ClientResponse:
        """Deletes the Entity Type for the given Id.

        Args:
            entity_type_id: The Id of the Entity Type to delete.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .delete()
            .go()
        )

    def delete_entity_type_permission(
        self,
        entity_type_id: str,
        permission_id: str,
    ) -> ClientResponse:
        """Hard deletes a permission.

        This is a dangerous operation and should not be used in most circumstances. This
        permanently removes the given permission from all grants that had it.

        Args:
            entity_type_id: The Id of the entityType the the permission belongs to.
            permission_id: The Id of the permission to delete.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .url_segment("permission")
            .url_segment(permission_id)
            .delete()
            .go()
        )

    def patch_entity(self, entity_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the Entity with the given Id.

        Args:
            entity_id: The Id of the Entity Type to update.
            request: The request that contains just the new Entity information.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_entity_type(self, entity_type_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the Entity Type with the given Id.

        Args:
            entity_type_id: The Id of the Entity Type to update.
            request: The request that contains just the new Entity Type information.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_entity_type_permission(
        self,
        entity_type_id: str,
        permission_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Patches the permission with the given Id for the entity type.

        Args:
            entity_type_id: The Id of the entityType that the permission belongs to.
            permission_id: The Id of the permission to patch.
            request: The request that contains the new permission information.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .url_segment("permission")
            .url_segment(permission_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def refresh_entity_search_index(self) -> ClientResponse:
        """Request a refresh of the Entity search index.

        This API is not generally necessary and the search index will become consistent in a
        reasonable amount of time. There may be scenarios where you may wish to manually request an
        index refresh. One example may be if you are using the Search API or Delete Tenant API
        immediately following a Entity Create etc, you may wish to request a refresh to ensure the
        index immediately current before making a query request to the search index.
        """
        return (
            self.start()
            .uri("/api/entity/search")
            .put()
            .go()
        )

    def retrieve_entity(self, entity_id: str) -> ClientResponse:
        """Retrieves the Entity for the given Id.

        Args:
            entity_id: The Id of the Entity.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .get()
            .go()
        )

    def retrieve_entity_grant(
        self,
        entity_id: str,
        recipient_entity_id: Optional[str],
        user_id: Optional[str] = None,
    ) -> ClientResponse:
        """Retrieves an Entity Grant for the given Entity and User/Entity.

        Args:
            entity_id: The Id of the Entity.
            recipient_entity_id: (Optional) The Id of the Entity that the Entity Grant is for.
            user_id: (Optional) The Id of the User that the Entity Grant is for.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .url_segment("grant")
            .url_parameter("recipientEntityId", recipient_entity_id)
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_entity_type(self, entity_type_id: str) -> ClientResponse:
        """Retrieves the Entity Type for the given Id.

        Args:
            entity_type_id: The Id of the Entity Type.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .get()
            .go()
        )

    def retrieve_entity_types(self) -> ClientResponse:
        """Retrieves all the Entity Types."""
        return (
            self.start()
            .uri("/api/entity/type")
            .get()
            .go()
        )

    def search_entities(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches entities with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/entity/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_entities_by_ids(self, ids: List[str]) -> ClientResponse:
        """Retrieves the entities for the given Ids.

        If any Id is invalid, it is ignored.

        Args:
            ids: The entity ids to search for.
        """
        return (
            self.start()
            .uri("/api/entity/search")
            .url_parameter("ids", ids)
            .get()
            .go()
        )

    def search_entity_grants(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches Entity Grants with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/entity/grant/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_entity_types(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the entity types with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/entity/type/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_entity(self, entity_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the Entity with the given Id.

        Args:
            entity_id: The Id of the Entity to update.
            request: The request that contains all the new Entity information.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_entity_type(self, entity_type_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the Entity Type with the given Id.

        Args:
            entity_type_id: The Id of the Entity Type to update.
            request: The request that contains all the new Entity Type information.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_entity_type_permission(
        self,
        entity_type_id: str,
        permission_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the permission with the given Id for the entity type.

        Args:
            entity_type_id: The Id of the entityType that the permission belongs to.
            permission_id: The Id of the permission to update.
            request: The request that contains all the new permission information.
        """
        return (
            self.start()
            .uri("/api/entity/type")
            .url_segment(entity_type_id)
            .url_segment("permission")
            .url_segment(permission_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def upsert_entity_grant(self, entity_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Creates or updates an Entity Grant.

        This is when a User/Entity is granted permissions to an Entity.

        Args:
            entity_id: The Id of the Entity that the User/Entity is being granted access to.
            request: The request object that contains all the information used to create the Entity
                Grant.
        """
        return (
            self.start()
            .uri("/api/entity")
            .url_segment(entity_id)
            .url_segment("grant")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
