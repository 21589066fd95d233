"""Application, application role and OAuth scope APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class ApplicationsAPI(BaseClient):
    """Application, application role and OAuth scope APIs."""

    def create_application(
        self,
        application_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates an application.

        You can optionally specify an Id for the application, if not provided one will be
        generated.

        Args:
            application_id: (Optional) The Id to use for the application. If not provided a secure
                random UUID will be generated.
            request: The request object that contains all the information used to create the
                application.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_application_role(
        self,
        application_id: str,
        role_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a new role for an application.

        You must specify the Id of the application you are creating the role for. You can
        optionally specify an Id for the role inside the ApplicationRole object itself, if not
        provided one will be generated.

        Args:
            application_id: The Id of the application to create the role on.
            role_id: (Optional) The Id of the role. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the
                application role.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_oauth_scope(
        self,
        application_id: str,
        scope_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a new custom OAuth scope for an application.

        You must specify the Id of the application you are creating the scope for. You can
        optionally specify an Id for the OAuth scope on the URL, if not provided one will be
        generated.

        Args:
            application_id: The Id of the application to create the OAuth scope on.
            scope_id: (Optional) The Id of the OAuth scope. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the OAuth
                OAuth scope.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("scope")
            .url_segment(scope_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def deactivate_application(self, application_id: str) -> ClientResponse:
        """Deactivates the application with the given Id.

        Args:
            application_id: The Id of the application to deactivate.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .delete()
            .go()
        )

    def delete_application(self, application_id: str) -> ClientResponse:
        """Hard deletes an application.

        This is a dangerous operation and should not be used in most circumstances. This will
        delete the application, any registrations for that application, metrics and reports for the
        application, all the roles for the application, and any other data associated with the
        application. This operation could take a very long time, depending on the amount of data in
        your database.

        Args:
            application_id: The Id of the application to delete.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_parameter("hardDelete", True)
            .delete()
            .go()
        )

    def delete_application_role(self, application_id: str, role_id: str) -> ClientResponse:
        """Hard deletes an application role.

        This is a dangerous operation and should not be used in most circumstances. This
        permanently removes the given role from all users that had it.

        Args:
            application_id: The Id of the application that the role belongs to.
            role_id: The Id of the role to delete.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .delete()
            .go()
        )

    def delete_oauth_scope(self, application_id: str, scope_id: str) -> ClientResponse:
        """Hard deletes a custom OAuth scope.

        OAuth workflows that are still requesting the deleted OAuth scope may fail depending on the
        application's unknown scope policy.

        Args:
            application_id: The Id of the application that the OAuth scope belongs to.
            scope_id: The Id of the OAuth scope to delete.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("scope")
            .url_segment(scope_id)
            .delete()
            .go()
        )

    def patch_application(self, application_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the application with the given Id.

        Args:
            application_id: The Id of the application to update.
            request: The request that contains just the new application information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_application_role(
        self,
        application_id: str,
        role_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the application role with the given Id for the application.

        Args:
            application_id: The Id of the application that the role belongs to.
            role_id: The Id of the role to update.
            request: The request that contains just the new role information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_oauth_scope(
        self,
        application_id: str,
        scope_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the custom OAuth scope with the given Id for the application.

        Args:
            application_id: The Id of the application that the OAuth scope belongs to.
            scope_id: The Id of the OAuth scope to update.
            request: The request that contains just the new OAuth scope information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("scope")
            .url_segment(scope_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def reactivate_application(self, application_id: str) -> ClientResponse:
        """Reactivates the application with the given Id.

        Args:
            application_id: The Id of the application to reactivate.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_parameter("reactivate", True)
            .put()
            .go()
        )

    def retrieve_application(self, application_id: Optional[str] = None) -> ClientResponse:
        """Retrieves the application for the given Id or all the applications if the Id is null.

        Args:
            application_id: (Optional) The application Id.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .get()
            .go()
        )

    def retrieve_applications(self) -> ClientResponse:
        """Retrieves all the applications."""
        return (
            self.start()
            .uri("/api/application")
            .get()
            .go()
        )

    def retrieve_inactive_applications(self) -> ClientResponse:
        """Retrieves all the applications that are currently inactive."""
        return (
            self.start()
            .uri("/api/application")
            .url_parameter("inactive", True)
            .get()
            .go()
        )

    def retrieve_oauth_scope(self, application_id: str, scope_id: str) -> ClientResponse:
        """Retrieves a custom OAuth scope.

        Args:
            application_id: The Id of the application that the OAuth scope belongs to.
            scope_id: The Id of the OAuth scope to retrieve.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("scope")
            .url_segment(scope_id)
            .get()
            .go()
        )

    def retrieve_oauth_configuration(self, application_id: str) -> ClientResponse:
        """Retrieves the Oauth2 configuration for the application for the given Application Id.

        Args:
            application_id: The Id of the Application to retrieve OAuth configuration.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("oauth-configuration")
            .get()
            .go()
        )

    def search_applications(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches applications with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/application/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_application(self, application_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the application with the given Id.

        Args:
            application_id: The Id of the application to update.
            request: The request that contains all the new application information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_application_role(
        self,
        application_id: str,
        role_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the application role with the given Id for the application.

        Args:
            application_id: The Id of the application that the role belongs to.
            role_id: The Id of the role to update.
            request: The request that contains all the new role information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("role")
            .url_segment(role_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_oauth_scope(
        self,
        application_id: str,
        scope_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the OAuth scope with the given Id for the application.

        Args:
            application_id: The Id of the application that the OAuth scope belongs to.
            scope_id: The Id of the OAuth scope to update.
            request: The request that contains all the new OAuth scope information.
        """
        return (
            self.start()
            .uri("/api/application")
            .url_segment(application_id)
            .url_segment("scope")
            .url_segment(scope_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
