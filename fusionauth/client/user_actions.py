"""User action and user action reason APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class UserActionsAPI(BaseClient):
    """User action and user action reason APIs."""

    def action_user(self, request: Dict[str, Any]) -> ClientResponse:
        """Takes an action on a user.

        The user being actioned is called the "actionee" and the user taking the action is called
        the "actioner". Both user ids are required in the request object.

        Args:
            request: The action request that includes all the information about the action being
                taken including the Id of the action, any options and the duration (if applicable).
        """
        return (
            self.start()
            .uri("/api/user/action")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def cancel_action(self, action_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Cancels the user action.

        Args:
            action_id: The action Id of the action to cancel.
            request: The action request that contains the information about the cancellation.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_segment(action_id)
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def create_user_action(
        self,
        user_action_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a user action.

        This action cannot be taken on a user until this call successfully returns. Anytime after
        that the user action can be applied to any user.

        Args:
            user_action_id: (Optional) The Id for the user action. If not provided a secure random
                UUID will be generated.
            request: The request object that contains all the information used to create the user
                action.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_user_action_reason(
        self,
        user_action_reason_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a user reason.

        This user action reason cannot be used when actioning a user until this call completes
        successfully. Anytime after that the user action reason can be used.

        Args:
            user_action_reason_id: (Optional) The Id for the user action reason. If not provided a
                secure random UUID will be generated.
            request: The request object that contains all the information used to create the user
                action reason.
        """
        return (
            self.start()
            .uri("/api/user-action-reason")
            .url_segment(user_action_reason_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def deactivate_user_action(self, user_action_id: str) -> ClientResponse:
        """Deactivates the user action with the given Id.

        Args:
            user_action_id: The Id of the user action to deactivate.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .delete()
            .go()
        )

    def delete_user_action(self, user_action_id: str) -> ClientResponse:
        """Deletes the user action for the given Id.

        This permanently deletes the user action and also any history and logs of the action being
        applied to any users.

        Args:
            user_action_id: The Id of the user action to delete.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .url_parameter("hardDelete", True)
            .delete()
            .go()
        )

    def delete_user_action_reason(self, user_action_reason_id: str) -> ClientResponse:
        """Deletes the user action reason for the given Id.

        Args:
            user_action_reason_id: The Id of the user action reason to delete.
        """
        return (
            self.start()
            .uri("/api/user-action-reason")
            .url_segment(user_action_reason_id)
            .delete()
            .go()
        )

    def modify_action(self, action_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Modifies a temporal user action by changing the expiration of the action and optionally
        adding a comment to the action.

        Args:
            action_id: The Id of the action to modify. This is technically the user action log Id.
            request: The request that contains all the information about the modification.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_segment(action_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def patch_user_action(self, user_action_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the user action with the given Id.

        Args:
            user_action_id: The Id of the user action to update.
            request: The request that contains just the new user action information.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_user_action_reason(
        self,
        user_action_reason_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the user action reason with the given Id.

        Args:
            user_action_reason_id: The Id of the user action reason to update.
            request: The request that contains just the new user action reason information.
        """
        return (
            self.start()
            .uri("/api/user-action-reason")
            .url_segment(user_action_reason_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def reactivate_user_action(self, user_action_id: str) -> ClientResponse:
        """Reactivates the user action with the given Id.

        Args:
            user_action_id: The Id of the user action to reactivate.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .url_parameter("reactivate", True)
            .put()
            .go()
        )

    def retrieve_action(self, action_id: str) -> ClientResponse:
        """Retrieves a single action log (the log of a user action that was taken on a user
        previously) for the given Id.

        Args:
            action_id: The Id of the action to retrieve.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_segment(action_id)
            .get()
            .go()
        )

    def retrieve_actions(self, user_id: str) -> ClientResponse:
        """Retrieves all the actions for the user with the given Id.

        This will return all time based actions that are active, and inactive as well as non-time
        based actions.

        Args:
            user_id: The Id of the user to fetch the actions for.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_parameter("userId", user_id)
            .get()
            .go()
        )

    def retrieve_actions_preventing_login(self, user_id: str) -> ClientResponse:
        """Retrieves all the actions for the user with the given Id that are currently preventing
        the User from logging in.

        Args:
            user_id: The Id of the user to fetch the actions for.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_parameter("userId", user_id)
            .url_parameter("preventingLogin", True)
            .get()
            .go()
        )

    def retrieve_active_actions(self, user_id: str) -> ClientResponse:
        """Retrieves all the actions for the user with the given Id that are currently active.

        An active action means one that is time based and has not been canceled, and has not ended.

        Args:
            user_id: The Id of the user to fetch the actions for.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_parameter("userId", user_id)
            .url_parameter("active", True)
            .get()
            .go()
        )

    def retrieve_inactive_actions(self, user_id: str) -> ClientResponse:
        """Retrieves all the actions for the user with the given Id that are currently inactive.

        An inactive action means one that is time based and has been canceled or has expired, or is
        not time based.

        Args:
            user_id: The Id of the user to fetch the actions for.
        """
        return (
            self.start()
            .uri("/api/user/action")
            .url_parameter("userId", user_id)
            .url_parameter("active", False)
            .get()
            .go()
        )

    def retrieve_inactive_user_actions(self) -> ClientResponse:
        """Retrieves all the user actions that are currently inactive."""
        return (
            self.start()
            .uri("/api/user-action")
            .url_parameter("inactive", True)
            .get()
            .go()
        )

    def retrieve_user_action(self, user_action_id: Optional[str] = None) -> ClientResponse:
        """Retrieves the user action for the given Id.

        If you pass in null for the Id, this will return all the user actions.

        Args:
            user_action_id: (Optional) The Id of the user action.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .get()
            .go()
        )

    def retrieve_user_action_reason(
        self,
        user_action_reason_id: Optional[str] = None,
    ) -> ClientResponse:
        """Retrieves the user action reason for the given Id.

        If you pass in null for the Id, this will return all the user action reasons.

        Args:
            user_action_reason_id: (Optional) The Id of the user action reason.
        """
        return (
            self.start()
            .uri("/api/user-action-reason")
            .url_segment(user_action_reason_id)
            .get()
            .go()
        )

    def retrieve_user_action_reasons(self) -> ClientResponse:
        """Retrieves all the user action reasons."""
        return (
            self.start()
            .uri("/api/user-action-reason")
            .get()
            .go()
        )

    def retrieve_user_actions(self) -> ClientResponse:
        """Retrieves all the user actions."""
        return (
            self.start()
            .uri("/api/user-action")
            .get()
            .go()
        )

    def update_user_action(self, user_action_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the user action with the given Id.

        Args:
            user_action_id: The Id of the user action to update.
            request: The request that contains all the new user action information.
        """
        return (
            self.start()
            .uri("/api/user-action")
            .url_segment(user_action_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_user_action_reason(
        self,
        user_action_reason_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the user action reason with the given Id.

        Args:
            user_action_reason_id: The Id of the user action reason to update.
            request: The request that contains all the new user action reason information.
        """
        return (
            self.start()
            .uri("/api/user-action-reason")
            .url_segment(user_action_reason_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
