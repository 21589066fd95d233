"""Webhook APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class WebhooksAPI(BaseClient):
    """Webhook APIs."""

    def create_webhook(self, webhook_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a webhook.

        You can optionally specify an Id for the webhook, if not provided one will be generated.

        Args:
            webhook_id: (Optional) The Id for the webhook. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the
                webhook.
        """
        return (
            self.start()
            .uri("/api/webhook")
            .url_segment(webhook_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_webhook(self, webhook_id: str) -> ClientResponse:
        """Deletes the webhook for the given Id.

        Args:
            webhook_id: The Id of the webhook to delete.
        """
        return (
            self.start()
            .uri("/api/webhook")
            .url_segment(webhook_id)
            .delete()
            .go()
        )

    def patch_webhook(self, webhook_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Patches the webhook with the given Id.

        Args:
            webhook_id: The Id of the webhook to update.
            request: The request that contains the new webhook information.
        """
        return (
            self.start()
            .uri("/api/webhook")
            .url_segment(webhook_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_webhook(self, webhook_id: Optional[str] = None) -> ClientResponse:
        """Retrieves the webhook for the given Id.

        If you pass in null for the Id, this will return all the webhooks.

        Args:
            webhook_id: (Optional) The Id of the webhook.
        """
        return (
            self.start()
            .uri("/api/webhook")
            .url_segment(webhook_id)
            .get()
            .go()
        )

    def retrieve_webhook_attempt_log(self, webhook_attempt_log_id: str) -> ClientResponse:
        """Retrieves a single webhook attempt log for the given Id.

        Args:
            webhook_attempt_log_id: The Id of the webhook attempt log to retrieve.
        """
        return (
            self.start()
            .uri("/api/system/webhook-attempt-log")
            .url_segment(webhook_attempt_log_id)
            .get()
            .go()
        )

    def retrieve_webhook_event_log(self, webhook_event_log_id: str) -> ClientResponse:
        """Retrieves a single webhook event log for the given Id.

        Args:
            webhook_event_log_id: The Id of the webhook event log to retrieve.
        """
        return (
            self.start()
            .uri("/api/system/webhook-event-log")
            .url_segment(webhook_event_log_id)
            .get()
            .go()
        )

    def retrieve_webhooks(self) -> ClientResponse:
        """Retrieves all the webhooks."""
        return (
            self.start()
            .uri("/api/webhook")
            .get()
            .go()
        )

    def search_webhook_event_logs(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the webhook event logs with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/system/webhook-event-log/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_webhooks(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches webhooks with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/webhook/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_webhook(self, webhook_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the webhook with the given Id.

        Args:
            webhook_id: The Id of the webhook to update.
            request: The request that contains all the new webhook information.
        """
        return (
            self.start()
            .uri("/api/webhook")
            .url_segment(webhook_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
