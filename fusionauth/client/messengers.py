"""Message template and messenger APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class MessengersAPI(BaseClient):
    """Message template and messenger APIs."""

    def create_message_template(
        self,
        message_template_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates an message template.

        You can optionally specify an Id for the template, if not provided one will be generated.

        Args:
            message_template_id: (Optional) The Id for the template. If not provided a secure
                random UUID will be generated.
            request: The request object that contains all the information used to create the
                message template.
        """
        return (
            self.start()
            .uri("/api/message/template")
            .url_segment(message_template_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_messenger(
        self,
        messenger_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates a messenger.

        You can optionally specify an Id for the messenger, if not provided one will be generated.

        Args:
            messenger_id: (Optional) The Id for the messenger. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the
                messenger.
        """
        return (
            self.start()
            .uri("/api/messenger")
            .url_segment(messenger_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_message_template(self, message_template_id: str) -> ClientResponse:
        """Deletes the message template for the given Id.

        Args:
            message_template_id: The Id of the message template to delete.
        """
        return (
            self.start()
            .uri("/api/message/template")
            .url_segment(message_template_id)
            .delete()
            .go()
        )

    def delete_messenger(self, messenger_id: str) -> ClientResponse:
        """Deletes the messenger for the given Id.

        Args:
            messenger_id: The Id of the messenger to delete.
        """
        return (
            self.start()
            .uri("/api/messenger")
            .url_segment(messenger_id)
            .delete()
            .go()
        )

    def patch_message_template(
        self,
        message_template_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the message template with the given Id.

        Args:
            message_template_id: The Id of the message template to update.
            request: The request that contains just the new message template information.
        """
        return (
            self.start()
            .uri("/api/message/template")
            .url_segment(message_template_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_messenger(self, messenger_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the messenger with the given Id.

        Args:
            messenger_id: The Id of the messenger to update.
            request: The request that contains just the new messenger information.
        """
        return (
            self.start()
            .uri("/api/messenger")
            .url_segment(messenger_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_message_template(
        self,
        message_template_id: Optional[str] = None,
    ) -> ClientResponse:
        """Retrieves the message template for the given Id.

        If you don't specify the Id, this will return all the message templates.

        Args:
            message_template_id: (Optional) The Id of the message template.
        """
        return (
            self.start()
            .uri("/api/message/template")
            .url_segment(message_template_id)
            .get()
            .go()
        )

    def retrieve_message_template_preview(self, request: Dict[str, Any]) -> ClientResponse:
        """Creates a preview of the message template provided in the request, normalized to a given
        locale.

        Args:
            request: The request that contains the email template and optionally a locale to render
                it in.
        """
        return (
            self.start()
            .uri("/api/message/template/preview")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_message_templates(self) -> ClientResponse:
        """Retrieves all the message templates."""
        return (
            self.start()
            .uri("/api/message/template")
            .get()
            .go()
        )

    def retrieve_messenger(self, messenger_id: str) -> ClientResponse:
        """Retrieves the messenger with the given Id.

        Args:
            messenger_id: The Id of the messenger.
        """
        return (
            self.start()
            .uri("/api/messenger")
            .url_segment(messenger_id)
            .get()
            .go()
        )

    def retrieve_messengers(self) -> ClientResponse:
        """Retrieves all the messengers."""
        return (
            self.start()
            .uri("/api/messenger")
            .get()
            .go()
        )

    def update_message_template(
        self,
        message_template_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the message template with the given Id.

        Args:
            message_template_id: The Id of the message template to update.
            request: The request that contains all the new message template information.
        """
        return (
            self.start()
            .uri("/api/message/template")
            .url_segment(message_template_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_messenger(self, messenger_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the messenger with the given Id.

        Args:
            messenger_id: The Id of the messenger to update.
            request: The request object that contains all the new messenger information.
        """
        return (
            self.start()
            .uri("/api/messenger")
            .url_segment(messenger_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
