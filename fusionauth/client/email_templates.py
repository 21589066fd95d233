"""Email template APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class EmailTemplatesAPI(BaseClient):
    """Email template APIs."""

    def create_email_template(
        self,
        email_template_id: Optional[str],
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Creates an email template.

        You can optionally specify an Id for the template, if not provided one will be generated.

        Args:
            email_template_id: (Optional) The Id for the template. If not provided a secure random
                UUID will be generated.
            request: The request object that contains all the information used to create the email
                template.
        """
        return (
            self.start()
            .uri("/api/email/template")
            .url_segment(email_template_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_email_template(self, email_template_id: str) -> ClientResponse:
        """Deletes the email template for the given Id.

        Args:
            email_template_id: The Id of the email template to delete.
        """
        return (
            self.start()
            .uri("/api/email/template")
            .url_segment(email_template_id)
            .delete()
            .go()
        )

    def patch_email_template(
        self,
        email_template_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates, via PATCH, the email template with the given Id.

        Args:
            email_template_id: The Id of the email template to update.
            request: The request that contains just the new email template information.
        """
        return (
            self.start()
            .uri("/api/email/template")
            .url_segment(email_template_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_email_template(self, email_template_id: Optional[str] = None) -> ClientResponse:
        """Retrieves the email template for the given Id.

        If you don't specify the Id, this will return all the email templates.

        Args:
            email_template_id: (Optional) The Id of the email template.
        """
        return (
            self.start()
            .uri("/api/email/template")
            .url_segment(email_template_id)
            .get()
            .go()
        )

    def retrieve_email_template_preview(self, request: Dict[str, Any]) -> ClientResponse:
        """Creates a preview of the email template provided in the request.

        This allows you to preview an email template that hasn't been saved to the database yet.
        The entire email template does not need to be provided on the request. This will create the
        preview based on whatever is given.

        Args:
            request: The request that contains the email template and optionally a locale to render
                it in.
        """
        return (
            self.start()
            .uri("/api/email/template/preview")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_email_templates(self) -> ClientResponse:
        """Retrieves all the email templates."""
        return (
            self.start()
            .uri("/api/email/template")
            .get()
            .go()
        )

    def search_email_templates(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches email templates with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/email/template/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def send_email(self, email_template_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Send an email using an email template Id.

        You can optionally provide ``requestData`` to access key value pairs in the email template.

        Args:
            email_template_id: The Id for the template.
            request: The send email request that contains all the information used to send the
                email.
        """
        return (
            self.start()
            .uri("/api/email/send")
            .url_segment(email_template_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_email_template(
        self,
        email_template_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Updates the email template with the given Id.

        Args:
            email_template_id: The Id of the email template to update.
            request: The request that contains all the new email template information.
        """
        return (
            self.start()
            .uri("/api/email/template")
            .url_segment(email_template_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
