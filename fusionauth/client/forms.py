"""Form and form field APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class FormsAPI(BaseClient):
    """Form and form field APIs."""

    def create_form(self, form_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a form.

        You can optionally specify an Id for the form, if not provided one will be generated.

        Args:
            form_id: (Optional) The Id for the form. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the form.
        """
        return (
            self.start()
            .uri("/api/form")
            .url_segment(form_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_form_field(self, field_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a form field.

        You can optionally specify an Id for the form, if not provided one will be generated.

        Args:
            field_id: (Optional) The Id for the form field. If not provided a secure random UUID
                will be generated.
            request: The request object that contains all the information used to create the form
                field.
        """
        return (
            self.start()
            .uri("/api/form/field")
            .url_segment(field_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_form(self, form_id: str) -> ClientResponse:
        """Deletes the form for the given Id.

        Args:
            form_id: The Id of the form to delete.
        """
        return (
            self.start()
            .uri("/api/form")
            .url_segment(form_id)
            .delete()
            .go()
        )

    def delete_form_field(self, field_id: str) -> ClientResponse:
        """Deletes the form field for the given Id.

        Args:
            field_id: The Id of the form field to delete.
        """
        return (
            self.start()
            .uri("/api/form/field")
            .url_segment(field_id)
            .delete()
            .go()
        )

    def patch_form(self, form_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Patches the form with the given Id.

        Args:
            form_id: The Id of the form to patch.
            request: The request object that contains the new form information.
        """
        return (
            self.start()
            .uri("/api/form")
            .url_segment(form_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_form_field(self, field_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Patches the form field with the given Id.

        Args:
            field_id: The Id of the form field to patch.
            request: The request object that contains the new form field information.
        """
        return (
            self.start()
            .uri("/api/form/field")
            .url_segment(field_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_form(self, form_id: str) -> ClientResponse:
        """Retrieves the form with the given Id.

        Args:
            form_id: The Id of the form.
        """
        return (
            self.start()
            .uri("/api/form")
            .url_segment(form_id)
            .get()
            .go()
        )

    def retrieve_form_field(self, field_id: str) -> ClientResponse:
        """Retrieves the form field with the given Id.

        Args:
            field_id: The Id of the form field.
        """
        return (
            self.start()
            .uri("/api/form/field")
            .url_segment(field_id)
            .get()
            .go()
        )

    def retrieve_form_fields(self) -> ClientResponse:
        """Retrieves all the forms fields"""
        return (
            self.start()
            .uri("/api/form/field")
            .get()
            .go()
        )

    def retrieve_forms(self) -> ClientResponse:
        """Retrieves all the forms."""
        return (
            self.start()
            .uri("/api/form")
            .get()
            .go()
        )

    def update_form(self, form_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the form with the given Id.

        Args:
            form_id: The Id of the form to update.
            request: The request object that contains all the new form information.
        """
        return (
            self.start()
            .uri("/api/form")
            .url_segment(form_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_form_field(self, field_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the form field with the given Id.

        Args:
            field_id: The Id of the form field to update.
            request: The request object that contains all the new form field information.
        """
        return (
            self.start()
            .uri("/api/form/field")
            .url_segment(field_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
