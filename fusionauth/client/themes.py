"""Theme APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class ThemesAPI(BaseClient):
    """Theme APIs."""

    def create_theme(self, theme_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a Theme.

        You can optionally specify an Id for the theme, if not provided one will be generated.

        Args:
            theme_id: (Optional) The Id for the theme. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the theme.
        """
        return (
            self.start()
            .uri("/api/theme")
            .url_segment(theme_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_theme(self, theme_id: str) -> ClientResponse:
        """Deletes the theme for the given Id.

        Args:
            theme_id: The Id of the theme to delete.
        """
        return (
            self.start()
            .uri("/api/theme")
            .url_segment(theme_id)
            .delete()
            .go()
        )

    def patch_theme(self, theme_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the theme with the given Id.

        Args:
            theme_id: The Id of the theme to update.
            request: The request that contains just the new theme information.
        """
        return (
            self.start()
            .uri("/api/theme")
            .url_segment(theme_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_theme(self, theme_id: str) -> ClientResponse:
        """Retrieves the theme for the given Id.

        Args:
            theme_id: The Id of the theme.
        """
        return (
            self.start()
            .uri("/api/theme")
            .url_segment(theme_id)
            .get()
            .go()
        )

    def retrieve_themes(self) -> ClientResponse:
        """Retrieves all the themes."""
        return (
            self.start()
            .uri("/api/theme")
            .get()
            .go()
        )

    def search_themes(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches themes with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/theme/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_theme(self, theme_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the theme with the given Id.

        Args:
            theme_id: The Id of the theme to update.
            request: The request that contains all the new theme information.
        """
        return (
            self.start()
            .uri("/api/theme")
            .url_segment(theme_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
