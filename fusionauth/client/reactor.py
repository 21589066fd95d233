"""Reactor (licensing) APIs."""
from __future__ import annotations
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class ReactorAPI(BaseClient):
    """Reactor (licensing) APIs."""

    def activate_reactor(self, request: Dict[str, Any]) -> ClientResponse:
        """Activates the FusionAuth Reactor using a license Id and optionally a license text (for
        air-gapped deployments)

        Args:
            request: An optional request that contains the license text to activate Reactor (useful
                for air-gap deployments of FusionAuth).
        """
        return (
            self.start()
            .uri("/api/reactor")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def deactivate_reactor(self) -> ClientResponse:
        """Deactivates the FusionAuth Reactor."""
        return (
            self.start()
            .uri("/api/reactor")
            .delete()
            .go()
        )

    def regenerate_reactor_keys(self) -> ClientResponse:
        """Regenerates any keys that are used by the FusionAuth Reactor."""
        return (
            self.start()
            .uri("/api/reactor")
            .put()
            .go()
        )

    def retrieve_reactor_metrics(self) -> ClientResponse:
        """Retrieves the FusionAuth Reactor metrics."""
        return (
            self.start()
            .uri("/api/reactor/metrics")
            .get()
            .go()
        )

    def retrieve_reactor_status(self) -> ClientResponse:
        """Retrieves the FusionAuth Reactor status."""
        return (
            self.start()
            .uri("/api/reactor")
            .get()
            .go()
        )
