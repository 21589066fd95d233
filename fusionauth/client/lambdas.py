"""Lambda APIs."""
from __future__ import annotations
from typing import Any, Dict, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class LambdasAPI(BaseClient):
    """Lambda APIs."""

    def create_lambda(self, lambda_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a Lambda.

        You can optionally specify an Id for the lambda, if not provided one will be generated.

        Args:
            lambda_id: (Optional) The Id for the lambda. If not provided a secure random UUID will
                be generated.
            request: The request object that contains all the information used to create the
                lambda.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_segment(lambda_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def delete_lambda(self, lambda_id: str) -> ClientResponse:
        """Deletes the lambda for the given Id.

        Args:
            lambda_id: The Id of the lambda to delete.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_segment(lambda_id)
            .delete()
            .go()
        )

    def patch_lambda(self, lambda_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the lambda with the given Id.

        Args:
            lambda_id: The Id of the lambda to update.
            request: The request that contains just the new lambda information.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_segment(lambda_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def retrieve_lambda(self, lambda_id: str) -> ClientResponse:
        """Retrieves the lambda for the given Id.

        Args:
            lambda_id: The Id of the lambda.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_segment(lambda_id)
            .get()
            .go()
        )

    def retrieve_lambdas(self) -> ClientResponse:
        """Retrieves all the lambdas."""
        return (
            self.start()
            .uri("/api/lambda")
            .get()
            .go()
        )

    def retrieve_lambdas_by_type(self, type: str) -> ClientResponse:
        """Retrieves all the lambdas for the provided type.

        Args:
            type: The type of the lambda to return.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_parameter("type", type)
            .get()
            .go()
        )

    def search_lambdas(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches lambdas with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/lambda/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_lambda(self, lambda_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the lambda with the given Id.

        Args:
            lambda_id: The Id of the lambda to update.
            request: The request that contains all the new lambda information.
        """
        return (
            self.start()
            .uri("/api/lambda")
            .url_segment(lambda_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )
