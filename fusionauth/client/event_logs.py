"""Audit log, event log and login record APIs."""
from __future__ import annotations
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class EventLogsAPI(BaseClient):
    """Audit log, event log and login record APIs."""

    def create_audit_log(self, request: Dict[str, Any]) -> ClientResponse:
        """Creates an audit log with the message and user name (usually an email).

        Audit logs should be written anytime you make changes to the FusionAuth database. When
        using the FusionAuth App web interface, any changes are automatically written to the audit
        log. However, if you are accessing the API, you must write the audit logs yourself.

        Args:
            request: The request object that contains all the information used to create the audit
                log entry.
        """
        return (
            self.start()
            .uri("/api/system/audit-log")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_audit_log(self, audit_log_id: int) -> ClientResponse:
        """Retrieves a single audit log for the given Id.

        Args:
            audit_log_id: The Id of the audit log to retrieve.
        """
        return (
            self.start()
            .uri("/api/system/audit-log")
            .url_segment(audit_log_id)
            .get()
            .go()
        )

    def retrieve_event_log(self, event_log_id: int) -> ClientResponse:
        """Retrieves a single event log for the given Id.

        Args:
            event_log_id: The Id of the event log to retrieve.
        """
        return (
            self.start()
            .uri("/api/system/event-log")
            .url_segment(event_log_id)
            .get()
            .go()
        )

    def search_audit_logs(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the audit logs with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/system/audit-log/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_event_logs(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the event logs with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/system/event-log/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_login_records(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches the login records with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/system/login-record/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
