"""Reporting APIs."""
from __future__ import annotations
from typing import Optional

from ..core import ClientResponse
from .base import BaseClient


class ReportsAPI(BaseClient):
    """Reporting APIs."""

    def retrieve_daily_active_report(
        self,
        application_id: Optional[str],
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the daily active user report between the two instants.

        If you specify an application Id, it will only return the daily active counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/daily-active-user")
            .url_parameter("applicationId", application_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_login_report(
        self,
        application_id: Optional[str],
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the login report between the two instants.

        If you specify an application Id, it will only return the login counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/login")
            .url_parameter("applicationId", application_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_monthly_active_report(
        self,
        application_id: Optional[str],
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the monthly active user report between the two instants.

        If you specify an application Id, it will only return the monthly active counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/monthly-active-user")
            .url_parameter("applicationId", application_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_recent_logins(self, offset: int, limit: int) -> ClientResponse:
        """Retrieves the last number of login records.

        Args:
            offset: The initial record. e.g. 0 is the last login, 100 will be the 100th most recent
                login.
            limit: (Optional, defaults to 10) The number of records to retrieve.
        """
        return (
            self.start()
            .uri("/api/user/recent-login")
            .url_parameter("offset", offset)
            .url_parameter("limit", limit)
            .get()
            .go()
        )

    def retrieve_registration_report(
        self,
        application_id: Optional[str],
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the registration report between the two instants.

        If you specify an application Id, it will only return the registration counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/registration")
            .url_parameter("applicationId", application_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_total_report(self) -> ClientResponse:
        """Retrieves the totals report.

        This contains all the total counts for each application and the global registration count.
        """
        return (
            self.start()
            .uri("/api/report/totals")
            .get()
            .go()
        )

    def retrieve_user_login_report(
        self,
        application_id: Optional[str],
        user_id: str,
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the login report between the two instants for a particular user by Id.

        If you specify an application Id, it will only return the login counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            user_id: The userId Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/login")
            .url_parameter("applicationId", application_id)
            .url_parameter("userId", user_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_user_login_report_by_login_id(
        self,
        application_id: Optional[str],
        login_id: str,
        start: int,
        end: int,
    ) -> ClientResponse:
        """Retrieves the login report between the two instants for a particular user by login Id.

        If you specify an application Id, it will only return the login counts for that
        application.

        Args:
            application_id: (Optional) The application Id.
            login_id: The userId Id.
            start: The start instant as UTC milliseconds since Epoch.
            end: The end instant as UTC milliseconds since Epoch.
        """
        return (
            self.start()
            .uri("/api/report/login")
            .url_parameter("applicationId", application_id)
            .url_parameter("loginId", login_id)
            .url_parameter("start", start)
            .url_parameter("end", end)
            .get()
            .go()
        )

    def retrieve_user_recent_logins(self, user_id: str, offset: int, limit: int) -> ClientResponse:
        """Retrieves the last number of login records for a user.

        Args:
            user_id: The Id of the user.
            offset: The initial record. e.g. 0 is the last login, 100 will be the 100th most recent
                login.
            limit: (Optional, defaults to 10) The number of records to retrieve.
        """
        return (
            self.start()
            .uri("/api/user/recent-login")
            .url_parameter("userId", user_id)
            .url_parameter("offset", offset)
            .url_parameter("limit", limit)
            .get()
            .go()
        )
