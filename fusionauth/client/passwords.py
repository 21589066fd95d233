"""Password change and validation APIs."""
from __future__ import annotations
import warnings
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class PasswordsAPI(BaseClient):
    """Password change and validation APIs."""

    def change_password(self, change_password_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Changes a user's password using the change password Id.

        This usually occurs after an email has been sent to the user and they clicked on a link to
        reset their password.

        As of version 1.32.2, prefer sending the changePasswordId in the request body. To do this,
        omit the first parameter, and set the value in the request body.

        Args:
            change_password_id: The change password Id used to find the user. This value is
                generated by FusionAuth once the change password workflow has been initiated.
            request: The change password request that contains all the information used to change
                the password.
        """
        return (
            self.start_anonymous()
            .uri("/api/user/change-password")
            .url_segment(change_password_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def change_password_by_jwt(self, encoded_jwt: str, request: Dict[str, Any]) -> ClientResponse:
        """Changes a user's password using their access token (JWT) instead of the changePasswordId
        A common use case for this method will be if you want to allow the user to change their own
        password.

        Remember to send refreshToken in the request body if you want to get a new refresh token
        when login using the returned oneTimePassword.

        Args:
            encoded_jwt: The encoded JWT (access token).
            request: The change password request that contains all the information used to change
                the password.

        Deprecated:
            This method has been renamed to change_password_using_jwt, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to change_password_using_jwt, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start_anonymous()
            .uri("/api/user/change-password")
            .authorization(f"Bearer {encoded_jwt}")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def change_password_by_identity(self, request: Dict[str, Any]) -> ClientResponse:
        """Changes a user's password using their identity (loginId and password).

        Using a loginId instead of the changePasswordId bypasses the email verification and allows
        a password to be changed directly without first calling the #forgotPassword method.

        Args:
            request: The change password request that contains all the information used to change
                the password.
        """
        return (
            self.start()
            .uri("/api/user/change-password")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def change_password_using_jwt(
        self,
        encoded_jwt: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Changes a user's password using their access token (JWT) instead of the changePasswordId
        A common use case for this method will be if you want to allow the user to change their own
        password.

        Remember to send refreshToken in the request body if you want to get a new refresh token
        when login using the returned oneTimePassword.

        Args:
            encoded_jwt: The encoded JWT (access token).
            request: The change password request that contains all the information used to change
                the password.
        """
        return (
            self.start_anonymous()
            .uri("/api/user/change-password")
            .authorization(f"Bearer {encoded_jwt}")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def check_change_password_using_id(self, change_password_id: str) -> ClientResponse:
        """Check to see if the user must obtain a Trust Token Id in order to complete a change
        password request. When a user has enabled Two-Factor authentication, before you are allowed
        to use the Change Password API to change your password, you must obtain a Trust Token by
        completing a Two-Factor Step-Up authentication.

        An HTTP status code of 400 with a general error code of [TrustTokenRequired] indicates that
        a Trust Token is required to make a POST request to this API.

        Args:
            change_password_id: The change password Id used to find the user. This value is
                generated by FusionAuth once the change password workflow has been initiated.
        """
        return (
            self.start_anonymous()
            .uri("/api/user/change-password")
            .url_segment(change_password_id)
            .get()
            .go()
        )

    def check_change_password_using_jwt(self, encoded_jwt: str) -> ClientResponse:
        """Check to see if the user must obtain a Trust Token Id in order to complete a change
        password request. When a user has enabled Two-Factor authentication, before you are allowed
        to use the Change Password API to change your password, you must obtain a Trust Token by
        completing a Two-Factor Step-Up authentication.

        An HTTP status code of 400 with a general error code of [TrustTokenRequired] indicates that
        a Trust Token is required to make a POST request to this API.

        Args:
            encoded_jwt: The encoded JWT (access token).
        """
        return (
            self.start_anonymous()
            .uri("/api/user/change-password")
            .authorization(f"Bearer {encoded_jwt}")
            .get()
            .go()
        )

    def check_change_password_using_login_id(self, login_id: str) -> ClientResponse:
        """Check to see if the user must obtain a Trust Request Id in order to complete a change
        password request. When a user has enabled Two-Factor authentication, before you are allowed
        to use the Change Password API to change your password, you must obtain a Trust Request Id
        by completing a Two-Factor Step-Up authentication.

        An HTTP status code of 400 with a general error code of [TrustTokenRequired] indicates that
        a Trust Token is required to make a POST request to this API.

        Args:
            login_id: The loginId of the User that you intend to change the password for.
        """
        return (
            self.start()
            .uri("/api/user/change-password")
            .url_parameter("username", login_id)
            .get()
            .go()
        )

    def forgot_password(self, request: Dict[str, Any]) -> ClientResponse:
        """Begins the forgot password sequence, which kicks off an email to the user so that they
        can reset their password.

        Args:
            request: The request that contains the information about the user so that they can be
                emailed.
        """
        return (
            self.start()
            .uri("/api/user/forgot-password")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def retrieve_password_validation_rules(self) -> ClientResponse:
        """Retrieves the password validation rules for a specific tenant.

        This method requires a tenantId to be provided through the use of a Tenant scoped API key
        or an HTTP header X-FusionAuth-TenantId to specify the Tenant Id.

        This API does not require an API key.
        """
        return (
            self.start_anonymous()
            .uri("/api/tenant/password-validation-rules")
            .get()
            .go()
        )

    def retrieve_password_validation_rules_with_tenant_id(self, tenant_id: str) -> ClientResponse:
        """Retrieves the password validation rules for a specific tenant.

        This API does not require an API key.

        Args:
            tenant_id: The Id of the tenant.
        """
        return (
            self.start_anonymous()
            .uri("/api/tenant/password-validation-rules")
            .url_segment(tenant_id)
            .get()
            .go()
        )
