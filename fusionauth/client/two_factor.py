"""Two-factor authentication APIs."""
from __future__ import annotations
import warnings
from typing import Any, Dict

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class TwoFactorAPI(BaseClient):
    """Two-factor authentication APIs."""

    def disable_two_factor(self, user_id: str, method_id: str, code: str) -> ClientResponse:
        """Disable two-factor authentication for a user.

        Args:
            user_id: The Id of the User for which you're disabling two-factor authentication.
            method_id: The two-factor method identifier you wish to disable
            code: The two-factor code used verify the the caller knows the two-factor secret.
        """
        return (
            self.start()
            .uri("/api/user/two-factor")
            .url_segment(user_id)
            .url_parameter("methodId", method_id)
            .url_parameter("code", code)
            .delete()
            .go()
        )

    def disable_two_factor_with_request(
        self,
        user_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Disable two-factor authentication for a user using a JSON body rather than URL
        parameters.

        Args:
            user_id: The Id of the User for which you're disabling two-factor authentication.
            request: The request information that contains the code and methodId along with any
                event information.
        """
        return (
            self.start()
            .uri("/api/user/two-factor")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def enable_two_factor(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Enable two-factor authentication for a user.

        Args:
            user_id: The Id of the user to enable two-factor authentication.
            request: The two-factor enable request information.
        """
        return (
            self.start()
            .uri("/api/user/two-factor")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def generate_two_factor_recovery_codes(self, user_id: str) -> ClientResponse:
        """Generate two-factor recovery codes for a user.

        Generating two-factor recovery codes will invalidate any existing recovery codes.

        Args:
            user_id: The Id of the user to generate new Two Factor recovery codes.
        """
        return (
            self.start()
            .uri("/api/user/two-factor/recovery-code")
            .url_segment(user_id)
            .post()
            .go()
        )

    def generate_two_factor_secret(self) -> ClientResponse:
        """Generate a Two Factor secret that can be used to enable Two Factor authentication for a
        User. The response will contain both the secret and a Base32 encoded form of the secret
        which can be shown to a User when using a 2 Step Authentication application such as Google
        Authenticator.
        """
        return (
            self.start()
            .uri("/api/two-factor/secret")
            .get()
            .go()
        )

    def generate_two_factor_secret_using_jwt(self, encoded_jwt: str) -> ClientResponse:
        """Generate a Two Factor secret that can be used to enable Two Factor authentication for a
        User. The response will contain both the secret and a Base32 encoded form of the secret
        which can be shown to a User when using a 2 Step Authentication application such as Google
        Authenticator.

        Args:
            encoded_jwt: The encoded JWT (access token).
        """
        return (
            self.start_anonymous()
            .uri("/api/two-factor/secret")
            .authorization(f"Bearer {encoded_jwt}")
            .get()
            .go()
        )

    def retrieve_two_factor_recovery_codes(self, user_id: str) -> ClientResponse:
        """Retrieve two-factor recovery codes for a user.

        Args:
            user_id: The Id of the user to retrieve Two Factor recovery codes.
        """
        return (
            self.start()
            .uri("/api/user/two-factor/recovery-code")
            .url_segment(user_id)
            .get()
            .go()
        )

    def retrieve_two_factor_status(
        self,
        user_id: str,
        application_id: str,
        two_factor_trust_id: str,
    ) -> ClientResponse:
        """Retrieve a user's two-factor status.

        This can be used to see if a user will need to complete a two-factor challenge to complete
        a login, and optionally identify the state of the two-factor trust across various
        applications.

        Args:
            user_id: The user Id to retrieve the Two-Factor status.
            application_id: The optional applicationId to verify.
            two_factor_trust_id: The optional two-factor trust Id to verify.
        """
        return (
            self.start()
            .uri("/api/two-factor/status")
            .url_parameter("userId", user_id)
            .url_parameter("applicationId", application_id)
            .url_segment(two_factor_trust_id)
            .get()
            .go()
        )

    def send_two_factor_code(self, request: Dict[str, Any]) -> ClientResponse:
        """Send a Two Factor authentication code to assist in setting up Two Factor authentication
        or disabling.

        Args:
            request: The request object that contains all the information used to send the code.

        Deprecated:
            This method has been renamed to send_two_factor_code_for_enable_disable, use that
            method instead.
        """
        warnings.warn(
            "This method has been renamed to send_two_factor_code_for_enable_disable, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start()
            .uri("/api/two-factor/send")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def send_two_factor_code_for_enable_disable(self, request: Dict[str, Any]) -> ClientResponse:
        """Send a Two Factor authentication code to assist in setting up Two Factor authentication
        or disabling.

        Args:
            request: The request object that contains all the information used to send the code.
        """
        return (
            self.start()
            .uri("/api/two-factor/send")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def send_two_factor_code_for_login(self, two_factor_id: str) -> ClientResponse:
        """Send a Two Factor authentication code to allow the completion of Two Factor
        authentication.

        Args:
            two_factor_id: The Id returned by the Login API necessary to complete Two Factor
                authentication.

        Deprecated:
            This method has been renamed to send_two_factor_code_for_login_using_method, use that
            method instead.
        """
        warnings.warn(
            "This method has been renamed to send_two_factor_code_for_login_using_method, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start_anonymous()
            .uri("/api/two-factor/send")
            .url_segment(two_factor_id)
            .post()
            .go()
        )

    def send_two_factor_code_for_login_using_method(
        self,
        two_factor_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Send a Two Factor authentication code to allow the completion of Two Factor
        authentication.

        Args:
            two_factor_id: The Id returned by the Login API necessary to complete Two Factor
                authentication.
            request: The Two Factor send request that contains all the information used to send the
                Two Factor code to the user.
        """
        return (
            self.start_anonymous()
            .uri("/api/two-factor/send")
            .url_segment(two_factor_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
