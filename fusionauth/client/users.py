"""User, registration and verification APIs."""
from __future__ import annotations
import warnings
from typing import Any, Dict, List, Optional

from ..core import ClientResponse, JSONBodyHandler
from .base import BaseClient


class UsersAPI(BaseClient):
    """User, registration and verification APIs."""

    def comment_on_user(self, request: Dict[str, Any]) -> ClientResponse:
        """Adds a comment to the user's account.

        Args:
            request: The request object that contains all the information used to create the user
                comment.
        """
        return (
            self.start()
            .uri("/api/user/comment")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def create_user(self, user_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Creates a user.

        You can optionally specify an Id for the user, if not provided one will be generated.

        Args:
            user_id: (Optional) The Id for the user. If not provided a secure random UUID will be
                generated.
            request: The request object that contains all the information used to create the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def deactivate_user(self, user_id: str) -> ClientResponse:
        """Deactivates the user with the given Id.

        Args:
            user_id: The Id of the user to deactivate.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .delete()
            .go()
        )

    def deactivate_users(self, user_ids: List[str]) -> ClientResponse:
        """Deactivates the users with the given Ids.

        Args:
            user_ids: The ids of the users to deactivate.

        Deprecated:
            This method has been renamed to deactivate_users_by_ids, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to deactivate_users_by_ids, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start()
            .uri("/api/user/bulk")
            .url_parameter("userId", user_ids)
            .url_parameter("dryRun", False)
            .url_parameter("hardDelete", False)
            .delete()
            .go()
        )

    def deactivate_users_by_ids(self, user_ids: List[str]) -> ClientResponse:
        """Deactivates the users with the given Ids.

        Args:
            user_ids: The ids of the users to deactivate.
        """
        return (
            self.start()
            .uri("/api/user/bulk")
            .url_parameter("userId", user_ids)
            .url_parameter("dryRun", False)
            .url_parameter("hardDelete", False)
            .delete()
            .go()
        )

    def delete_registration(self, user_id: str, application_id: str) -> ClientResponse:
        """Deletes the user registration for the given user and application.

        Args:
            user_id: The Id of the user whose registration is being deleted.
            application_id: The Id of the application to remove the registration for.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .url_segment(application_id)
            .delete()
            .go()
        )

    def delete_registration_with_request(
        self,
        user_id: str,
        application_id: str,
        request: Dict[str, Any],
    ) -> ClientResponse:
        """Deletes the user registration for the given user and application along with the given
        JSON body that contains the event information.

        Args:
            user_id: The Id of the user whose registration is being deleted.
            application_id: The Id of the application to remove the registration for.
            request: The request body that contains the event information.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .url_segment(application_id)
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def delete_user(self, user_id: str) -> ClientResponse:
        """Deletes the user for the given Id.

        This permanently deletes all information, metrics, reports and data associated with the
        user.

        Args:
            user_id: The Id of the user to delete.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .url_parameter("hardDelete", True)
            .delete()
            .go()
        )

    def delete_user_with_request(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Deletes the user based on the given request (sent to the API as JSON).

        This permanently deletes all information, metrics, reports and data associated with the
        user.

        Args:
            user_id: The Id of the user to delete (required).
            request: The request object that contains all the information used to delete the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def delete_users(self, request: Dict[str, Any]) -> ClientResponse:
        """Deletes the users with the given Ids, or users matching the provided JSON query or
        queryString. The order of preference is Ids, query and then queryString, it is recommended
        to only provide one of the three for the request.

        This method can be used to deactivate or permanently delete (hard-delete) users based upon
        the hardDelete boolean in the request body. Using the dryRun parameter you may also request
        the result of the action without actually deleting or deactivating any users.

        Args:
            request: The UserDeleteRequest.

        Deprecated:
            This method has been renamed to delete_users_by_query, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to delete_users_by_query, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start()
            .uri("/api/user/bulk")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def delete_users_by_query(self, request: Dict[str, Any]) -> ClientResponse:
        """Deletes the users with the given Ids, or users matching the provided JSON query or
        queryString. The order of preference is Ids, query and then queryString, it is recommended
        to only provide one of the three for the request.

        This method can be used to deactivate or permanently delete (hard-delete) users based upon
        the hardDelete boolean in the request body. Using the dryRun parameter you may also request
        the result of the action without actually deleting or deactivating any users.

        Args:
            request: The UserDeleteRequest.
        """
        return (
            self.start()
            .uri("/api/user/bulk")
            .body_handler(JSONBodyHandler(request))
            .delete()
            .go()
        )

    def generate_email_verification_id(self, email: str) -> ClientResponse:
        """Generate a new Email Verification Id to be used with the Verify Email API.

        This API will not attempt to send an email to the User. This API may be used to collect the
        verificationId for use with a third party system.

        Args:
            email: The email address of the user that needs a new verification email.
        """
        return (
            self.start()
            .uri("/api/user/verify-email")
            .url_parameter("email", email)
            .url_parameter("sendVerifyEmail", False)
            .put()
            .go()
        )

    def generate_registration_verification_id(
        self,
        email: str,
        application_id: str,
    ) -> ClientResponse:
        """Generate a new Application Registration Verification Id to be used with the Verify
        Registration API. This API will not attempt to send an email to the User. This API may be
        used to collect the verificationId for use with a third party system.

        Args:
            email: The email address of the user that needs a new verification email.
            application_id: The Id of the application to be verified.
        """
        return (
            self.start()
            .uri("/api/user/verify-registration")
            .url_parameter("email", email)
            .url_parameter("sendVerifyPasswordEmail", False)
            .url_parameter("applicationId", application_id)
            .put()
            .go()
        )

    def import_users(self, request: Dict[str, Any]) -> ClientResponse:
        """Bulk imports users.

        This request performs minimal validation and runs batch inserts of users with the
        expectation that each user does not yet exist and each registration corresponds to an
        existing FusionAuth Application. This is done to increases the insert performance.

        Therefore, if you encounter an error due to a database key violation, the response will
        likely offer a generic explanation. If you encounter an error, you may optionally enable
        additional validation to receive a JSON response body with specific validation errors. This
        will slow the request down but will allow you to identify the cause of the failure. See the
        validateDbConstraints request parameter.

        Args:
            request: The request that contains all the information about all the users to import.
        """
        return (
            self.start()
            .uri("/api/user/import")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def patch_registration(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the registration for the user with the given Id and the application
        defined in the request.

        Args:
            user_id: The Id of the user whose registration is going to be updated.
            request: The request that contains just the new registration information.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def patch_user(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates, via PATCH, the user with the given Id.

        Args:
            user_id: The Id of the user to update.
            request: The request that contains just the new user information.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .patch()
            .go()
        )

    def reactivate_user(self, user_id: str) -> ClientResponse:
        """Reactivates the user with the given Id.

        Args:
            user_id: The Id of the user to reactivate.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .url_parameter("reactivate", True)
            .put()
            .go()
        )

    def register(self, user_id: Optional[str], request: Dict[str, Any]) -> ClientResponse:
        """Registers a user for an application.

        If you provide the User and the UserRegistration object on this request, it will create the
        user as well as register them for the application. This is called a Full Registration.
        However, if you only provide the UserRegistration object, then the user must already exist
        and they will be registered for the application. The user Id can also be provided and it
        will either be used to look up an existing user or it will be used for the newly created
        User.

        Args:
            user_id: (Optional) The Id of the user being registered for the application and
                optionally created.
            request: The request that optionally contains the User and must contain the
                UserRegistration.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def resend_email_verification(self, email: str) -> ClientResponse:
        """Re-sends the verification email to the user.

        Args:
            email: The email address of the user that needs a new verification email.
        """
        return (
            self.start()
            .uri("/api/user/verify-email")
            .url_parameter("email", email)
            .put()
            .go()
        )

    def resend_email_verification_with_application_template(
        self,
        application_id: str,
        email: str,
    ) -> ClientResponse:
        """Re-sends the verification email to the user.

        If the Application has configured a specific email template this will be used instead of
        the tenant configuration.

        Args:
            application_id: The unique Application Id to used to resolve an application specific
                email template.
            email: The email address of the user that needs a new verification email.
        """
        return (
            self.start()
            .uri("/api/user/verify-email")
            .url_parameter("applicationId", application_id)
            .url_parameter("email", email)
            .put()
            .go()
        )

    def resend_registration_verification(self, email: str, application_id: str) -> ClientResponse:
        """Re-sends the application registration verification email to the user.

        Args:
            email: The email address of the user that needs a new verification email.
            application_id: The Id of the application to be verified.
        """
        return (
            self.start()
            .uri("/api/user/verify-registration")
            .url_parameter("email", email)
            .url_parameter("applicationId", application_id)
            .put()
            .go()
        )

    def retrieve_registration(self, user_id: str, application_id: str) -> ClientResponse:
        """Retrieves the user registration for the user with the given Id and the given application
        Id.

        Args:
            user_id: The Id of the user.
            application_id: The Id of the application.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .url_segment(application_id)
            .get()
            .go()
        )

    def retrieve_user(self, user_id: str) -> ClientResponse:
        """Retrieves the user for the given Id.

        Args:
            user_id: The Id of the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .get()
            .go()
        )

    def retrieve_user_by_change_password_id(self, change_password_id: str) -> ClientResponse:
        """Retrieves the user by a change password Id.

        The intended use of this API is to retrieve a user after the forgot password workflow has
        been initiated and you may not know the user's email or username.

        Args:
            change_password_id: The unique change password Id that was sent via email or returned
                by the Forgot Password API.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_parameter("changePasswordId", change_password_id)
            .get()
            .go()
        )

    def retrieve_user_by_email(self, email: str) -> ClientResponse:
        """Retrieves the user for the given email.

        Args:
            email: The email of the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_parameter("email", email)
            .get()
            .go()
        )

    def retrieve_user_by_login_id(self, login_id: str) -> ClientResponse:
        """Retrieves the user for the loginId.

        The loginId can be either the username or the email.

        Args:
            login_id: The email or username of the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_parameter("loginId", login_id)
            .get()
            .go()
        )

    def retrieve_user_by_username(self, username: str) -> ClientResponse:
        """Retrieves the user for the given username.

        Args:
            username: The username of the user.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_parameter("username", username)
            .get()
            .go()
        )

    def retrieve_user_by_verification_id(self, verification_id: str) -> ClientResponse:
        """Retrieves the user by a verificationId.

        The intended use of this API is to retrieve a user after the forgot password workflow has
        been initiated and you may not know the user's email or username.

        Args:
            verification_id: The unique verification Id that has been set on the user object.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_parameter("verificationId", verification_id)
            .get()
            .go()
        )

    def retrieve_user_comments(self, user_id: str) -> ClientResponse:
        """Retrieves all the comments for the user with the given Id.

        Args:
            user_id: The Id of the user.
        """
        return (
            self.start()
            .uri("/api/user/comment")
            .url_segment(user_id)
            .get()
            .go()
        )

    def search_user_comments(self, request: Dict[str, Any]) -> ClientResponse:
        """Searches user comments with the specified criteria and pagination.

        Args:
            request: The search criteria and pagination information.
        """
        return (
            self.start()
            .uri("/api/user/comment/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_users(self, ids: List[str]) -> ClientResponse:
        """Retrieves the users for the given Ids.

        If any Id is invalid, it is ignored.

        Args:
            ids: The user ids to search for.

        Deprecated:
            This method has been renamed to search_users_by_ids, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to search_users_by_ids, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start()
            .uri("/api/user/search")
            .url_parameter("ids", ids)
            .get()
            .go()
        )

    def search_users_by_ids(self, ids: List[str]) -> ClientResponse:
        """Retrieves the users for the given Ids.

        If any Id is invalid, it is ignored.

        Args:
            ids: The user Ids to search for.
        """
        return (
            self.start()
            .uri("/api/user/search")
            .url_parameter("ids", ids)
            .get()
            .go()
        )

    def search_users_by_query(self, request: Dict[str, Any]) -> ClientResponse:
        """Retrieves the users for the given search criteria and pagination.

        Args:
            request: The search criteria and pagination constraints. Fields used: ids, query,
                queryString, numberOfResults, orderBy, startRow, and sortFields.
        """
        return (
            self.start()
            .uri("/api/user/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def search_users_by_query_string(self, request: Dict[str, Any]) -> ClientResponse:
        """Retrieves the users for the given search criteria and pagination.

        Args:
            request: The search criteria and pagination constraints. Fields used: ids, query,
                queryString, numberOfResults, orderBy, startRow, and sortFields.

        Deprecated:
            This method has been renamed to search_users_by_query, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to search_users_by_query, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start()
            .uri("/api/user/search")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def update_registration(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the registration for the user with the given Id and the application defined in
        the request.

        Args:
            user_id: The Id of the user whose registration is going to be updated.
            request: The request that contains all the new registration information.
        """
        return (
            self.start()
            .uri("/api/user/registration")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def update_user(self, user_id: str, request: Dict[str, Any]) -> ClientResponse:
        """Updates the user with the given Id.

        Args:
            user_id: The Id of the user to update.
            request: The request that contains all the new user information.
        """
        return (
            self.start()
            .uri("/api/user")
            .url_segment(user_id)
            .body_handler(JSONBodyHandler(request))
            .put()
            .go()
        )

    def verify_email(self, verification_id: str) -> ClientResponse:
        """Confirms a email verification.

        The Id given is usually from an email sent to the user.

        Args:
            verification_id: The email verification Id sent to the user.

        Deprecated:
            This method has been renamed to verify_email_address and changed to take a JSON request
            body, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to verify_email_address and changed to take a JSON request body, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start_anonymous()
            .uri("/api/user/verify-email")
            .url_segment(verification_id)
            .post()
            .go()
        )

    def verify_email_address(self, request: Dict[str, Any]) -> ClientResponse:
        """Confirms a user's email address.

        The request body will contain the verificationId. You may also be required to send a
        one-time use code based upon your configuration. When the tenant is configured to gate a
        user until their email address is verified, this procedures requires two values instead of
        one. The verificationId is a high entropy value and the one-time use code is a low entropy
        value that is easily entered in a user interactive form. The two values together are able
        to confirm a user's email address and mark the user's email address as verified.

        Args:
            request: The request that contains the verificationId and optional one-time use code
                paired with the verificationId.
        """
        return (
            self.start_anonymous()
            .uri("/api/user/verify-email")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def verify_email_address_by_user_id(self, request: Dict[str, Any]) -> ClientResponse:
        """Administratively verify a user's email address.

        Use this method to bypass email verification for the user.

        The request body will contain the userId to be verified. An API key is required when
        sending the userId in the request body.

        Args:
            request: The request that contains the userId to verify.
        """
        return (
            self.start()
            .uri("/api/user/verify-email")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )

    def verify_registration(self, verification_id: str) -> ClientResponse:
        """Confirms an application registration.

        The Id given is usually from an email sent to the user.

        Args:
            verification_id: The registration verification Id sent to the user.

        Deprecated:
            This method has been renamed to verify_user_registration and changed to take a JSON
            request body, use that method instead.
        """
        warnings.warn(
            "This method has been renamed to verify_user_registration and changed to take a JSON request body, use that method instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return (
            self.start_anonymous()
            .uri("/api/user/verify-registration")
            .url_segment(verification_id)
            .post()
            .go()
        )

    def verify_user_registration(self, request: Dict[str, Any]) -> ClientResponse:
        """Confirms a user's registration.

        The request body will contain the verificationId. You may also be required to send a
        one-time use code based upon your configuration. When the application is configured to gate
        a user until their registration is verified, this procedures requires two values instead of
        one. The verificationId is a high entropy value and the one-time use code is a low entropy
        value that is easily entered in a user interactive form. The two values together are able
        to confirm a user's registration and mark the user's registration as verified.

        Args:
            request: The request that contains the verificationId and optional one-time use code
                paired with the verificationId.
        """
        return (
            self.start_anonymous()
            .uri("/api/user/verify-registration")
            .body_handler(JSONBodyHandler(request))
            .post()
            .go()
        )
