from flask import current_app
from flask_jwt_extended import create_access_token


class AuthService:
    """Service class for issuing access tokens"""

    @staticmethod
    def token_lifetime():
        return current_app.config['JWT_ACCESS_TOKEN_EXPIRES']

    @classmethod
    def issue_token(cls, token_request):
        """
        Sign the caller's claims into a time-limited access token.

        Args:
            token_request (TokenRequest): validated claims from the request body.

        Returns:
            str: the encoded token, valid for ``token_lifetime()``.
        """
        return create_access_token(
            identity=token_request.subject,
            additional_claims=token_request.claims,
            expires_delta=cls.token_lifetime(),
        )
