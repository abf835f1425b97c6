"""
Caller identity resolution.

IdentityResolver turns the Authorization header value into an account id.
JWTIdentityResolver validates simplejwt access tokens and reads the
account id claim; it never touches the database.
"""

import logging
import uuid
from abc import ABC, abstractmethod

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from .errors import AuthError, ERROR_MISSING_AUTHORIZATION, ERROR_INVALID_TOKEN

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '


class IdentityResolver(ABC):
    """Extracts an authenticated account id from a bearer token."""

    @abstractmethod
    def resolve_account_id(self, token):
        """
        Resolve the account id carried by `token`.

        Args:
            token: Authorization header value, with or without `Bearer `

        Returns:
            uuid.UUID of the authenticated account

        Raises:
            AuthError: If the token is missing, invalid or expired
        """


class JWTIdentityResolver(IdentityResolver):

    def resolve_account_id(self, token):
        raw_token = self.strip_bearer(token)
        if not raw_token:
            raise AuthError(ERROR_MISSING_AUTHORIZATION)

        try:
            access_token = AccessToken(raw_token)
        except TokenError as e:
            logger.warning(f"Token authentication failed: {e}")
            raise AuthError(ERROR_INVALID_TOKEN) from e

        claim = access_token.get(api_settings.USER_ID_CLAIM)
        if claim is None:
            raise AuthError('token contained no recognizable account identification')

        try:
            return uuid.UUID(str(claim))
        except ValueError as e:
            raise AuthError('token account identification is not a valid id') from e

    @staticmethod
    def strip_bearer(token):
        token = (token or '').strip()
        if token.startswith(BEARER_PREFIX):
            return token[len(BEARER_PREFIX):].strip()
        return token
