"""
Error taxonomy for company request handling.

Every error raised by the handler's collaborators carries an ErrorKind,
and the handler maps responses from that kind instead of comparing
error text.
"""

from enum import Enum


ERROR_INVALID_COMPANY_ID = 'invalid company id'
ERROR_INVALID_ACCOUNT_ID = 'invalid account id'
ERROR_NOT_FOUND_RECORDS = 'database not found records'
ERROR_USER_ALREADY_IN_THIS_COMPANY = 'this user is already in this company'
ERROR_MISSING_AUTHORIZATION = 'missing authorization token'
ERROR_INVALID_TOKEN = 'invalid or expired token'


class ErrorKind(str, Enum):
    DECODE = 'decode'
    IDENTIFIER = 'identifier'
    AUTH = 'auth'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    UNCLASSIFIED = 'unclassified'


class CompanyServiceError(Exception):
    """Base exception for company service errors."""

    kind = ErrorKind.UNCLASSIFIED
    default_message = 'unexpected error'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class DecodeError(CompanyServiceError):
    """Raised when a request body is malformed or fails validation."""

    kind = ErrorKind.DECODE
    default_message = 'invalid request body'


class IdentifierError(CompanyServiceError):
    """Raised when a path parameter is not a well-formed identifier."""

    kind = ErrorKind.IDENTIFIER
    default_message = 'invalid identifier'


class AuthError(CompanyServiceError):
    """Raised when the bearer token is missing or invalid."""

    kind = ErrorKind.AUTH
    default_message = ERROR_INVALID_TOKEN


class NotFoundError(CompanyServiceError):
    """Raised when a referenced company, account or membership does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = ERROR_NOT_FOUND_RECORDS


class ConflictError(CompanyServiceError):
    """Raised when a membership already exists."""

    kind = ErrorKind.CONFLICT
    default_message = 'record already exists'
