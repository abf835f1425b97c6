"""
Company request handler.

CompanyRequestHandler translates HTTP requests into controller calls and
controller results into HTTP responses. It is stateless: the controller,
identity resolver and payload decoder are injected at construction, and a
single instance serves every request.

Per request: decode payload (if any), parse path identifiers, resolve the
caller (if needed), call the controller once, map the outcome.
"""

import logging
import uuid
from functools import lru_cache

from . import responses
from .controller import DatabaseCompanyController
from .decoders import SerializerPayloadDecoder
from .entities import EntityKind, RemoveUser
from .errors import (
    AuthError,
    CompanyServiceError,
    DecodeError,
    ErrorKind,
    IdentifierError,
    ERROR_INVALID_ACCOUNT_ID,
    ERROR_INVALID_COMPANY_ID,
    ERROR_USER_ALREADY_IN_THIS_COMPANY,
)
from .identity import JWTIdentityResolver

logger = logging.getLogger(__name__)

ROLE_UPDATED = 'role updated'


def parse_identifier(value, message):
    """
    Parse a path parameter as a UUID.

    Raises:
        IdentifierError: If the value is missing or not a valid UUID
    """
    if isinstance(value, uuid.UUID):
        return value

    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise IdentifierError(message)


def get_authorization(request):
    return request.headers.get('Authorization', '')


class CompanyRequestHandler:

    def __init__(self, controller, identity_resolver, decoder):
        self.controller = controller
        self.identity_resolver = identity_resolver
        self.decoder = decoder

    def create(self, request):
        try:
            company = self.decoder.decode(request.body, EntityKind.COMPANY)
        except DecodeError as e:
            return responses.status_bad_request(e)

        try:
            account_id = self.identity_resolver.resolve_account_id(get_authorization(request))
        except AuthError as e:
            return responses.status_unauthorized(e)

        try:
            new_company = self.controller.create(account_id, company)
        except CompanyServiceError as e:
            return self.internal_server_error(e)

        return responses.status_created(new_company)

    def update(self, request, company_id):
        try:
            data = self.decoder.decode(request.body, EntityKind.COMPANY)
            company_id = parse_identifier(company_id, ERROR_INVALID_COMPANY_ID)
        except (DecodeError, IdentifierError) as e:
            return responses.status_bad_request(e)

        try:
            company = self.controller.update(company_id, data)
        except CompanyServiceError as e:
            return responses.status_bad_request(e)

        return responses.status_ok(company)

    def get(self, request, company_id):
        try:
            company_id = parse_identifier(company_id, ERROR_INVALID_COMPANY_ID)
        except IdentifierError as e:
            return responses.status_bad_request(e)

        # Anonymous callers may still look a company up.
        account_id = self.resolve_optional_account_id(request)

        try:
            company = self.controller.get(company_id, account_id)
        except CompanyServiceError as e:
            return responses.status_bad_request(e)

        return responses.status_ok(company)

    def list(self, request):
        try:
            account_id = self.identity_resolver.resolve_account_id(get_authorization(request))
        except AuthError as e:
            return responses.status_unauthorized(e)

        try:
            companies = self.controller.list(account_id)
        except CompanyServiceError as e:
            return responses.status_bad_request(e)

        return responses.status_ok(companies)

    def delete(self, request, company_id):
        try:
            company_id = parse_identifier(company_id, ERROR_INVALID_COMPANY_ID)
        except IdentifierError as e:
            return responses.status_bad_request(e)

        try:
            self.controller.delete(company_id)
        except CompanyServiceError as e:
            return self.internal_server_error(e)

        return responses.status_no_content()

    def update_account_company(self, request, company_id, account_id):
        try:
            account_company = self.decoder.decode(request.body, EntityKind.ACCOUNT_COMPANY)
            account_company = account_company.with_ids(
                parse_identifier(company_id, ERROR_INVALID_COMPANY_ID),
                parse_identifier(account_id, ERROR_INVALID_ACCOUNT_ID),
            )
        except (DecodeError, IdentifierError) as e:
            return responses.status_bad_request(e)

        try:
            self.controller.update_account_company(account_company)
        except CompanyServiceError as e:
            return responses.status_bad_request(e)

        return responses.status_ok(ROLE_UPDATED)

    def invite_user(self, request, company_id):
        try:
            invite_user = self.decoder.decode(request.body, EntityKind.INVITE_USER)
            invite_user = invite_user.with_company_id(
                parse_identifier(company_id, ERROR_INVALID_COMPANY_ID)
            )
        except (DecodeError, IdentifierError) as e:
            return responses.status_bad_request(e)

        try:
            self.controller.invite_user(invite_user)
        except CompanyServiceError as e:
            return self.check_default_errors(e)

        return responses.status_no_content()

    def get_accounts(self, request, company_id):
        try:
            company_id = parse_identifier(company_id, ERROR_INVALID_COMPANY_ID)
        except IdentifierError as e:
            return responses.status_bad_request(e)

        try:
            accounts = self.controller.get_accounts(company_id)
        except CompanyServiceError as e:
            return self.internal_server_error(e)

        return responses.status_ok(accounts)

    def remove_user(self, request, company_id, account_id):
        try:
            remove_user = RemoveUser(
                account_id=parse_identifier(account_id, ERROR_INVALID_ACCOUNT_ID),
                company_id=parse_identifier(company_id, ERROR_INVALID_COMPANY_ID),
            )
        except IdentifierError as e:
            return responses.status_bad_request(e)

        try:
            self.controller.remove_user(remove_user)
        except CompanyServiceError as e:
            return self.check_default_errors(e)

        return responses.status_no_content()

    def resolve_optional_account_id(self, request):
        try:
            return self.identity_resolver.resolve_account_id(get_authorization(request))
        except AuthError:
            return None

    def check_default_errors(self, err):
        """Map a membership mutation error to 404, 409 or 500."""
        if err.kind is ErrorKind.NOT_FOUND:
            return responses.status_not_found(err)

        if err.kind is ErrorKind.CONFLICT:
            return responses.status_conflict(ERROR_USER_ALREADY_IN_THIS_COMPANY)

        return self.internal_server_error(err)

    def internal_server_error(self, err):
        logger.error(f"Company operation failed: {err}", exc_info=err)
        return responses.status_internal_server_error(err)


@lru_cache(maxsize=None)
def get_default_handler():
    """Build the process-wide handler wired to the default collaborators."""
    return CompanyRequestHandler(
        controller=DatabaseCompanyController(),
        identity_resolver=JWTIdentityResolver(),
        decoder=SerializerPayloadDecoder(),
    )
