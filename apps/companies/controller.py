"""
Company business operations.

CompanyController is the interface the request handler delegates to.
DatabaseCompanyController implements it on the Django ORM and returns
serialized data ready to be written to a response.

Errors are always raised as CompanyServiceError subclasses so the handler
can map them by kind.
"""

import logging
from abc import ABC, abstractmethod
from functools import wraps

from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from .errors import CompanyServiceError, ConflictError, NotFoundError
from .models import AccountCompany, Company
from .serializers import CompanyAccountSerializer, CompanySerializer

logger = logging.getLogger(__name__)

Account = get_user_model()


class CompanyController(ABC):
    """Business operations on companies and their memberships."""

    @abstractmethod
    def create(self, account_id, company):
        """Create a company owned by `account_id` and return it."""

    @abstractmethod
    def update(self, company_id, company):
        """Update a company's attributes and return it."""

    @abstractmethod
    def get(self, company_id, account_id):
        """Return a company; `account_id` is None for anonymous callers."""

    @abstractmethod
    def list(self, account_id):
        """Return every company `account_id` belongs to."""

    @abstractmethod
    def delete(self, company_id):
        """Delete a company and its memberships."""

    @abstractmethod
    def update_account_company(self, account_company):
        """Change the role of an existing membership."""

    @abstractmethod
    def invite_user(self, invite_user):
        """Grant the account owning `invite_user.email` a role in a company."""

    @abstractmethod
    def get_accounts(self, company_id):
        """Return every account in a company with its role."""

    @abstractmethod
    def remove_user(self, remove_user):
        """Remove an account from a company."""


def wrap_database_errors(method):
    """Re-raise unexpected database failures as unclassified service errors."""

    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as e:
            raise CompanyServiceError(f"database error: {e}") from e

    return wrapper


class DatabaseCompanyController(CompanyController):

    @wrap_database_errors
    def create(self, account_id, company):
        """
        Create company and associate the creator as admin.

        Raises:
            NotFoundError: If the creating account does not exist
        """
        if not Account.objects.filter(account_id=account_id).exists():
            raise NotFoundError()

        with transaction.atomic():
            new_company = Company.objects.create(
                name=company.name,
                description=company.description
            )
            AccountCompany.objects.create(
                account_id=account_id,
                company=new_company,
                role=AccountCompany.ROLE_ADMIN
            )

        logger.info(f"Company created: company_id={new_company.company_id}, account_id={account_id}")
        return CompanySerializer(new_company, context={'role': AccountCompany.ROLE_ADMIN}).data

    @wrap_database_errors
    def update(self, company_id, company):
        existing = self.get_company(company_id)
        existing.name = company.name
        existing.description = company.description
        existing.save(update_fields=['name', 'description', 'updated_at'])
        return CompanySerializer(existing).data

    @wrap_database_errors
    def get(self, company_id, account_id):
        company = self.get_company(company_id)

        role = None
        if account_id is not None:
            role = AccountCompany.objects.filter(
                company=company,
                account_id=account_id
            ).values_list('role', flat=True).first()

        return CompanySerializer(company, context={'role': role}).data

    @wrap_database_errors
    def list(self, account_id):
        memberships = AccountCompany.objects.filter(
            account_id=account_id
        ).select_related('company').order_by('-company__created_at')

        return [
            CompanySerializer(membership.company, context={'role': membership.role}).data
            for membership in memberships
        ]

    @wrap_database_errors
    def delete(self, company_id):
        deleted, _ = Company.objects.filter(company_id=company_id).delete()
        if deleted:
            logger.info(f"Company deleted: company_id={company_id}")

    @wrap_database_errors
    def update_account_company(self, account_company):
        updated = AccountCompany.objects.filter(
            company_id=account_company.company_id,
            account_id=account_company.account_id
        ).update(role=account_company.role, updated_at=timezone.now())

        if not updated:
            raise NotFoundError()

    @wrap_database_errors
    def invite_user(self, invite_user):
        """
        Add an existing account to a company with the requested role.

        Raises:
            NotFoundError: If the company or the invited email is unknown
            ConflictError: If the account is already in the company
        """
        company = self.get_company(invite_user.company_id)

        account = self.get_account_by_email(invite_user.email)

        if AccountCompany.objects.filter(company=company, account=account).exists():
            raise ConflictError(
                f"account {account.account_id} already exists in company {company.company_id}"
            )

        try:
            with transaction.atomic():
                AccountCompany.objects.create(
                    account=account,
                    company=company,
                    role=invite_user.role
                )
        except IntegrityError as e:
            raise ConflictError(str(e)) from e

        logger.info(
            f"Account invited: company_id={company.company_id}, "
            f"account_id={account.account_id}, role={invite_user.role}"
        )

    @wrap_database_errors
    def get_accounts(self, company_id):
        memberships = AccountCompany.objects.filter(
            company_id=company_id
        ).select_related('account').order_by('account__email')

        return CompanyAccountSerializer(memberships, many=True).data

    @wrap_database_errors
    def remove_user(self, remove_user):
        deleted, _ = AccountCompany.objects.filter(
            company_id=remove_user.company_id,
            account_id=remove_user.account_id
        ).delete()

        if not deleted:
            raise NotFoundError()

        logger.info(
            f"Account removed: company_id={remove_user.company_id}, "
            f"account_id={remove_user.account_id}"
        )

    @staticmethod
    def get_company(company_id):
        try:
            return Company.objects.get(company_id=company_id)
        except Company.DoesNotExist:
            raise NotFoundError()

    @staticmethod
    def get_account_by_email(email):
        """
        Find an account by email, ignoring case.

        Stored addresses keep the case they were registered with, so an
        exact match wins when several accounts differ only by case.
        """
        accounts = list(Account.objects.filter(email__iexact=email))
        if not accounts:
            raise NotFoundError()

        for account in accounts:
            if account.email == email:
                return account
        return accounts[0]
