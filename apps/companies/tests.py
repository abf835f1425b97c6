"""
Tests for company models.

Tests cover:
1. valid - Happy path scenarios
2. error - Error handling
3. invalid - Input validation
4. edge - Boundary conditions
5. functional - Business logic
6. security - Data isolation between companies
"""

import uuid
from datetime import timedelta

from django.test import TestCase
from django.core.exceptions import ValidationError
from django.db.utils import IntegrityError
from apps.authentication.models import Account
from .models import Company, AccountCompany


class CompanyModelTests(TestCase):
    """Tests for Company model."""

    def setUp(self):
        """Set up test data."""
        self.company_data = {
            'name': 'Test Company',
            'description': 'Vulnerability management',
        }

    # TEST TYPE 1: VALID (Happy Path)
    def test_valid_company_creation(self):
        """Test creating a company with valid data."""
        company = Company.objects.create(**self.company_data)
        self.assertEqual(company.name, 'Test Company')
        self.assertEqual(company.description, 'Vulnerability management')
        self.assertIsInstance(company.company_id, uuid.UUID)

    def test_valid_company_string_representation(self):
        """Test company __str__ method."""
        company = Company.objects.create(**self.company_data)
        expected = f"{company.name} ({company.company_id})"
        self.assertEqual(str(company), expected)

    def test_valid_timestamps_set(self):
        company = Company.objects.create(**self.company_data)
        self.assertIsNotNone(company.created_at)
        self.assertIsNotNone(company.updated_at)

    # TEST TYPE 2: ERROR (Error Handling)
    def test_error_duplicate_primary_key(self):
        """Test that company ids cannot collide."""
        company = Company.objects.create(**self.company_data)
        with self.assertRaises(IntegrityError):
            Company.objects.create(company_id=company.company_id, name='Clone')

    # TEST TYPE 3: INVALID (Input Validation)
    def test_invalid_name_too_long(self):
        """Test full_clean rejects names over 255 characters."""
        company = Company(name='x' * 256)
        with self.assertRaises(ValidationError) as ctx:
            company.full_clean()
        self.assertIn('name', ctx.exception.message_dict)

    def test_invalid_blank_name(self):
        company = Company(name='')
        with self.assertRaises(ValidationError):
            company.full_clean()

    # TEST TYPE 4: EDGE (Edge Cases)
    def test_edge_description_defaults_to_empty(self):
        """Test company without a description."""
        company = Company.objects.create(name='Bare')
        self.assertEqual(company.description, '')

    def test_edge_distinct_companies_share_name(self):
        """Test that company names are not unique."""
        first = Company.objects.create(name='Acme')
        second = Company.objects.create(name='Acme')
        self.assertNotEqual(first.company_id, second.company_id)

    def test_edge_newest_company_first(self):
        older = Company.objects.create(name='Older')
        newer = Company.objects.create(name='Newer', created_at=older.created_at + timedelta(seconds=1))
        self.assertEqual(list(Company.objects.all()), [newer, older])


class AccountCompanyModelTests(TestCase):
    """Tests for AccountCompany relationship model."""

    def setUp(self):
        """Set up test data."""
        self.account = Account.objects.create_user(
            email='test@example.com',
            username='testuser',
            password='testpass123'
        )
        self.company = Company.objects.create(name='Test Company')

    # TEST TYPE 1: VALID (Happy Path)
    def test_valid_account_company_creation(self):
        """Test creating account-company relationship."""
        account_company = AccountCompany.objects.create(
            account=self.account,
            company=self.company,
            role='admin'
        )
        self.assertEqual(account_company.account, self.account)
        self.assertEqual(account_company.company, self.company)
        self.assertEqual(account_company.role, 'admin')

    def test_valid_string_representation(self):
        account_company = AccountCompany.objects.create(
            account=self.account,
            company=self.company,
            role='supervisor'
        )
        self.assertEqual(str(account_company), 'test@example.com - Test Company (supervisor)')

    def test_valid_all_roles(self):
        """Test every role can be stored."""
        for i, (role, _label) in enumerate(AccountCompany.ROLE_CHOICES):
            account = Account.objects.create_user(
                email=f'role{i}@example.com',
                username=f'role{i}',
                password='testpass123'
            )
            account_company = AccountCompany.objects.create(account=account, company=self.company, role=role)
            self.assertEqual(account_company.role, role)

    # TEST TYPE 2: ERROR (Error Handling)
    def test_error_duplicate_membership(self):
        """Test that an account cannot join the same company twice."""
        AccountCompany.objects.create(account=self.account, company=self.company, role='admin')
        with self.assertRaises(IntegrityError):
            AccountCompany.objects.create(account=self.account, company=self.company, role='member')

    # TEST TYPE 3: INVALID (Input Validation)
    def test_invalid_role_rejected_by_full_clean(self):
        account_company = AccountCompany(account=self.account, company=self.company, role='owner')
        with self.assertRaises(ValidationError) as ctx:
            account_company.full_clean()
        self.assertIn('role', ctx.exception.message_dict)

    # TEST TYPE 4: EDGE (Edge Cases)
    def test_edge_default_role_is_member(self):
        """Test default role assignment."""
        account_company = AccountCompany.objects.create(account=self.account, company=self.company)
        self.assertEqual(account_company.role, AccountCompany.ROLE_MEMBER)

    # TEST TYPE 5: FUNCTIONAL (Business Logic)
    def test_functional_many_to_many_accessors(self):
        """Test the through model links both sides."""
        AccountCompany.objects.create(account=self.account, company=self.company)
        self.assertEqual(list(self.company.accounts.all()), [self.account])
        self.assertEqual(list(self.account.companies.all()), [self.company])

    def test_functional_company_delete_cascades(self):
        """Test deleting a company removes memberships but keeps accounts."""
        AccountCompany.objects.create(account=self.account, company=self.company)
        self.company.delete()
        self.assertFalse(AccountCompany.objects.exists())
        self.assertTrue(Account.objects.filter(pk=self.account.pk).exists())

    def test_functional_account_delete_cascades(self):
        AccountCompany.objects.create(account=self.account, company=self.company)
        self.account.delete()
        self.assertFalse(AccountCompany.objects.exists())
        self.assertTrue(Company.objects.filter(pk=self.company.pk).exists())

    # TEST TYPE 6: SECURITY (Data Isolation)
    def test_security_memberships_scoped_per_company(self):
        """Test an account only sees companies it belongs to."""
        other = Company.objects.create(name='Other Company')
        AccountCompany.objects.create(account=self.account, company=self.company)
        self.assertNotIn(other, self.account.companies.all())
