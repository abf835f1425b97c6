"""
Tests for the Account model.

Tests cover:
1. valid - Happy path scenarios
2. error - Error handling
3. invalid - Input validation
4. edge - Boundary conditions
5. functional - Token identity
6. security - Password storage
"""

import uuid

from django.test import TestCase
from django.core.exceptions import ValidationError
from django.db.utils import IntegrityError
from rest_framework_simplejwt.tokens import RefreshToken
from .models import Account


class AccountModelTests(TestCase):
    """Tests for Account model."""

    def setUp(self):
        """Set up test data."""
        self.account_data = {
            'email': 'test@example.com',
            'username': 'testuser',
            'password': 'TestPass123!',
        }

    # TEST TYPE 1: VALID (Happy Path)
    def test_valid_account_creation(self):
        """Test creating an account with valid data."""
        account = Account.objects.create_user(**self.account_data)
        self.assertEqual(account.email, 'test@example.com')
        self.assertTrue(account.check_password('TestPass123!'))
        self.assertIsInstance(account.account_id, uuid.UUID)
        self.assertEqual(account.pk, account.account_id)

    def test_valid_account_string_representation(self):
        """Test account __str__ method."""
        account = Account.objects.create_user(**self.account_data)
        self.assertEqual(str(account), 'test@example.com (testuser)')

    def test_valid_superuser_creation(self):
        account = Account.objects.create_superuser(**self.account_data)
        self.assertTrue(account.is_staff)
        self.assertTrue(account.is_superuser)

    # TEST TYPE 2: ERROR (Error Handling)
    def test_error_duplicate_email(self):
        """Test error handling for duplicate email."""
        Account.objects.create_user(**self.account_data)
        with self.assertRaises(IntegrityError):
            Account.objects.create_user(
                email='test@example.com',
                username='other',
                password='TestPass123!'
            )

    # TEST TYPE 3: INVALID (Input Validation)
    def test_invalid_email_format(self):
        """Test validation rejects invalid email formats."""
        account = Account(email='invalid-email', username='testuser2')
        account.set_unusable_password()
        with self.assertRaises(ValidationError) as ctx:
            account.full_clean()
        self.assertIn('email', ctx.exception.message_dict)

    def test_invalid_empty_email(self):
        """Test validation rejects empty email."""
        account = Account(email='', username='testuser3')
        account.set_unusable_password()
        with self.assertRaises(ValidationError):
            account.full_clean()

    # TEST TYPE 4: EDGE (Edge Cases)
    def test_edge_email_is_username_field(self):
        self.assertEqual(Account.USERNAME_FIELD, 'email')
        self.assertIn('username', Account.REQUIRED_FIELDS)

    def test_edge_newest_account_first(self):
        first = Account.objects.create_user(email='a@example.com', username='a', password='x')
        second = Account.objects.create_user(email='b@example.com', username='b', password='x')
        second.created_at = first.created_at.replace(year=first.created_at.year + 1)
        second.save(update_fields=['created_at'])
        self.assertEqual(list(Account.objects.all()), [second, first])

    # TEST TYPE 5: FUNCTIONAL (Token identity)
    def test_functional_token_carries_account_id(self):
        """Test issued access tokens identify the account by its UUID."""
        account = Account.objects.create_user(**self.account_data)
        access = RefreshToken.for_user(account).access_token
        self.assertEqual(access['account_id'], str(account.account_id))

    # TEST TYPE 6: SECURITY (Password storage)
    def test_security_password_hashed_with_argon2(self):
        """Test passwords are never stored in plain text."""
        account = Account.objects.create_user(**self.account_data)
        self.assertNotEqual(account.password, 'TestPass123!')
        self.assertTrue(account.password.startswith('argon2'))
