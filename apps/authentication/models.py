"""
Account models for the company service.

This module defines the Account model, the identity that bearer tokens
resolve to and that companies grant roles to.
"""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.core.validators import EmailValidator
from django.utils import timezone


class Account(AbstractUser):
    """
    Custom user model extending Django's AbstractUser.

    Attributes:
        account_id: UUID primary key, carried in JWT access tokens
        email: Unique email address (primary identifier, used for invites)
        created_at: Timestamp of account creation
        updated_at: Timestamp of last update
    """

    account_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Override email to make it unique and required
    email = models.EmailField(
        unique=True,
        validators=[EmailValidator()],
        error_messages={
            'unique': "An account with that email already exists.",
        }
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Use email as the primary authentication field
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']  # Username is required by AbstractUser

    class Meta:
        db_table = 'accounts'
        verbose_name = 'account'
        verbose_name_plural = 'accounts'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.email} ({self.username})"
