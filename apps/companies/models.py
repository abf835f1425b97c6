"""
Company management models.

This module defines companies and the account-company relationships that
grant each member a role. Implements multi-tenant membership.
"""

import uuid

from django.db import models
from django.utils import timezone
from django.conf import settings


class Company(models.Model):
    """
    Company model representing a tenant organization.

    Attributes:
        company_id: UUID primary key
        name: Company name
        description: Free-form description
        created_at: Registration timestamp
        updated_at: Last modification timestamp
    """

    company_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default='')

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Many-to-many relationship with accounts
    accounts = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through='AccountCompany',
        related_name='companies'
    )

    class Meta:
        db_table = 'companies'
        verbose_name_plural = 'companies'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.company_id})"


class AccountCompany(models.Model):
    """
    Account-Company relationship carrying the account's role.

    Attributes:
        account: Associated account
        company: Associated company
        role: Account's role in the company
        created_at: Relationship creation timestamp
        updated_at: Last role change timestamp
    """

    ROLE_ADMIN = 'admin'
    ROLE_SUPERVISOR = 'supervisor'
    ROLE_MEMBER = 'member'

    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_SUPERVISOR, 'Supervisor'),
        (ROLE_MEMBER, 'Member'),
    ]

    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='account_companies'
    )
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='company_accounts'
    )
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_MEMBER,
        db_index=True
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'account_company'
        verbose_name_plural = 'account companies'
        unique_together = ['account', 'company']
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.account.email} - {self.company.name} ({self.role})"
