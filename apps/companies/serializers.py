"""
Company management serializers.

This module provides DRF serializers that validate incoming company,
role and invite payloads, and that render companies and their members.
"""

from rest_framework import serializers
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field

from .models import Company, AccountCompany


class CompanyPayloadSerializer(serializers.Serializer):
    """
    Serializer for company create/update bodies.

    Includes:
    - Name trimming and minimum length
    - Optional description
    """

    name = serializers.CharField(max_length=255, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_name(self, value):
        """Validate company name."""
        if not value or not value.strip():
            raise serializers.ValidationError("Company name cannot be empty")

        if len(value.strip()) < 2:
            raise serializers.ValidationError("Company name must be at least 2 characters long")

        return value.strip()


class AccountCompanyRoleSerializer(serializers.Serializer):
    """Serializer for role update bodies."""

    role = serializers.CharField()

    def validate_role(self, value):
        """Validate role choice."""
        valid_roles = [choice[0] for choice in AccountCompany.ROLE_CHOICES]
        if value not in valid_roles:
            raise serializers.ValidationError(
                f"Invalid role. Must be one of: {', '.join(valid_roles)}"
            )
        return value


class InviteUserSerializer(AccountCompanyRoleSerializer):
    """Serializer for invite bodies: the invited account's email and role."""

    email = serializers.EmailField()

    def validate_email(self, value):
        return value.lower()


class CompanySerializer(serializers.ModelSerializer):
    """
    Serializer for Company model with the caller's role.

    The role is passed through the serializer context, since it belongs to
    the membership rather than the company.
    """

    role = serializers.SerializerMethodField()

    class Meta:
        model = Company
        fields = [
            'company_id',
            'name',
            'description',
            'role',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    @extend_schema_field(OpenApiTypes.STR)
    def get_role(self, obj):
        """Get the caller's role for this company, if any."""
        return self.context.get('role')


class CompanyAccountSerializer(serializers.ModelSerializer):
    """Serializer for the accounts that belong to a company."""

    account_id = serializers.UUIDField(source='account.account_id', read_only=True)
    email = serializers.EmailField(source='account.email', read_only=True)
    username = serializers.CharField(source='account.username', read_only=True)

    class Meta:
        model = AccountCompany
        fields = [
            'account_id',
            'email',
            'username',
            'role',
        ]
        read_only_fields = fields
