"""
Django admin configuration for company models.
"""

from django.contrib import admin
from .models import Company, AccountCompany


class AccountCompanyInline(admin.TabularInline):
    model = AccountCompany
    extra = 0
    raw_id_fields = ['account']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    """Admin interface for Company model."""

    list_display = ['name', 'company_id', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['company_id', 'created_at', 'updated_at']
    ordering = ['-created_at']
    inlines = [AccountCompanyInline]

    fieldsets = (
        ('Company Information', {
            'fields': ('company_id', 'name', 'description')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(AccountCompany)
class AccountCompanyAdmin(admin.ModelAdmin):
    """Admin interface for AccountCompany relationship model."""

    list_display = ['account', 'company', 'role', 'created_at']
    list_filter = ['role', 'created_at']
    search_fields = ['account__email', 'company__name']
    raw_id_fields = ['account', 'company']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    fieldsets = (
        ('Relationship', {
            'fields': ('account', 'company', 'role')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
