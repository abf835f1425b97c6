"""
Django admin configuration for accounts.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from .models import Account


class AccountCreationForm(UserCreationForm):

    class Meta(UserCreationForm.Meta):
        model = Account
        fields = ('email', 'username')


class AccountChangeForm(UserChangeForm):

    class Meta(UserChangeForm.Meta):
        model = Account
        fields = '__all__'


@admin.register(Account)
class AccountAdmin(BaseUserAdmin):
    """Admin interface for Account model, keyed by email."""

    form = AccountChangeForm
    add_form = AccountCreationForm

    list_display = ['email', 'username', 'account_id', 'is_staff', 'created_at']
    list_filter = ['is_staff', 'is_superuser', 'is_active']
    search_fields = ['email', 'username', 'account_id']
    ordering = ['-created_at']

    fieldsets = (
        (None, {'fields': ('account_id', 'email', 'username', 'password')}),
        ('Profile', {'fields': ('first_name', 'last_name')}),
        ('Access', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['account_id', 'created_at', 'updated_at', 'last_login']
