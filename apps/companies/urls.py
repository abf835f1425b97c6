"""
Companies URLs.

API endpoints for company management and account-company roles.
Identifiers are matched as plain strings so malformed ids reach the
handler and are rejected with 400.
"""
from django.urls import path
from .views import (
    CompanyListCreateView,
    CompanyDetailView,
    CompanyRolesView,
    AccountCompanyRoleView,
)

app_name = 'companies'

urlpatterns = [
    # Company CRUD
    path('companies', CompanyListCreateView.as_view(), name='company-list-create'),
    path('companies/<str:company_id>', CompanyDetailView.as_view(), name='company-detail'),

    # Company roles management
    path('companies/<str:company_id>/roles', CompanyRolesView.as_view(), name='company-roles'),
    path(
        'companies/<str:company_id>/roles/<str:account_id>',
        AccountCompanyRoleView.as_view(),
        name='account-company-role'
    ),
]
