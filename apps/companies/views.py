"""
Company management API views.

This module routes each HTTP method to the matching CompanyRequestHandler
operation. Views carry no authentication of their own: whether a caller
identity is required differs per operation, so the handler resolves it.
"""

from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .handlers import get_default_handler
from .serializers import (
    AccountCompanyRoleSerializer,
    CompanyAccountSerializer,
    CompanyPayloadSerializer,
    CompanySerializer,
    InviteUserSerializer,
)


COMPANY_ID_PARAMETER = OpenApiParameter(
    name='company_id',
    type=OpenApiTypes.UUID,
    location=OpenApiParameter.PATH,
    description='companyID of the company'
)

ACCOUNT_ID_PARAMETER = OpenApiParameter(
    name='account_id',
    type=OpenApiTypes.UUID,
    location=OpenApiParameter.PATH,
    description='accountID of the account'
)


class CompanyHandlerView(APIView):
    """Base view dispatching to a CompanyRequestHandler."""

    authentication_classes = []
    permission_classes = [AllowAny]

    # Injected through as_view(request_handler=...) in tests
    request_handler = None

    def get_handler(self):
        return self.request_handler or get_default_handler()


class CompanyListCreateView(CompanyHandlerView):
    """
    List companies for the caller or create a new company.

    GET: Returns all companies where the caller is a member
    POST: Creates a new company and assigns the caller as admin
    """

    @extend_schema(
        summary="List companies",
        description="Returns all companies where the authenticated account is a member",
        responses={
            200: CompanySerializer(many=True),
            400: OpenApiResponse(description="Bad request"),
            401: OpenApiResponse(description="Unauthorized"),
        }
    )
    def get(self, request):
        return self.get_handler().list(request)

    @extend_schema(
        summary="Create company",
        description="Creates a new company and assigns the current account as admin",
        request=CompanyPayloadSerializer,
        responses={
            201: CompanySerializer,
            400: OpenApiResponse(description="Bad request"),
            401: OpenApiResponse(description="Unauthorized"),
            500: OpenApiResponse(description="Internal server error"),
        }
    )
    def post(self, request):
        return self.get_handler().create(request)


class CompanyDetailView(CompanyHandlerView):
    """
    Retrieve, update, or delete a company.

    GET: Retrieve company details (anonymous callers allowed)
    PATCH: Update company
    DELETE: Delete company and its memberships
    """

    @extend_schema(
        summary="Get company",
        parameters=[COMPANY_ID_PARAMETER],
        responses={
            200: CompanySerializer,
            400: OpenApiResponse(description="Bad request"),
        }
    )
    def get(self, request, company_id):
        return self.get_handler().get(request, company_id)

    @extend_schema(
        summary="Update company",
        parameters=[COMPANY_ID_PARAMETER],
        request=CompanyPayloadSerializer,
        responses={
            200: CompanySerializer,
            400: OpenApiResponse(description="Bad request"),
        }
    )
    def patch(self, request, company_id):
        return self.get_handler().update(request, company_id)

    @extend_schema(
        summary="Delete company",
        parameters=[COMPANY_ID_PARAMETER],
        responses={
            204: OpenApiResponse(description="Company deleted"),
            400: OpenApiResponse(description="Invalid company id"),
            500: OpenApiResponse(description="Internal server error"),
        }
    )
    def delete(self, request, company_id):
        return self.get_handler().delete(request, company_id)


class CompanyRolesView(CompanyHandlerView):
    """
    Manage the accounts of a company.

    GET: List all accounts in the company with their roles
    POST: Invite an existing account into the company
    """

    @extend_schema(
        summary="List company accounts",
        parameters=[COMPANY_ID_PARAMETER],
        responses={
            200: CompanyAccountSerializer(many=True),
            400: OpenApiResponse(description="Invalid company id"),
            500: OpenApiResponse(description="Internal server error"),
        }
    )
    def get(self, request, company_id):
        return self.get_handler().get_accounts(request, company_id)

    @extend_schema(
        summary="Invite user to company",
        parameters=[COMPANY_ID_PARAMETER],
        request=InviteUserSerializer,
        responses={
            204: OpenApiResponse(description="User invited"),
            400: OpenApiResponse(description="Bad request"),
            404: OpenApiResponse(description="Company or account not found"),
            409: OpenApiResponse(description="User already in this company"),
            500: OpenApiResponse(description="Internal server error"),
        }
    )
    def post(self, request, company_id):
        return self.get_handler().invite_user(request, company_id)


class AccountCompanyRoleView(CompanyHandlerView):
    """
    Manage a single account's membership.

    PATCH: Update the account's role
    DELETE: Remove the account from the company
    """

    @extend_schema(
        summary="Update account role",
        parameters=[COMPANY_ID_PARAMETER, ACCOUNT_ID_PARAMETER],
        request=AccountCompanyRoleSerializer,
        responses={
            200: OpenApiResponse(description="Role updated"),
            400: OpenApiResponse(description="Bad request"),
        }
    )
    def patch(self, request, company_id, account_id):
        return self.get_handler().update_account_company(request, company_id, account_id)

    @extend_schema(
        summary="Remove user from company",
        parameters=[COMPANY_ID_PARAMETER, ACCOUNT_ID_PARAMETER],
        responses={
            204: OpenApiResponse(description="User removed"),
            400: OpenApiResponse(description="Invalid company or account id"),
            404: OpenApiResponse(description="Membership not found"),
            409: OpenApiResponse(description="Conflict"),
            500: OpenApiResponse(description="Internal server error"),
        }
    )
    def delete(self, request, company_id, account_id):
        return self.get_handler().remove_user(request, company_id, account_id)
