"""
Request-scoped entities built by the payload decoder and the handler.

These are constructed fresh for each request and never persisted directly.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class EntityKind(str, Enum):
    COMPANY = 'company'
    ACCOUNT_COMPANY = 'account_company'
    INVITE_USER = 'invite_user'


@dataclass(frozen=True)
class CompanyPayload:
    name: str
    description: str = ''


@dataclass(frozen=True)
class AccountCompanyRole:
    """Membership grant; the ids come from the URL path, never the body."""

    role: str
    company_id: Optional[uuid.UUID] = None
    account_id: Optional[uuid.UUID] = None

    def with_ids(self, company_id: uuid.UUID, account_id: uuid.UUID) -> AccountCompanyRole:
        return replace(self, company_id=company_id, account_id=account_id)


@dataclass(frozen=True)
class InviteUser:
    email: str
    role: str
    company_id: Optional[uuid.UUID] = None

    def with_company_id(self, company_id: uuid.UUID) -> InviteUser:
        return replace(self, company_id=company_id)


@dataclass(frozen=True)
class RemoveUser:
    account_id: uuid.UUID
    company_id: uuid.UUID
