"""
Request body decoding.

PayloadDecoder turns a raw request body into one of the request-scoped
entities. SerializerPayloadDecoder is the default implementation: JSON
parsing followed by validation with the matching DRF serializer.
"""

import json
from abc import ABC, abstractmethod

from .entities import (
    AccountCompanyRole,
    CompanyPayload,
    EntityKind,
    InviteUser,
)
from .errors import DecodeError
from .serializers import (
    AccountCompanyRoleSerializer,
    CompanyPayloadSerializer,
    InviteUserSerializer,
)


class PayloadDecoder(ABC):
    """Decodes a request body into a typed entity."""

    @abstractmethod
    def decode(self, body, kind):
        """
        Decode `body` into the entity registered for `kind`.

        Raises:
            DecodeError: If the body is malformed or invalid
        """


class SerializerPayloadDecoder(PayloadDecoder):

    serializers = {
        EntityKind.COMPANY: (CompanyPayloadSerializer, CompanyPayload),
        EntityKind.ACCOUNT_COMPANY: (AccountCompanyRoleSerializer, AccountCompanyRole),
        EntityKind.INVITE_USER: (InviteUserSerializer, InviteUser),
    }

    def decode(self, body, kind):
        serializer_class, entity_class = self.serializers[kind]

        serializer = serializer_class(data=self.parse_json(body))
        if not serializer.is_valid():
            raise DecodeError('invalid request body', details=serializer.errors)

        return entity_class(**serializer.validated_data)

    def parse_json(self, body):
        """Parse a JSON object out of raw body bytes."""
        if not body:
            raise DecodeError('request body is empty')

        if isinstance(body, bytes):
            try:
                body = body.decode('utf-8')
            except UnicodeDecodeError as e:
                raise DecodeError('request body is not valid utf-8') from e

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f'request body is not valid JSON: {e.msg}') from e

        if not isinstance(data, dict):
            raise DecodeError('request body must be a JSON object')

        return data
