"""
Tests for the default identity resolver and payload decoder.
"""

import uuid
from datetime import timedelta

from django.test import SimpleTestCase
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from .decoders import SerializerPayloadDecoder
from .entities import AccountCompanyRole, CompanyPayload, EntityKind, InviteUser
from .errors import AuthError, DecodeError, ErrorKind
from .identity import JWTIdentityResolver


class JWTIdentityResolverTests(SimpleTestCase):

    def setUp(self):
        self.resolver = JWTIdentityResolver()
        self.account_id = uuid.uuid4()

    def access_token(self, **claims):
        token = AccessToken()
        for key, value in claims.items():
            token[key] = value
        return str(token)

    def test_valid_bearer_token(self):
        token = self.access_token(account_id=str(self.account_id))

        self.assertEqual(self.resolver.resolve_account_id(f'Bearer {token}'), self.account_id)

    def test_valid_token_without_prefix(self):
        token = self.access_token(account_id=str(self.account_id))

        self.assertEqual(self.resolver.resolve_account_id(token), self.account_id)

    def test_error_missing_token(self):
        for header in ['', None, 'Bearer ', '   ']:
            with self.subTest(header=header):
                with self.assertRaises(AuthError) as ctx:
                    self.resolver.resolve_account_id(header)
                self.assertEqual(ctx.exception.kind, ErrorKind.AUTH)

    def test_error_garbage_token(self):
        with self.assertLogs('apps.companies.identity', level='WARNING'):
            with self.assertRaises(AuthError):
                self.resolver.resolve_account_id('Bearer invalid_token_here')

    def test_error_expired_token(self):
        token = AccessToken()
        token['account_id'] = str(self.account_id)
        token.set_exp(lifetime=-timedelta(minutes=5))

        with self.assertLogs('apps.companies.identity', level='WARNING'):
            with self.assertRaises(AuthError):
                self.resolver.resolve_account_id(f'Bearer {token}')

    def test_error_refresh_token_rejected(self):
        refresh = RefreshToken()
        refresh['account_id'] = str(self.account_id)

        with self.assertLogs('apps.companies.identity', level='WARNING'):
            with self.assertRaises(AuthError):
                self.resolver.resolve_account_id(f'Bearer {refresh}')

    def test_edge_missing_account_claim(self):
        with self.assertRaises(AuthError):
            self.resolver.resolve_account_id(f'Bearer {self.access_token()}')

    def test_edge_non_uuid_account_claim(self):
        token = self.access_token(account_id='42')

        with self.assertRaises(AuthError):
            self.resolver.resolve_account_id(f'Bearer {token}')


class SerializerPayloadDecoderTests(SimpleTestCase):

    def setUp(self):
        self.decoder = SerializerPayloadDecoder()

    def test_valid_company(self):
        entity = self.decoder.decode(b'{"name": "  Acme  ", "description": "Tools"}', EntityKind.COMPANY)

        self.assertEqual(entity, CompanyPayload(name='Acme', description='Tools'))

    def test_valid_company_without_description(self):
        entity = self.decoder.decode('{"name": "Acme"}', EntityKind.COMPANY)

        self.assertEqual(entity, CompanyPayload(name='Acme', description=''))

    def test_valid_role_ignores_body_ids(self):
        body = b'{"role": "supervisor", "company_id": "x", "account_id": "y"}'

        entity = self.decoder.decode(body, EntityKind.ACCOUNT_COMPANY)

        self.assertEqual(entity, AccountCompanyRole(role='supervisor'))
        self.assertIsNone(entity.company_id)
        self.assertIsNone(entity.account_id)

    def test_valid_invite_lowercases_email(self):
        entity = self.decoder.decode(b'{"email": "Ana@Example.COM", "role": "member"}', EntityKind.INVITE_USER)

        self.assertEqual(entity, InviteUser(email='ana@example.com', role='member'))

    def test_invalid_bodies(self):
        bodies = [
            b'',
            b'not json',
            b'[{"name": "Acme"}]',
            b'"Acme"',
            b'\xff\xfe',
            b'{"name": "A"}',
            b'{"name": ""}',
            b'{"name": "' + b'x' * 256 + b'"}',
        ]

        for body in bodies:
            with self.subTest(body=body[:20]):
                with self.assertRaises(DecodeError) as ctx:
                    self.decoder.decode(body, EntityKind.COMPANY)
                self.assertEqual(ctx.exception.kind, ErrorKind.DECODE)

    def test_invalid_role_choice(self):
        with self.assertRaises(DecodeError) as ctx:
            self.decoder.decode(b'{"role": "owner"}', EntityKind.ACCOUNT_COMPANY)

        self.assertIn('role', ctx.exception.details)

    def test_invalid_invite_missing_email(self):
        with self.assertRaises(DecodeError) as ctx:
            self.decoder.decode(b'{"role": "member"}', EntityKind.INVITE_USER)

        self.assertIn('email', ctx.exception.details)
