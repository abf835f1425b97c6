"""
Test Suite for Project Structure
Tests settings, wiring and documentation endpoints of the company service.
"""
import os
import pytest
from pathlib import Path
from unittest.mock import patch
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.test import TestCase, override_settings
from django.urls import resolve
from rest_framework.test import APITestCase

from config import settings as project_settings


class ProjectStructureValidTests(TestCase):
    """Valid (Happy Path) Tests"""

    def test_django_settings_loaded(self):
        """Valid: settings expose a key and a default database"""
        self.assertIsNotNone(settings.SECRET_KEY)
        self.assertIsNotNone(settings.DATABASES)

    def test_all_apps_registered(self):
        """Valid: Service apps are registered in INSTALLED_APPS"""
        for app in ['apps.authentication', 'apps.companies', 'rest_framework', 'drf_spectacular', 'corsheaders']:
            self.assertIn(app, settings.INSTALLED_APPS)

    def test_custom_account_model(self):
        """Valid: Accounts are the user model"""
        self.assertEqual(settings.AUTH_USER_MODEL, 'authentication.Account')

    def test_database_connection(self):
        """Valid: the configured database answers queries"""
        from django.db import connection
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            result = cursor.fetchone()
            self.assertEqual(result[0], 1)

    def test_company_routes_resolve(self):
        """Valid: Company routes map to the handler views"""
        company_id = '0a1b2c3d-4e5f-6071-8293-a4b5c6d7e8f9'
        routes = {
            '/api/companies': 'companies:company-list-create',
            f'/api/companies/{company_id}': 'companies:company-detail',
            f'/api/companies/{company_id}/roles': 'companies:company-roles',
            f'/api/companies/{company_id}/roles/{company_id}': 'companies:account-company-role',
        }
        for url, name in routes.items():
            with self.subTest(url=url):
                self.assertEqual(resolve(url).view_name, name)


class ProjectStructureErrorTests(TestCase):
    """Error Handling Tests"""

    def test_missing_env_variable_has_default(self):
        """Error: unset environment falls back to development keys"""
        self.assertIsNotNone(settings.SECRET_KEY)
        self.assertIsNotNone(settings.SIMPLE_JWT['SIGNING_KEY'])

    @override_settings(DEBUG=False)
    def test_unknown_route_is_404(self):
        response = self.client.get('/api/unknown')
        self.assertEqual(response.status_code, 404)


class ProjectStructureInvalidTests(TestCase):
    """Invalid Input Tests"""

    def test_database_url_parsing(self):
        """Invalid: dj-database-url falls back to the default URL"""
        import dj_database_url
        result = dj_database_url.config(default='sqlite:///db.sqlite3')
        self.assertIn('ENGINE', result)

    def test_cors_settings_defined(self):
        """Invalid: CORS origins list is defined"""
        self.assertTrue(hasattr(settings, 'CORS_ALLOWED_ORIGINS'))


class ProjectStructureEdgeTests(TestCase):
    """Edge Case Tests"""

    def test_paths_use_pathlib(self):
        """Edge: Project paths are cross-platform"""
        self.assertIsInstance(settings.BASE_DIR, Path)

    def test_logging_configured_for_apps(self):
        """Edge: Application loggers are configured"""
        self.assertIn('apps', settings.LOGGING['loggers'])
        self.assertIn('console', settings.LOGGING['handlers'])


class ProjectStructureFunctionalTests(APITestCase):
    """Functional (Business Logic) Tests"""

    def test_admin_accessible(self):
        """Functional: admin login page renders"""
        response = self.client.get('/admin/', follow=True)
        self.assertIn(response.status_code, [200, 302])

    def test_api_schema_accessible(self):
        """Functional: OpenAPI schema is served"""
        response = self.client.get('/api/schema/')
        self.assertEqual(response.status_code, 200)

    def test_api_schema_documents_company_routes(self):
        response = self.client.get('/api/schema/', {'format': 'json'})
        paths = response.json()['paths']
        self.assertIn('/api/companies', paths)
        self.assertIn('/api/companies/{company_id}/roles/{account_id}', paths)

    def test_api_docs_accessible(self):
        """Functional: Swagger UI is served"""
        response = self.client.get('/api/docs/')
        self.assertEqual(response.status_code, 200)



class ProjectStructureSecurityTests(TestCase):
    """Security Tests"""

    def test_secret_key_required_without_debug(self):
        """Security: production never runs on the development key"""
        with patch.dict(os.environ, clear=True):
            with self.assertRaises(ImproperlyConfigured):
                project_settings.env_secret_key(debug=False)

    def test_secret_key_from_environment(self):
        with patch.dict(os.environ, {'SECRET_KEY': 'production-key'}, clear=True):
            self.assertEqual(project_settings.env_secret_key(debug=False), 'production-key')

    def test_development_key_only_with_debug(self):
        with patch.dict(os.environ, clear=True):
            self.assertEqual(project_settings.env_secret_key(debug=True), project_settings.DEV_SECRET_KEY)

    def test_password_hashers_use_argon2(self):
        """Security: Password hashing uses Argon2"""
        self.assertIn('Argon2PasswordHasher', settings.PASSWORD_HASHERS[0])

    def test_jwt_configured_for_account_ids(self):
        """Security: JWT settings identify accounts by UUID"""
        jwt_settings = settings.SIMPLE_JWT
        self.assertIn('ACCESS_TOKEN_LIFETIME', jwt_settings)
        self.assertIn('ALGORITHM', jwt_settings)
        self.assertEqual(jwt_settings['USER_ID_CLAIM'], 'account_id')
        self.assertEqual(jwt_settings['USER_ID_FIELD'], 'account_id')

    def test_cors_configured(self):
        """Security: CORS is restricted to known origins"""
        self.assertTrue(hasattr(settings, 'CORS_ALLOWED_ORIGINS'))
        self.assertNotEqual(getattr(settings, 'CORS_ALLOW_ALL_ORIGINS', False), True)


@pytest.mark.integration
class IntegrationTests(TestCase):
    """Integration tests for complete project setup"""

    def test_all_apps_migrations_ready(self):
        """Integration: hand-written migrations match the models"""
        try:
            call_command('makemigrations', '--check', '--dry-run', verbosity=0)
        except SystemExit:
            self.fail("Migrations are missing or conflicting")
