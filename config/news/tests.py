"""
Tests for the BBC News App.

Covers:
1. Article catalog construction and id parsing
2. News API (list, detail, not-found)
3. Health check
4. Landing page and public assets
5. Route-not-found and internal-error fallbacks
6. CORS headers
7. ``serve`` management command
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings

from .catalog import Article, Catalog, build_default_catalog, parse_article_id
from .middleware import sanitize_error_message

ARTICLE_FIELDS = ('id', 'headline', 'summary', 'category', 'timestamp', 'image')


# =============================================================================
# Catalog Tests
# =============================================================================


class CatalogTest(SimpleTestCase):
    """Tests for the in-memory article catalog."""

    def test_default_catalog_is_ordered_by_id(self):
        catalog = build_default_catalog()
        self.assertEqual([a.id for a in catalog], [1, 2, 3, 4, 5])
        self.assertEqual(len(catalog), 5)

    def test_default_categories(self):
        catalog = build_default_catalog()
        self.assertEqual(
            [a.category for a in catalog.all()],
            ['Technology', 'Environment', 'Sports', 'Health', 'Business'],
        )

    def test_timestamps_step_back_one_hour(self):
        now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        catalog = build_default_catalog(now=now)
        self.assertEqual(catalog.get(1).timestamp, now)
        self.assertEqual(catalog.get(5).timestamp, now - timedelta(hours=4))

    def test_image_urls(self):
        article = build_default_catalog().get(2)
        self.assertEqual(
            article.image,
            "https://via.placeholder.com/400x250/4CAF50/FFFFFF?text=Climate+News",
        )

    def test_get_missing_id(self):
        catalog = build_default_catalog()
        self.assertIsNone(catalog.get(999))
        self.assertIsNone(catalog.get(None))

    def test_duplicate_ids_rejected(self):
        now = datetime.now(timezone.utc)
        article = Article(1, "Headline", "Summary", "Tech", now, "https://example.com/a.png")
        with self.assertRaises(ValueError):
            Catalog([article, article])

    def test_articles_are_immutable(self):
        article = build_default_catalog().get(1)
        with self.assertRaises(FrozenInstanceError):
            article.headline = "Changed"

    def test_to_dict_has_all_fields(self):
        data = build_default_catalog().get(3).to_dict()
        self.assertEqual(tuple(data), ARTICLE_FIELDS)

    def test_to_dict_keeps_milliseconds(self):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        data = build_default_catalog(now=now).get(1).to_dict()
        self.assertEqual(data['timestamp'], '2026-01-01T00:00:00.000Z')


class ParseArticleIdTest(SimpleTestCase):
    """``parse_article_id`` keeps only the leading integer."""

    def test_plain_number(self):
        self.assertEqual(parse_article_id("4"), 4)

    def test_trailing_garbage_ignored(self):
        self.assertEqual(parse_article_id("3abc"), 3)

    def test_non_numeric(self):
        self.assertIsNone(parse_article_id("abc"))
        self.assertIsNone(parse_article_id(""))

    def test_signed(self):
        self.assertEqual(parse_article_id("-1"), -1)
        self.assertEqual(parse_article_id(" +2"), 2)

    def test_hex_prefix(self):
        self.assertEqual(parse_article_id('0x1'), 1)
        self.assertEqual(parse_article_id('0X1a'), 26)
        self.assertEqual(parse_article_id('-0x2'), -2)

    def test_hex_prefix_without_digits(self):
        self.assertIsNone(parse_article_id('0x'))
        self.assertIsNone(parse_article_id('0xg'))


# =============================================================================
# API Tests
# =============================================================================


class NewsApiTest(SimpleTestCase):
    """Tests for ``/api/news`` and ``/api/news/<id>``."""

    def test_list_articles(self):
        response = self.client.get('/api/news')
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertIsInstance(body['data'], list)
        self.assertGreater(len(body['data']), 0)
        self.assertEqual(len(body['data']), body['total'])

    def test_list_items_have_required_fields(self):
        for item in self.client.get('/api/news').json()['data']:
            for field in ARTICLE_FIELDS:
                self.assertTrue(item.get(field), f"{field} missing in article {item.get('id')}")

    def test_timestamps_are_iso_utc(self):
        item = self.client.get('/api/news').json()['data'][0]
        self.assertTrue(item['timestamp'].endswith('Z'))
        datetime.fromisoformat(item['timestamp'].replace('Z', '+00:00'))

    def test_trailing_slash_accepted(self):
        self.assertEqual(self.client.get('/api/news/').status_code, 200)

    def test_get_every_article(self):
        for article in apps.get_app_config('news').catalog:
            response = self.client.get(f'/api/news/{article.id}')
            self.assertEqual(response.status_code, 200)
            body = response.json()
            self.assertEqual(body['status'], 'success')
            self.assertEqual(body['data']['id'], article.id)

    def test_article_not_found(self):
        response = self.client.get('/api/news/999')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'status': 'error', 'message': 'Article not found'})

    def test_non_numeric_id_not_found(self):
        response = self.client.get('/api/news/abc')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Article not found')

    def test_hex_id_resolves(self):
        response = self.client.get('/api/news/0x1')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['id'], 1)

    def test_catalog_shared_between_requests(self):
        first = self.client.get('/api/news').json()['data']
        second = self.client.get('/api/news').json()['data']
        self.assertEqual(first, second)

    def test_post_is_route_not_found(self):
        response = self.client.post('/api/news')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Route not found')


class HealthCheckTest(SimpleTestCase):
    """Tests for ``/api/health``."""

    def test_health(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['status'], 'healthy')
        self.assertEqual(body['version'], '1.0.0')
        self.assertIsInstance(body['uptime'], float)
        self.assertGreaterEqual(body['uptime'], 0)
        self.assertRegex(body['timestamp'], r'^\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z$')


# =============================================================================
# Front-end Tests
# =============================================================================


class PublicFilesTest(SimpleTestCase):
    """Tests for the landing page and static assets."""

    def test_landing_page(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'BBC News')
        self.assertTrue(response['Content-Type'].startswith('text/html'))

    def test_static_asset(self):
        response = self.client.get('/css/styles.css')
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response['Content-Type'].startswith('text/css'))

    def test_directory_is_not_listed(self):
        response = self.client.get('/css/')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Route not found')

    def test_path_outside_public_dir(self):
        with self.assertNoLogs('news', level='ERROR'):
            response = self.client.get('/%2e%2e/pyproject.toml')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'status': 'error', 'message': 'Route not found'})

    def test_public_dir_ships_with_app(self):
        app_dir = Path(apps.get_app_config('news').path)
        self.assertEqual(Path(settings.NEWS_PUBLIC_DIR).resolve(), (app_dir / 'public').resolve())
        self.assertTrue((app_dir / 'public' / 'index.html').is_file())


# =============================================================================
# Fallback Tests
# =============================================================================


class FallbackTest(SimpleTestCase):
    """Tests for the not-found and error fallbacks."""

    def test_route_not_found(self):
        response = self.client.get('/non-existent-route')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'status': 'error', 'message': 'Route not found'})

    @patch('news.views.get_catalog')
    def test_internal_error_is_sanitized(self, mock_catalog):
        mock_catalog.side_effect = RuntimeError("database\r\nFAKE LOG LINE")

        with self.assertLogs('news', level='ERROR') as logs:
            response = self.client.get('/api/news')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'status': 'error', 'message': 'Internal server error'})
        self.assertNotIn(b'FAKE', response.content)
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].getMessage(), "Server error: databaseFAKE LOG LINE")

    def test_sanitize_empty_message(self):
        self.assertEqual(sanitize_error_message(ValueError()), 'Unknown error')

    def test_sanitize_strips_line_breaks(self):
        self.assertEqual(sanitize_error_message(ValueError("a\nb\rc")), 'abc')


# =============================================================================
# CORS Tests
# =============================================================================


@override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:3000'])
class CorsTest(SimpleTestCase):
    """CORS headers are only returned for configured origins."""

    def test_allowed_origin(self):
        response = self.client.get('/api/news', HTTP_ORIGIN='http://localhost:3000')
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:3000')
        self.assertEqual(response['Access-Control-Allow-Credentials'], 'true')

    def test_other_origin(self):
        response = self.client.get('/api/news', HTTP_ORIGIN='https://evil.example.com')
        self.assertNotIn('Access-Control-Allow-Origin', response)


# =============================================================================
# Management Command Tests
# =============================================================================


class ServeCommandTest(SimpleTestCase):
    """Tests for ``manage.py serve``."""

    @patch('news.management.commands.serve.call_command')
    def test_prints_urls_and_runs_server(self, mock_call):
        out = StringIO()
        call_command('serve', port=8080, stdout=out)

        output = out.getvalue()
        self.assertIn('http://0.0.0.0:8080', output)
        self.assertIn('http://0.0.0.0:8080/api/health', output)
        self.assertIn('http://0.0.0.0:8080/api/news', output)
        mock_call.assert_called_once_with('runserver', '0.0.0.0:8080', use_reloader=False)

    @override_settings(PORT=4000)
    @patch('news.management.commands.serve.call_command')
    def test_default_port_from_settings(self, mock_call):
        call_command('serve', stdout=StringIO())
        mock_call.assert_called_once_with('runserver', '0.0.0.0:4000', use_reloader=False)

    def test_invalid_port(self):
        with self.assertRaises(CommandError):
            call_command('serve', port=70000, stdout=StringIO())
