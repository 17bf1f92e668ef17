"""
Tests for application wiring: root endpoint, CORS, error envelope, the
lifespan-owned engine and startup failure.

Run with:
    python -m pytest tests/test_server.py
"""
import os
import tempfile
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core import settings
from app.core.config import Settings
from app.db import StorageUnavailableError, build_engine, create_db_and_tables
from app.logic.games import InvalidGameIdError, parse_game_id
from app.server import app


class TestRoot(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_root_returns_plain_text(self):
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers['content-type'].startswith('text/plain'))
        self.assertIn('online', resp.text)

    def test_unknown_route_uses_message_envelope(self):
        resp = self.client.get('/api/nothing-here')
        self.assertEqual(resp.status_code, 404)
        self.assertIn('message', resp.json())

    def test_cors_preflight_allows_front_end(self):
        resp = self.client.options('/api/games', headers={
            'Origin': 'https://games.example.io',
            'Access-Control-Request-Method': 'POST',
        })
        self.assertEqual(resp.status_code, 200)
        self.assertIn('access-control-allow-origin', resp.headers)


class TestLifespan(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        db_path = os.path.join(self.tmpdir.name, 'games.db')
        self.url_patch = patch.object(settings, 'DATABASE_URL', f'sqlite:///{db_path}')
        self.url_patch.start()

    def tearDown(self):
        self.url_patch.stop()
        self.tmpdir.cleanup()

    def test_engine_is_created_and_injected(self):
        with TestClient(app) as client:
            created = client.post('/api/games', json={'title': 'Stardew Valley'})
            self.assertEqual(created.status_code, 201)
            fetched = client.get(f"/api/games/{created.json()['id']}")
            self.assertEqual(fetched.status_code, 200)
            self.assertEqual(fetched.json()['title'], 'Stardew Valley')

    def test_data_survives_restart(self):
        with TestClient(app) as client:
            game_id = client.post('/api/games', json={'title': 'Terraria'}).json()['id']
        with TestClient(app) as client:
            self.assertEqual(client.get(f'/api/games/{game_id}').status_code, 200)


class TestStorage(unittest.TestCase):

    def test_unreachable_database_is_fatal(self):
        engine = build_engine('sqlite:////nonexistent-dir/for/games.db')
        with self.assertRaises(StorageUnavailableError):
            create_db_and_tables(engine)
        engine.dispose()

    def test_unreachable_database_aborts_startup(self):
        with patch.object(settings, 'DATABASE_URL', 'sqlite:////nonexistent-dir/for/games.db'):
            with self.assertRaises(StorageUnavailableError):
                with TestClient(app):
                    pass


class TestSettings(unittest.TestCase):

    def test_environment_is_read_once_at_import(self):
        with patch.dict(os.environ, {'PORT': '12345', 'DATABASE_URL': 'sqlite://'}):
            fresh = Settings()
        self.assertEqual(fresh.PORT, settings.PORT)
        self.assertEqual(fresh.DATABASE_URL, settings.DATABASE_URL)


class TestParseGameId(unittest.TestCase):

    def test_accepts_hex_id(self):
        self.assertEqual(parse_game_id('0' * 32), '0' * 32)

    def test_normalizes_hyphenated_uuid(self):
        value = '12345678-1234-5678-1234-567812345678'
        self.assertEqual(parse_game_id(value), value.replace('-', ''))

    def test_rejects_malformed_id(self):
        for value in ('', 'abc', 'z' * 32):
            with self.assertRaises(InvalidGameIdError):
                parse_game_id(value)


if __name__ == '__main__':
    unittest.main()
