import unittest

import mongomock
from fastapi.testclient import TestClient

from foodsupply.config.settings import settings
from foodsupply.core.rate_limit import limiter
from foodsupply.database.mongo_client import get_database
from foodsupply.main import app


class ApiTestCase(unittest.TestCase):
    """Runs the app against a fresh in-memory database for every test."""

    raise_server_exceptions = True

    def setUp(self):
        self.db = mongomock.MongoClient()[settings.mongodb_database]
        app.dependency_overrides[get_database] = lambda: self.db
        limiter.reset()
        self._bcrypt_rounds = settings.bcrypt_rounds
        settings.bcrypt_rounds = 4
        self.client = TestClient(app, raise_server_exceptions=self.raise_server_exceptions)

    def tearDown(self):
        app.dependency_overrides.clear()
        settings.bcrypt_rounds = self._bcrypt_rounds
