"""
Shared fixtures for the Wordlet test suite.
"""

import os
import tempfile

# Keep test logs out of the working directory; must run before wordlet is imported
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordlet-test-logs'))

import pytest

from wordlet import create_app
from wordlet.config import TestingConfig
from wordlet.services.game_service import GameService
from wordlet.services.game_store import InMemoryGameStore
from wordlet.services.word_catalog import WordCatalog

# Every word here is also in the bundled word list
TEST_WORDS = ["crane", "crate", "apple", "ghost", "plumb", "fight", "jumpy", "brick", "vodka", "mound"]


@pytest.fixture
def catalog():
    return WordCatalog(TEST_WORDS, seed=7)


@pytest.fixture
def store():
    return InMemoryGameStore()


@pytest.fixture
def service(store, catalog):
    return GameService(store, catalog)


@pytest.fixture
def app(store):
    return create_app(TestingConfig, store=store)


@pytest.fixture
def client(app):
    return app.test_client()
