import os
import tempfile

import pytest

# Keep test logs out of the working tree; must run before the package import
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="punjabi_wordle_logs_"))

from punjabi_wordle import create_app  # noqa: E402
from punjabi_wordle.config import TestingConfig  # noqa: E402
from punjabi_wordle.services.game_service import initialize_game_service  # noqa: E402
from punjabi_wordle.services.word_service import initialize_word_service  # noqa: E402
from punjabi_wordle.services.word_store import InMemoryWordStore  # noqa: E402


@pytest.fixture
def store():
    return InMemoryWordStore()


@pytest.fixture
def app(store):
    initialize_word_service(store)
    initialize_game_service(max_rounds=6, relaxed=True)
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
