import random
import pytest

from brainteasers import create_app
from brainteasers.config import TestingConfig
from brainteasers.services.storage_service import MemoryStorage, initialize_storage_service
from brainteasers.services.game_service import initialize_game_service


class TestConfig(TestingConfig):
    TESTING = True
    SECRET_KEY = 'test-secret'


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def seeded_storage():
    return MemoryStorage()


@pytest.fixture()
def tiny_storage():
    """One category per game type with a handful of known entries."""
    storage = MemoryStorage(seed=False)
    storage.add_category('Animals', 'fa-paw', '#4F46E5', 1, 'word')
    storage.add_word('cat', 1, ['Purring pet', 'Chases mice', 'Has nine lives'])

    storage.add_category('Pairs', 'fa-clone', '#F59E0B', 0, 'memory')
    storage.add_memory_card('★', 2, difficulty=1)
    storage.add_memory_card('♥', 2, difficulty=1)

    storage.add_category('Numbers', 'fa-sort-numeric-up', '#6366F1', 0, 'number')
    storage.add_category('Crosswords', 'fa-table', '#F59E0B', 0, 'crossword')
    return storage


@pytest.fixture()
def flask_app():
    storage = initialize_storage_service()
    initialize_game_service(storage, settle_delay=TestConfig.MEMORY_SETTLE_DELAY_SECONDS)
    application, _socketio = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
