import logging
import os
import random
import sys
from collections import deque

import pytest

# Ensure the backend root (containing the `matchfeed` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from matchfeed import create_app, socketio
from matchfeed.services.games.registry import GameRegistry

NAMESPACE = '/ws'
START_MS = 1_700_000_000_000


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    LOG_LEVEL = 'DEBUG'
    FEED_HOST = '0.0.0.0'
    FEED_PORT = 9000
    FEED_NAMESPACE = NAMESPACE
    CORS_ALLOWED_ORIGINS = '*'
    TICK_INTERVAL_SEC = 5
    SPAWN_INTERVAL_SEC = 30
    TOTAL_GAME_MINUTES = 12
    INITIAL_BATCH_SIZE = 3
    RECURRING_BATCH_SIZE = 2
    INITIAL_START_DELAY_MS = (5000, 20000)
    RECURRING_START_DELAY_MS = (15000, 45000)
    TIMER_HEARTBEAT_SEC = 0


class ScriptedRandom(random.Random):
    """random.Random whose choice/randint answers can be queued up front."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.scripted = {'choice': deque(), 'randint': deque()}

    def script(self, method, *values):
        self.scripted[method].extend(values)
        return self

    def choice(self, seq):
        queue = self.scripted['choice']
        if queue:
            value = queue.popleft()
            assert value in seq
            return value
        return super().choice(seq)

    def randint(self, a, b):
        queue = self.scripted['randint']
        if queue:
            value = queue.popleft()
            assert a <= value <= b
            return value
        return super().randint(a, b)


class FakeClock:
    def __init__(self, ms=START_MS):
        self.ms = ms

    def __call__(self):
        return self.ms

    def advance(self, ms):
        self.ms += ms


class RecordingFanout:
    def __init__(self):
        self.published = []

    def publish(self, payload):
        self.published.append(payload)
        return 1


@pytest.fixture()
def rng():
    return ScriptedRandom(1234)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def logger():
    return logging.getLogger('matchfeed.tests')


@pytest.fixture()
def registry(rng, clock, logger):
    return GameRegistry(rng=rng, now=clock, logger=logger)


@pytest.fixture()
def recorder():
    return RecordingFanout()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def feed(flask_app, rng, clock):
    live_feed = flask_app.extensions['live_feed']
    live_feed.registry.rng = rng
    live_feed.registry.now = clock
    return live_feed


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )
    yield test_client
    try:
        test_client.disconnect(namespace=NAMESPACE)
    except Exception:
        pass
