import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from feedback.app import create_app
from shared import HistoryStore, InferenceError


class FakeInference:
    """Records prompts and replies with a canned payload"""

    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else {'response': '- Dashboard is slow'}
        self.error = error
        self.calls = []

    def run(self, model, inputs):
        self.calls.append((model, inputs))
        if self.error:
            raise self.error
        return self.payload


class FakeCache:
    """Dict-backed stand-in for the Redis cache"""

    def __init__(self):
        self.entries = {}
        self.ttls = {}

    def get(self, key):
        return self.entries.get(key)

    def put(self, key, value, ttl):
        self.entries[key] = value
        self.ttls[key] = ttl


class BrokenHistory:
    def insert(self, feedback, summary):
        raise RuntimeError('disk full')

    def list_recent(self):
        raise RuntimeError('disk full')


@pytest.fixture
def inference():
    return FakeInference()


@pytest.fixture
def failing_inference():
    return FakeInference(error=InferenceError('model unavailable'))


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture
def history(tmp_path):
    return HistoryStore(str(tmp_path / 'history.db'))


@pytest.fixture
def client(inference, cache, history):
    app = create_app(inference=inference, cache=cache, history=history)
    app.config['TESTING'] = True
    return app.test_client()
