"""
Shared fixtures: a fake requests session serving canned TBA responses.
"""

import json

import pytest

from tba_data.api_client import TBAClient
from tba_data.config import TBAConfig

BASE_URL = "https://tba.test/api/v3"


class FakeResponse:
    def __init__(self, body="", status_code=200):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.text = body
        self.status_code = status_code


class FakeSession:
    """Serves responses by path; a tuple of responses is consumed one per call."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, headers=None, allow_redirects=None, timeout=None):
        path = url[len(BASE_URL):]
        self.calls.append({'path': path, 'headers': headers,
                           'allow_redirects': allow_redirects, 'timeout': timeout})
        if path not in self.routes:
            return FakeResponse("", status_code=404)

        route = self.routes[path]
        if isinstance(route, tuple):
            # The last response repeats once the others are used up
            if len(route) > 1:
                self.routes[path] = route[1:]
            route = route[0]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(route)

    def paths(self):
        return [call['path'] for call in self.calls]


@pytest.fixture
def config():
    return TBAConfig(base_url=BASE_URL, api_key="test-key", team_key="frc4611",
                     event_key="2024ohcl", max_retries=3, retry_delay=0)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(config, session):
    return TBAClient(config, session=session)


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleeps():
    return SleepRecorder()
