"""
Tests for header construction and the request layer.
"""

from datetime import datetime

import pytest
import requests

from conftest import FakeResponse
from tba_data.api_client import (
    URL_TEMPLATES,
    RequestKind,
    TBAClient,
    build_headers,
    get_status,
)
from tba_data.config import TBAConfig
from tba_data.exceptions import (
    ConfigurationError,
    InvalidArgument,
    InvalidRequestKind,
    UpstreamError,
)


def test_build_headers_carries_key():
    headers = build_headers("abc123")
    assert headers["X-TBA-Auth-Key"] == "abc123"
    assert "If-Modified-Since" in headers


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_build_headers_requires_key(api_key):
    with pytest.raises(ConfigurationError):
        build_headers(api_key)


def test_every_kind_has_a_template():
    assert set(URL_TEMPLATES) == set(RequestKind)


@pytest.mark.parametrize("kind, params, path", [
    (RequestKind.ALL_EVENTS_LIST, {'year': 2024}, "/events/2024"),
    (RequestKind.ALL_TEAMS_LIST, {'year': 2024, 'page_num': 3}, "/teams/2024/3/simple"),
    (RequestKind.TEAM_NAME, {'team_key': "254"}, "/team/frc254/simple"),
    (RequestKind.EVENT_OPR, {'event_key': "2024mnmi"}, "/event/2024mnmi/oprs"),
    (RequestKind.EVENT_COPR, {'event_key': "2024mnmi"}, "/event/2024mnmi/coprs"),
    (RequestKind.TEAM_MATCH, {'team_key': "frc48", 'event_key': "2024mnmi"},
     "/team/frc48/event/2024mnmi/matches/simple"),
    (RequestKind.EVENT_RANKING, {'event_key': "2024mnmi"}, "/event/2024mnmi/rankings"),
    (RequestKind.STATUS, {}, "/status"),
])
def test_fetch_maps_kind_to_endpoint(client, session, kind, params, path):
    session.routes[path] = "{}"
    assert client.fetch(kind, **params) == "{}"
    assert session.paths() == [path]


def test_fetch_sends_headers_and_follows_redirects(client, session):
    session.routes["/status"] = "{}"
    client.fetch(RequestKind.STATUS)
    call = session.calls[0]
    assert call['headers']["X-TBA-Auth-Key"] == "test-key"
    assert call['allow_redirects'] is True


def test_fetch_accepts_kind_by_name(client, session):
    session.routes["/event/2024ohcl/oprs"] = "{}"
    client.fetch("EventOPR")
    assert session.paths() == ["/event/2024ohcl/oprs"]


def test_unknown_kind_fails_before_request(client, session):
    with pytest.raises(InvalidRequestKind):
        client.fetch("EventAwards")
    assert session.calls == []


def test_defaults_come_from_config(client, session):
    session.routes["/team/frc4611/event/2024ohcl/matches/simple"] = "[]"
    session.routes[f"/events/{datetime.now().year}"] = "[]"
    client.fetch(RequestKind.TEAM_MATCH)
    client.fetch(RequestKind.ALL_EVENTS_LIST)
    assert session.paths() == [
        "/team/frc4611/event/2024ohcl/matches/simple",
        f"/events/{datetime.now().year}",
    ]


def test_missing_default_event_key_is_configuration_error(session):
    client = TBAClient(TBAConfig(base_url="https://tba.test/api/v3", api_key="k"), session=session)
    with pytest.raises(ConfigurationError):
        client.fetch(RequestKind.EVENT_OPR)
    assert session.calls == []


def test_missing_api_key_is_configuration_error(session):
    client = TBAClient(TBAConfig(base_url="https://tba.test/api/v3"), session=session)
    with pytest.raises(ConfigurationError):
        client.fetch(RequestKind.STATUS)


def test_non_200_raises_with_status(client, session):
    session.routes["/event/2024ohcl/oprs"] = FakeResponse("Unauthorized", status_code=401)
    with pytest.raises(UpstreamError) as excinfo:
        client.fetch(RequestKind.EVENT_OPR)
    assert excinfo.value.status_code == 401
    assert "401" in str(excinfo.value)


def test_empty_body_raises(client, session):
    session.routes["/status"] = FakeResponse("", status_code=200)
    with pytest.raises(UpstreamError):
        client.fetch(RequestKind.STATUS)


def test_network_failure_is_wrapped(client, session):
    cause = requests.ConnectionError("connection refused")
    session.routes["/status"] = cause
    with pytest.raises(UpstreamError) as excinfo:
        client.fetch(RequestKind.STATUS)
    assert excinfo.value.__cause__ is cause
    assert "connection refused" in str(excinfo.value)


def test_fetch_json_rejects_malformed_body(client, session):
    session.routes["/status"] = "<html>oops</html>"
    with pytest.raises(UpstreamError):
        client.fetch_json(RequestKind.STATUS)


def test_get_status(client, session):
    session.routes["/status"] = {'current_season': 2024, 'max_season': 2025, 'is_datafeed_down': False}
    status = get_status(client)
    assert status['current_season'] == 2024


@pytest.mark.parametrize("kind, params", [
    (RequestKind.TEAM_NAME, {'team_key': "team254"}),
    (RequestKind.TEAM_NAME, {'team_key': "frc254/../status"}),
    (RequestKind.EVENT_OPR, {'event_key': "../status"}),
    (RequestKind.EVENT_RANKING, {'event_key': "ohcl"}),
    (RequestKind.TEAM_MATCH, {'team_key': "4611", 'event_key': "2024oh/cl"}),
])
def test_malformed_keys_fail_before_request(client, session, kind, params):
    with pytest.raises(InvalidArgument):
        client.fetch(kind, **params)
    assert session.calls == []


def test_malformed_configured_keys_fail_before_request(session):
    config = TBAConfig(base_url="https://tba.test/api/v3", api_key="k",
                       team_key="team4611", event_key="2024 ohcl")
    client = TBAClient(config, session=session)

    with pytest.raises(InvalidArgument):
        client.fetch(RequestKind.TEAM_NAME)
    with pytest.raises(InvalidArgument):
        client.fetch(RequestKind.EVENT_COPR)
    assert session.calls == []
