"""Shared fakes: an HTTP session whose responses are scripted per URL."""

from unittest.mock import MagicMock

import pytest
import requests

from backend.tools.failover import FailoverFetcher


def _response(scripted):
    if isinstance(scripted, Exception):
        raise scripted

    status, payload = scripted if isinstance(scripted, tuple) else (200, scripted)
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    if isinstance(payload, ValueError):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def make_session():
    """
    make_session({url: payload | (status, payload) | Exception})
    A (200, ValueError(...)) entry makes .json() raise.
    Unknown URLs raise ConnectionError. Calls are recorded on session.get.call_args_list.
    """

    def factory(routes):
        session = MagicMock(spec=requests.Session)

        def get(url, timeout=None):
            assert timeout is not None and timeout > 0
            if url not in routes:
                raise requests.ConnectionError(f"no route for {url}")
            return _response(routes[url])

        session.get.side_effect = get
        return session

    return factory


@pytest.fixture
def make_fetcher(make_session):
    def factory(routes):
        session = make_session(routes)
        return FailoverFetcher(session=session, timeout=5), session

    return factory


def called_urls(session):
    return [c.args[0] for c in session.get.call_args_list]


@pytest.fixture
def urls_of():
    return called_urls
