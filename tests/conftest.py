"""Pytest configuration and shared fixtures."""

import json
import pytest
import requests
from urllib.parse import urlparse

from vcsa_health.collectors.vapi import SESSION_PATH
from vcsa_health.data.models import ENDPOINTS

PATH_TO_NAME = {ep.path: ep.name for ep in ENDPOINTS}


def make_response(status_code=200, json_data=None, text=None, url="https://vcsa.example.com/"):
    """Build a real requests.Response with the given body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    body = text if text is not None else json.dumps(json_data)
    resp._content = body.encode("utf-8")
    return resp


class FakeVAPISession:
    """Stand-in for requests.Session that answers like an appliance.

    `health` maps endpoint names to a value string, a prepared Response,
    or an exception to raise.
    """

    def __init__(self, health=None, session_response=None):
        self.health = dict(health or {})
        if session_response is None:
            session_response = make_response(json_data={"value": "token-123"})
        self.session_response = session_response
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        path = urlparse(url).path
        self.calls.append({"method": method, "url": url, "path": path, **kwargs})
        if path == SESSION_PATH:
            return self._answer(self.session_response)
        name = PATH_TO_NAME.get(path)
        if name not in self.health:
            return make_response(404, {"type": "com.vmware.vapi.std.errors.not_found"}, url=url)
        return self._answer(self.health[name], url=url)

    def _answer(self, item, url="https://vcsa.example.com/"):
        if isinstance(item, Exception):
            raise item
        if isinstance(item, requests.Response):
            return item
        return make_response(json_data={"value": item}, url=url)

    def close(self):
        self.closed = True

    @property
    def health_calls(self):
        return [c for c in self.calls if c["method"] == "GET"]

    @property
    def queried_names(self):
        return [PATH_TO_NAME[c["path"]] for c in self.health_calls]


@pytest.fixture
def all_green():
    return {ep.name: "green" for ep in ENDPOINTS}


@pytest.fixture
def fake_session(all_green):
    return FakeVAPISession(health=all_green)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def session_factory():
    return FakeVAPISession
