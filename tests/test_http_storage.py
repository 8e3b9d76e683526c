"""Tests for the HTTP storage backend."""

import json

import httpx
import pytest

from monitor_scoring.consts import STATE_API_PATH, STATE_KEY
from monitor_scoring.models.model_storage import AppState
from monitor_scoring.storage.http_storage import HttpStorage

BASE_URL = "https://monitor.example.com"


class FakeServer:
    """In-memory stand-in for the monitor-data route."""

    def __init__(self, document=None, fail_with: int | None = None):
        self.document = document
        self.fail_with = fail_with
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "boom"})
        if request.url.path != STATE_API_PATH:
            return httpx.Response(404)
        if request.method == "GET":
            return httpx.Response(200, json=self.document)
        if request.method == "POST":
            self.document = json.loads(request.content)
            return httpx.Response(200, json={"success": True})
        return httpx.Response(405)


def _storage(server: FakeServer) -> HttpStorage:
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(server.handler))
    return HttpStorage(BASE_URL, client=client)


class TestHttpStorage:
    """Tests for HttpStorage."""

    def test_load_empty_store(self):
        """Test that a null document means nothing stored."""
        server = FakeServer(document=None)
        assert _storage(server).load(STATE_KEY) is None
        assert server.requests[0].method == "GET"

    def test_save_then_load(self):
        """Test that a saved document is returned by the next load."""
        server = FakeServer()
        storage = _storage(server)

        assert storage.save(STATE_KEY, {"systems": [], "tools": []}) is True
        assert storage.load(STATE_KEY) == {"systems": [], "tools": []}
        assert server.requests[0].method == "POST"

    def test_server_error(self):
        """Test that server errors become None/False."""
        storage = _storage(FakeServer(fail_with=500))
        assert storage.load(STATE_KEY) is None
        assert storage.save(STATE_KEY, {}) is False

    def test_network_error(self):
        """Test that transport failures become None/False."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        storage = HttpStorage(BASE_URL, client=client)

        assert storage.load(STATE_KEY) is None
        assert storage.save(STATE_KEY, {}) is False

    def test_invalid_json(self):
        """Test that a non-JSON body is treated as missing."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        assert HttpStorage(BASE_URL, client=client).load(STATE_KEY) is None

    def test_other_keys_not_served(self):
        """Test that keys other than the state key never hit the network."""
        server = FakeServer(document={"systems": []})
        storage = _storage(server)

        assert storage.load("other") is None
        assert storage.save("other", {}) is False
        assert server.requests == []

    def test_context_manager_closes_client(self):
        """Test that leaving a with block closes the HTTP client."""
        transport = httpx.MockTransport(FakeServer().handler)
        client = httpx.Client(base_url=BASE_URL, transport=transport)
        with HttpStorage(BASE_URL, client=client) as storage:
            assert storage.load(STATE_KEY) is None

        assert client.is_closed

    def test_trailing_slash_stripped(self):
        """Test base URL normalization."""
        storage = HttpStorage(f"{BASE_URL}/")
        try:
            assert storage.base_url == BASE_URL
        finally:
            storage.close()

    def test_state_round_trip(self, sample_state: AppState):
        """Test whole-state persistence through the route."""
        server = FakeServer()
        storage = _storage(server)

        assert storage.save_state(sample_state) is True
        assert isinstance(server.document["lastUpdated"], int)
        assert server.document["systems"][0]["id"] == "sys_full"

        loaded = storage.load_state()
        assert loaded is not None
        assert loaded.systems == sample_state.systems


@pytest.mark.parametrize("status", [400, 403, 503])
def test_save_rejected_status(status):
    """Test that any non-success status fails the save."""
    assert _storage(FakeServer(fail_with=status)).save(STATE_KEY, {}) is False
