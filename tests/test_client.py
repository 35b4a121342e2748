"""
HTTP Client Tests

Tests for:
- Client construction, auth and headers
- Error classification by status code
- Connection failures
- Response document / links access
- Rate limiter
"""

import base64
import time

import pytest
import requests
import responses

from h1client.client import H1Client, RateLimiter
from h1client.config import ClientConfig
from h1client.errors import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    TransportError,
)


class TestClientConstruction:

    def test_configured(self, client):
        assert client.is_configured is True
        assert client.request_count == 0

    def test_unconfigured_default(self):
        client = H1Client()
        assert client.is_configured is False
        assert "api.hackerone.com" in client.config.base_url

    def test_url_for(self, client, base_url):
        assert client.url_for("programs/1") == f"{base_url}programs/1"
        assert client.url_for("/programs/1") == f"{base_url}programs/1"

    def test_url_for_base_without_trailing_slash(self):
        client = H1Client(ClientConfig(base_url="https://api.test/v1"))
        assert client.url_for("reports") == "https://api.test/v1/reports"

    def test_services_attached(self, client):
        assert client.programs is not None
        assert client.reports is not None
        assert client.credentials is not None

    def test_context_manager_closes_session(self, client_config):
        with H1Client(client_config) as client:
            session = client.session
            assert session is client.session
        assert client._session is None


class TestRequests:

    @responses.activate
    def test_basic_auth_and_headers(self, client, base_url):
        responses.add(responses.GET, f"{base_url}me/programs", json={"data": []})

        client.get("me/programs")

        request = responses.calls[0].request
        expected = base64.b64encode(b"api-example:secret-token").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == "h1client"
        assert client.request_count == 1

    @responses.activate
    def test_no_auth_when_unconfigured(self, base_url):
        client = H1Client(ClientConfig(base_url=base_url, max_retries=0))
        responses.add(responses.GET, f"{base_url}me/programs", json={"data": []})

        client.get("me/programs")

        assert "Authorization" not in responses.calls[0].request.headers

    @responses.activate
    def test_response_document_and_links(self, client, base_url, load_fixture):
        responses.add(
            responses.GET,
            f"{base_url}programs/1337/structured_scopes",
            body=load_fixture("structured-scopes-page1.json"),
            content_type="application/json",
        )

        response = client.get("programs/1337/structured_scopes")

        assert response.status_code == 200
        assert len(response.document.data) == 2
        assert response.links.next_page_number() == 2

    @responses.activate
    def test_empty_body(self, client, base_url):
        responses.add(responses.DELETE, f"{base_url}credentials/1", status=204)

        response = client.delete("credentials/1")

        assert response.document.data is None
        assert response.links.has_next is False

    @responses.activate
    def test_malformed_body_raises_decode_error(self, client, base_url):
        responses.add(responses.GET, f"{base_url}programs/1", body='{"data": {"id"')

        response = client.get("programs/1")

        with pytest.raises(DecodeError):
            response.document

    @responses.activate
    def test_post_sends_json(self, client, base_url):
        responses.add(responses.POST, f"{base_url}reports/1/activities", json={"data": {}})

        client.post("reports/1/activities", json_data={"data": {"type": "activity-comment"}})

        assert responses.calls[0].request.body == b'{"data": {"type": "activity-comment"}}'


class TestErrorClassification:

    @pytest.mark.parametrize("status, error_cls", [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (429, RateLimitError),
        (500, TransportError),
    ])
    @responses.activate
    def test_status_codes(self, client, base_url, status, error_cls):
        responses.add(responses.GET, f"{base_url}reports/1", status=status, json={})

        with pytest.raises(error_cls) as exc_info:
            client.get("reports/1")

        assert exc_info.value.status_code == status

    @responses.activate
    def test_retry_after(self, client, base_url):
        responses.add(
            responses.GET, f"{base_url}reports/1",
            status=429, headers={"Retry-After": "12"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            client.get("reports/1")

        assert exc_info.value.retry_after == 12.0

    @responses.activate
    def test_jsonapi_errors_collected(self, client, base_url, load_fixture):
        responses.add(
            responses.POST, f"{base_url}reports/1/state_changes",
            status=422, body=load_fixture("error-422.json"),
            content_type="application/json",
        )

        with pytest.raises(TransportError) as exc_info:
            client.post("reports/1/state_changes", json_data={})

        error = exc_info.value
        assert error.status_code == 422
        assert error.errors[0]["title"] == "Invalid Parameter"
        assert "not allowed" in str(error)

    @responses.activate
    def test_connection_error(self, client, base_url):
        responses.add(
            responses.GET, f"{base_url}reports/1",
            body=requests.ConnectionError("refused"),
        )

        with pytest.raises(TransportError, match="Connection error") as exc_info:
            client.get("reports/1")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @responses.activate
    def test_timeout(self, client, base_url):
        responses.add(
            responses.GET, f"{base_url}reports/1",
            body=requests.Timeout("slow"),
        )

        with pytest.raises(TransportError, match="timed out"):
            client.get("reports/1")


class TestRateLimiter:
    """Test the sliding-window rate limiter."""

    def test_allows_requests_under_limit(self):
        limiter = RateLimiter(max_requests=10, window_seconds=60)

        for _ in range(10):
            assert limiter.acquire() == 0.0

    def test_remaining_decrements(self):
        limiter = RateLimiter(max_requests=5, window_seconds=60)
        assert limiter.remaining == 5

        limiter.acquire()
        assert limiter.remaining == 4

    def test_reset_clears_state(self):
        limiter = RateLimiter(max_requests=5, window_seconds=60)
        limiter.acquire()
        limiter.acquire()
        limiter.reset()
        assert limiter.remaining == 5

    def test_waits_when_full(self, monkeypatch):
        clock = [100.0]
        slept = []

        def fake_sleep(seconds):
            slept.append(seconds)
            clock[0] += seconds

        monkeypatch.setattr(time, "monotonic", lambda: clock[0])
        monkeypatch.setattr(time, "sleep", fake_sleep)

        limiter = RateLimiter(max_requests=2, window_seconds=10)
        limiter.acquire()
        clock[0] += 4
        limiter.acquire()

        waited = limiter.acquire()

        assert waited == pytest.approx(6.0)
        assert slept == [pytest.approx(6.0)]
        assert limiter.remaining == 0
