# h1client — HackerOne API client library
# Copyright (C) 2026 h1client Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
h1client - HTTP Client

Authenticated, rate-limited transport for the HackerOne API.
Uses HTTP Basic Auth with the API identifier + token.

API Reference: https://api.hackerone.com/reference/

Usage:
    config = ClientConfig(api_identifier="my-id", api_token="secret")
    with H1Client(config) as client:
        program = client.programs.get("1337")
        scopes = client.programs.list_all_structured_scopes("1337")
"""

import time
import logging
from collections import deque
from typing import Any, Optional
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import ClientConfig
from .errors import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    TransportError,
)
from .jsonapi import Document, parse_document
from .pagination import Links
from .services import CredentialService, ProgramService, ReportService


logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
#  Rate Limiter
# ─────────────────────────────────────────────────────────────────────

class RateLimiter:
    """
    Sliding-window rate limiter.

    Allows at most max_requests calls to acquire() per window_seconds,
    sleeping when the window is full.
    """

    def __init__(self, max_requests: int = 600, window_seconds: float = 60.0):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._timestamps: deque[float] = deque()

    def _purge(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    def acquire(self) -> float:
        """
        Take a slot, blocking until one is free.

        Returns:
            Seconds spent waiting (0.0 if none)
        """
        now = time.monotonic()
        self._purge(now)

        waited = 0.0
        if len(self._timestamps) >= self.max_requests:
            waited = self._timestamps[0] + self.window_seconds - now
            if waited > 0:
                logger.debug(f"Rate limit reached, waiting {waited:.1f}s")
                time.sleep(waited)
            now = time.monotonic()
            self._purge(now)

        self._timestamps.append(now)
        return max(waited, 0.0)

    @property
    def remaining(self) -> int:
        """Slots left in the current window."""
        self._purge(time.monotonic())
        return max(0, self.max_requests - len(self._timestamps))

    def reset(self) -> None:
        self._timestamps.clear()


# ─────────────────────────────────────────────────────────────────────
#  Response
# ─────────────────────────────────────────────────────────────────────

class Response:
    """
    A successful API response.

    The body is parsed on first access to document or links.
    """

    def __init__(self, raw: requests.Response):
        self.raw = raw
        self._document: Optional[Document] = None

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self):
        return self.raw.headers

    @property
    def content(self) -> bytes:
        return self.raw.content

    @property
    def document(self) -> Document:
        if self._document is None:
            self._document = parse_document(self.content) if self.content else Document()
        return self._document

    @property
    def links(self) -> Links:
        return Links.from_dict(self.document.links)


# ─────────────────────────────────────────────────────────────────────
#  Client
# ─────────────────────────────────────────────────────────────────────

class H1Client:
    """
    HackerOne API client.

    Authentication: HTTP Basic Auth
      - Username: API identifier
      - Password: API token

    Resource services:
      - programs:    ProgramService
      - reports:     ReportService
      - credentials: CredentialService
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self._session: Optional[requests.Session] = None
        self._rate_limiter = RateLimiter(
            max_requests=self.config.rate_limit_requests,
            window_seconds=self.config.rate_limit_window,
        )
        self._request_count = 0

        self.programs = ProgramService(self)
        self.reports = ReportService(self)
        self.credentials = CredentialService(self)

    def __enter__(self) -> "H1Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_configured(self) -> bool:
        """HackerOne requires both identifier and token."""
        return bool(self.config.api_identifier and self.config.api_token)

    @property
    def session(self) -> requests.Session:
        """Lazy-initialized HTTP session with retry logic."""
        if self._session is None:
            self._session = self._build_session()
        return self._session

    def _build_session(self) -> requests.Session:
        session = requests.Session()

        if self.config.max_retries > 0:
            retry = Retry(
                total=self.config.max_retries,
                backoff_factor=1.0,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry)
        else:
            adapter = HTTPAdapter()
        session.mount("https://", adapter)
        session.mount("http://", adapter)

        session.verify = self.config.verify_ssl
        if self.is_configured:
            session.auth = (self.config.api_identifier, self.config.api_token)
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        })
        return session

    def url_for(self, path: str) -> str:
        """Resolve an API path against the configured base URL."""
        base = self.config.base_url
        if not base.endswith("/"):
            base += "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json_data: Optional[Any] = None,
    ) -> Response:
        """
        Make an authenticated, rate-limited API request.

        Args:
            method: HTTP method
            path: API path, relative to base_url
            params: Query parameters
            json_data: JSON request body

        Returns:
            Response for any 2xx/3xx status

        Raises:
            TransportError subclass on failure
        """
        self._rate_limiter.acquire()
        url = self.url_for(path)
        logger.debug(f"{method} {url} params={params}")

        try:
            raw = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            raise TransportError(
                f"Request timed out after {self.config.timeout}s: {method} {path}"
            ) from e
        except requests.RequestException as e:
            raise TransportError(f"Connection error: {e}") from e

        self._request_count += 1
        self._raise_for_status(raw, path)
        return Response(raw)

    def _raise_for_status(self, raw: requests.Response, path: str) -> None:
        status = raw.status_code
        if status < 400:
            return

        errors = _error_objects(raw)
        detail = "; ".join(
            str(e.get("detail") or e.get("title")) for e in errors
            if isinstance(e, dict) and (e.get("detail") or e.get("title"))
        )
        kwargs = {"status_code": status, "response": raw, "errors": errors}
        logger.debug(f"API error {status} for {path}: {detail or raw.text[:200]}")

        if status == 401:
            raise AuthenticationError(
                "Authentication failed. Check your API identifier and token.", **kwargs
            )
        elif status == 403:
            raise AuthenticationError(
                "Insufficient permissions for this endpoint.", **kwargs
            )
        elif status == 404:
            raise NotFoundError(f"Resource not found: {path}", **kwargs)
        elif status == 429:
            try:
                retry_after = float(raw.headers.get("Retry-After", 60))
            except ValueError:
                retry_after = 60.0
            raise RateLimitError("Rate limit exceeded.", retry_after=retry_after, **kwargs)
        raise TransportError(
            f"API error {status}: {detail or raw.text[:200]}", **kwargs
        )

    def get(self, path: str, params: Optional[dict] = None) -> Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, json_data: Optional[Any] = None) -> Response:
        return self.request("POST", path, json_data=json_data)

    def delete(self, path: str) -> Response:
        return self.request("DELETE", path)

    @property
    def request_count(self) -> int:
        """Total requests made by this client."""
        return self._request_count

    @property
    def rate_limit_remaining(self) -> int:
        return self._rate_limiter.remaining

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None


def _error_objects(raw: requests.Response) -> list:
    """JSON:API error objects from an error body, if it has any."""
    try:
        body = raw.json()
    except ValueError:
        return []
    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        return body["errors"]
    return []
