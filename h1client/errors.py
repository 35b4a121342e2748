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
h1client - Error Types

Every exception raised by the library derives from H1Error.

  DecodeError      - response body is not the JSON shape we expect
  PaginationError  - a listing cannot make progress (bad or cyclic next link)
  TransportError   - HTTP-level failure, classified by status code
"""

from typing import Any, Optional


class H1Error(Exception):
    """Base exception for h1client."""


class DecodeError(H1Error):
    """Malformed JSON or a payload that does not fit the target model."""


class PaginationError(H1Error):
    """Pagination stopped making progress."""


class TransportError(H1Error):
    """Base exception for HTTP and connection failures."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response: Any = None,
        errors: Optional[list[dict]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.errors = errors or []


class AuthenticationError(TransportError):
    """Invalid credentials or insufficient permissions."""
    pass


class NotFoundError(TransportError):
    """Resource not found."""
    pass


class RateLimitError(TransportError):
    """API rate limit exceeded."""

    def __init__(self, message: str, retry_after: float = 60.0, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
