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
h1client - HackerOne API Client Library

Typed models for HackerOne resources, a JSON:API envelope decoder,
link-driven pagination and per-resource services.

Components:
  - H1Client:        Authenticated, rate-limited transport
  - ProgramService / ReportService / CredentialService
  - decode / decode_list: JSON:API envelope decoding
  - fetch_all:       Page-link-driven pagination
"""

__version__ = "0.3.0"
__license__ = "GPL-3.0-or-later"

from .errors import (
    H1Error,
    DecodeError,
    PaginationError,
    TransportError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
)
from .jsonapi import (
    Document,
    decode,
    decode_list,
    decode_resource,
    decode_resources,
    encode_resource,
    parse_document,
)
from .pagination import (
    DEFAULT_PAGE_SIZE,
    Links,
    ListOptions,
    Page,
    fetch_all,
)
from .models import (
    Activity,
    Credential,
    CredentialInquiry,
    CredentialInquiryResponse,
    Credentials,
    CredentialsTable,
    Group,
    Member,
    Program,
    Report,
    ReportState,
    ReportSummary,
    Severity,
    StructuredScope,
    User,
    UserProfilePicture,
    Weakness,
)
from .config import ClientConfig, Config, load_config, get_config, reset_config
from .credentials import CredentialManager, get_credentials, reset_credentials
from .client import H1Client, RateLimiter, Response
from .services import (
    CredentialService,
    ProgramService,
    ReportListFilter,
    ReportService,
)


def get_version() -> str:
    """Return the current version string."""
    return __version__


__all__ = [
    # Errors
    "H1Error",
    "DecodeError",
    "PaginationError",
    "TransportError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    # Decoding
    "Document",
    "decode",
    "decode_list",
    "decode_resource",
    "decode_resources",
    "encode_resource",
    "parse_document",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "Links",
    "ListOptions",
    "Page",
    "fetch_all",
    # Models
    "Activity",
    "Credential",
    "CredentialInquiry",
    "CredentialInquiryResponse",
    "Credentials",
    "CredentialsTable",
    "Group",
    "Member",
    "Program",
    "Report",
    "ReportState",
    "ReportSummary",
    "Severity",
    "StructuredScope",
    "User",
    "UserProfilePicture",
    "Weakness",
    # Config
    "ClientConfig",
    "Config",
    "load_config",
    "get_config",
    "reset_config",
    "CredentialManager",
    "get_credentials",
    "reset_credentials",
    # Client
    "H1Client",
    "RateLimiter",
    "Response",
    # Services
    "CredentialService",
    "ProgramService",
    "ReportListFilter",
    "ReportService",
    "get_version",
]
