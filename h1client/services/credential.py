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
h1client - Credential Service

Endpoints:
  GET    /programs/{id}/credential_inquiries                         (paginated)
  GET    /programs/{id}/credential_inquiries/{id}/credential_inquiry_responses
                                                                     (paginated)
  POST   /credentials                                                - Create
  DELETE /credentials/{id}                                           - Delete

API Reference: https://api.hackerone.com/customer-resources/#credentials
"""

import json
import logging
from typing import Any, Optional

from ..models import Credential, CredentialInquiry, CredentialInquiryResponse
from ..jsonapi import encode_resource
from ..pagination import ListOptions, Page
from .base import BaseService


logger = logging.getLogger(__name__)


class CredentialService(BaseService):
    """Credential related methods of the HackerOne API."""

    def list_credential_inquiries(
        self,
        program_id: str,
        list_options: Optional[ListOptions] = None,
    ) -> Page[CredentialInquiry]:
        """Fetch one page of a program's credential inquiries."""
        return self._get_page(
            CredentialInquiry,
            f"programs/{program_id}/credential_inquiries",
            list_options,
        )

    def list_all_credential_inquiries(self, program_id: str) -> list[CredentialInquiry]:
        """Fetch every credential inquiry of a program, across all pages."""
        return self._fetch_all(
            lambda options: self.list_credential_inquiries(program_id, options)
        )

    def list_credential_inquiry_responses(
        self,
        program_id: str,
        inquiry_id: str,
        list_options: Optional[ListOptions] = None,
    ) -> Page[CredentialInquiryResponse]:
        """Fetch one page of responses to a credential inquiry."""
        return self._get_page(
            CredentialInquiryResponse,
            f"programs/{program_id}/credential_inquiries/{inquiry_id}/credential_inquiry_responses",
            list_options,
        )

    def list_all_credential_inquiry_responses(
        self, program_id: str, inquiry_id: str,
    ) -> list[CredentialInquiryResponse]:
        """Fetch every response to a credential inquiry, across all pages."""
        return self._fetch_all(
            lambda options: self.list_credential_inquiry_responses(program_id, inquiry_id, options)
        )

    def create_credential(
        self,
        structured_scope_id: str,
        credentials: Any,
        assignee: Optional[str] = None,
    ) -> Credential:
        """
        Create a credential for a structured scope.

        Args:
            structured_scope_id: Asset the credential grants access to
            credentials: Any JSON-serialisable value; sent as a JSON string
            assignee: Username to assign the credential to

        The API expects structured_scope_id beside "data", not inside it.

        API docs: https://api.hackerone.com/customer-resources/#credentials-create-a-credential
        """
        body = encode_resource(
            Credential.RESOURCE_TYPE,
            {"credentials": json.dumps(credentials), "assignee": assignee},
            structured_scope_id=structured_scope_id,
        )
        logger.debug(f"Creating credential for structured scope {structured_scope_id}")
        return self._post_one(Credential, "credentials", body)

    def delete_credential(self, credential_id: str) -> None:
        """Delete a credential by ID."""
        self._client.delete(f"credentials/{credential_id}")
