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
h1client - Program Service

Endpoints:
  GET /me/programs                             - Programs of the API user
  GET /programs/{id}                           - Program details
  GET /programs/{id}/structured_scopes         - Program assets (paginated)
"""

from typing import Optional

from ..models import Program, StructuredScope
from ..pagination import ListOptions, Page
from .base import BaseService


class ProgramService(BaseService):
    """Program related methods of the HackerOne API."""

    def me(self) -> list[Program]:
        """Fetch the programs available to the API user."""
        return self._get_list(Program, "me/programs")

    def get(self, program_id: str) -> Program:
        """
        Fetch a program by ID.

        Raises:
            NotFoundError: If the program doesn't exist
        """
        return self._get_one(Program, f"programs/{program_id}")

    def list_structured_scopes(
        self,
        program_id: str,
        list_options: Optional[ListOptions] = None,
    ) -> Page[StructuredScope]:
        """Fetch one page of structured scopes for a program."""
        return self._get_page(
            StructuredScope,
            f"programs/{program_id}/structured_scopes",
            list_options,
        )

    def list_all_structured_scopes(self, program_id: str) -> list[StructuredScope]:
        """Fetch every structured scope for a program, across all pages."""
        return self._fetch_all(
            lambda options: self.list_structured_scopes(program_id, options)
        )
