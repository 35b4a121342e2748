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
h1client Services - Base

Shared plumbing for resource services: one HTTP call plus a decode,
or fetch_all() over a page-fetching closure.
"""

from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from ..jsonapi import decode_resource, decode_resources
from ..pagination import ListOptions, Page, fetch_all

if TYPE_CHECKING:
    from ..client import H1Client


T = TypeVar("T")


class BaseService:
    """Base class for resource services. Holds the client collaborator."""

    def __init__(self, client: "H1Client"):
        self._client = client

    def _get_one(self, cls: type[T], path: str) -> T:
        response = self._client.get(path)
        return decode_resource(cls, response.document.data)

    def _post_one(self, cls: type[T], path: str, body: dict) -> T:
        response = self._client.post(path, json_data=body)
        return decode_resource(cls, response.document.data)

    def _get_list(self, cls: type[T], path: str) -> list[T]:
        response = self._client.get(path)
        return decode_resources(cls, response.document.data)

    def _get_page(
        self,
        cls: type[T],
        path: str,
        list_options: Optional[ListOptions] = None,
        params: Optional[dict] = None,
    ) -> Page[T]:
        query = dict(params or {})
        if list_options is not None:
            query.update(list_options.to_params())
        response = self._client.get(path, params=query or None)
        return Page(
            items=decode_resources(cls, response.document.data),
            links=response.links,
        )

    def _fetch_all(self, fetch_page: Callable[[ListOptions], Page[T]]) -> list[T]:
        config = self._client.config
        return fetch_all(fetch_page, page_size=config.page_size, max_pages=config.max_pages)
