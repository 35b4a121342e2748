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
h1client - Pagination

List endpoints return one page of resources plus a links object:

    {"data": [...], "links": {"self": ..., "next": ..., "prev": ...}}

The presence of links.next is the only continuation signal. fetch_all()
follows it page by page and returns every item in server order, or
raises without returning anything.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar
from urllib.parse import parse_qs, urlparse

from .errors import DecodeError, PaginationError


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100     # API maximum
DEFAULT_MAX_PAGES = 1000


@dataclass(frozen=True)
class Links:
    """Page links returned alongside a list response."""
    self_link: Optional[str] = None
    next: Optional[str] = None
    prev: Optional[str] = None
    first: Optional[str] = None
    last: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Links":
        data = data or {}
        values = {}
        for key in ("self", "next", "prev", "first", "last"):
            value = data.get(key)
            if key == "prev" and value is None:
                value = data.get("previous")
            if value is not None and not isinstance(value, str):
                raise DecodeError(f"links.{key} must be a string")
            values["self_link" if key == "self" else key] = value or None
        return cls(**values)

    @property
    def has_next(self) -> bool:
        return bool(self.next)

    def next_page_number(self) -> int:
        """
        Page number encoded in the next link's page[number] parameter.

        Returns 0 when there is no next link or it carries no valid number.
        """
        if not self.next:
            return 0
        query = parse_qs(urlparse(self.next).query)
        values = query.get("page[number]")
        if not values:
            return 0
        try:
            return int(values[0])
        except ValueError:
            return 0


@dataclass
class ListOptions:
    """Pagination cursor sent as page[number] / page[size]."""
    page: int = 0
    page_size: int = 0

    def to_params(self) -> dict[str, int]:
        params = {}
        if self.page:
            params["page[number]"] = self.page
        if self.page_size:
            params["page[size]"] = self.page_size
        return params


@dataclass(frozen=True)
class Page(Generic[T]):
    """A single page of a list response."""
    items: list[T] = field(default_factory=list)
    links: Links = field(default_factory=Links)


def fetch_all(
    fetch_page: Callable[[ListOptions], Page[T]],
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> list[T]:
    """
    Fetch every page of a listing, sequentially.

    Args:
        fetch_page: Called with the cursor for each page
        page_size: Items requested per page
        max_pages: Upper bound on pages fetched

    Returns:
        All items in server order

    Raises:
        PaginationError: next link has no page number, points at a page
            already fetched, or max_pages is exceeded
        Any exception raised by fetch_page, unchanged. Items accumulated
        before the failure are discarded.
    """
    options = ListOptions(page=1, page_size=page_size)
    items: list[T] = []
    visited = set()

    while True:
        visited.add(options.page)
        page = fetch_page(options)
        items.extend(page.items)
        logger.debug(
            f"Fetched page {options.page} ({len(page.items)} items, {len(items)} total)"
        )

        if not page.links.has_next:
            return items

        next_page = page.links.next_page_number()
        if next_page <= 0:
            raise PaginationError(f"Next link has no page number: {page.links.next}")
        if next_page in visited:
            raise PaginationError(f"Next link points back to page {next_page}")
        if len(visited) >= max_pages:
            raise PaginationError(f"Exceeded {max_pages} pages")
        options.page = next_page
