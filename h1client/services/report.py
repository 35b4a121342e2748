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
h1client - Report Service

Endpoints:
  GET  /reports                        - Reports matching a filter (paginated)
  GET  /reports/{id}                   - Report details
  POST /reports/{id}/state_changes     - Move a report to a new state
  POST /reports/{id}/activities        - Comment on a report

API Reference: https://api.hackerone.com/core-resources/#reports
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Optional, Union

from ..jsonapi import encode_resource
from ..models import Activity, CreateComment, Report, ReportState, StateChange
from ..pagination import ListOptions, Page
from .base import BaseService


logger = logging.getLogger(__name__)


@dataclass
class ReportListFilter:
    """
    Filters for ReportService.list().

    Rendered with the API's bracket syntax, e.g. filter[program][]=acme
    and filter[created_at__gt]=2016-02-02T04:05:06+00:00. Unset values
    are omitted. Naive datetimes are taken as UTC.
    """
    program: list[str] = field(default_factory=list)
    state: list[str] = field(default_factory=list)
    id: list[int] = field(default_factory=list)
    created_at__gt: Optional[datetime] = None
    created_at__lt: Optional[datetime] = None
    triaged_at__gt: Optional[datetime] = None
    triaged_at__lt: Optional[datetime] = None
    triaged_at__null: bool = False
    closed_at__gt: Optional[datetime] = None
    closed_at__lt: Optional[datetime] = None
    closed_at__null: bool = False
    disclosed_at__gt: Optional[datetime] = None
    disclosed_at__lt: Optional[datetime] = None
    disclosed_at__null: bool = False
    bounty_awarded_at__gt: Optional[datetime] = None
    bounty_awarded_at__lt: Optional[datetime] = None
    bounty_awarded_at__null: bool = False
    swag_at__gt: Optional[datetime] = None
    swag_at__lt: Optional[datetime] = None
    swag_at__null: bool = False
    last_reporter_activity_at__gt: Optional[datetime] = None
    last_reporter_activity_at__lt: Optional[datetime] = None
    last_reporter_activity_at__null: bool = False
    first_program_activity_at__gt: Optional[datetime] = None
    first_program_activity_at__lt: Optional[datetime] = None
    first_program_activity_at__null: bool = False
    last_program_activity_at__gt: Optional[datetime] = None
    last_program_activity_at__lt: Optional[datetime] = None
    last_activity_at__gt: Optional[datetime] = None
    last_activity_at__lt: Optional[datetime] = None

    def to_params(self) -> dict[str, Union[str, list[str]]]:
        params: dict[str, Union[str, list[str]]] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                if value:
                    params[f"filter[{f.name}][]"] = [str(v) for v in value]
            elif isinstance(value, bool):
                if value:
                    params[f"filter[{f.name}]"] = "true"
            elif isinstance(value, datetime):
                if value.tzinfo is None:
                    value = value.replace(tzinfo=timezone.utc)
                params[f"filter[{f.name}]"] = value.isoformat()
        return params


class ReportService(BaseService):
    """Report related methods of the HackerOne API."""

    def get(self, report_id: str) -> Report:
        """
        Fetch a report by ID.

        Raises:
            NotFoundError: If the report doesn't exist
        """
        return self._get_one(Report, f"reports/{report_id}")

    def change_state(
        self,
        report_id: str,
        message: str,
        state: Union[str, ReportState],
        original_report_id: Optional[str] = None,
    ) -> Report:
        """
        Transition a report to a new state.

        original_report_id is required by the API when marking a
        report as a duplicate.

        API docs: https://api.hackerone.com/core-resources/#reports-change-state
        """
        if isinstance(state, ReportState):
            state = state.value
        change = StateChange(message=message, state=state, original_report_id=original_report_id)
        logger.debug(f"Changing state of report {report_id} to {state}")
        return self._post_one(
            Report,
            f"reports/{report_id}/state_changes",
            encode_resource(StateChange.RESOURCE_TYPE, change.to_attributes()),
        )

    def create_comment(self, report_id: str, message: str, internal: bool = False) -> Activity:
        """
        Post a comment on a report.

        API docs: https://api.hackerone.com/core-resources/#reports-create-comment
        """
        comment = CreateComment(message=message, internal=internal)
        return self._post_one(
            Activity,
            f"reports/{report_id}/activities",
            encode_resource(CreateComment.RESOURCE_TYPE, comment.to_attributes()),
        )

    def url(self, report_id: str) -> str:
        """Web URL of a report."""
        return f"{self._client.config.web_url.rstrip('/')}/reports/{report_id}"

    def list(
        self,
        report_filter: Optional[ReportListFilter] = None,
        list_options: Optional[ListOptions] = None,
    ) -> Page[Report]:
        """
        Fetch one page of reports matching the filter.

        API docs: https://api.hackerone.com/core-resources/#reports-get-all-reports
        """
        report_filter = report_filter or ReportListFilter()
        return self._get_page(Report, "reports", list_options, report_filter.to_params())

    def list_all(self, report_filter: Optional[ReportListFilter] = None) -> list[Report]:
        """Fetch every report matching the filter, across all pages."""
        return self._fetch_all(lambda options: self.list(report_filter, options))
