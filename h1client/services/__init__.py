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
h1client Services

Per-resource callers composing one HTTP request with the JSON:API
decoder, or the paginator with the decoder for list endpoints.
"""

from .base import BaseService
from .program import ProgramService
from .report import ReportListFilter, ReportService
from .credential import CredentialService


__all__ = [
    "BaseService",
    "ProgramService",
    "ReportService",
    "ReportListFilter",
    "CredentialService",
]
