"""
h1client Models

Typed representations of the HackerOne resources returned by the API.
Every field is optional because the API may omit any attribute; absent
and null values both decode to None. Field names match the wire names
unless declared otherwise with attribute().

HackerOne API docs: https://api.hackerone.com/reference/
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional

from .jsonapi import attribute, relationship


class ReportState(Enum):
    """States a report can be moved to."""
    NEW = "new"
    PENDING_PROGRAM_REVIEW = "pending-program-review"
    TRIAGED = "triaged"
    NEEDS_MORE_INFO = "needs-more-info"
    RESOLVED = "resolved"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "not-applicable"
    DUPLICATE = "duplicate"
    SPAM = "spam"
    RETESTING = "retesting"


# ─────────────────────────────────────────────────────────────────────
#  Users
# ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserProfilePicture:
    """Avatar URLs keyed by size."""
    size_62x62: Optional[str] = attribute("62x62")
    size_82x82: Optional[str] = attribute("82x82")
    size_110x110: Optional[str] = attribute("110x110")
    size_260x260: Optional[str] = attribute("260x260")


@dataclass(frozen=True)
class Group:
    """A permission group inside a program."""
    RESOURCE_TYPE: ClassVar[str] = "group"

    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    permissions: Optional[list[str]] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Program:
    """
    A program the API user has access to.

    groups and members only come from the resource's relationships.
    """
    RESOURCE_TYPE: ClassVar[str] = "program"

    id: Optional[str] = None
    type: Optional[str] = None
    handle: Optional[str] = None
    policy: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    groups: Optional[list[Group]] = relationship()
    members: "Optional[list[Member]]" = relationship()


@dataclass(frozen=True)
class User:
    """An individual HackerOne user."""
    RESOURCE_TYPE: ClassVar[str] = "user"

    id: Optional[str] = None
    type: Optional[str] = None
    disabled: Optional[bool] = None
    username: Optional[str] = None
    name: Optional[str] = None
    profile_picture: Optional[UserProfilePicture] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    reputation: Optional[int] = None
    signal: Optional[float] = None
    impact: Optional[float] = None
    hackerone_triager: Optional[bool] = None
    created_at: Optional[datetime] = None
    participating_programs: Optional[list[Program]] = relationship()


@dataclass(frozen=True)
class Member:
    """A user's membership of a program."""
    RESOURCE_TYPE: ClassVar[str] = "member"

    id: Optional[str] = None
    type: Optional[str] = None
    permissions: Optional[list[str]] = None
    created_at: Optional[datetime] = None
    user: Optional[User] = relationship()


# ─────────────────────────────────────────────────────────────────────
#  Scope
# ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StructuredScope:
    """An asset defined by a program."""
    RESOURCE_TYPE: ClassVar[str] = "structured-scope"

    id: Optional[str] = None
    type: Optional[str] = None
    asset_identifier: Optional[str] = None
    asset_type: Optional[str] = None
    eligible_for_bounty: Optional[bool] = None
    eligible_for_submission: Optional[bool] = None
    instruction: Optional[str] = None
    confidentiality_requirement: Optional[str] = None
    integrity_requirement: Optional[str] = None
    availability_requirement: Optional[str] = None
    max_severity: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    reference: Optional[str] = None


# ─────────────────────────────────────────────────────────────────────
#  Reports
# ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Weakness:
    RESOURCE_TYPE: ClassVar[str] = "weakness"

    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    external_id: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Severity:
    RESOURCE_TYPE: ClassVar[str] = "severity"

    id: Optional[str] = None
    type: Optional[str] = None
    rating: Optional[str] = None
    score: Optional[float] = None
    author_type: Optional[str] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Activity:
    """
    An entry in a report's timeline.

    The resource type varies per activity ("activity-comment",
    "activity-bug-triaged", ...), so it is not checked on decode.
    """
    id: Optional[str] = None
    type: Optional[str] = None
    message: Optional[str] = None
    internal: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    actor: Optional[User] = relationship()


@dataclass(frozen=True)
class ReportSummary:
    RESOURCE_TYPE: ClassVar[str] = "report-summary"

    id: Optional[str] = None
    type: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[User] = relationship()


@dataclass(frozen=True)
class Report:
    """A vulnerability report submitted to a program."""
    RESOURCE_TYPE: ClassVar[str] = "report"

    id: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None
    state: Optional[str] = None
    vulnerability_information: Optional[str] = None
    created_at: Optional[datetime] = None
    triaged_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    disclosed_at: Optional[datetime] = None
    bounty_awarded_at: Optional[datetime] = None
    swag_awarded_at: Optional[datetime] = None
    last_reporter_activity_at: Optional[datetime] = None
    first_program_activity_at: Optional[datetime] = None
    last_program_activity_at: Optional[datetime] = None
    last_activity_at: Optional[datetime] = None
    last_public_activity_at: Optional[datetime] = None
    issue_tracker_reference_id: Optional[str] = None
    issue_tracker_reference_url: Optional[str] = None
    reporter: Optional[User] = relationship()
    program: Optional[Program] = relationship()
    structured_scope: Optional[StructuredScope] = relationship()
    weakness: Optional[Weakness] = relationship()
    severity: Optional[Severity] = relationship()
    activities: Optional[list[Activity]] = relationship()
    summaries: Optional[list[ReportSummary]] = relationship()


# ─────────────────────────────────────────────────────────────────────
#  Credentials
# ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CredentialsTable:
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class Credentials:
    table: Optional[CredentialsTable] = None


@dataclass(frozen=True)
class Credential:
    """A set of test credentials handed out for a structured scope."""
    RESOURCE_TYPE: ClassVar[str] = "credential"

    id: Optional[str] = None
    type: Optional[str] = None
    credentials: Optional[Credentials] = None
    revoked: Optional[bool] = None
    assignee_id: Optional[str] = None
    assignee_username: Optional[str] = None


@dataclass(frozen=True)
class CredentialInquiry:
    """A question a program asks hackers requesting credentials."""
    RESOURCE_TYPE: ClassVar[str] = "credential-inquiry"

    id: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CredentialInquiryResponse:
    """A hacker's answer to a CredentialInquiry."""
    RESOURCE_TYPE: ClassVar[str] = "credential-inquiry-response"

    id: Optional[str] = None
    type: Optional[str] = None
    details: Optional[str] = None
    created_at: Optional[datetime] = None
    user: Optional[User] = relationship()


# ─────────────────────────────────────────────────────────────────────
#  Request bodies
# ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StateChange:
    """Body of a report state change request."""
    RESOURCE_TYPE: ClassVar[str] = "state-change"

    message: str
    state: str
    original_report_id: Optional[str] = None

    def to_attributes(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "state": self.state,
            "original_report_id": self.original_report_id,
        }


@dataclass(frozen=True)
class CreateComment:
    """Body of a report comment request."""
    RESOURCE_TYPE: ClassVar[str] = "activity-comment"

    message: str
    internal: bool = False

    def to_attributes(self) -> dict[str, Any]:
        return {"message": self.message, "internal": self.internal}
