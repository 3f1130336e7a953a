"""Domain entity for support requests filed with a manufacturer."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class IssueCategory(str, Enum):
    MALFUNCTION = "malfunction"
    DEFECT = "defect"
    DAMAGE = "damage"
    OTHER = "other"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SupportRequestStatus(str, Enum):
    """Lifecycle states of a support request.

    Filing a request moves it straight to ``SENT``; ``PENDING`` and
    ``RESOLVED`` are only reached through an explicit update.
    """

    PENDING = "pending"
    SENT = "sent"
    RESOLVED = "resolved"


@dataclass
class SupportRequest:
    """A warranty claim for a product, e-mailed to the brand's support desk."""

    product_id: str
    issue_description: str
    category: IssueCategory
    severity: IssueSeverity
    id: str = field(default_factory=lambda: str(uuid4()))
    status: SupportRequestStatus = SupportRequestStatus.PENDING
    email_sent_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def mark_sent(self) -> None:
        """Record that the claim e-mail went out."""
        self.status = SupportRequestStatus.SENT
        self.email_sent_at = datetime.now(timezone.utc)

    def update(
        self,
        *,
        status: SupportRequestStatus | None = None,
        issue_description: str | None = None,
        category: IssueCategory | None = None,
        severity: IssueSeverity | None = None,
    ) -> None:
        if status is not None:
            self.status = status
        if issue_description is not None:
            self.issue_description = issue_description
        if category is not None:
            self.category = category
        if severity is not None:
            self.severity = severity
