"""Domain entity for warranty-expiration reminders."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class NotificationType(str, Enum):
    DAYS_90 = "90days"
    DAYS_60 = "60days"
    DAYS_30 = "30days"
    EXPIRED = "expired"


@dataclass
class Notification:
    """A scheduled reminder for a product whose warranty is about to end.

    Created by an external scheduler, never by user action.
    """

    product_id: str
    type: NotificationType
    id: str = field(default_factory=lambda: str(uuid4()))
    sent: bool = False
    sent_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def mark_sent(self) -> None:
        self.sent = True
        self.sent_at = datetime.now(timezone.utc)
