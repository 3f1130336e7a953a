"""Domain entity for product reviews."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Review:
    """A rating (1–5) left on a product. Immutable once created."""

    product_id: str
    rating: int
    id: str = field(default_factory=lambda: str(uuid4()))
    title: str | None = None
    content: str | None = None
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    recommend: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
