"""Domain entity for favorited products and providers."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class FavoriteType(str, Enum):
    PRODUCT = "product"
    PROVIDER = "provider"


@dataclass
class Favorite:
    type: FavoriteType
    target_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
