"""SQLAlchemy ORM model for the Brand entity."""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from warranty_manager.infrastructure.database.base import Base


class BrandModel(Base):
    """ORM model — maps to the 'brands' table."""

    __tablename__ = "brands"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    support_email: Mapped[str] = mapped_column(String(255), nullable=False)
    support_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    country_emails: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<BrandModel(id={self.id}, name='{self.name}')>"
