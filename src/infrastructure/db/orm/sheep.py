from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class SheepORM(Base):
    __tablename__ = "sheep"
    __table_args__ = (
        UniqueConstraint("owner_id", "tag_number", name="ux_sheep_owner_tag"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tag_number: Mapped[str] = mapped_column(String(16), nullable=False)
    gender: Mapped[str] = mapped_column(String(6), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    breed: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # Genealogy fields
    mother_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sheep.id"), nullable=True, index=True
    )
    father_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sheep.id"), nullable=True, index=True
    )

    # Breeding fields
    fertility: Mapped[str | None] = mapped_column(String(4), nullable=True)
    is_pregnant: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pregnancy_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    health_status: Mapped[str] = mapped_column(String(32), nullable=False, default="healthy")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
