"""Subscription model: one row per cake-box subscription."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from boloflix.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Subscription(Base):
    """A customer's subscription to a cake plan.

    ``id`` and ``created_at`` are assigned on insert and never patched.
    The customer email is denormalized: there is no customer table.
    """

    __tablename__ = "subscriptions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )

    # Customer
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Plan
    plan_title: Mapped[str] = mapped_column(String(100), nullable=False)
    plan_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    flavor_preference: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Delivery preference (free text, not checked against capacity)
    delivery_day: Mapped[str] = mapped_column(String(50), nullable=False)
    delivery_time: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Subscription(id={self.id}, customer={self.customer_name}, plan={self.plan_title})>"
