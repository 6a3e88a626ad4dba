"""Subscription store: CRUD operations on the subscriptions table.

Each operation is a single statement against the database; driver errors
are logged and re-raised as ``PersistenceError`` so routes never leak them.
"""

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from boloflix.errors import NotFoundError, PersistenceError
from boloflix.models.subscription import Subscription

logger = logging.getLogger(__name__)

# Columns a patch may touch. ``id`` and ``created_at`` are never editable.
EDITABLE_FIELDS = frozenset(
    {
        "customer_name",
        "customer_email",
        "plan_title",
        "plan_price",
        "flavor_preference",
        "delivery_day",
        "delivery_time",
    }
)


async def create_subscription(db: AsyncSession, fields: dict[str, Any]) -> Subscription:
    """Insert one subscription and return the persisted row."""
    subscription = Subscription(**{k: v for k, v in fields.items() if k in EDITABLE_FIELDS})
    try:
        db.add(subscription)
        await db.flush()
        await db.refresh(subscription)
    except SQLAlchemyError as exc:
        logger.exception("Failed to insert subscription for %s", fields.get("customer_name"))
        raise PersistenceError("Erro interno ao processar a assinatura.") from exc

    logger.info("Created subscription %s (%s)", subscription.id, subscription.plan_title)
    return subscription


async def list_subscriptions(db: AsyncSession) -> list[Subscription]:
    """Return every subscription, newest first."""
    stmt = select(Subscription).order_by(Subscription.created_at.desc(), Subscription.id.desc())
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("Failed to list subscriptions")
        raise PersistenceError("Erro ao buscar assinaturas.") from exc
    return list(result.scalars().all())


async def get_subscription(db: AsyncSession, subscription_id: int) -> Subscription | None:
    """Look up one subscription by primary key."""
    try:
        return await db.get(Subscription, subscription_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load subscription %s", subscription_id)
        raise PersistenceError("Erro ao buscar assinatura.") from exc


async def update_subscription(
    db: AsyncSession, subscription_id: int, patch: dict[str, Any]
) -> Subscription:
    """Apply a partial patch. Only the supplied editable fields change.

    Raises:
        NotFoundError: If no row has ``subscription_id``.
    """
    subscription = await get_subscription(db, subscription_id)
    if subscription is None:
        raise NotFoundError()

    for field, value in patch.items():
        if field in EDITABLE_FIELDS:
            setattr(subscription, field, value)

    try:
        await db.flush()
        await db.refresh(subscription)
    except SQLAlchemyError as exc:
        logger.exception("Failed to update subscription %s", subscription_id)
        raise PersistenceError("Erro ao atualizar assinatura.") from exc

    logger.info("Updated subscription %s: %s", subscription_id, sorted(patch))
    return subscription


async def delete_subscription(db: AsyncSession, subscription_id: int) -> bool:
    """Delete a subscription. Returns False if there was nothing to delete."""
    try:
        result = await db.execute(delete(Subscription).where(Subscription.id == subscription_id))
        await db.flush()
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete subscription %s", subscription_id)
        raise PersistenceError("Erro ao deletar assinatura.") from exc

    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted subscription %s", subscription_id)
    else:
        logger.info("Delete of missing subscription %s ignored", subscription_id)
    return deleted
