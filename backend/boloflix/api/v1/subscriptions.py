"""Subscriptions API router.

Creation is public (checkout). Listing, editing and deleting are admin-only.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from boloflix.api.deps import get_db, get_notifier, require_admin
from boloflix.models.subscription import Subscription
from boloflix.schemas.subscription import (
    MessageResponse,
    SubscriptionCreate,
    SubscriptionEnvelope,
    SubscriptionResponse,
    SubscriptionUpdate,
)
from boloflix.services import subscription_store
from boloflix.services.notifier import Notifier

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.post(
    "/subscriptions",
    response_model=SubscriptionEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a subscription",
)
@router.post(
    "/subscribe",
    response_model=SubscriptionEnvelope,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_subscription(
    body: SubscriptionCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
) -> dict:
    """Persist a new subscription, then email the operator and the customer.

    The emails run as a background task after the response is sent; their
    outcome never changes the response.
    """
    subscription = await subscription_store.create_subscription(db, body.model_dump())
    data = SubscriptionResponse.model_validate(subscription)

    background_tasks.add_task(notifier.notify_new_subscription, data)

    return {"message": "Assinatura criada com sucesso!", "data": data}


@router.get(
    "/subscriptions",
    response_model=list[SubscriptionResponse],
    summary="List all subscriptions, newest first",
)
async def list_subscriptions(
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(require_admin),
) -> list[Subscription]:
    return await subscription_store.list_subscriptions(db)


@router.put(
    "/subscriptions/{subscription_id}",
    response_model=SubscriptionEnvelope,
    summary="Update a subscription",
)
async def update_subscription(
    subscription_id: int,
    body: SubscriptionUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(require_admin),
) -> dict:
    """Partially update a subscription. Only explicitly provided fields are changed.

    Raises 404 if the subscription does not exist.
    """
    subscription = await subscription_store.update_subscription(
        db, subscription_id, body.model_dump(exclude_unset=True)
    )
    return {
        "message": "Assinatura atualizada com sucesso.",
        "data": SubscriptionResponse.model_validate(subscription),
    }


@router.delete(
    "/subscriptions/{subscription_id}",
    response_model=MessageResponse,
    summary="Delete a subscription",
)
async def delete_subscription(
    subscription_id: int,
    db: AsyncSession = Depends(get_db),
    _admin: str = Depends(require_admin),
) -> dict:
    """Delete a subscription. Deleting a missing id is not an error."""
    await subscription_store.delete_subscription(db, subscription_id)
    return {"message": "Assinatura deletada com sucesso."}
