"""Delivery comms routes.

GET /comms/your-next-delivery/{customer_id} — next-delivery notification
for one customer.  Malformed ids return 400, unknown ids return 404.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from app.api.deps import get_notification_generator
from app.notification.delivery import DeliveryError, NotificationGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comms", tags=["comms"])


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class DeliveryCommsOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    message: str
    total_price: float = Field(alias="totalPrice")
    free_gift: bool = Field(alias="freeGift")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get(
    "/your-next-delivery/{customer_id}",
    response_model=DeliveryCommsOut,
    summary="Next delivery notification for a customer",
)
def get_next_delivery_comms(
    customer_id: str,
    generator: NotificationGenerator = Depends(get_notification_generator),
) -> DeliveryCommsOut:
    result = generator.generate(customer_id)

    if result.error is DeliveryError.INVALID_IDENTIFIER:
        raise HTTPException(status_code=400, detail=f"The customer ID {customer_id} is invalid")
    if result.error is DeliveryError.CUSTOMER_NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")

    notification = result.value
    return DeliveryCommsOut(
        title=notification.title,
        message=notification.message,
        total_price=float(notification.total_price),
        free_gift=notification.free_gift,
    )
