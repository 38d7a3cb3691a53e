"""
webhook/routes.py

Payment provider callbacks. Unauthenticated; every request is checked
against the Stripe signature header instead.
"""

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.database.session import get_db
from gighub.webhook.schemas import WebhookAck
from gighub.webhook.services import WebhookService

router = APIRouter(prefix="/webhook", tags=["Webhooks"])


@router.post(
    "/payment",
    response_model=WebhookAck,
    status_code=status.HTTP_200_OK,
    summary="Payment Events",
    include_in_schema=False,
)
async def payment_webhook(
    request: Request,
    stripe_signature: str | None = Header(default=None, alias="Stripe-Signature"),
    db: AsyncSession = Depends(get_db),
) -> WebhookAck:
    payload = await request.body()
    await WebhookService(db).handle_payment_event(payload, stripe_signature)
    return WebhookAck(received=True)
