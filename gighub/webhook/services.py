"""
webhook/services.py

Payment provider webhook handling.
- Verifies the Stripe signature over the raw request body
- Marks the matching order paid on `payment_intent.succeeded`
- Other event types are acknowledged and ignored
"""

import logging
from typing import Any

import stripe
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.config import settings
from gighub.core.exceptions import BadRequestError, ServerError
from gighub.order.services import OrderService

logger = logging.getLogger(__name__)

PAYMENT_SUCCEEDED = "payment_intent.succeeded"


class WebhookService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def verify_event(self, payload: bytes, signature: str | None) -> Any:
        """
        Returns the parsed Stripe event.

        Raises:
            ServerError: Stripe keys are not configured.
            BadRequestError: payload is not valid JSON or the signature does not match.
        """
        if not settings.STRIPE_SECRET_KEY or not settings.STRIPE_WEBHOOK_SECRET:
            logger.error("[WEBHOOK] Stripe keys are not configured")
            raise ServerError("Stripe configuration error")

        try:
            return stripe.Webhook.construct_event(
                payload, signature or "", settings.STRIPE_WEBHOOK_SECRET
            )
        except ValueError as e:
            logger.warning(f"[WEBHOOK] Invalid payload: {e}")
            raise BadRequestError(f"Webhook Error: {e}")
        except stripe.SignatureVerificationError as e:
            logger.warning(f"[WEBHOOK] Signature verification failed: {e}")
            raise BadRequestError(f"Webhook Error: {e}")

    async def handle_payment_event(self, payload: bytes, signature: str | None) -> None:
        event = self.verify_event(payload, signature)
        event_type = event["type"]
        logger.info(f"[WEBHOOK] Received {event_type} ({event['id']})")

        if event_type == PAYMENT_SUCCEEDED:
            intent_id = event["data"]["object"]["id"]
            await OrderService(self.db).mark_paid(intent_id)
