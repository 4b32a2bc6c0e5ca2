"""
Billing webhooks router.

Endpoints:
- POST /api/webhooks/revenuecat - RevenueCat subscription events
- POST /api/webhooks/stripe - Stripe subscription and payment events (signed)
"""

import hmac
import logging

import stripe
from fastapi import APIRouter, HTTPException, Request, status

from nudgequest.config import config
from nudgequest.core.use_cases.credit_payment import handle_payment_succeeded
from nudgequest.core.use_cases.handle_subscription_event import (
    handle_revenuecat_event,
    handle_stripe_event,
)
from nudgequest.services import payments

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])
logger = logging.getLogger(__name__)


@router.post("/revenuecat")
async def revenuecat_webhook(request: Request) -> dict:
    """
    Toggle premium from RevenueCat events.

    Accepts both the wrapped ({"event": {...}}) and the flat payload.
    """
    if config.REVENUECAT_WEBHOOK_SECRET:
        expected = config.REVENUECAT_WEBHOOK_SECRET.get_secret_value()
        received = request.headers.get("Authorization", "")
        if received.lower().startswith("bearer "):
            received = received[len("bearer "):]
        if not hmac.compare_digest(received, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid webhook secret"
            )

    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body")
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Expected a JSON object"
        )

    event = payload.get("event", payload)
    if not isinstance(event, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Expected an event object"
        )
    result = await handle_revenuecat_event(event)
    return {"received": True, "handled": result.handled}


@router.post("/stripe")
async def stripe_webhook(request: Request) -> dict:
    payload = await request.body()
    signature = request.headers.get("stripe-signature")

    try:
        event = payments.construct_webhook_event(payload, signature)
    except payments.PaymentsNotConfigured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payments are not configured",
        )
    except (ValueError, stripe.SignatureVerificationError) as e:
        logger.warning(f"Rejected Stripe webhook: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid signature")

    event_type = event.get("type", "")
    data_object = event.get("data", {}).get("object", {})
    if event_type == "payment_intent.succeeded":
        result = await handle_payment_succeeded(data_object)
    else:
        result = await handle_stripe_event(event_type, data_object)
    return {"received": True, "handled": result.handled}
