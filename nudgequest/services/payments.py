"""
Payment Service - Stripe client.

Creates PaymentIntents for plans/currency packages and verifies webhook
signatures. Billing state itself is handled by the subscription use-case.
"""

import json
import logging
from typing import Any

import stripe

from nudgequest.config import config
from nudgequest.core.domain.shop import price_in_cents

logger = logging.getLogger(__name__)


class PaymentsNotConfigured(RuntimeError):
    """Stripe keys are missing from the environment."""


def _api_key() -> str:
    if not config.STRIPE_SECRET_KEY:
        raise PaymentsNotConfigured("STRIPE_SECRET_KEY is not set")
    return config.STRIPE_SECRET_KEY.get_secret_value()


def create_payment_intent(user_id: int, item: dict[str, Any]) -> dict[str, Any]:
    """
    Create a PaymentIntent for a priced catalog item.

    Returns the client secret and amount for the frontend.
    """
    amount = price_in_cents(item["price"])
    intent = stripe.PaymentIntent.create(
        api_key=_api_key(),
        amount=amount,
        currency="usd",
        metadata={"user_id": str(user_id), "item_id": item["id"]},
        automatic_payment_methods={"enabled": True},
    )
    logger.info(f"PaymentIntent {intent['id']} created for user {user_id}: {item['id']}")
    return {
        "client_secret": intent["client_secret"],
        "amount": amount,
        "currency": "usd",
        "item_id": item["id"],
    }


def construct_webhook_event(payload: bytes, signature: str | None) -> dict[str, Any]:
    """
    Verify a Stripe webhook payload and return it as a plain dict.

    Raises stripe.SignatureVerificationError on a bad signature.
    """
    if not config.STRIPE_WEBHOOK_SECRET:
        raise PaymentsNotConfigured("STRIPE_WEBHOOK_SECRET is not set")
    stripe.Webhook.construct_event(
        payload, signature or "", config.STRIPE_WEBHOOK_SECRET.get_secret_value()
    )
    return json.loads(payload)
