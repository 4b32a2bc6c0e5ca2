"""
Credit Payment Use Case - fulfil a succeeded Stripe PaymentIntent.

AICODE-NOTE: The Purchase row carries the unique payment_intent_id and is
written in the same transaction as the credit, so a redelivered webhook
credits nothing the second time.
"""

import logging
from dataclasses import dataclass
from typing import Any

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from nudgequest.core.domain.shop import (
    PLAN_PERIODS,
    extend_until,
    find_priced_item,
    package_credit,
    price_in_cents,
)
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.storage import purchase_repo, user_repo

logger = logging.getLogger(__name__)


@dataclass
class PaymentCreditResult:
    handled: bool
    user_id: int | None = None
    item_id: str = ""
    coins: int = 0
    gems: int = 0
    duplicate: bool = False
    error_message: str = ""


async def handle_payment_succeeded(intent: dict[str, Any]) -> PaymentCreditResult:
    """Apply a Stripe `payment_intent.succeeded` event object."""
    intent_id = intent.get("id")
    metadata = intent.get("metadata") or {}
    item = find_priced_item(metadata.get("item_id") or "")
    try:
        user_id = int(metadata.get("user_id"))
    except (TypeError, ValueError):
        user_id = None

    if not intent_id or user_id is None or item is None:
        logger.warning(f"PaymentIntent {intent_id} without usable metadata: {metadata}")
        return PaymentCreditResult(handled=False, error_message="Missing payment metadata")

    amount = intent.get("amount_received", intent.get("amount"))
    if amount != price_in_cents(item["price"]):
        logger.warning(
            f"PaymentIntent {intent_id}: amount {amount} does not match {item['id']}"
        )
        return PaymentCreditResult(
            handled=False, user_id=user_id, item_id=item["id"],
            error_message="Amount does not match item price",
        )

    if not await user_repo.get_user(user_id):
        logger.warning(f"PaymentIntent {intent_id} for unknown user {user_id}")
        return PaymentCreditResult(
            handled=False, user_id=user_id, error_message="User not found"
        )

    if await purchase_repo.get_by_payment_intent(intent_id):
        return _already_credited(intent_id, user_id, item["id"])

    coins, gems = package_credit(item["id"]) or (0, 0)
    try:
        async with in_transaction():
            await purchase_repo.record_purchase(
                user_id, item["id"], 0, 0, payment_intent_id=intent_id
            )
            if coins or gems:
                await user_repo.credit_wallet(user_id, coins=coins, gems=gems)
            else:
                user = await user_repo.get_user_for_update(user_id)
                period = PLAN_PERIODS[item["interval"]]
                await user_repo.set_premium(
                    user, True, extend_until(user.premium_expires_at, period, utcnow())
                )
    except IntegrityError:
        return _already_credited(intent_id, user_id, item["id"])

    logger.info(
        f"PaymentIntent {intent_id}: user {user_id} bought {item['id']} "
        f"(+{coins} coins, +{gems} gems)"
    )
    return PaymentCreditResult(
        handled=True, user_id=user_id, item_id=item["id"], coins=coins, gems=gems
    )


def _already_credited(intent_id: str, user_id: int, item_id: str) -> PaymentCreditResult:
    logger.info(f"PaymentIntent {intent_id} already credited")
    return PaymentCreditResult(
        handled=True, user_id=user_id, item_id=item_id, duplicate=True
    )
