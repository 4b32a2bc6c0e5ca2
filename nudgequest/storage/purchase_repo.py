"""
Purchase Repository - plain CRUD operations for the Purchase model.

AICODE-NOTE: Data access only, NO business logic.
"""

from nudgequest.database.models import Purchase


async def record_purchase(
    user_id: int,
    item_id: str,
    coin_cost: int,
    gem_cost: int,
    payment_intent_id: str | None = None,
) -> Purchase:
    """Raises IntegrityError if the payment intent was already recorded."""
    return await Purchase.create(
        user_id=user_id,
        item_id=item_id,
        coin_cost=coin_cost,
        gem_cost=gem_cost,
        payment_intent_id=payment_intent_id,
    )


async def get_by_payment_intent(payment_intent_id: str) -> Purchase | None:
    return await Purchase.get_or_none(payment_intent_id=payment_intent_id)
