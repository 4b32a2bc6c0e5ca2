"""
Payments API router.

Endpoints:
- GET /api/payments/plans - Premium plans
- GET /api/payments/shop - Power-ups and currency packages
- POST /api/payments/create-payment-intent - Stripe PaymentIntent for a plan/package
- POST /api/payments/purchase - Buy a power-up with coins/gems
"""

import logging

import stripe
from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from nudgequest.core.domain.shop import (
    COIN_PACKAGES,
    GEM_PACKAGES,
    PLANS,
    POWER_UPS,
    find_priced_item,
)
from nudgequest.core.use_cases.purchase_power_up import PurchasePowerUpUseCase
from nudgequest.database.models import User
from nudgequest.interfaces.api.auth import get_current_user
from nudgequest.interfaces.api.errors import raise_for_result
from nudgequest.interfaces.api.schemas import (
    CurrencyPackage,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PlanResponse,
    PlansResponse,
    PowerUpResponse,
    PurchaseRequest,
    PurchaseResponse,
    RewardResponse,
    ShopResponse,
)
from nudgequest.services import payments

router = APIRouter(prefix="/api/payments", tags=["payments"])
logger = logging.getLogger(__name__)


@router.get("/plans", response_model=PlansResponse)
async def list_plans() -> PlansResponse:
    return PlansResponse(plans=[PlanResponse(**plan) for plan in PLANS])


@router.get("/shop", response_model=ShopResponse)
async def shop_catalog() -> ShopResponse:
    return ShopResponse(
        power_ups=[PowerUpResponse.model_validate(p) for p in POWER_UPS.values()],
        coin_packages=[CurrencyPackage(**p) for p in COIN_PACKAGES],
        gem_packages=[CurrencyPackage(**p) for p in GEM_PACKAGES],
    )


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest, user: User = Depends(get_current_user)
) -> PaymentIntentResponse:
    item = find_priced_item(request.item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown item")

    try:
        intent = await run_in_threadpool(payments.create_payment_intent, user.id, item)
    except payments.PaymentsNotConfigured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payments are not configured",
        )
    except stripe.StripeError as e:
        logger.error(f"Stripe error for user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to create payment intent",
        )

    return PaymentIntentResponse(**intent)


@router.post("/purchase", response_model=PurchaseResponse)
async def purchase(
    request: PurchaseRequest, user: User = Depends(get_current_user)
) -> PurchaseResponse:
    result = await PurchasePowerUpUseCase().execute(
        user_id=user.id, item_id=request.item_id, mission_id=request.mission_id
    )
    raise_for_result(result)

    return PurchaseResponse(
        success=True,
        item_id=result.item_id,
        coins=result.user.coins,
        gems=result.user.gems,
        reward=RewardResponse.model_validate(result.reward) if result.reward else None,
    )
