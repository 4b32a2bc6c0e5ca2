"""
Purchase Power-Up Use Case - spend coins/gems in the shop.

AICODE-NOTE: The wallet is debited with a conditional update so the balance
can never go negative, even with concurrent purchases.
"""

import logging
from dataclasses import dataclass, field

from tortoise.expressions import F
from tortoise.transactions import in_transaction

from nudgequest.core.domain.gamification import RewardOutcome
from nudgequest.core.domain.shop import (
    LUCKY_COIN,
    MISSION_RUSH,
    POWER_UPS,
    STREAK_SHIELD,
    XP_BOOSTER,
    can_afford,
    extend_until,
)
from nudgequest.core.domain.timeutils import utcnow
from nudgequest.database.models import User
from nudgequest.storage import purchase_repo, user_repo

from .update_mission_progress import UpdateMissionProgressUseCase

logger = logging.getLogger(__name__)

_BOOST_FIELDS = {
    XP_BOOSTER: "xp_boost_until",
    LUCKY_COIN: "coin_boost_until",
    STREAK_SHIELD: "streak_shield_until",
}


@dataclass
class PurchaseResult:
    success: bool
    user: User | None = None
    item_id: str = ""
    reward: RewardOutcome | None = None
    new_badges: list[str] = field(default_factory=list)
    error_message: str = ""
    error_code: str = ""


class PurchasePowerUpUseCase:
    async def execute(
        self, user_id: int, item_id: str, mission_id: int | None = None
    ) -> PurchaseResult:
        power_up = POWER_UPS.get(item_id)
        if power_up is None:
            return PurchaseResult(
                success=False, error_message="Unknown item", error_code="invalid"
            )

        user = await user_repo.get_user(user_id)
        if not user:
            return PurchaseResult(
                success=False, error_message="User not found", error_code="not_found"
            )
        if not can_afford(user.coins, user.gems, power_up):
            return PurchaseResult(
                success=False, error_message="Insufficient balance", error_code="invalid"
            )

        if item_id == MISSION_RUSH:
            return await self._mission_rush(user_id, mission_id)

        now = utcnow()
        boost_field = _BOOST_FIELDS[item_id]
        async with in_transaction():
            if not await self._debit(user_id, power_up.coin_cost, power_up.gem_cost):
                return PurchaseResult(
                    success=False, error_message="Insufficient balance", error_code="invalid"
                )
            user = await user_repo.get_user(user_id)
            setattr(
                user,
                boost_field,
                extend_until(getattr(user, boost_field), power_up.duration, now),
            )
            await user.save(update_fields=[boost_field])
            await purchase_repo.record_purchase(
                user_id, item_id, power_up.coin_cost, power_up.gem_cost
            )

        logger.info(f"User {user_id} bought {item_id}")
        return PurchaseResult(success=True, user=user, item_id=item_id)

    async def _mission_rush(self, user_id: int, mission_id: int | None) -> PurchaseResult:
        power_up = POWER_UPS[MISSION_RUSH]
        if mission_id is None:
            return PurchaseResult(
                success=False,
                error_message="mission_id is required for Mission Rush",
                error_code="invalid",
            )

        # Debit first: a failed completion refunds below.
        if not await self._debit(user_id, power_up.coin_cost, power_up.gem_cost):
            return PurchaseResult(
                success=False, error_message="Insufficient balance", error_code="invalid"
            )

        result = await UpdateMissionProgressUseCase().complete_instantly(mission_id, user_id)
        if not result.success:
            await User.filter(id=user_id).update(
                coins=F("coins") + power_up.coin_cost, gems=F("gems") + power_up.gem_cost
            )
            return PurchaseResult(
                success=False,
                error_message=result.error_message,
                error_code=result.error_code,
            )

        await purchase_repo.record_purchase(
            user_id, MISSION_RUSH, power_up.coin_cost, power_up.gem_cost
        )
        logger.info(f"User {user_id} used Mission Rush on mission {mission_id}")
        return PurchaseResult(
            success=True,
            user=await user_repo.get_user(user_id),
            item_id=MISSION_RUSH,
            reward=result.reward,
            new_badges=result.new_badges,
        )

    async def _debit(self, user_id: int, coins: int, gems: int) -> bool:
        updated = await User.filter(id=user_id, coins__gte=coins, gems__gte=gems).update(
            coins=F("coins") - coins, gems=F("gems") - gems
        )
        return updated == 1
