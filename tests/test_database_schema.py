"""
Schema checks: every model gets its table and the unique constraints hold.

AICODE-NOTE: These constraints back the exactly-once rules (one match per
pair, one run per quest, one badge per code), so they are tested directly.
"""

import pytest
from tortoise.exceptions import IntegrityError, OperationalError

from factories import make_quest
from nudgequest.database.models import (
    Friendship,
    Match,
    Mission,
    Purchase,
    Quest,
    Swipe,
    User,
    UserBadge,
    UserQuest,
)


@pytest.mark.asyncio
async def test_all_models_have_tables(db):
    tables = {
        "users": User,
        "quests": Quest,
        "user_quests": UserQuest,
        "missions": Mission,
        "swipes": Swipe,
        "matches": Match,
        "friendships": Friendship,
        "user_badges": UserBadge,
        "purchases": Purchase,
    }

    for table_name, model in tables.items():
        assert model._meta.db_table == table_name
        try:
            await model.all().limit(1)
        except OperationalError as e:
            pytest.fail(f"Table '{table_name}' does not exist or has schema issues: {e}")


@pytest.mark.asyncio
async def test_new_user_defaults(user):
    assert user.xp == 0
    assert user.level == 1
    assert user.coins == 100
    assert user.gems == 0
    assert user.streak == 0
    assert user.interests == []
    assert user.discovery_enabled is True
    assert user.discovery_radius == 50
    assert user.is_premium is False


@pytest.mark.asyncio
async def test_match_pair_is_unique(user, other_user):
    await Match.create(user_one=user, user_two=other_user)

    with pytest.raises(IntegrityError):
        await Match.create(user_one=user, user_two=other_user)


@pytest.mark.asyncio
async def test_swipe_is_unique_per_direction_pair(user, other_user):
    await Swipe.create(swiper=user, swiped=other_user, direction="RIGHT")
    await Swipe.create(swiper=other_user, swiped=user, direction="LEFT")

    with pytest.raises(IntegrityError):
        await Swipe.create(swiper=user, swiped=other_user, direction="LEFT")


@pytest.mark.asyncio
async def test_user_quest_and_badge_are_unique(user):
    quest = await make_quest()
    await UserQuest.create(user=user, quest=quest)
    await UserBadge.create(user=user, badge="level_5")

    with pytest.raises(IntegrityError):
        await UserQuest.create(user=user, quest=quest)
    with pytest.raises(IntegrityError):
        await UserBadge.create(user=user, badge="level_5")


@pytest.mark.asyncio
async def test_friendship_pair_key_is_unique(user, other_user):
    await Friendship.create(
        requester=user, addressee=other_user, pair_key=f"{user.id}:{other_user.id}"
    )

    with pytest.raises(IntegrityError):
        await Friendship.create(
            requester=other_user, addressee=user, pair_key=f"{user.id}:{other_user.id}"
        )


@pytest.mark.asyncio
async def test_payment_intent_is_recorded_once(user):
    await Purchase.create(user=user, item_id="coins_100", payment_intent_id="pi_1")
    await Purchase.create(user=user, item_id="streak_shield", coin_cost=100)
    await Purchase.create(user=user, item_id="lucky_coin", coin_cost=75)

    with pytest.raises(IntegrityError):
        await Purchase.create(user=user, item_id="coins_100", payment_intent_id="pi_1")
