"""Tests for mission progress, rewards and daily generation."""

import asyncio
import random
from datetime import timedelta

import pytest

from factories import make_mission, make_user
from nudgequest.core.domain.timeutils import as_utc, utcnow
from nudgequest.core.use_cases.generate_daily_missions import (
    generate_for_all_users,
    generate_for_user,
)
from nudgequest.core.use_cases.update_mission_progress import (
    UpdateMissionProgressUseCase,
)
from nudgequest.database.models import Mission, User


@pytest.mark.asyncio
async def test_progress_below_target_gives_no_reward(user: User) -> None:
    mission = await make_mission(user, target=3)

    result = await UpdateMissionProgressUseCase().execute(mission.id, user.id)

    assert result.success
    assert result.is_completed is False
    assert result.reward is None
    assert result.mission.current == 1

    await user.refresh_from_db()
    assert user.xp == 0
    assert user.coins == 100


@pytest.mark.asyncio
async def test_reaching_target_completes_and_rewards(user: User) -> None:
    mission = await make_mission(user, target=3, current=2, xp_reward=15, coin_reward=10)

    result = await UpdateMissionProgressUseCase().execute(mission.id, user.id)

    assert result.success
    assert result.is_completed is True
    assert result.reward.xp_earned == 15
    assert result.reward.coins_earned == 10

    await mission.refresh_from_db()
    assert mission.is_completed is True
    assert mission.current == 3
    assert mission.completed_at is not None

    await user.refresh_from_db()
    assert user.xp == 15
    assert user.coins == 110


@pytest.mark.asyncio
async def test_completed_mission_rewards_exactly_once(user: User) -> None:
    mission = await make_mission(user, target=1, xp_reward=15, coin_reward=10)
    use_case = UpdateMissionProgressUseCase()

    first = await use_case.execute(mission.id, user.id)
    second = await use_case.execute(mission.id, user.id)

    assert first.success
    assert not second.success
    assert second.error_code == "invalid"

    await user.refresh_from_db()
    assert user.xp == 15


@pytest.mark.asyncio
async def test_concurrent_completion_rewards_once(user: User) -> None:
    mission = await make_mission(user, target=1, xp_reward=15, coin_reward=10)
    use_case = UpdateMissionProgressUseCase()

    results = await asyncio.gather(
        use_case.execute(mission.id, user.id),
        use_case.execute(mission.id, user.id),
    )

    assert sorted(r.success for r in results) == [False, True]
    await user.refresh_from_db()
    assert user.xp == 15
    assert user.coins == 110


@pytest.mark.asyncio
async def test_concurrent_increments_are_not_lost(user: User) -> None:
    mission = await make_mission(user, target=5)
    use_case = UpdateMissionProgressUseCase()

    results = await asyncio.gather(
        use_case.execute(mission.id, user.id),
        use_case.execute(mission.id, user.id),
    )

    assert all(r.success for r in results)
    await mission.refresh_from_db()
    assert mission.current == 2
    assert mission.is_completed is False


@pytest.mark.asyncio
async def test_large_increment_is_clamped_to_target(user: User) -> None:
    mission = await make_mission(user, target=3)

    result = await UpdateMissionProgressUseCase().execute(mission.id, user.id, increment=10)

    assert result.is_completed
    assert result.mission.current == 3


@pytest.mark.asyncio
async def test_level_up_from_mission(user: User) -> None:
    """95 XP + 15 XP mission -> level 2 and a 20 coin bonus."""
    user.xp = 95
    await user.save()
    mission = await make_mission(user, target=1, xp_reward=15, coin_reward=10)

    result = await UpdateMissionProgressUseCase().execute(mission.id, user.id)

    assert result.reward.leveled_up
    assert result.reward.level_bonus == 20

    await user.refresh_from_db()
    assert user.xp == 110
    assert user.level == 2
    assert user.coins == 100 + 10 + 20


@pytest.mark.asyncio
async def test_active_xp_booster_doubles_mission_xp(user: User) -> None:
    user.xp_boost_until = utcnow() + timedelta(hours=1)
    await user.save()
    mission = await make_mission(user, target=1, xp_reward=15, coin_reward=10)

    result = await UpdateMissionProgressUseCase().execute(mission.id, user.id)

    assert result.reward.xp_earned == 30
    assert result.reward.coins_earned == 10


@pytest.mark.asyncio
async def test_progress_errors(user: User, other_user: User) -> None:
    mission = await make_mission(user)
    use_case = UpdateMissionProgressUseCase()

    assert (await use_case.execute(mission.id, other_user.id)).error_code == "forbidden"
    assert (await use_case.execute(9999, user.id)).error_code == "not_found"
    assert (await use_case.execute(mission.id, user.id, increment=0)).error_code == "invalid"


@pytest.mark.asyncio
async def test_complete_instantly(user: User) -> None:
    mission = await make_mission(user, target=5, current=1)

    result = await UpdateMissionProgressUseCase().complete_instantly(mission.id, user.id)

    assert result.is_completed
    assert result.mission.current == 5


@pytest.mark.asyncio
async def test_generate_for_user_creates_two_daily_missions(user: User) -> None:
    before = utcnow()

    missions = await generate_for_user(user.id, rng=random.Random(7))

    assert len(missions) == 2
    assert len({m.title for m in missions}) == 2
    for mission in missions:
        assert mission.type == "DAILY"
        assert mission.current == 0
        assert mission.is_completed is False
        due = as_utc(mission.due_date)
        assert before + timedelta(hours=23) < due <= utcnow() + timedelta(hours=24)


@pytest.mark.asyncio
async def test_generate_for_all_users(user: User) -> None:
    await make_user("second_user")

    served = await generate_for_all_users(rng=random.Random(1))

    assert served == 2
    assert await Mission.all().count() == 4
