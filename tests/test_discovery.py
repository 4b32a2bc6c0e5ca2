"""Tests for swipes, matches and the friendship a match creates."""

import asyncio

import pytest

from nudgequest.core.domain.badge_rules import SOCIAL_BUTTERFLY
from nudgequest.core.use_cases.record_swipe import RecordSwipeUseCase
from nudgequest.database.models import Friendship, Match, User
from nudgequest.storage import badge_repo, friend_repo


@pytest.mark.asyncio
async def test_one_sided_right_swipe_is_not_a_match(user: User, other_user: User) -> None:
    result = await RecordSwipeUseCase().execute(user.id, other_user.id, "RIGHT")

    assert result.success
    assert result.is_match is False
    assert await Match.all().count() == 0


@pytest.mark.asyncio
async def test_mutual_right_swipes_create_one_match(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()

    await use_case.execute(other_user.id, user.id, "RIGHT")
    result = await use_case.execute(user.id, other_user.id, "RIGHT")

    assert result.is_match is True
    assert result.match.user_one_id == min(user.id, other_user.id)
    assert result.match.user_two_id == max(user.id, other_user.id)
    assert await Match.all().count() == 1


@pytest.mark.asyncio
async def test_repeat_swipe_returns_existing_match(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(user.id, other_user.id, "RIGHT")
    first = await use_case.execute(other_user.id, user.id, "RIGHT")

    again = await use_case.execute(user.id, other_user.id, "RIGHT")

    assert again.is_match is True
    assert again.match.id == first.match.id
    assert await Match.all().count() == 1


@pytest.mark.asyncio
async def test_match_makes_users_friends(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(user.id, other_user.id, "RIGHT")
    await use_case.execute(other_user.id, user.id, "RIGHT")

    friendship = await friend_repo.get_between(user.id, other_user.id)

    assert friendship.status == "ACCEPTED"
    assert friendship.accepted_at is not None
    assert await Friendship.all().count() == 1


@pytest.mark.asyncio
async def test_match_accepts_pending_friend_request(user: User, other_user: User) -> None:
    pending = await friend_repo.create_request(other_user.id, user.id)
    use_case = RecordSwipeUseCase()

    await use_case.execute(user.id, other_user.id, "RIGHT")
    await use_case.execute(other_user.id, user.id, "RIGHT")

    await pending.refresh_from_db()
    assert pending.status == "ACCEPTED"
    assert await Friendship.all().count() == 1


@pytest.mark.asyncio
async def test_left_swipe_never_matches(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(other_user.id, user.id, "RIGHT")

    result = await use_case.execute(user.id, other_user.id, "LEFT")

    assert result.success
    assert result.is_match is False
    assert await Match.all().count() == 0


@pytest.mark.asyncio
async def test_swipe_changes_direction(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(user.id, other_user.id, "LEFT")
    await use_case.execute(other_user.id, user.id, "RIGHT")

    result = await use_case.execute(user.id, other_user.id, "RIGHT")

    assert result.is_match is True


@pytest.mark.asyncio
async def test_swipe_validation(user: User) -> None:
    use_case = RecordSwipeUseCase()

    assert (await use_case.execute(user.id, user.id, "RIGHT")).error_code == "invalid"
    assert (await use_case.execute(user.id, 9999, "RIGHT")).error_code == "not_found"
    assert (await use_case.execute(user.id, 9999, "UP")).error_code == "invalid"


@pytest.mark.asyncio
async def test_simultaneous_right_swipes_create_one_match(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()

    results = await asyncio.gather(
        use_case.execute(user.id, other_user.id, "RIGHT"),
        use_case.execute(other_user.id, user.id, "RIGHT"),
    )

    assert all(r.success for r in results)
    assert any(r.is_match for r in results)
    assert await Match.all().count() == 1
    assert await Friendship.filter(status="ACCEPTED").count() == 1


@pytest.mark.asyncio
async def test_match_awards_friend_badge_to_both(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(user.id, other_user.id, "RIGHT")
    await use_case.execute(other_user.id, user.id, "RIGHT")

    assert SOCIAL_BUTTERFLY in await badge_repo.earned_codes(user.id)
    assert SOCIAL_BUTTERFLY in await badge_repo.earned_codes(other_user.id)


@pytest.mark.asyncio
async def test_repeat_match_repairs_missing_friendship(user: User, other_user: User) -> None:
    use_case = RecordSwipeUseCase()
    await use_case.execute(user.id, other_user.id, "RIGHT")
    await use_case.execute(other_user.id, user.id, "RIGHT")
    await Friendship.all().delete()

    await use_case.execute(user.id, other_user.id, "RIGHT")

    friendship = await friend_repo.get_between(user.id, other_user.id)
    assert friendship.status == "ACCEPTED"
    assert await Match.all().count() == 1
