"""Tests for friend requests."""

import asyncio

import pytest

from nudgequest.core.domain.badge_rules import SOCIAL_BUTTERFLY
from nudgequest.core.use_cases.friend_requests import (
    AcceptFriendRequestUseCase,
    SendFriendRequestUseCase,
)
from nudgequest.database.models import Friendship, User
from nudgequest.storage import badge_repo, friend_repo


@pytest.mark.asyncio
async def test_send_friend_request(user: User, other_user: User) -> None:
    result = await SendFriendRequestUseCase().execute(user.id, other_user.id)

    assert result.success
    assert result.friendship.status == "PENDING"

    incoming = await friend_repo.list_incoming_pending(other_user.id)
    assert [f.requester.id for f in incoming] == [user.id]


@pytest.mark.asyncio
async def test_duplicate_request_in_either_direction(user: User, other_user: User) -> None:
    await SendFriendRequestUseCase().execute(user.id, other_user.id)

    again = await SendFriendRequestUseCase().execute(user.id, other_user.id)
    reverse = await SendFriendRequestUseCase().execute(other_user.id, user.id)

    assert again.error_code == "invalid"
    assert reverse.error_code == "invalid"


@pytest.mark.asyncio
async def test_send_request_validation(user: User) -> None:
    assert (await SendFriendRequestUseCase().execute(user.id, user.id)).error_code == "invalid"
    assert (await SendFriendRequestUseCase().execute(user.id, 9999)).error_code == "not_found"


@pytest.mark.asyncio
async def test_accept_friend_request(user: User, other_user: User) -> None:
    sent = await SendFriendRequestUseCase().execute(user.id, other_user.id)

    result = await AcceptFriendRequestUseCase().execute(sent.friendship.id, other_user.id)

    assert result.success
    assert result.friendship.status == "ACCEPTED"
    assert result.new_badges == [SOCIAL_BUTTERFLY]
    assert SOCIAL_BUTTERFLY in await badge_repo.earned_codes(user.id)

    friends = await friend_repo.list_accepted(user.id)
    assert len(friends) == 1


@pytest.mark.asyncio
async def test_only_addressee_can_accept(user: User, other_user: User) -> None:
    sent = await SendFriendRequestUseCase().execute(user.id, other_user.id)

    result = await AcceptFriendRequestUseCase().execute(sent.friendship.id, user.id)

    assert result.error_code == "forbidden"


@pytest.mark.asyncio
async def test_accept_twice_is_rejected(user: User, other_user: User) -> None:
    sent = await SendFriendRequestUseCase().execute(user.id, other_user.id)
    await AcceptFriendRequestUseCase().execute(sent.friendship.id, other_user.id)

    result = await AcceptFriendRequestUseCase().execute(sent.friendship.id, other_user.id)

    assert result.error_code == "invalid"


@pytest.mark.asyncio
async def test_crossing_requests_leave_one_friendship(user: User, other_user: User) -> None:
    use_case = SendFriendRequestUseCase()

    results = await asyncio.gather(
        use_case.execute(user.id, other_user.id),
        use_case.execute(other_user.id, user.id),
    )

    assert sorted(r.success for r in results) == [False, True]
    assert [r.error_code for r in results if not r.success] == ["invalid"]
    assert await Friendship.all().count() == 1


@pytest.mark.asyncio
async def test_repeated_create_for_pair_returns_none(user: User, other_user: User) -> None:
    await friend_repo.create_request(user.id, other_user.id)

    assert await friend_repo.create_request(user.id, other_user.id) is None
    assert await friend_repo.create_request(other_user.id, user.id) is None
    assert await Friendship.all().count() == 1
