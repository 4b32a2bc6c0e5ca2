"""
Swipe Repository - plain CRUD operations for the Swipe model.

AICODE-NOTE: Data access only, NO business logic.
"""

from tortoise.exceptions import IntegrityError

from nudgequest.database.models import Swipe


async def get_swipe(swiper_id: int, swiped_id: int) -> Swipe | None:
    return await Swipe.get_or_none(swiper_id=swiper_id, swiped_id=swiped_id)


async def upsert_swipe(swiper_id: int, swiped_id: int, direction: str) -> Swipe:
    """Record a swipe; a repeat swipe on the same user overwrites the direction."""
    swipe = await get_swipe(swiper_id, swiped_id)
    if swipe is None:
        try:
            return await Swipe.create(
                swiper_id=swiper_id, swiped_id=swiped_id, direction=direction
            )
        except IntegrityError:
            swipe = await Swipe.get(swiper_id=swiper_id, swiped_id=swiped_id)

    swipe.direction = direction
    await swipe.save(update_fields=["direction"])
    return swipe


async def swiped_ids(swiper_id: int) -> set[int]:
    """Ids of users the swiper has already swiped on."""
    ids = await Swipe.filter(swiper_id=swiper_id).values_list("swiped_id", flat=True)
    return set(ids)
