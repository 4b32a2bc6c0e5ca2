"""
Matching Domain Rules - distance, candidate filtering and match pairs.

AICODE-NOTE: Pure functions, NO database access, NO side-effects.
Candidates are plain objects with the User discovery attributes.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable

EARTH_RADIUS_KM = 6371.0
MAX_CANDIDATES = 20

LEFT = "LEFT"
RIGHT = "RIGHT"
DIRECTIONS = (LEFT, RIGHT)


@dataclass
class Candidate:
    """Potential match with its distance from the viewer."""

    user: Any
    distance_km: float | None
    shared_interests: int


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points, in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def _has_location(user: Any) -> bool:
    return (
        user.location_enabled
        and user.latitude is not None
        and user.longitude is not None
    )


def rank_candidates(
    viewer: Any,
    users: Iterable[Any],
    swiped_ids: set[int],
    limit: int = MAX_CANDIDATES,
) -> list[Candidate]:
    """
    Filter and order potential matches for the viewer.

    Rules:
    - skip the viewer, users with discovery off and users already swiped
    - if both sides share a location, keep only those within the viewer's radius
    - order by shared interests (desc), then distance (asc, unknown last)
    """
    viewer_interests = set(viewer.interests or [])
    candidates: list[Candidate] = []

    for user in users:
        if user.id == viewer.id or user.id in swiped_ids:
            continue
        if not user.discovery_enabled:
            continue

        distance = None
        if _has_location(viewer) and _has_location(user):
            distance = haversine_km(
                viewer.latitude, viewer.longitude, user.latitude, user.longitude
            )
            if distance > viewer.discovery_radius:
                continue
            distance = round(distance, 1)

        shared = len(viewer_interests & set(user.interests or []))
        candidates.append(Candidate(user=user, distance_km=distance, shared_interests=shared))

    candidates.sort(
        key=lambda c: (
            -c.shared_interests,
            c.distance_km is None,
            c.distance_km or 0.0,
        )
    )
    return candidates[:limit]


def match_pair(user_a_id: int, user_b_id: int) -> tuple[int, int]:
    """Normalise an unordered pair so that it maps to one Match row."""
    return (user_a_id, user_b_id) if user_a_id < user_b_id else (user_b_id, user_a_id)


def is_mutual(direction: str, reciprocal_direction: str | None) -> bool:
    """A match needs both swipes to be RIGHT."""
    return direction == RIGHT and reciprocal_direction == RIGHT
