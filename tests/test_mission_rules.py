"""Tests for the mission progress state machine."""

import random

import pytest

from nudgequest.core.domain.mission_rules import (
    DAILY_MISSION_TEMPLATES,
    advance,
    can_progress,
    pick_daily_templates,
)


def test_advance_below_target() -> None:
    outcome = advance(current=0, target=3)
    assert outcome.current == 1
    assert outcome.completed_now is False


def test_advance_reaching_target_completes() -> None:
    outcome = advance(current=2, target=3, delta=1)
    assert outcome.current == 3
    assert outcome.completed_now is True


def test_advance_clamps_to_target() -> None:
    outcome = advance(current=1, target=3, delta=10)
    assert outcome.current == 3
    assert outcome.completed_now is True


def test_advance_on_full_mission_does_not_complete_again() -> None:
    outcome = advance(current=3, target=3, delta=1)
    assert outcome.current == 3
    assert outcome.completed_now is False


@pytest.mark.parametrize("delta", [0, -1])
def test_advance_rejects_non_positive_delta(delta: int) -> None:
    with pytest.raises(ValueError):
        advance(current=0, target=3, delta=delta)


def test_completed_mission_is_terminal() -> None:
    assert can_progress(False) is True
    assert can_progress(True) is False


def test_pick_daily_templates_returns_two_distinct() -> None:
    picked = pick_daily_templates(rng=random.Random(42))

    assert len(picked) == 2
    titles = [t["title"] for t in picked]
    assert len(set(titles)) == 2
    assert all(t in DAILY_MISSION_TEMPLATES for t in picked)
