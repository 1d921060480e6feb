"""Read-only derived views over a snapshot of a collection's records."""
from __future__ import annotations

from typing import Iterable

from gym_api.domain.records import GymClass, Member


def search_members(members: Iterable[Member], query: str) -> list[Member]:
    """Case-insensitive substring match of ``query`` against name or email."""
    needle = query.lower()
    return [m for m in members if needle in m.name.lower() or needle in m.email.lower()]


def filter_by_start_time(classes: Iterable[GymClass], start_time: str) -> list[GymClass]:
    return [c for c in classes if c.start_time == start_time]


def _within(value: str, start_time: str, end_time: str) -> bool:
    return start_time <= value <= end_time


def conflicting_classes(
    classes: Iterable[GymClass], trainer_id: str, start_time: str, end_time: str
) -> list[GymClass]:
    """
    Classes of ``trainer_id`` whose own start or end time lies in the window.

    Bounds are inclusive and compared as strings. A class that starts before
    and ends after the window has neither endpoint inside it, so it is not
    reported.
    """
    return [
        c
        for c in classes
        if c.trainer_id == trainer_id
        and (_within(c.start_time, start_time, end_time) or _within(c.end_time, start_time, end_time))
    ]
