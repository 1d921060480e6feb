from __future__ import annotations

from gym_api.domain import queries
from gym_api.domain.records import GymClass, Member


def _member(member_id: str, name: str, email: str) -> Member:
    return Member(
        id=member_id,
        name=name,
        email=email,
        join_date="2024-01-01",
        membership_type="basic",
        created_at=1,
    )


def _class(class_id: str, trainer_id: str, start: str, end: str) -> GymClass:
    return GymClass(
        id=class_id,
        name="Class",
        description="",
        start_time=start,
        end_time=end,
        trainer_id=trainer_id,
        capacity=10,
        created_at=1,
    )


def test_search_matches_name_or_email_case_insensitively():
    alice = _member("m1", "Alice Smith", "a@x.com")
    bob = _member("m2", "Bob", "bob@alice.org")
    carol = _member("m3", "Carol", "carol@x.com")

    result = queries.search_members([alice, bob, carol], "alice")
    assert result == [alice, bob]

    assert queries.search_members([alice, bob, carol], "ALICE") == [alice, bob]


def test_search_does_not_strip_the_term():
    alice = _member("m1", "Alice Smith", "a@x.com")
    assert queries.search_members([alice], "e s") == [alice]
    assert queries.search_members([alice], " alice") == []


def test_filter_by_start_time_is_exact_string_equality():
    a = _class("c1", "t1", "09:00", "10:00")
    b = _class("c2", "t1", "9:00", "10:00")
    c = _class("c3", "t2", "09:00", "11:00")
    assert queries.filter_by_start_time([a, b, c], "09:00") == [a, c]
    assert queries.filter_by_start_time([a, b, c], "09") == []


def test_class_starting_inside_window_conflicts():
    classes = [_class("c1", "t1", "09:30", "10:30")]
    assert queries.conflicting_classes(classes, "t1", "09:00", "10:00") == classes


def test_class_ending_inside_window_conflicts():
    classes = [_class("c1", "t1", "08:00", "09:15")]
    assert queries.conflicting_classes(classes, "t1", "09:00", "10:00") == classes


def test_window_bounds_are_inclusive():
    ends_at_start = [_class("c1", "t1", "08:00", "09:00")]
    starts_at_end = [_class("c2", "t1", "10:00", "11:00")]
    assert queries.conflicting_classes(ends_at_start, "t1", "09:00", "10:00") == ends_at_start
    assert queries.conflicting_classes(starts_at_end, "t1", "09:00", "10:00") == starts_at_end


def test_class_containing_the_window_is_not_a_conflict():
    classes = [_class("c1", "t1", "08:00", "11:00")]
    assert queries.conflicting_classes(classes, "t1", "09:00", "10:00") == []


def test_other_trainers_classes_are_ignored():
    classes = [_class("c1", "t2", "09:30", "09:45")]
    assert queries.conflicting_classes(classes, "t1", "09:00", "10:00") == []


def test_conflicting_classes_lists_every_hit():
    inside = _class("c1", "t1", "09:10", "09:50")
    overlap_end = _class("c2", "t1", "09:45", "12:00")
    before = _class("c3", "t1", "07:00", "08:00")
    result = queries.conflicting_classes([inside, overlap_end, before], "t1", "09:00", "10:00")
    assert result == [inside, overlap_end]
