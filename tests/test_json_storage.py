from __future__ import annotations

import json

import pytest

from gym_api.domain.records import Member, Trainer
from gym_api.repositories.json_storage import JsonRepository


def _member(member_id: str, created_at: int) -> Member:
    return Member(
        id=member_id,
        name="Jo",
        email="jo@x.com",
        join_date="2024-01-01",
        membership_type="gold",
        created_at=created_at,
    )


def test_missing_file_reads_as_empty(json_repo, json_file):
    assert not json_file.exists()
    assert json_repo.members.values() == []
    assert json_repo.trainers.get("x") is None


def test_insert_writes_file_immediately(json_repo, json_file):
    json_repo.members.insert("m1", _member("m1", 5))
    data = json.loads(json_file.read_text(encoding="utf-8"))
    assert data["members"]["m1"]["name"] == "Jo"
    assert data["gym_classes"] == {}
    assert data["trainers"] == {}


def test_reopened_file_sees_previous_writes(json_repo, json_file):
    json_repo.trainers.insert(
        "t1", Trainer(id="t1", name="Sam", email="s@x.com", specializations=["yoga"], created_at=1)
    )
    json_repo.members.insert("m1", _member("m1", 2))
    json_repo.members.insert("m2", _member("m2", 3))
    json_repo.members.remove("m1")

    reopened = JsonRepository(json_file)
    assert [m.id for m in reopened.members.values()] == ["m2"]
    assert reopened.trainers.get("t1").specializations == ["yoga"]


def test_overwrite_keeps_position(json_repo):
    json_repo.members.insert("a", _member("a", 1))
    json_repo.members.insert("b", _member("b", 2))
    json_repo.members.insert("a", _member("a", 1))
    assert [m.id for m in json_repo.members.values()] == ["a", "b"]


def test_remove_missing_leaves_file_untouched(json_repo, json_file):
    json_repo.members.insert("m1", _member("m1", 1))
    before = json_file.read_text(encoding="utf-8")
    assert json_repo.members.remove("other") is None
    assert json_file.read_text(encoding="utf-8") == before


def test_failed_save_keeps_previous_document(json_repo, json_file):
    json_repo.members.insert("m1", _member("m1", 1))
    before = json_file.read_text(encoding="utf-8")

    with pytest.raises(TypeError):
        json_repo.document.save({"members": {"m2": object()}, "gym_classes": {}, "trainers": {}})

    assert json_file.read_text(encoding="utf-8") == before
    assert [p.name for p in json_file.parent.iterdir()] == [json_file.name]
    assert [m.id for m in JsonRepository(json_file).members.values()] == ["m1"]
