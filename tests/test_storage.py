"""Tests for the JSONL career store."""

import json

import pytest

from career_scraper.models import CareerRecord, Player, Team, TransferType
from career_scraper.storage import CareerStore, JSONLCareerStore


def write_jsonl(path, rows):
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write((row if isinstance(row, str) else json.dumps(row)) + "\n")


def test_missing_files_are_empty(tmp_path):
    """Test a fresh data directory has no players, teams or history."""
    store = JSONLCareerStore(str(tmp_path / "careers"))
    assert store.load_players() == []
    assert store.load_teams() == []
    assert store.load_history() == []
    assert not store.has_history("p1", "t1", 2019)


def test_load_players_and_teams(tmp_path):
    """Test records are loaded in file order and bad lines are skipped."""
    write_jsonl(tmp_path / "players.jsonl", [
        {"id": "p1", "name": "Erling Haaland"},
        "not json",
        {"id": "p2"},
        "",
        {"id": "p3", "name": "Kylian Mbappé"},
    ])
    write_jsonl(tmp_path / "teams.jsonl", [
        {"id": "t1", "name": "Manchester City F.C."},
        {"id": "t2", "name": "Real Madrid"},
    ])

    store = JSONLCareerStore(str(tmp_path))

    assert store.load_players() == [
        Player(id="p1", name="Erling Haaland"),
        Player(id="p3", name="Kylian Mbappé"),
    ]
    assert [t.id for t in store.load_teams()] == ["t1", "t2"]


def test_insert_and_has_history(tmp_path):
    """Test inserted records are appended and found by year."""
    store = JSONLCareerStore(str(tmp_path / "careers"))
    record = CareerRecord(
        player_id="p1",
        team_id="t1",
        valid_from="2022-07-01",
        valid_to=None,
        transfer_type=TransferType.PERMANENT,
    )

    store.insert_history(record)
    store.insert_history(record.model_copy(update={"team_id": "t2", "valid_from": "2019-01-01"}))

    assert store.has_history("p1", "t1", 2022)
    assert store.has_history("p1", "t2", 2019)
    assert not store.has_history("p1", "t1", 2019)
    assert not store.has_history("p2", "t1", 2022)

    history = store.load_history()
    assert len(history) == 2
    assert history[0] == record

    lines = (tmp_path / "careers" / "player_team_history.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["transfer_type"] == "permanent"
    assert json.loads(lines[0])["valid_to"] is None


def test_base_store_is_abstract():
    """Test the base interface must be implemented."""
    store = CareerStore()
    with pytest.raises(NotImplementedError):
        store.load_players()
    with pytest.raises(NotImplementedError):
        store.has_history("p1", "t1", 2020)


def test_has_history_reads_file_once(tmp_path, monkeypatch):
    """Test lookups reuse loaded keys and see records inserted afterwards."""
    store = JSONLCareerStore(str(tmp_path))
    store.insert_history(CareerRecord(player_id="p1", team_id="t1", valid_from="2019-07-01"))

    loads = []
    original_load = store.load_history

    def counting_load():
        loads.append(1)
        return original_load()

    monkeypatch.setattr(store, "load_history", counting_load)

    assert store.has_history("p1", "t1", 2019)
    assert not store.has_history("p1", "t2", 2020)

    store.insert_history(CareerRecord(player_id="p1", team_id="t2", valid_from="2020-01-01"))

    assert store.has_history("p1", "t2", 2020)
    assert len(loads) == 1
