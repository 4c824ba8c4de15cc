"""
Tests for the JSON progress store.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.progress import ProgressStore
from watersort.session import GameSession
from watersort.solver import Layout, LevelConfig


def test_record_best_keeps_better_record(tmp_path):
    store = ProgressStore(tmp_path / "progress.json")

    store.record_best(7, moves=20, time=60.0)
    store.record_best(7, moves=25, time=10.0)  # more moves: ignored
    assert store.best_by_seed[7] == {"moves": 20, "time": 60.0}

    store.record_best(7, moves=20, time=45.0)  # tie on moves, faster
    assert store.best_by_seed[7] == {"moves": 20, "time": 45.0}

    store.record_best(7, moves=18, time=90.0)
    assert store.best_by_seed[7] == {"moves": 18, "time": 90.0}


def test_progress_persists(tmp_path):
    path = tmp_path / "progress.json"
    store = ProgressStore(path)
    store.record_best(3, moves=12, time=30.5)
    store.increment_streak()
    store.increment_streak()
    store.mark_level_completed(3)

    reloaded = ProgressStore(path)

    assert reloaded.best_by_seed == {3: {"moves": 12, "time": 30.5}}
    assert reloaded.current_streak == 2
    assert reloaded.is_completed(3)


def test_reset_streak(tmp_path):
    store = ProgressStore(tmp_path / "progress.json")
    store.increment_streak()
    store.reset_streak()
    assert ProgressStore(tmp_path / "progress.json").current_streak == 0


def test_mark_level_completed_creates_empty_record(tmp_path):
    store = ProgressStore(tmp_path / "progress.json")

    store.mark_level_completed(4)
    assert store.best_by_seed[4] == {"moves": 0, "time": 0.0}

    store.record_best(5, moves=9, time=3.0)
    store.mark_level_completed(5)
    assert store.best_by_seed[5] == {"moves": 9, "time": 3.0}
    assert store.completed_levels == [4, 5]


def test_save_custom_level(tmp_path):
    store = ProgressStore(tmp_path / "progress.json")
    config = LevelConfig(seed=12, colors=2, capacity=2, extra_empty=1)
    layout = Layout.from_lists([[0, 1], [1, 0], []])

    entry = store.save_custom_level(config, layout)
    named = store.save_custom_level(config, layout, name="Tricky")

    assert entry["name"] == "Custom-12"
    assert named["name"] == "Tricky"
    reloaded = ProgressStore(tmp_path / "progress.json")
    assert len(reloaded.custom_levels) == 2
    assert LevelConfig.from_dict(reloaded.custom_levels[0]["config"]) == config
    assert Layout.from_lists(reloaded.custom_levels[0]["tubes"]) == layout


def test_corrupt_file_starts_fresh(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text("{not json", encoding="utf-8")

    store = ProgressStore(path)

    assert store.best_by_seed == {}
    assert store.current_streak == 0
    assert store.load_session() is None


@pytest.mark.parametrize("content", [
    "[]",
    "42",
    '{"best_by_seed": [1, 2]}',
    '{"current_streak": "lots"}',
    '{"completed_levels": 5}',
    '{"best_by_seed": {"seven": {"moves": 3, "time": 1.0}}}',
])
def test_wrong_shape_starts_fresh(tmp_path, content):
    path = tmp_path / "progress.json"
    path.write_text(content, encoding="utf-8")

    store = ProgressStore(path)

    assert store.best_by_seed == {}
    assert store.current_streak == 0
    assert store.completed_levels == []
    assert store.load_session() is None


def test_non_object_saved_session_is_dropped(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text(json.dumps({"current_streak": 2, "saved_session": [1, 2]}),
                    encoding="utf-8")

    store = ProgressStore(path)

    assert store.current_streak == 2
    assert store.load_session() is None


def test_session_snapshot_round_trip(tmp_path):
    path = tmp_path / "progress.json"
    store = ProgressStore(path)
    config = LevelConfig.for_difficulty("normal", seed=8)
    session = GameSession(config, progress=store)
    source, destination = session.request_hint()
    session.pour(source, destination)

    store.save_session(session.to_dict())
    data = ProgressStore(path).load_session()
    restored = GameSession.from_dict(data)

    assert restored.layout == session.layout
    assert restored.history == session.history
    assert restored.start_time == session.start_time
    assert restored.config == config

    store.clear_session()
    assert ProgressStore(path).load_session() is None


def test_session_win_records_best(tmp_path):
    store = ProgressStore(tmp_path / "progress.json")
    config = LevelConfig(seed=21, colors=3, capacity=2, extra_empty=1)
    session = GameSession(config, progress=store,
                          layout=Layout.from_lists([[0, 1], [1], [0], [2, 2]]))

    session.pour(0, 1)
    session.pour(0, 2)

    assert store.best_by_seed[21]["moves"] == 2
    assert store.current_streak == 1
    saved = json.loads((tmp_path / "progress.json").read_text(encoding="utf-8"))
    assert saved["best_by_seed"]["21"]["moves"] == 2
