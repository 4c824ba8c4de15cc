"""
Tests for the console application's session setup.
"""

import importlib
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.progress import ProgressStore
from watersort.session import GameSession
from watersort.solver import Difficulty, LevelConfig


@pytest.fixture
def app_module(tmp_path, monkeypatch):
    # main configures a log file in the working directory on import
    monkeypatch.chdir(tmp_path)
    return importlib.import_module("main")


@pytest.fixture
def saved_progress(tmp_path):
    path = tmp_path / "progress.json"
    store = ProgressStore(path)
    config = LevelConfig.for_difficulty("normal", seed=8)
    session = GameSession(config)
    store.save_session(session.to_dict())
    return path


def make_app(app_module, tmp_path, progress_path, **kwargs):
    return app_module.Application(settings_path=str(tmp_path / "config.json"),
                                  progress_path=str(progress_path), **kwargs)


def test_saved_session_is_resumed(app_module, tmp_path, saved_progress):
    application = make_app(app_module, tmp_path, saved_progress)
    application.setup()

    assert application.session.config.seed == 8
    assert application.session.config.difficulty == Difficulty.NORMAL


def test_explicit_difficulty_starts_new_level(app_module, tmp_path, saved_progress):
    application = make_app(app_module, tmp_path, saved_progress, difficulty="expert")
    application.setup()

    assert application.session.config.difficulty == Difficulty.EXPERT


def test_explicit_seed_starts_new_level(app_module, tmp_path, saved_progress):
    application = make_app(app_module, tmp_path, saved_progress, seed=99)
    application.setup()

    assert application.session.config.seed == 99
    assert application.session.config.difficulty == Difficulty.NORMAL


def test_direct_pour_command_clears_selection(app_module, tmp_path):
    application = make_app(app_module, tmp_path, tmp_path / "progress.json", seed=8)
    application.setup()
    session = application.session
    source, destination = session.request_hint()

    assert application.handle(f"s {source}")
    assert application.handle(f"{source} {destination}")

    assert session.selected_index is None
    assert session.move_count == 1
