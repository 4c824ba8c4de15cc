"""
Tests for the background hint worker.

run() is called directly so the tests do not depend on a running event loop.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

QtCore = pytest.importorskip("PyQt5.QtCore")

from watersort.hint_worker import HintWorker
from watersort.solver import Layout, LevelConfig


CONFIG = LevelConfig(seed=1, colors=3, capacity=2, extra_empty=1)


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    return app


def test_worker_emits_hint(qt_app):
    layout = Layout.from_lists([[0, 1], [1], [0], [2, 2]])
    worker = HintWorker(layout, CONFIG, time_budget=1.0)
    results = []
    worker.hint_ready.connect(results.append)

    worker.run()

    assert len(results) == 1
    assert results[0].is_complete
    assert [m.indices for m in results[0].moves] == [(0, 1), (0, 2)]


def test_worker_reports_errors(qt_app):
    worker = HintWorker(None, CONFIG, time_budget=1.0)
    errors = []
    results = []
    worker.error_occurred.connect(errors.append)
    worker.hint_ready.connect(results.append)

    worker.run()

    assert len(errors) == 1
    assert results == []
