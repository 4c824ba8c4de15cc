"""
Hint Worker Module for the Water Sort puzzle

Provides a background QThread that computes a hint off the interactive
path. The worker searches an immutable layout snapshot taken when it
was created; moves the player makes meanwhile are not reflected in the
result.
"""

import logging

from PyQt5.QtCore import QThread, pyqtSignal

from watersort.solver import DEFAULT_TIME_BUDGET, Layout, LevelConfig, find_hint


# Configure module logger
logger = logging.getLogger(__name__)


class HintWorker(QThread):
    """
    Background worker thread for one hint computation.

    Signals:
        hint_ready(object): Emitted with the HintResult
        error_occurred(str): Emitted when the search raises

    Example:
        worker = HintWorker(session.layout, session.config)
        worker.hint_ready.connect(ui.show_hint)
        worker.start()
    """

    hint_ready = pyqtSignal(object)  # Emits HintResult
    error_occurred = pyqtSignal(str)

    def __init__(self, layout: Layout, config: LevelConfig,
                 time_budget: float = DEFAULT_TIME_BUDGET):
        """
        Initialize the hint worker.

        Args:
            layout: Layout snapshot to search
            config: Level configuration
            time_budget: Seconds the complete search may take
        """
        super().__init__()
        self.layout = layout
        self.config = config
        self.time_budget = time_budget

    def run(self):
        """Compute the hint. Called when the thread starts."""
        logger.debug(f"Hint worker started (budget {self.time_budget}s)")
        try:
            result = find_hint(self.layout, self.config, self.time_budget)
        except Exception as e:
            logger.exception("Error computing hint")
            self.error_occurred.emit(str(e))
            return

        logger.debug(f"Hint worker finished: {result.move_count} move(s), "
                     f"complete={result.is_complete}")
        self.hint_ready.emit(result)
