"""
Water Sort Puzzle - Entry Point

Runs an interactive console game on top of the puzzle engine.

Example:
    python main.py
    python main.py --difficulty hard --seed 42
"""

import sys
import logging
import argparse
import time
from typing import Optional

from watersort.progress import ProgressStore, PROGRESS_FILE
from watersort.session import GameSession, SelectionOutcome, SessionPolicy
from watersort.settings import load_settings, SETTINGS_FILE
from watersort.solver import Difficulty, LevelConfig


# Configure logging - output to both console and file
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler("watersort.log", mode='w', encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  <from> <to>   pour tube <from> into tube <to>
  s <i>         select tube <i> (select again / another tube to pour)
  u             undo
  h             hint
  r             restart (resets streak)
  n             next level
  q             quit (session is saved)"""


class Application:
    """
    Console application controller.

    Owns the game session and the progress store and translates text
    commands into session calls.
    """

    def __init__(self, difficulty: Optional[str] = None, seed: Optional[int] = None,
                 settings_path: str = str(SETTINGS_FILE),
                 progress_path: str = str(PROGRESS_FILE),
                 debug_mode: bool = False):
        """
        Initialize the application.

        Args:
            difficulty: Difficulty name (default: from settings, skips resuming when given)
            seed: Level seed (default: saved session or current time)
            settings_path: Settings JSON path
            progress_path: Progress JSON path
            debug_mode: Enable debug logging (overrides saved setting)
        """
        self.settings = load_settings(settings_path)
        self.progress = ProgressStore(progress_path)
        self.debug_mode = debug_mode or self.settings.get("debug_enabled", False)
        self.difficulty = Difficulty(difficulty or self.settings["default_difficulty"])
        self.seed = seed
        # An explicit difficulty or seed asks for a new level
        self.resume = difficulty is None and seed is None
        self.session: Optional[GameSession] = None

    def setup(self):
        """Create or resume the game session."""
        if self.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

        policy = SessionPolicy(
            undo_cap=self.settings.get("undo_cap"),
            unlimited_hints=bool(self.settings.get("unlimited_hints", False)),
        )
        budget = float(self.settings.get("hint_time_budget", 0.1))

        saved = self.progress.load_session()
        if saved and self.resume:
            logger.info("Resuming saved session")
            self.session = GameSession.from_dict(saved, progress=self.progress,
                                                 policy=policy, hint_time_budget=budget)
            return

        seed = self.seed if self.seed is not None else int(time.time())
        config = LevelConfig.for_difficulty(self.difficulty, seed)
        self.session = GameSession(config, progress=self.progress,
                                   policy=policy, hint_time_budget=budget)
        logger.info(f"New level: {config}")

    def render(self) -> str:
        """Text rendering of the current layout."""
        session = self.session
        config = session.config
        lines = [f"Level {config.seed} ({config.difficulty.display_name})  "
                 f"moves: {session.move_count}  time: {session.elapsed_time:.0f}s  "
                 f"streak: {self.progress.current_streak}"]
        for index, tube in enumerate(session.layout.tubes):
            marker = "*" if session.selected_index == index else " "
            contents = " ".join(str(c) for c in tube)
            slots = " ".join("." for _ in range(config.capacity - len(tube)))
            lines.append(f"{marker}{index:2d} | {contents} {slots}".rstrip())
        flags = []
        if session.can_undo:
            flags.append("undo")
        if session.can_hint:
            flags.append("hint")
        lines.append(f"available: {', '.join(flags) or '-'}")
        return "\n".join(lines)

    def handle(self, command: str) -> bool:
        """
        Execute one command.

        Returns:
            False when the application should exit
        """
        parts = command.split()
        if not parts:
            return True
        session = self.session
        head = parts[0].lower()

        if head == "q":
            return False
        if head == "u":
            if session.undo() is None:
                print("Nothing to undo")
        elif head == "h":
            hint = session.request_hint()
            print(f"Hint: pour {hint[0]} -> {hint[1]}" if hint else "No hint available")
        elif head == "r":
            session.restart()
        elif head == "n":
            session.advance_level()
        elif head == "s" and len(parts) == 2 and parts[1].isdigit():
            self._report(session.select_tube(int(parts[1])))
        elif len(parts) == 2 and all(p.isdigit() for p in parts):
            self._report(session.pour(int(parts[0]), int(parts[1])))
        else:
            print(HELP_TEXT)
        return True

    def _report(self, outcome: SelectionOutcome):
        if outcome == SelectionOutcome.ILLEGAL:
            print("Can't pour there")
        elif outcome == SelectionOutcome.WON:
            print(f"Solved in {self.session.move_count} moves! Type 'n' for the next level.")

    def run(self) -> int:
        """
        Run the command loop.

        Returns:
            Exit code
        """
        print(HELP_TEXT)
        try:
            while True:
                print()
                print(self.render())
                try:
                    command = input("> ")
                except EOFError:
                    break
                if not self.handle(command):
                    break
        finally:
            self.progress.save_session(self.session.to_dict())
        return 0


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Water Sort Puzzle - Sort the colors into their own tubes"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Difficulty preset; starts a new level instead of resuming (default: from settings)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Level seed (default: resume saved session or use current time)"
    )
    parser.add_argument(
        "--settings",
        default=str(SETTINGS_FILE),
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--progress",
        default=str(PROGRESS_FILE),
        help="Progress file (default: progress.json)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args()


def main():
    """Initialize and run the Water Sort console game."""
    args = parse_args()

    application = Application(difficulty=args.difficulty, seed=args.seed,
                              settings_path=args.settings,
                              progress_path=args.progress,
                              debug_mode=args.debug)
    application.setup()
    sys.exit(application.run())


if __name__ == "__main__":
    main()
