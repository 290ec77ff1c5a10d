import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import GameConfig, build_policy
from tictactoe.controller import GameController
from tictactoe.game_logic import GameLogic, Mode
from tictactoe.opponent import POLICIES
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
BASE_COLOR = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
LIGHT_TEXT_COLOR = Qt.white
DISABLED_COLOR = QColor(127, 127, 127)

MODE_CHOICES = {"single": Mode.SINGLE_PLAYER, "two": Mode.TWO_PLAYER}

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_dark_palette(app: QApplication):
    """
    Dark theme; disabled buttons grey out so locked modes and the
    unstarted Restart button read as unavailable.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    for role in (QPalette.WindowText, QPalette.Text, QPalette.ButtonText,
                 QPalette.HighlightedText):
        palette.setColor(role, LIGHT_TEXT_COLOR)
    for role in (QPalette.WindowText, QPalette.Text, QPalette.ButtonText):
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe", description="Tic-Tac-Toe, one or two players")
    p.add_argument("--mode", choices=sorted(MODE_CHOICES), default=None,
                   help="Start a game in this mode right away")
    p.add_argument("--delay", type=int, default=None, metavar="MS",
                   help="Computer thinking delay in milliseconds (default: 600)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random opponent")
    p.add_argument("--opponent", choices=sorted(POLICIES), default=None,
                   help="Computer opponent policy (default: random)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p


def load_config(argv=None, environ=None) -> GameConfig:
    parser = build_parser()
    ns, _ = parser.parse_known_args(argv)   # leave Qt's own flags alone
    try:
        return GameConfig.from_env(environ).override(
            computer_delay_ms=ns.delay,
            seed=ns.seed,
            opponent=ns.opponent,
            initial_mode=MODE_CHOICES.get(ns.mode),
            verbose=ns.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    config = load_config(argv)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    controller = GameController(GameLogic(build_policy(config)), config.computer_delay_ms)
    window = TicTacToeWindow(controller)
    if config.initial_mode is not None:
        controller.start(config.initial_mode)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
