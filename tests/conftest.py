import os

import pytest

# qt must not look for a display when controller/window tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe.game_logic import GameLogic, Mode
from tictactoe.opponent import LowestIndexPolicy


@pytest.fixture
def engine():
    return GameLogic(policy=LowestIndexPolicy())


@pytest.fixture
def two_player(engine):
    engine.start(Mode.TWO_PLAYER)
    return engine


@pytest.fixture
def single_player(engine):
    engine.start(Mode.SINGLE_PLAYER)
    return engine


def play(engine, moves):
    for idx in moves:
        assert engine.apply_human_move(idx), f"move {idx} was rejected"


@pytest.fixture(scope="session")
def qapp():
    # one application per process; widgets need the gui flavour
    QtCore = pytest.importorskip("PySide6.QtCore")
    app = QtCore.QCoreApplication.instance()
    if app is None:
        try:
            from PySide6.QtWidgets import QApplication
            app = QApplication([])
        except ImportError:
            app = QtCore.QCoreApplication([])
    return app
