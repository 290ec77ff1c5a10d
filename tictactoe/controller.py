import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .config import COMPUTER_DELAY_MS
from .game_logic import GameLogic

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    qt side of the engine: forwards ui intents, publishes snapshots and
    schedules the computer's answer on a one-shot timer
    """
    state_changed = Signal(object)     # GameSnapshot

    def __init__(self, engine=None, delay_ms=COMPUTER_DELAY_MS, parent=None):
        super().__init__(parent)
        self.engine = engine or GameLogic()
        self.delay_ms = delay_ms
        self._pending_move_id = None    # token the armed timer was computed for
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_computer_timer)

    def snapshot(self):
        return self.engine.snapshot()

    @property
    def computer_pending(self):
        return self._timer.isActive()

    @Slot(object)
    def start(self, mode):
        self._cancel_pending()
        if self.engine.start(mode):
            self._publish()

    @Slot()
    def restart(self):
        self._cancel_pending()
        if self.engine.restart():
            self._publish()

    @Slot(int)
    def click_cell(self, index):
        if self.engine.apply_human_move(index):
            self._publish()

    @Slot()
    def shutdown(self):
        self._cancel_pending()

    def _cancel_pending(self):
        if self._timer.isActive():
            logger.debug("cancelling computer move for move_id %s", self._pending_move_id)
            self._timer.stop()
        self._pending_move_id = None

    def _publish(self):
        # emit first so the human move is drawn before the computer answers
        snap = self.engine.snapshot()
        self.state_changed.emit(snap)
        if self.engine.awaiting_computer() and not self._timer.isActive():
            self._pending_move_id = snap.move_id
            logger.debug("computer move scheduled in %d ms for move_id %d",
                         self.delay_ms, snap.move_id)
            self._timer.start(self.delay_ms)

    @Slot()
    def _on_computer_timer(self):
        self._timer.stop()
        token, self._pending_move_id = self._pending_move_id, None
        if token is None:
            return
        if self.engine.apply_computer_move(expected_move_id=token):
            self._publish()
