import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .opponent import RandomPolicy

logger = logging.getLogger(__name__)

PLAYER_X = 'X'
PLAYER_O = 'O'
DRAW = 'Draw'
BOARD_CELLS = 9

# rows, then columns, then diagonals; order decides which line is highlighted
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mode(Enum):
    TWO_PLAYER = "TWO_PLAYER"
    SINGLE_PLAYER = "SINGLE_PLAYER"


class Status(Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    DRAWN = "DRAWN"


class WinResult(NamedTuple):
    winner: Optional[str]
    line: Optional[Tuple[int, int, int]]


def evaluate(board):
    """
    scan the 8 lines in fixed order, first full matching line wins
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for line in WIN_LINES:
        a, b, c = line
        if board[a] and board[a] == board[b] == board[c]:
            return WinResult(board[a], line)
    return WinResult(None, None)


def is_draw(board):
    """
    no winner and no empty cell
    """
    return evaluate(board).winner is None and all(board)


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell is None]


def _other(symbol):
    return PLAYER_O if symbol == PLAYER_X else PLAYER_X


@dataclass(frozen=True)
class Score:
    X: int = 0
    O: int = 0
    Draw: int = 0

    def bump(self, key):
        # new tally with one counter raised by one
        counts = {PLAYER_X: self.X, PLAYER_O: self.O, DRAW: self.Draw}
        counts[key] += 1
        return Score(counts[PLAYER_X], counts[PLAYER_O], counts[DRAW])


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only view of the engine, handed to the ui after every operation
    """
    board: Tuple[Optional[str], ...]
    mode: Mode
    turn: str
    status: Status
    winner: Optional[str]
    winning_line: Optional[Tuple[int, int, int]]
    score: Score
    started: bool
    move_id: int
    was_reset: bool = False
    was_started: bool = False

    @property
    def game_over(self):
        return self.status in (Status.WON, Status.DRAWN)

    @property
    def can_restart(self):
        return self.started

    def mode_selectable(self, mode):
        # the active mode's button is locked once a game is running
        return not (self.started and self.mode == mode)

    def cell_enabled(self, index):
        return (self.started and not self.game_over
                and self.board[index] is None)


def status_message(snap):
    """
    human readable status line for a snapshot
    """
    single = snap.mode == Mode.SINGLE_PLAYER
    if not snap.started:
        return "Choose a mode & start the game."
    if snap.status == Status.WON:
        if single:
            return "You win! 🎉" if snap.winner == PLAYER_X else "Computer wins! 😞"
        return f"Player {snap.winner} wins! 🎉"
    if snap.status == Status.DRAWN:
        return "It's a draw!"
    if single:
        msg = "Your move: X (You)" if snap.turn == PLAYER_X else "Computer is thinking..."
    elif snap.was_started:
        msg = "Your move: X"
    else:
        msg = f"{snap.turn}'s turn"
    return f"Game reset. {msg}" if snap.was_reset else msg


class GameLogic:
    """
    tic-tac-toe rules and state

    every operation returns True when it changed state and False when it
    was rejected; a rejected call never touches board, turn, status or score.
    """
    def __init__(self, policy=None):
        """
        init board, counters and opponent policy
        """
        self.policy = policy or RandomPolicy()
        self.mode = Mode.TWO_PLAYER
        self.score = Score()
        self.started = False
        self.move_id = 0                  # bumped on every accepted change
        self._reset_board()
        self.status = Status.NOT_STARTED

    def _reset_board(self):
        self.board = [None] * BOARD_CELLS
        self.turn = PLAYER_X
        self.status = Status.IN_PROGRESS
        self.winner = None
        self.winning_line = None
        self._was_reset = False
        self._was_started = False

    def start(self, mode):
        """
        begin a fresh game in the given mode, score is kept
        """
        try:
            mode = Mode(mode)
        except (TypeError, ValueError):
            logger.warning("ignoring start with unknown mode %r", mode)
            return False
        self.mode = mode
        self._reset_board()
        self.started = True
        self._was_started = True
        self.move_id += 1
        logger.info("game started: %s", mode.value)
        return True

    def restart(self):
        """
        clear the board, keep mode and score
        """
        if not self.started:
            logger.debug("restart rejected: no game started")
            return False
        self._reset_board()
        self._was_reset = True
        self.move_id += 1
        logger.info("game restarted: %s", self.mode.value)
        return True

    def _reject(self, why):
        logger.debug("move rejected: %s", why)
        return False

    def _legal_index(self, index):
        return (isinstance(index, int) and not isinstance(index, bool)
                and 0 <= index < BOARD_CELLS and self.board[index] is None)

    def apply_human_move(self, index):
        """
        place the current turn's mark at index
        """
        if not self.started:
            return self._reject("game not started")
        if self.status != Status.IN_PROGRESS:
            return self._reject("game is over")
        if not self._legal_index(index):
            return self._reject(f"cell {index!r} not available")
        if self.mode == Mode.SINGLE_PLAYER and self.turn != PLAYER_X:
            return self._reject("computer's turn")
        self._place(index, self.turn)
        return True

    def awaiting_computer(self):
        return (self.started and self.mode == Mode.SINGLE_PLAYER
                and self.status == Status.IN_PROGRESS
                and self.turn == PLAYER_O and None in self.board)

    def apply_computer_move(self, expected_move_id=None):
        """
        let the policy place O; expected_move_id guards against stale timers
        """
        if not self.awaiting_computer():
            return self._reject("computer may not move now")
        if expected_move_id is not None and expected_move_id != self.move_id:
            return self._reject(f"stale computer move {expected_move_id} (now {self.move_id})")
        try:
            index = self.policy.choose_move(tuple(self.board))
        except Exception:
            logger.exception("policy %r failed to choose a move", self.policy)
            return False
        if not self._legal_index(index):
            logger.error("policy %r chose illegal cell %r", self.policy, index)
            return False
        self._place(index, PLAYER_O)
        return True

    def _place(self, index, symbol):
        # single place where outcome and score are decided
        self.board[index] = symbol
        self._was_reset = False
        self._was_started = False
        self.move_id += 1
        logger.info("%s -> %d", symbol, index)
        result = evaluate(self.board)
        if result.winner:
            self.status = Status.WON
            self.winner, self.winning_line = result
            self.score = self.score.bump(result.winner)
            logger.info("%s wins on %s, score %s", result.winner, result.line, self.score)
        elif None not in self.board:
            self.status = Status.DRAWN
            self.score = self.score.bump(DRAW)
            logger.info("draw, score %s", self.score)
        else:
            self.turn = _other(symbol)

    def snapshot(self):
        return GameSnapshot(
            board=tuple(self.board),
            mode=self.mode,
            turn=self.turn,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line if self.status == Status.WON else None,
            score=self.score,
            started=self.started,
            move_id=self.move_id,
            was_reset=self._was_reset,
            was_started=self._was_started,
        )
