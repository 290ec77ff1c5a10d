import logging

from ..game_logic import Mode, Status, status_message
from ..controller import GameController
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window: renders snapshots, turns clicks into controller calls
    """
    def __init__(self, controller=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = controller or GameController(parent=self)
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.controller.state_changed.connect(self.render)
        self.render(self.controller.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.click_cell)
        self._create_status_area()         # status + score
        self.main_layout.addWidget(self.status_widget)
        self._create_controls()            # mode + restart buttons
        self.main_layout.addWidget(self.controls_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        single_action = QAction("New Single Player Game", self)
        single_action.triggered.connect(lambda: self.controller.start(Mode.SINGLE_PLAYER))
        two_action = QAction("New Two Player Game", self)
        two_action.triggered.connect(lambda: self.controller.start(Mode.TWO_PLAYER))
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (single_action, two_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_status_area(self):
        self.status_widget = QWidget()
        vl = QVBoxLayout(self.status_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.score_label = QLabel("")
        self.score_label.setAlignment(Qt.AlignCenter)
        vl.addWidget(self.message_label); vl.addWidget(self.score_label)

    def _create_controls(self):
        # mode buttons + restart
        self.controls_widget = QWidget()
        hl = QHBoxLayout(self.controls_widget)
        self.single_button = QPushButton("Single Player")
        self.single_button.clicked.connect(lambda: self.controller.start(Mode.SINGLE_PLAYER))
        self.two_button = QPushButton("Two Player")
        self.two_button.clicked.connect(lambda: self.controller.start(Mode.TWO_PLAYER))
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.controller.restart)
        hl.addStretch(1)
        for w in (self.single_button, self.two_button, self.restart_button):
            hl.addWidget(w)
        hl.addStretch(1)

    def _update_message(self, snap):
        # set message text + style
        style = "color: #eee;"
        if snap.status == Status.WON:
            lost = snap.mode == Mode.SINGLE_PLAYER and snap.winner == 'O'
            style = "color: #ff8a8a; font-weight: bold;" if lost else "color: lime; font-weight: bold;"
        elif snap.status == Status.DRAWN:
            style = "color: #ffd27a; font-weight: bold;"
        elif snap.started:
            style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(status_message(snap))

    @Slot(object)
    def render(self, snap):
        """
        redraw everything from one snapshot
        """
        self.board_widget.set_snapshot(snap)
        self._update_message(snap)
        s = snap.score
        self.score_label.setText(f"X: {s.X}    O: {s.O}    Draw: {s.Draw}")
        self.single_button.setEnabled(snap.mode_selectable(Mode.SINGLE_PLAYER))
        self.two_button.setEnabled(snap.mode_selectable(Mode.TWO_PLAYER))
        self.restart_button.setEnabled(snap.can_restart)

    def closeEvent(self, event):
        # drop any pending computer move on close
        self.controller.shutdown()
        logger.debug("window closed")
        event.accept()
