from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL = QColor("#ffeb3b")

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index 0-8 on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.snapshot = None            # last GameSnapshot drawn
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def set_snapshot(self, snapshot):
        # store state and repaint
        self.snapshot = snapshot
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            cell = side / 3
            painter.fillRect(self.rect(), QColor("#333"))
            snap = self.snapshot
            # winning cells first so marks draw over them
            if snap is not None and snap.winning_line:
                for i in snap.winning_line:
                    r, c = divmod(i, 3)
                    painter.fillRect(QRectF(ox + c*cell, oy + r*cell, cell, cell), WIN_FILL)
            # grid lines
            painter.setPen(QPen(QColor("#555"), 2))
            for i in range(1, 3):
                x = ox + i*cell
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            if snap is None:
                return
            for i, sym in enumerate(snap.board):
                if not sym: continue
                r, c = divmod(i, 3)
                cx = ox + c*cell + cell/2
                cy = oy + r*cell + cell/2
                rad = cell/2 * 0.7
                if sym == 'X':
                    painter.setPen(QPen(X_COLOR, 4))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def index_at(self, x, y):
        """
        board index under widget coords, or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / 3
        col = min(int((x-ox)//cell), 2); row = min(int((y-oy)//cell), 2)
        return row*3 + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: only forward cells the snapshot allows
        """
        if event.button() != Qt.LeftButton or self.snapshot is None:
            return
        pos = event.position()
        idx = self.index_at(pos.x(), pos.y())
        if idx is not None and self.snapshot.cell_enabled(idx):
            self.cell_clicked.emit(idx)  # notify main window
