"""
Board View (Renderer)
=====================
Paints the Board as a grid of clickable cells plus the start button and the
loading indicator.

Why is this file needed?
------------------------
1. Rendering: It turns the Board into a header row of category titles and a
   NUM_QUESTIONS_PER_CAT x NUM_CATEGORIES body of cells.
2. Interaction: Cell clicks carry a typed Coordinate; the reveal state machine
   decides what the cell shows next.
3. Loading: It shows/hides the progress bar and relabels the start button as
   the controller moves between states.

Classes:
    ClueCell: One clickable grid cell.
    BoardView: The whole board widget.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import (
    QGridLayout, QLabel, QProgressBar, QPushButton, QSizePolicy, QVBoxLayout, QWidget
)

from jeopardy.config import PLACEHOLDER
from jeopardy.model.board import Board, Coordinate
from jeopardy.model.reveal import SideEffect, advance

logger = logging.getLogger(__name__)

START_LABEL = "Start!"
LOADING_LABEL = "Loading..."
RESTART_LABEL = "Restart!"

BOARD_STYLE = """
    QLabel#categoryTitle {
        background: #060ce9; color: white; font-weight: bold;
        padding: 8px;
    }
    QLabel#clueCell {
        background: #115ff4; color: white; font-size: 14px; padding: 6px;
    }
    QLabel#clueCell:disabled { background: #74119c; color: #dcdcdc; }
"""


class ClueCell(QLabel):
    """A grid cell addressed by its Coordinate. Disabled cells get no clicks."""
    clicked = Signal(object)  # Coordinate

    def __init__(self, coordinate: Coordinate, parent: QWidget | None = None) -> None:
        super().__init__(PLACEHOLDER, parent)
        self.coordinate = coordinate
        self.setObjectName("clueCell")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumSize(140, 90)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.coordinate)
        super().mousePressEvent(event)

    def mark_disabled(self) -> None:
        self.setEnabled(False)
        self.setCursor(Qt.CursorShape.ArrowCursor)


class BoardView(QWidget):
    """Grid of clue cells under a start button, with an out-of-band loader."""
    start_requested = Signal()
    cell_clicked = Signal(object)  # Coordinate

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setStyleSheet(BOARD_STYLE)

        self._board: Optional[Board] = None
        self._cells: dict[Coordinate, ClueCell] = {}

        layout = QVBoxLayout(self)

        self.btn_start = QPushButton(START_LABEL)
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(self.start_requested)
        layout.addWidget(self.btn_start)

        self.progress = QProgressBar()
        self.progress.setRange(0, 0)  # Indeterminate
        self.progress.setTextVisible(False)
        self.progress.setVisible(False)
        layout.addWidget(self.progress)

        self.grid_container = QWidget()
        self.grid = QGridLayout(self.grid_container)
        self.grid.setSpacing(4)
        layout.addWidget(self.grid_container, 1)

        self.cell_clicked.connect(self.on_cell_clicked)

    @property
    def board(self) -> Optional[Board]:
        return self._board

    def cell(self, coordinate: Coordinate) -> ClueCell:
        return self._cells[coordinate]

    def _clear_grid(self) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._cells.clear()
        self._board = None

    def render_loading(self) -> None:
        """Wipe the board, show the loader and lock the start button."""
        self._clear_grid()
        self.progress.setVisible(True)
        self.btn_start.setEnabled(False)
        self.btn_start.setText(LOADING_LABEL)

    def render_idle(self) -> None:
        self.progress.setVisible(False)
        self.btn_start.setEnabled(True)
        self.btn_start.setText(START_LABEL)

    def render_board(self, board: Board) -> None:
        """Header row of titles, then one row per clue index with a placeholder in each cell."""
        self._clear_grid()
        self._board = board

        for col, title in enumerate(board.titles):
            header = QLabel(title)
            header.setObjectName("categoryTitle")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            header.setWordWrap(True)
            self.grid.addWidget(header, 0, col)

        for coordinate in board.coordinates():
            cell = ClueCell(coordinate, self.grid_container)
            cell.clicked.connect(self.cell_clicked)
            self.grid.addWidget(cell, coordinate.clue_index + 1, coordinate.category_index)
            self._cells[coordinate] = cell

        self.progress.setVisible(False)
        self.btn_start.setEnabled(True)
        self.btn_start.setText(RESTART_LABEL)

    @Slot(object)
    def on_cell_clicked(self, coordinate: Coordinate) -> None:
        """Advance the clue under the cell and repaint it."""
        if self._board is None:
            return

        clue = self._board.clue_at(coordinate)
        reveal = advance(clue)
        if reveal is None:
            return

        cell = self._cells[coordinate]
        cell.setText(reveal.text)
        if reveal.side_effect is SideEffect.DISABLE:
            cell.mark_disabled()
        logger.debug(f"Cell {coordinate} now showing {clue.showing}")
