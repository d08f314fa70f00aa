"""
Main Application Window
=======================
The top-level window holding the board and a status bar.

Why is this file needed?
------------------------
1. Layout: It hosts the BoardView as the central widget.
2. Routing: It connects the start button to a background load, and the
   controller's state changes to the matching renderer calls.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QMessageBox, QStatusBar

from jeopardy.controller.game import GameController, GameState
from jeopardy.controller.workers import BoardLoaderWorker
from jeopardy.application import VISIBLE_APP_NAME
from jeopardy.view.board_view import BoardView

logger = logging.getLogger(__name__)

# How long closing the window blocks on a running load before deferring
CLOSE_WAIT_MS = 500


class MainWindow(QMainWindow):
    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self.controller = controller
        self.loader_worker: Optional[BoardLoaderWorker] = None

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 700)

        self.board_view = BoardView(self)
        self.setCentralWidget(self.board_view)

        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Press Start! to load a board.")

        # --- SIGNAL CONNECTIONS ---
        self.board_view.start_requested.connect(self.on_start_requested)
        self.controller.state_changed.connect(self.on_state_changed)

        self.board_view.render_idle()

    def is_loading(self) -> bool:
        worker_busy = self.loader_worker is not None and self.loader_worker.isRunning()
        return worker_busy or self.controller.is_loading

    @Slot()
    def on_start_requested(self) -> None:
        if self.is_loading():
            logger.info("Start requested while loading, ignored.")
            return

        self.board_view.render_loading()
        self.statusBar().showMessage("Loading categories...")

        self.loader_worker = BoardLoaderWorker(self.controller)
        self.loader_worker.board_loaded.connect(self.on_board_loaded)
        self.loader_worker.error_occurred.connect(self.on_load_error)
        self.loader_worker.start()

    @Slot(object)
    def on_state_changed(self, state: GameState) -> None:
        match state:
            case GameState.LOADING:
                self.board_view.render_loading()

            case GameState.READY:
                board = self.controller.board
                if board is not None:
                    self.board_view.render_board(board)

            case GameState.IDLE:
                self.board_view.render_idle()

    @Slot(object)
    def on_board_loaded(self, board) -> None:
        logger.info(f"Board with {len(board.categories)} categories loaded.")
        self.statusBar().showMessage("Click a cell to see the question, click again for the answer.")

    @Slot(str)
    def on_load_error(self, msg: str) -> None:
        self.statusBar().showMessage("Loading failed.")
        self.board_view.render_idle()
        QMessageBox.critical(self, "Error", f"Could not load a new board:\n{msg}")

    def closeEvent(self, event) -> None:
        # Requests cannot be cancelled; close once the in-flight load is done.
        if self.loader_worker is not None and self.loader_worker.isRunning():
            if not self.loader_worker.wait(CLOSE_WAIT_MS):
                logger.info("Close requested during a load, deferring until it finishes.")
                self.statusBar().showMessage("Finishing the current load before closing...")
                self.loader_worker.finished.connect(self.close)
                event.ignore()
                return
        super().closeEvent(event)
