"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling network-bound tasks.

Why is this file needed?
------------------------
1. Responsiveness: Fetching seven API responses on the main thread would
   freeze the GUI. The load runs in its own thread with its own asyncio loop.
2. Signals: They provide a safe way to hand the finished board (or the error)
   back to the GUI thread using Qt Signals.

Classes:
    BoardLoaderWorker: Runs GameController.start_game().
"""
import asyncio
import logging

from PySide6.QtCore import QThread, Signal

from jeopardy.controller.game import GameController
from jeopardy.model.errors import JeopardyError

logger = logging.getLogger(__name__)


class BoardLoaderWorker(QThread):
    # Signals to update the UI from the background
    board_loaded = Signal(object)  # Board
    error_occurred = Signal(str)

    def __init__(self, controller: GameController):
        super().__init__()
        self.controller = controller

    def run(self):
        logger.info("Starting board load in background thread...")
        try:
            board = asyncio.run(self.controller.start_game())

        except JeopardyError as e:
            logger.error(f"Board load failed: {e}")
            self.error_occurred.emit(str(e))

        except Exception as e:
            logger.exception(f"Unexpected error in BoardLoaderWorker: {e}")
            self.error_occurred.emit(f"Unexpected error: {e}")

        else:
            if board is not None:
                self.board_loaded.emit(board)
