"""
Game Controller
===============
Loads a new board and owns it for the rest of the game.

Why is this file needed?
------------------------
1. Orchestration: category ids -> sample -> fetch each category -> sample clues
   -> Board.
2. State: It owns the explicit IDLE / LOADING / READY state and announces
   changes through a Qt signal, so the view never infers state from its own
   widgets.
3. Re-entrancy: A start request while a load is in flight is ignored.

Classes:
    GameState: Lifecycle of the controller.
    GameController: The QObject the view subscribes to.
"""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from jeopardy.config import CATEGORY_POOL_SIZE
from jeopardy.controller.api_client import TriviaDataSource
from jeopardy.controller.sampler import Sampler
from jeopardy.model.board import (
    NUM_CATEGORIES, NUM_QUESTIONS_PER_CAT, Board, Category, Clue, load_board
)
from jeopardy.model.errors import MalformedResponse

logger = logging.getLogger(__name__)


class GameState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class GameController(QObject):
    """Builds boards from a data source and tracks the load state."""
    state_changed = Signal(object)  # GameState

    def __init__(
        self,
        source: TriviaDataSource,
        sampler: Optional[Sampler] = None,
        category_pool_size: int = CATEGORY_POOL_SIZE,
    ) -> None:
        super().__init__()
        self.source = source
        self.sampler = sampler if sampler is not None else Sampler()
        self.category_pool_size = category_pool_size

        self._state = GameState.IDLE
        self._board: Optional[Board] = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Optional[Board]:
        """The board of the current game, None until a load succeeds."""
        return self._board

    @property
    def is_loading(self) -> bool:
        return self._state is GameState.LOADING

    def _set_state(self, state: GameState) -> None:
        if state != self._state:
            self._state = state
            self.state_changed.emit(state)

    async def start_game(self) -> Optional[Board]:
        """
        Load a fresh board.

        Returns:
            The new Board, or None if a load was already in progress.

        Raises:
            NetworkFailure, MalformedResponse: Propagated from the load; no
                partial board is kept and the state falls back to IDLE.
        """
        if self.is_loading:
            logger.info("Load already in progress, ignoring start request.")
            return None

        self._board = None
        self._set_state(GameState.LOADING)
        logger.info("Loading new board...")

        try:
            board = await self._load_board()
        except Exception:
            logger.error("Board load failed, discarding partial data.")
            self._set_state(GameState.IDLE)
            raise

        self._board = board
        logger.info(f"Board ready: {', '.join(board.titles)}")
        self._set_state(GameState.READY)
        return board

    async def _load_board(self) -> Board:
        category_ids = await self.source.get_category_ids(self.category_pool_size)
        if len(category_ids) < NUM_CATEGORIES:
            raise MalformedResponse(
                f"Need {NUM_CATEGORIES} categories, the API offered {len(category_ids)}."
            )

        categories: list[Category] = []
        # One request at a time; the board is only exposed once complete.
        for category_id in self.sampler.sample(category_ids, NUM_CATEGORIES):
            fetched = await self.source.get_category(category_id)
            categories.append(self._pick_clues(fetched))

        return load_board(categories)

    def _pick_clues(self, category: Category) -> Category:
        if len(category.clues) < NUM_QUESTIONS_PER_CAT:
            raise MalformedResponse(
                f"Category '{category.title}' has {len(category.clues)} clues, "
                f"need {NUM_QUESTIONS_PER_CAT}."
            )

        picked = self.sampler.sample(category.clues, NUM_QUESTIONS_PER_CAT)
        return Category(
            title=category.title,
            clues=[Clue(question=c.question, answer=c.answer, value=c.value) for c in picked],
            id=category.id,
        )
