from jeopardy.model.board import (
    NUM_CATEGORIES,
    NUM_QUESTIONS_PER_CAT,
    Board,
    Category,
    Clue,
    Coordinate,
    RevealState,
    load_board,
)
from jeopardy.model.errors import IndexOutOfRange, JeopardyError, MalformedResponse, NetworkFailure
from jeopardy.model.reveal import Reveal, SideEffect, advance
