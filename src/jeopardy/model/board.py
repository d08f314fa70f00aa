"""
Board Model
===========
This module defines the in-memory data of a single game.

Why is this file needed?
------------------------
1. State Management: It holds the loaded categories and every clue's reveal
   state in one object owned by the GameController.
2. Addressing: A typed Coordinate replaces string cell ids, so the view never
   parses "2-3" style identifiers.
3. Decoupling: The view mutates clues through the Board it was handed; it never
   keeps a copy of its own.

Classes:
    RevealState: What a clue currently displays.
    Clue: A question/answer pair with its reveal state.
    Category: A titled group of clues.
    Coordinate: (category_index, clue_index) address of a grid cell.
    Board: The fixed-size grid of categories and clues.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, Optional, Sequence

from jeopardy.model.errors import IndexOutOfRange

NUM_CATEGORIES = 6
NUM_QUESTIONS_PER_CAT = 5


class RevealState(StrEnum):
    """Reveal progress of a clue. Only ever moves forward."""
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    question: str
    answer: str
    showing: RevealState = RevealState.HIDDEN
    value: Optional[int] = None

    def __post_init__(self) -> None:
        self.showing = RevealState(self.showing)


@dataclass
class Category:
    title: str
    clues: list[Clue] = field(default_factory=list)
    id: Optional[int] = None


@dataclass(frozen=True)
class Coordinate:
    """Address of one grid cell: column (category) and row (clue)."""
    category_index: int
    clue_index: int


@dataclass
class Board:
    """
    NUM_CATEGORIES categories with NUM_QUESTIONS_PER_CAT clues each.

    The dimensions are fixed for the lifetime of a game; a new game gets a new Board.
    """
    categories: list[Category] = field(default_factory=list)

    @property
    def titles(self) -> list[str]:
        return [category.title for category in self.categories]

    def get_clue(self, category_index: int, clue_index: int) -> Clue:
        """
        Return the clue at the given column and row.

        Raises:
            IndexOutOfRange: If the indices fall outside the board. Negative
                indices are rejected rather than counted from the end.
        """
        if not 0 <= category_index < NUM_CATEGORIES:
            raise IndexOutOfRange(f"Category index {category_index} outside [0, {NUM_CATEGORIES}).")
        if not 0 <= clue_index < NUM_QUESTIONS_PER_CAT:
            raise IndexOutOfRange(f"Clue index {clue_index} outside [0, {NUM_QUESTIONS_PER_CAT}).")
        return self.categories[category_index].clues[clue_index]

    def clue_at(self, coordinate: Coordinate) -> Clue:
        return self.get_clue(coordinate.category_index, coordinate.clue_index)

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every cell address, row by row as the grid body lays them out."""
        for clue_index in range(NUM_QUESTIONS_PER_CAT):
            for category_index in range(NUM_CATEGORIES):
                yield Coordinate(category_index, clue_index)


def load_board(categories: Sequence[Category]) -> Board:
    """
    Wrap loaded categories into a Board.

    Precondition: exactly NUM_CATEGORIES categories with NUM_QUESTIONS_PER_CAT
    clues each. The loading pipeline guarantees the shape; it is not checked here.
    """
    return Board(categories=list(categories))
