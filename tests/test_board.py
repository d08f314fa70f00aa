"""Test the board model and cell addressing."""

import pytest

from jeopardy.model.board import (
    NUM_CATEGORIES, NUM_QUESTIONS_PER_CAT, Board, Coordinate, RevealState
)
from jeopardy.model.errors import IndexOutOfRange


class TestGetClue:
    def test_defined_for_every_coordinate(self, board: Board):
        """All 30 coordinates resolve to the clue stored at that position."""
        for cat_idx in range(NUM_CATEGORIES):
            for clue_idx in range(NUM_QUESTIONS_PER_CAT):
                clue = board.get_clue(cat_idx, clue_idx)
                assert clue.question == f"Q{cat_idx}-{clue_idx}"
                assert clue.showing is RevealState.HIDDEN

    @pytest.mark.parametrize("cat_idx, clue_idx", [
        (NUM_CATEGORIES, 0),
        (0, NUM_QUESTIONS_PER_CAT),
        (-1, 0),
        (0, -1),
        (100, 100),
    ])
    def test_out_of_range_raises(self, board: Board, cat_idx: int, clue_idx: int):
        with pytest.raises(IndexOutOfRange):
            board.get_clue(cat_idx, clue_idx)

    def test_index_out_of_range_is_an_index_error(self, board: Board):
        with pytest.raises(IndexError):
            board.get_clue(NUM_CATEGORIES, 0)

    def test_clue_at_returns_same_object(self, board: Board):
        """Mutations through a coordinate are visible on the board itself."""
        clue = board.clue_at(Coordinate(2, 3))
        clue.showing = RevealState.QUESTION
        assert board.categories[2].clues[3].showing is RevealState.QUESTION


class TestCoordinates:
    def test_covers_whole_board_once(self, board: Board):
        coords = list(board.coordinates())
        assert len(coords) == NUM_CATEGORIES * NUM_QUESTIONS_PER_CAT
        assert len(set(coords)) == len(coords)

    def test_row_major_order(self, board: Board):
        coords = list(board.coordinates())
        assert coords[0] == Coordinate(0, 0)
        assert coords[1] == Coordinate(1, 0)
        assert coords[NUM_CATEGORIES] == Coordinate(0, 1)

    def test_coordinate_is_hashable_value(self):
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert {Coordinate(1, 2): "x"}[Coordinate(1, 2)] == "x"


def test_titles_in_column_order(board: Board):
    assert board.titles == [f"Category {i}" for i in range(NUM_CATEGORIES)]
