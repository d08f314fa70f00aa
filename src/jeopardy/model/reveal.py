"""
Clue Reveal State Machine
=========================
Decides what a click on a clue cell shows next.

Each clue walks HIDDEN -> QUESTION -> ANSWER exactly once. The transition
depends only on the clue's own state; no board-wide state is consulted.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from jeopardy.model.board import Clue, RevealState


class SideEffect(Enum):
    NONE = auto()
    DISABLE = auto()  # cell stops accepting clicks


@dataclass(frozen=True)
class Reveal:
    """Display update produced by a click."""
    text: str
    side_effect: SideEffect = SideEffect.NONE


def advance(clue: Clue) -> Optional[Reveal]:
    """
    Move the clue one step forward and return what the cell should show.

    Returns:
        The question on the first call, the answer (with SideEffect.DISABLE) on
        the second, and None on every call after that.
    """
    if clue.showing == RevealState.HIDDEN:
        clue.showing = RevealState.QUESTION
        return Reveal(clue.question)

    if clue.showing == RevealState.QUESTION:
        clue.showing = RevealState.ANSWER
        return Reveal(clue.answer, SideEffect.DISABLE)

    # Already showing the answer
    return None
