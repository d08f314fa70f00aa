"""
Error Taxonomy
==============
Exceptions raised by the data source, the controller and the board model.

Classes:
    JeopardyError: Base class, lets callers catch everything from this package.
    NetworkFailure: The trivia API was unreachable, timed out or answered with an error.
    MalformedResponse: The API answered, but with data we cannot build a board from.
    IndexOutOfRange: A cell coordinate outside the board.
"""


class JeopardyError(Exception):
    """Base class for all application errors."""


class NetworkFailure(JeopardyError):
    """Raised when a request to the trivia API fails."""


class MalformedResponse(JeopardyError):
    """Raised when the trivia API returns data of the wrong shape or size."""


class IndexOutOfRange(JeopardyError, IndexError):
    """Raised when a coordinate does not address a clue on the board."""
