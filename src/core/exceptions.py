"""
Custom exceptions used across layers.

The pure chess core never raises these for odd positions (it returns empty move lists or fallbacks instead).
The Game, Service and API layers use them to refuse requests.
"""


class GameError(Exception):
    """Top-level exception of the application. Catch this one to handle anything the domain refuses to do."""


class GameStateError(GameError):
    """Game is not in a state that allows the requested action (ex. the game is already over)."""


class IllegalMoveError(GameError):
    """The requested move is not a legal move in the current position."""


class NotYourTurnError(GameError):
    """The human player tried to move while the engine is to move (or the reverse)."""


class InvalidFENError(GameError):
    """String could not be interpreted as a position."""


class InvalidRequestError(GameError):
    """Request model failed validation."""


class RepositoryError(GameError):
    """Record could not be found / stored."""
