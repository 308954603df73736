"""
Custom exceptions, shared by all layers.

The rules engine itself never raises for game input (it answers with booleans);
these are raised at the service / API boundary.
NOTE: plain Exception subclasses, not ValueError. pydantic only wraps ValueError/AssertionError
into a ValidationError, so raising these inside a validator lets them through unchanged.
"""


class GameError(Exception):
    """Top-level exception: catch this to catch anything the game layers raise on purpose."""


class IllegalMoveError(GameError):
    """Phase mismatch, target outside the current legal set, or wrong acting player."""


class EmptyHistoryError(GameError):
    """Nothing left to undo."""


class GameStateError(GameError):
    """Request does not make sense for the game in its current state (ex. the game is already won)."""


class InvalidRequestError(GameError):
    """Incoming request could not be validated."""


class RepositoryError(GameError):
    """Could not find / store a game."""
