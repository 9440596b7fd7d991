"""
Exceptions raised by the outer layers.

NOTE: breaking a rule of the game is NOT an exception. The engine returns a MoveError value for that,
and guarantees the board is left untouched. These exceptions are for requests that make no sense at all.
"""


class DraughtsError(Exception):
    """Base class for all errors raised by this package"""


class GameStateError(DraughtsError):
    """The game is not in a state that allows the requested action (ex. moving before the game started)"""


class InvalidNotationError(DraughtsError):
    """Text that cannot be read as a coordinate or a chain of coordinates"""


class InvalidRequestError(DraughtsError):
    """Request model failed validation"""


class RepositoryError(DraughtsError):
    """Record not found / could not be stored"""
