"""Exceptions raised across the layers. Everything derives from GameError so the outer layers can catch one type."""


class GameError(Exception):
    """Base class for all errors raised by this package."""


# --- Domain layer ---
class InvalidBoardSizeError(GameError):
    """Width or height of a board is negative (or not an integer)."""


class BoardConstructionError(GameError):
    """A Board was instantiated without going through Board.generate()."""


class InvalidNotationError(GameError):
    """A line notation string could not be parsed."""


class UnknownLineError(GameError):
    """The requested line does not exist on (or does not belong to) this board."""


class LineAlreadyClaimedError(GameError):
    """A player tried to claim a line that already has an owner."""


class BoxAlreadyOwnedError(GameError):
    """A box that already has an owner was closed a second time (should never happen)."""


# --- Boundary layers ---
class InvalidRequestError(GameError):
    """Request models that fail validation."""


class RepositoryError(GameError):
    """Record could not be found or stored."""
