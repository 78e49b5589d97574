"""Grimoire exceptions."""


class GrimoireError(Exception):
    """Base class for errors raised by the grimoire core."""


class NotFoundError(GrimoireError):
    """Raised when a player index, role name or acting role cannot be found."""


class InvalidStateError(GrimoireError):
    """Raised when an operation is not valid in the current state.

    Covers undo with an empty history and night-walk commands issued
    outside the sub-state that accepts them.
    """


class ValidationError(GrimoireError):
    """Raised by game setup when the requested game cannot be built.

    For example a player count outside 5-15, or a script without
    enough roles of a category to deal the distribution.
    """
