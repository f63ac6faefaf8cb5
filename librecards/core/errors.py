"""Errors raised when a game action is rejected."""


class GameError(Exception):
    """Base class for rejected game actions."""


class InputValidationError(GameError, ValueError):
    """The caller passed structurally invalid arguments."""


class StateConflictError(GameError, RuntimeError):
    """The action is not legal in the current game state."""


class IllegalTransitionError(StateConflictError):
    """A status transition was requested from the wrong state."""

    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Cannot switch from {current.name} to {target.name}")
