"""Engine error taxonomy.

Handlers raise these; ``engine.machine.step`` catches them at the transition
boundary and reports them as a diagnostic next to the unchanged state.
"""


class EngineError(Exception):
    """Base exception for rejected intents."""

    code = "ENGINE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class InvalidPhase(EngineError):
    """Intent not valid for the current phase (e.g. Start while a match runs)."""

    code = "INVALID_PHASE"


class NotFound(EngineError):
    """Referenced card or seat is absent."""

    code = "NOT_FOUND"


class IllegalMove(EngineError):
    """Move breaks a game rule."""

    code = "ILLEGAL_MOVE"


class InsufficientDeck(EngineError):
    """Draw requested but the deck cannot supply it."""

    code = "INSUFFICIENT_DECK"


class InvalidArgument(EngineError):
    """Intent payload out of range."""

    code = "INVALID_ARGUMENT"


class InvariantViolation(AssertionError):
    """A produced state breaks an engine invariant. Always a bug, never a no-op."""
