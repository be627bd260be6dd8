class PentagoError(Exception):
    pass


class InvalidInput(PentagoError, ValueError):
    """Malformed matrix handed to the rotation or board composition helpers."""


class IllegalAction(PentagoError, ValueError):
    """A well-formed action the current state does not allow."""


class UnknownAction(PentagoError, TypeError):
    pass
