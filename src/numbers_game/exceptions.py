"""Exceptions raised by the Countdown numbers solver."""


class CountdownError(Exception):
    """Base class for all solver errors."""
    pass


class InputValidationError(CountdownError):
    """Raised when the source numbers or target are malformed."""
    pass


class ExpressionError(CountdownError):
    """Raised when an infix expression cannot be parsed or evaluated."""
    pass
