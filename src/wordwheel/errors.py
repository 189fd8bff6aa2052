"""
Domain Exceptions
=================
All errors raised by the wordwheel package derive from WordWheelError.
"""


class WordWheelError(Exception):
    """Base class for wordwheel errors."""


class ActivationError(WordWheelError, ValueError):
    """Raised when a FORCE/VRTX activation request carries invalid parameters."""
