"""Exceptions raised by the generation engine."""

from __future__ import annotations


class UserInputError(ValueError):
    """
    Base class for errors caused by a user-provided string.

    The offending raw string is kept in :attr:`raw` so that callers can
    report it back.
    """

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class ArityError(UserInputError):
    """The number of parameters does not match the declared signature."""


class ParameterTypeError(UserInputError):
    """A parameter token cannot be read as its declared type."""


class ParameterConstraintError(UserInputError):
    """Well-typed parameter values rejected by the plugin itself."""


class NotFoundError(UserInputError):
    """No registered plugin has the requested name."""


class InvariantError(RuntimeError):
    """
    An internal invariant was broken.

    This signals a programming defect (usually in a plugin), not bad user
    input, and is never caught by the package.
    """
