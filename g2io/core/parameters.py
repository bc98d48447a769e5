"""Typed parameters given to plugins as comma-separated strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from g2io.core.errors import ArityError, InvariantError, ParameterTypeError

_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParameterType(str, Enum):
    POSITIVE_INTEGER = "positive integer"
    PROBABILITY = "probability"

    def parse(self, token: str) -> "ParameterValue":
        """Read a single token as a value of this type."""
        if self is ParameterType.POSITIVE_INTEGER:
            if not _DIGITS.fullmatch(token):
                raise ParameterTypeError(
                    f"cannot read '{token}' as a positive integer", token,
                )
            return ParameterValue(self, int(token))

        if not _FLOAT.fullmatch(token):
            raise ParameterTypeError(
                f"cannot read '{token}' as a probability", token,
            )
        p = float(token)
        if not 0.0 <= p <= 1.0:
            raise ParameterTypeError(
                f"probability must be between 0 and 1, got '{token}'", token,
            )
        return ParameterValue(self, p)


@dataclass(frozen=True)
class ParameterValue:
    """A parsed parameter, tagged with the type it was parsed as."""

    type: ParameterType
    value: Union[int, float]

    @classmethod
    def positive_integer(cls, value: int) -> "ParameterValue":
        return cls(ParameterType.POSITIVE_INTEGER, value)

    @classmethod
    def probability(cls, value: float) -> "ParameterValue":
        return cls(ParameterType.PROBABILITY, value)

    def as_int(self) -> int:
        if self.type is not ParameterType.POSITIVE_INTEGER:
            raise InvariantError(f"{self!r} is not a positive integer")
        return int(self.value)

    def as_float(self) -> float:
        if self.type is not ParameterType.PROBABILITY:
            raise InvariantError(f"{self!r} is not a probability")
        return float(self.value)


def parse_parameters(
    declared_types: Sequence[ParameterType],
    text: str,
) -> list[ParameterValue]:
    """
    Parse a comma-separated parameter string against a type signature.

    Parameters
    ----------
    declared_types : sequence of ParameterType
        Expected type of each positional parameter.
    text : str
        Raw parameter string, e.g. ``"4,0.5"``.  An empty string holds zero
        parameters.

    Returns
    -------
    list[ParameterValue]
        One value per declared type, in order.

    Raises
    ------
    ArityError
        If the number of tokens differs from ``len(declared_types)``.
    ParameterTypeError
        If a token does not parse as its declared type.
    """
    tokens = text.split(",") if text else []
    if len(tokens) != len(declared_types):
        raise ArityError(
            f"expected {len(declared_types)} parameter(s), got {len(tokens)}",
            text,
        )
    return [t.parse(token) for t, token in zip(declared_types, tokens)]
