"""
Named, parameterised plugins (generators, linkers, display engines).

A plugin is selected on the command line by a string ``"name"`` or
``"name/p1,p2,..."``.  The name picks the plugin out of a fixed registry, the
parameters are parsed against the plugin's declared types, and the plugin
then builds the object it stands for.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from g2io.core.errors import NotFoundError, ParameterConstraintError
from g2io.core.parameters import ParameterType, ParameterValue, parse_parameters

T = TypeVar("T")


class NamedParam(ABC, Generic[T]):
    """
    Base class for every plugin kind.

    Subclass this, set ``name``, ``description`` and
    ``expected_parameter_types``, and implement :meth:`try_with_params`.

    Example
    -------
    >>> class Constant(NamedParam[int]):
    ...     name = "const"
    ...     description = ("Returns its only parameter.",)
    ...     expected_parameter_types = (ParameterType.POSITIVE_INTEGER,)
    ...     def try_with_params(self, parameter_values):
    ...         return parameter_values[0].as_int()
    >>> Constant().try_with_str_params("7")
    7
    """

    name: str = "unnamed"
    description: tuple[str, ...] = ()
    expected_parameter_types: tuple[ParameterType, ...] = ()

    @abstractmethod
    def try_with_params(self, parameter_values: list[ParameterValue]) -> T:
        """
        Build the plugin product from parsed parameters.

        ``parameter_values`` always matches ``expected_parameter_types``.
        Implementations raise
        :class:`~g2io.core.errors.ParameterConstraintError` when the values
        are well typed but not acceptable together.
        """

    def try_with_str_params(self, params: str) -> T:
        """
        Parse ``params`` against the declared types, then build.

        A :class:`~g2io.core.errors.ParameterConstraintError` raised while
        building carries ``params`` as given, not the values rebuilt from it.
        """
        values = parse_parameters(self.expected_parameter_types, params)
        try:
            return self.try_with_params(values)
        except ParameterConstraintError as e:
            e.raw = params
            raise

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def split_named_str(s: str) -> tuple[str, str]:
    """Split ``"name/params"`` into its two parts (params may be empty)."""
    name, _, params = s.partition("/")
    return name, params


def named_from_str(
    collection: Iterable[NamedParam[T]],
    s: str,
    kind: str = "named object",
) -> T:
    """
    Resolve ``"name"`` or ``"name/params"`` against ``collection``.

    ``kind`` only names the plugin family in error messages.

    Raises
    ------
    NotFoundError
        If no plugin in the collection has that exact name.
    ArityError, ParameterTypeError, ParameterConstraintError
        If the matched plugin rejects the parameters.
    """
    collection = list(collection)
    name, params = split_named_str(s)
    for plugin in collection:
        if plugin.name == name:
            return plugin.try_with_str_params(params)
    available = ", ".join(p.name for p in collection)
    raise NotFoundError(f"Unknown {kind} '{s}'. Available: {available}", s)


def describe_named_params(collection: Iterable[NamedParam[Any]]) -> list[dict[str, Any]]:
    """Return a list of dicts summarising each plugin of a registry."""
    return [
        {
            "name": plugin.name,
            "description": list(plugin.description),
            "parameters": [t.value for t in plugin.expected_parameter_types],
        }
        for plugin in collection
    ]
