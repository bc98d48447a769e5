"""Generation engine: graph container, plugin framework and composition."""

from g2io.core.errors import (
    ArityError,
    InvariantError,
    NotFoundError,
    ParameterConstraintError,
    ParameterTypeError,
    UserInputError,
)
from g2io.core.graph import (
    EdgeKind,
    FirstToSecond,
    Graph,
    InnerGraph,
    InterGraphEdge,
    SecondToFirst,
)
from g2io.core.inner_outer import GenerationStep, InnerOuterGenerator
from g2io.core.named_param import NamedParam, named_from_str
from g2io.core.parameters import ParameterType, ParameterValue, parse_parameters

__all__ = [
    "ArityError",
    "EdgeKind",
    "FirstToSecond",
    "GenerationStep",
    "Graph",
    "InnerGraph",
    "InnerOuterGenerator",
    "InterGraphEdge",
    "InvariantError",
    "NamedParam",
    "NotFoundError",
    "ParameterConstraintError",
    "ParameterType",
    "ParameterTypeError",
    "ParameterValue",
    "SecondToFirst",
    "UserInputError",
    "named_from_str",
    "parse_parameters",
]
