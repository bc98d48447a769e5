"""g2io: a graph generator following an inner/outer pattern."""

from g2io.core import (
    EdgeKind,
    FirstToSecond,
    GenerationStep,
    Graph,
    InnerGraph,
    InnerOuterGenerator,
    InterGraphEdge,
    NamedParam,
    ParameterType,
    ParameterValue,
    SecondToFirst,
)

__version__ = "0.1.0"

__all__ = [
    "EdgeKind",
    "FirstToSecond",
    "GenerationStep",
    "Graph",
    "InnerGraph",
    "InnerOuterGenerator",
    "InterGraphEdge",
    "NamedParam",
    "ParameterType",
    "ParameterValue",
    "SecondToFirst",
]
