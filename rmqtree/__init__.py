from .builder import BuildResult, build
from .exceptions import DuplicateKey, EmptyInput, InconsistentState, InvalidRange, KeyNotFound, NotFound
from .nodes import Internal, Leaf, NodeArena
from .rmq import SemiDynamicRMQTree, construct, range_minimum, update

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "DuplicateKey",
    "EmptyInput",
    "InconsistentState",
    "Internal",
    "InvalidRange",
    "KeyNotFound",
    "Leaf",
    "NodeArena",
    "NotFound",
    "SemiDynamicRMQTree",
    "build",
    "construct",
    "range_minimum",
    "update",
]
