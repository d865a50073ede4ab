from __future__ import generator_stop

from typing import Any


class NotFound(LookupError):
    """Raised when a search doesn't turn up any results.
    Similar to KeyError or IndexError.
    """


class KeyNotFound(NotFound, KeyError):
    """Raised when a key is not part of the fixed key set of a tree.
    Nothing is modified before this is raised.
    """

    def __init__(self, key: Any, side: str = "") -> None:
        if side:
            msg = f"The {side} key [{key}] is not in this tree."
        else:
            msg = f"The key [{key}] is not in this tree."
        super().__init__(msg)
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidRange(ValueError):
    """Raised when the left end of a query range is greater than the right end."""

    def __init__(self, left: Any, right: Any) -> None:
        super().__init__(f"The specified range [{left}, {right}] is descending.")
        self.left = left
        self.right = right


# values, input errors


class EmptyInput(ValueError):
    """Raised when no key/value pairs are passed to build a tree from,
    and thus no tree can be built.
    """


class DuplicateKey(ValueError):
    """Raised when the same key is passed more than once to build a tree."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Duplicate key [{key}]")
        self.key = key


# runtime, possible coding errors


# aka ConsistencyError
class InconsistentState(RuntimeError):
    """Raised when the stored minimum of an internal node doesn't match the minimum of its children."""
