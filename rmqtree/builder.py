from __future__ import generator_stop

from collections.abc import Mapping
from operator import itemgetter
from typing import Dict, Generic, List, NamedTuple, Tuple

from .exceptions import DuplicateKey, EmptyInput
from .nodes import Internal, Leaf, NodeArena
from .typing import KeyT, Pairs, ValueT


class BuildResult(NamedTuple):
    arena: NodeArena
    root: int
    index: Dict  # key -> leaf handle


def sorted_pairs(pairs: Pairs) -> List[Tuple[KeyT, ValueT]]:
    """Returns the key/value pairs sorted ascending by key.
    Only the keys are compared, values can be of any orderable type.
    """

    if isinstance(pairs, Mapping):  # mapping should be before Iterable
        items = list(pairs.items())
    else:
        items = []
        seen = set()
        for key, value in pairs:
            if key in seen:
                raise DuplicateKey(key)
            seen.add(key)
            items.append((key, value))

    if not items:
        raise EmptyInput("No key/value pairs to process.")

    items.sort(key=itemgetter(0))
    return items


class _Builder(Generic[KeyT, ValueT]):
    def __init__(self, items: List[Tuple[KeyT, ValueT]]) -> None:
        self.items = items
        self.arena = NodeArena()
        self.index: Dict[KeyT, int] = {}

    def build(self, lo: int, hi: int) -> int:
        """Builds the subtree over `items[lo:hi]` and returns the handle of its root.
        The middle element goes to the right, so the shape only depends on `hi - lo`.
        """

        if hi - lo == 1:
            key, value = self.items[lo]
            handle = self.arena.add(Leaf(key, value))
            self.index[key] = handle
            return handle

        mid = lo + (hi - lo) // 2
        left = self.build(lo, mid)
        right = self.build(mid, hi)

        left_node = self.arena[left]
        right_node = self.arena[right]
        handle = self.arena.add(Internal(min(left_node.value, right_node.value), left, right))
        left_node.parent = handle
        right_node.parent = handle

        return handle


def build(pairs: Pairs) -> BuildResult:
    """Builds a perfectly balanced static tree whose leaves are the values of `pairs` sorted by key.
    `pairs` can be a mapping or an iterable of `(key, value)` tuples with distinct keys.
    Every internal node holds the minimum of its subtree.

    Raises `EmptyInput` if there are no pairs and `DuplicateKey` if a key occurs more than once.
    Runs in O(n log n) time because of the sorting.
    """

    items = sorted_pairs(pairs)
    builder = _Builder(items)
    root = builder.build(0, len(items))
    return BuildResult(builder.arena, root, builder.index)
