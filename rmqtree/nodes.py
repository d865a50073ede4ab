from __future__ import generator_stop

from typing import Any, Generic, Iterator, List, Optional, Tuple, Union

from .typing import KeyT, ValueT


class Leaf(Generic[KeyT, ValueT]):

    """Leaf node. Holds the current value of exactly one key."""

    __slots__ = ("key", "value", "parent")

    def __init__(self, key: KeyT, value: ValueT, parent: Optional[int] = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        return f"Leaf(key={self.key!r}, value={self.value!r}, parent={self.parent!r})"

    def __str__(self) -> str:
        return f'[LEAF: value = "{self.value}"]'


class Internal(Generic[ValueT]):

    """Internal node. `value` is the minimum of the values of its two children,
    `left` and `right` are handles into the owning `NodeArena`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: ValueT, left: int, right: int, parent: Optional[int] = None) -> None:
        self.value = value
        self.left = left
        self.right = right
        self.parent = parent

    def __repr__(self) -> str:
        return f"Internal(value={self.value!r}, left={self.left}, right={self.right}, parent={self.parent!r})"

    def __str__(self) -> str:
        return f'[INTERNAL: value = "{self.value}"]'


Node = Union[Leaf[Any, Any], Internal[Any]]


class NodeArena:

    """Append-only storage of tree nodes. Nodes refer to each other by their integer handle,
    which is the position in the arena. Parent handles are only used to walk upwards.
    """

    __slots__ = ("nodes",)

    nodes: List[Node]

    def __init__(self) -> None:
        self.nodes = []

    def add(self, node: Node) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, handle: int) -> Node:
        return self.nodes[handle]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def value(self, handle: int) -> Any:
        return self.nodes[handle].value

    def children(self, handle: int) -> Optional[Tuple[int, int]]:
        """Returns the handles of the left and right child, or `None` for leaves."""

        node = self.nodes[handle]
        if isinstance(node, Internal):
            return node.left, node.right
        else:
            return None

    def ancestors(self, handle: Optional[int]) -> Iterator[int]:
        """Yields `handle` and all handles above it up to and including the root."""

        while handle is not None:
            yield handle
            handle = self.nodes[handle].parent
