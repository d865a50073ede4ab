from __future__ import generator_stop

from typing import Dict, Generic, Iterator, List, Optional, Tuple

from .builder import BuildResult, build
from .exceptions import InconsistentState, InvalidRange, KeyNotFound
from .nodes import Internal, Leaf, Node, NodeArena
from .typing import KeyT, Pairs, ValueT


class SemiDynamicRMQTree(Generic[KeyT, ValueT]):

    """Semi-dynamic range minimum query tree.
    The set of keys is fixed when the tree is built, afterwards only values can be lowered using `update`.
    Both `update` and `range_minimum` run in O(log n) time.

    Example:
            tree = SemiDynamicRMQTree({1: 1, 2: 2, 3: 3, 4: 4})
            tree.range_minimum(2, 4)  # 2
            tree.update(4, -1)
            tree.range_minimum(2, 4)  # -1

    The structure is not thread-safe. Concurrent callers must serialize all access to an instance.
    """

    __slots__ = ("arena", "root", "index")

    arena: NodeArena
    root: int
    index: Dict[KeyT, int]

    def __init__(self, pairs: Pairs) -> None:
        """Builds the tree from a mapping or an iterable of `(key, value)` tuples. Runs in O(n log n) time.
        Raises `EmptyInput` if `pairs` is empty and `DuplicateKey` if a key is repeated.
        """

        self.arena, self.root, self.index = build(pairs)

    @classmethod
    def frombuild(cls, result: BuildResult) -> "SemiDynamicRMQTree":
        tree = cls.__new__(cls)
        tree.arena, tree.root, tree.index = result
        return tree

    # accessors

    def node(self, handle: int) -> Node:
        return self.arena[handle]

    def children(self, handle: int) -> Optional[Tuple[int, int]]:
        return self.arena.children(handle)

    def leaf(self, key: KeyT) -> int:
        """Returns the handle of the leaf holding the value of `key`."""

        try:
            return self.index[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def __getitem__(self, key: KeyT) -> ValueT:
        return self.arena.value(self.leaf(key))

    def __contains__(self, key: object) -> bool:
        return key in self.index

    def __len__(self) -> int:
        return len(self.index)

    def __iter__(self) -> Iterator[KeyT]:
        for key, value in self.items():
            yield key

    def _inorder(self) -> Iterator[Leaf]:
        stack = [self.root]
        while stack:
            node = self.arena[stack.pop()]
            if isinstance(node, Internal):
                stack.append(node.right)
                stack.append(node.left)
            else:
                yield node

    def items(self) -> Iterator[Tuple[KeyT, ValueT]]:
        """Yields `(key, value)` pairs in ascending key order."""

        for leaf in self._inorder():
            yield leaf.key, leaf.value

    @property
    def height(self) -> int:
        # the right half is never smaller than the left half, so the right spine is the longest path
        height = 0
        node = self.arena[self.root]
        while isinstance(node, Internal):
            node = self.arena[node.right]
            height += 1
        return height

    # operations

    def update(self, key: KeyT, value: ValueT) -> None:
        """Lowers the value of `key` to `value`. If the stored value is already smaller or equal,
        nothing changes. This never raises a value, ie. it is not an assignment.
        Raises `KeyNotFound` if `key` is not part of the tree, in which case nothing is modified.
        """

        leaf = self.leaf(key)

        for handle in self.arena.ancestors(leaf):
            node = self.arena[handle]
            node.value = min(node.value, value)

    def range_minimum(self, left_key: KeyT, right_key: KeyT) -> ValueT:
        """Returns the minimum value of all keys in the closed interval `[left_key, right_key]`.
        Both keys must be part of the tree, otherwise `KeyNotFound` is raised.
        Raises `InvalidRange` if `left_key > right_key`.
        """

        left_leaf = self._endpoint(left_key, "left")
        right_leaf = self._endpoint(right_key, "right")

        if left_key > right_key:
            raise InvalidRange(left_key, right_key)

        if left_leaf == right_leaf:
            return self.arena.value(left_leaf)

        split = self.split_node(left_leaf, right_leaf)

        values = [self.arena.value(left_leaf), self.arena.value(right_leaf)]
        values.extend(self.arena.value(h) for h in self._inner_subtrees(split, left_leaf, "left"))
        values.extend(self.arena.value(h) for h in self._inner_subtrees(split, right_leaf, "right"))

        return min(values)

    def _endpoint(self, key: KeyT, side: str) -> int:
        try:
            return self.index[key]
        except KeyError:
            raise KeyNotFound(key, side) from None

    def split_node(self, left_leaf: int, right_leaf: int) -> int:
        """Returns the handle of the lowest common ancestor of two leaves."""

        left_ancestors = set(self.arena.ancestors(left_leaf))

        for handle in self.arena.ancestors(right_leaf):
            if handle in left_ancestors:
                return handle

        raise InconsistentState("Leaves don't share a root")

    def path(self, split: int, leaf: int) -> Iterator[int]:
        """Yields the handles strictly between `leaf` and its ancestor `split`, bottom-up."""

        for handle in self.arena.ancestors(self.arena[leaf].parent):
            if handle == split:
                break
            yield handle

    def _inner_subtrees(self, split: int, leaf: int, side: str) -> Iterator[int]:
        """Yields the roots of the subtrees which hang off the path from `split` to `leaf`
        on the side facing into the query range.
        """

        child = leaf
        for handle in self.path(split, leaf):
            node = self.arena[handle]
            assert isinstance(node, Internal)  # for mypy
            if side == "left":
                if node.left == child:
                    yield node.right
            else:
                if node.right == child:
                    yield node.left
            child = handle

    # debugging

    def levels(self) -> Iterator[List[Node]]:
        """Yields the nodes of the tree level by level, starting at the root."""

        level = [self.root]
        while level:
            yield [self.arena[handle] for handle in level]
            next_level: List[int] = []
            for handle in level:
                children = self.arena.children(handle)
                if children:
                    next_level.extend(children)
            level = next_level

    def check_invariant(self) -> None:
        """Raises `InconsistentState` if the value of any internal node is not the minimum of its children."""

        for handle, node in enumerate(self.arena):
            if isinstance(node, Internal):
                truth = min(self.arena.value(node.left), self.arena.value(node.right))
                if node.value != truth:
                    raise InconsistentState(
                        f"Node {handle} holds {node.value}, but the minimum of its children is {truth}"
                    )

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, level)) for level in self.levels())

    def __repr__(self) -> str:
        return f"<SemiDynamicRMQTree keys={len(self)} height={self.height}>"


def construct(pairs: Pairs) -> SemiDynamicRMQTree:
    return SemiDynamicRMQTree(pairs)


def update(tree: SemiDynamicRMQTree, key: KeyT, value: ValueT) -> None:
    tree.update(key, value)


def range_minimum(tree: SemiDynamicRMQTree, left_key: KeyT, right_key: KeyT) -> ValueT:
    return tree.range_minimum(left_key, right_key)
