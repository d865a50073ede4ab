from __future__ import generator_stop

import random
from math import ceil, log2

from rmqtree.builder import build, sorted_pairs
from rmqtree.exceptions import DuplicateKey, EmptyInput
from rmqtree.nodes import Internal, Leaf
from rmqtree.test import MyTestCase, parametrize


def shape(arena, handle):
    children = arena.children(handle)
    if children is None:
        return arena[handle].key
    left, right = children
    return (shape(arena, left), shape(arena, right))


def depth(arena, handle):
    return len(list(arena.ancestors(handle))) - 1


class BuilderTest(MyTestCase):
    def test_single(self):
        arena, root, index = build({5: 50})
        self.assertEqual(1, len(arena))
        self.assertIsInstance(arena[root], Leaf)
        self.assertIsNone(arena[root].parent)
        self.assertEqual({5: root}, index)

    @parametrize(
        (2, (1, 2)),
        (3, (1, (2, 3))),
        (4, ((1, 2), (3, 4))),
        (5, ((1, 2), (3, (4, 5)))),
        (6, ((1, (2, 3)), (4, (5, 6)))),
        (7, ((1, (2, 3)), ((4, 5), (6, 7)))),
    )
    def test_shape(self, n, truth):
        result = build({i: i for i in range(1, n + 1)})
        self.assertEqual(truth, shape(result.arena, result.root))

    def test_shape_independent_of_input_order(self):
        keys = list(range(20))
        truth = build({k: -k for k in keys})
        for _ in range(5):
            random.shuffle(keys)
            result = build([(k, -k) for k in keys])
            self.assertEqual(shape(truth.arena, truth.root), shape(result.arena, result.root))

        result = build({(k, -k) for k in keys})
        self.assertEqual(shape(truth.arena, truth.root), shape(result.arena, result.root))

    def test_height(self):
        for n in range(1, 70):
            arena, root, index = build({i: i for i in range(n)})
            height = max(depth(arena, handle) for handle in index.values())
            self.assertEqual(ceil(log2(n)), height)

    def test_internal_values(self):
        values = random.sample(range(-100, 100), 37)
        arena, root, index = build(dict(enumerate(values)))

        self.assertEqual(min(values), arena[root].value)
        for node in arena:
            if isinstance(node, Internal):
                self.assertEqual(min(arena[node.left].value, arena[node.right].value), node.value)
                self.assertEqual(arena[node.left].parent, arena[node.right].parent)

    def test_index(self):
        pairs = {"b": 2.5, "a": 1.5, "d": 0.5, "c": 3.5}
        arena, root, index = build(pairs)
        self.assertEqual(set(pairs), set(index))
        for key, handle in index.items():
            leaf = arena[handle]
            self.assertIsInstance(leaf, Leaf)
            self.assertEqual(key, leaf.key)
            self.assertEqual(pairs[key], leaf.value)

        self.assertEqual(("a", "b"), shape(arena, root)[0])

    def test_sorted_pairs(self):
        self.assertEqual([(1, "z"), (2, "y"), (3, "x")], sorted_pairs([(3, "x"), (1, "z"), (2, "y")]))

    def test_sorted_pairs_ignores_values(self):
        # values of different types must not be compared
        self.assertEqual([(1, None), (2, "a")], sorted_pairs({2: "a", 1: None}))

    @parametrize(
        ({},),
        ([],),
        (set(),),
        (iter([]),),
    )
    def test_empty(self, pairs):
        with self.assertRaises(EmptyInput):
            build(pairs)

    def test_empty_is_value_error(self):
        with self.assertRaises(ValueError):
            build({})

    def test_duplicate(self):
        with self.assertRaises(DuplicateKey) as cm:
            build([(1, 1), (2, 2), (1, 3)])
        self.assertEqual(1, cm.exception.key)


if __name__ == "__main__":
    import unittest

    unittest.main()
