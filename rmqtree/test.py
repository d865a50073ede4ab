from functools import wraps
from itertools import product, zip_longest
from typing import Any, Callable, Iterable, Optional
from unittest import TestCase

from .exceptions import InconsistentState


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        suffix = f" : {msg}" if msg else ""
        for i, (a, b) in enumerate(zip_longest(first, second)):
            self.assertEqual(a, b, msg=f"in iteration index {i}{suffix}")

    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    def assertInvariant(self, tree: Any, msg: Optional[str] = None) -> None:
        """Fails if any internal node of `tree` doesn't hold the minimum of its children."""

        try:
            tree.check_invariant()
        except InconsistentState as e:
            self.fail(msg or str(e))


def random_arguments(n: int, *funcs: Callable[[], Any]) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(n):
                with self.subTest(str(i)):
                    if func(self, *(f() for f in funcs)) is not None:
                        raise AssertionError

        return inner

    return decorator


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def parametrize_product(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in product(*args_list):
                with self.subTest(str(args)):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator
