from time import perf_counter_ns
from typing import Optional


class MeasureTime:

    """Measures the wall time spent in the code under the context manager, in nanoseconds.

    Example:
            with MeasureTime() as t:
                    tree.update(key, value)
            print(f"update in {t.get():,} nanoseconds.")
    """

    __slots__ = ("delta", "start")
    delta: Optional[int]
    start: Optional[int]

    def __init__(self) -> None:
        self.delta = None
        self.start = None

    def __enter__(self) -> "MeasureTime":
        self.start = perf_counter_ns()
        return self

    def __exit__(self, type, value, traceback) -> Optional[bool]:
        self.delta = perf_counter_ns() - self.start

    def get(self) -> int:
        if self.delta is not None:
            return self.delta
        else:
            return perf_counter_ns() - self.start
