from __future__ import generator_stop

from typing import Any, Iterable, Mapping, Tuple, TypeVar, Union

from typing_extensions import Protocol  # typing.Protocol is availalble in Python 3.8+


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __ge__(self, other: Any) -> bool:
        ...


# keys must also be hashable, they are stored in a dict
KeyT = TypeVar("KeyT", bound=Orderable)
ValueT = TypeVar("ValueT", bound=Orderable)

Pairs = Union[Mapping[KeyT, ValueT], Iterable[Tuple[KeyT, ValueT]]]
