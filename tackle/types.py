import datetime
import math
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple, Protocol, Sequence, Mapping, Awaitable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
ArrayPolicy = Union[str, Callable[[list, list], list]]


class Kind(Enum):
    """tag for the value families the comparators and guards dispatch on"""
    NULL = 'null'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    DATE = 'date'
    ARRAY = 'array'
    OBJECT = 'object'
    OTHER = 'other'


def kind_of(value: Any) -> Kind:
    """classify a value. bool is checked before int since bool subclasses int."""
    if value is None: return Kind.NULL
    if isinstance(value, bool): return Kind.BOOLEAN
    if isinstance(value, (int, float)): return Kind.NUMBER
    if isinstance(value, str): return Kind.STRING
    if isinstance(value, (datetime.datetime, datetime.date)): return Kind.DATE
    if isinstance(value, (list, tuple)): return Kind.ARRAY
    if type(value) is dict: return Kind.OBJECT
    return Kind.OTHER


def epoch_ms(value: Union[datetime.datetime, datetime.date]) -> float:
    """milliseconds since the epoch. naive values are read as local time."""
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time())
    return value.timestamp() * 1000


def is_finite_number(value: Any) -> bool:
    return kind_of(value) is Kind.NUMBER and math.isfinite(value)


class Hole(Enum):
    """marks an argument slot that a curried call leaves open"""
    HOLE = 'hole'

    def __repr__(self) -> str:
        return f"<{self.name.lower()}>"


class Group(NamedTuple):
    """a distinct key with the items that produced it, in input order"""
    key: Any
    items: List[Any]


class Logger(Protocol):
    """anything with the four level methods. logging.Logger satisfies it."""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
