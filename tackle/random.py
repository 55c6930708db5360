"""
random helpers backed by a single numpy generator.
not suitable for anything security related.
"""
from __future__ import annotations
import math
import numpy as np
from .types import *
from .string import ascii_letters, digits, punctuation

_rng = np.random.default_rng()


def seed(value: Optional[int] = None) -> None:
    """re-seed the shared generator, e.g. for reproducible tests"""
    global _rng
    _rng = np.random.default_rng(value)


def generator() -> np.random.Generator:
    return _rng


def random_int(min_value: Union[int, float], max_value: Union[int, float]) -> int:
    """random integer between min_value and max_value, both inclusive"""
    low, high = math.ceil(min_value), math.floor(max_value)
    if low > high:
        raise ValueError(f"empty integer range [{min_value}, {max_value}]")
    return int(_rng.integers(low, high, endpoint=True))


def random_choice(array: Sequence[T]) -> Optional[T]:
    """random element, or None for an empty sequence"""
    if not array:
        return None
    return array[int(_rng.integers(len(array)))]


def random_choices(array: Sequence[T], length: int) -> List[T]:
    """pick length elements with replacement"""
    if not array:
        return []
    # index with numpy ints converted back, so object elements are never boxed into an ndarray
    return [array[int(i)] for i in _rng.integers(len(array), size=max(length, 0))]


def random_string(length: int, chars: str = ascii_letters + digits + punctuation) -> str:
    if not chars:
        raise ValueError("chars must not be empty")
    return ''.join(random_choices(chars, length))


def shuffle(array: Iterable[T]) -> List[T]:
    """shuffled copy of the input"""
    data = list(array)
    return [data[int(i)] for i in _rng.permutation(len(data))]
