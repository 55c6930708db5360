from __future__ import annotations
from functools import cmp_to_key
import numpy as np
from .types import *


def _sign(a: Any, b: Any) -> int:
    return -1 if a < b else 1 if a > b else 0


def _compare_keys(key_a: Any, key_b: Any) -> int:
    kind_a, kind_b = kind_of(key_a), kind_of(key_b)
    if kind_a is kind_b:
        if kind_a is Kind.NUMBER or kind_a is Kind.BOOLEAN:
            return _sign(key_a, key_b)
        if kind_a is Kind.DATE:
            return _compare_keys(epoch_ms(key_a), epoch_ms(key_b))
        if kind_a is Kind.ARRAY:
            for item_a, item_b in zip(key_a, key_b):
                result = _compare_keys(item_a, item_b)
                if result != 0: return result
            # on a shared prefix the shorter array sorts last
            return _sign(len(key_b), len(key_a))
    return _sign(str(key_a), str(key_b))


def sort_by_cb(key: Optional[KeySelector[T, Any]] = None) -> Comparer[T]:
    """
    creates a comparator returning -1, 0 or 1, for use with functools.cmp_to_key.
    the key can return numbers, booleans, dates, strings or nested lists/tuples of
    those, which compare element by element. anything else compares as str().

    ex: sorted(rows, key=cmp_to_key(sort_by_cb(lambda r: [r['group'], not r['active']])))
    """
    key_selector = key if key is not None else (lambda v: v)

    def compare(a: T, b: T) -> int:
        return _compare_keys(key_selector(a), key_selector(b))

    return compare


def _try_numpy_argsort(keys: List[Any]) -> Optional[List[int]]:
    """stable argsort when every key is a plain int, or every key is a finite float."""
    if not keys:
        return None
    if not (all(type(k) is int for k in keys) or
            all(type(k) is float and is_finite_number(k) for k in keys)):
        return None
    try:
        arr = np.asarray(keys)
        if arr.dtype.kind not in 'if':
            return None
        return np.argsort(arr, kind='stable').tolist()
    except (TypeError, ValueError, OverflowError):
        return None


def sort_by(array: Iterable[T], key: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """
    stable sort into a new list. ties keep their input order regardless of the key,
    since the original index is the last component of every comparison.
    """
    data = list(array)
    key_selector = key if key is not None else (lambda v: v)
    keys = [key_selector(item) for item in data]

    optimized = _try_numpy_argsort(keys)
    if optimized is not None:
        return [data[i] for i in optimized]

    ordered = sorted(zip(keys, range(len(data))), key=cmp_to_key(sort_by_cb()))
    return [data[index] for _, index in ordered]


def generate_range(start: Union[int, float], stop: Optional[Union[int, float]] = None,
                   step: Union[int, float] = 1) -> List[Union[int, float]]:
    """
    eager range from start (inclusive) to stop (exclusive).
    generate_range(4) -> [0, 1, 2, 3], generate_range(8, 2, -2) -> [8, 6, 4]
    """
    if stop is None:
        start, stop = 0, start
    if step == 0:
        raise ValueError("range step must not be zero")
    if (step > 0 and start >= stop) or (step < 0 and start <= stop):
        return []

    result = []
    current = start
    while (current < stop) if step > 0 else (current > stop):
        result.append(current)
        current += step
    return result


def flatten(array: Iterable[Any], depth: int = 1) -> List[Any]:
    """flatten nested lists and tuples to the given depth"""
    def flatten_recursive(items, current_depth):
        if current_depth <= 0:
            return list(items)

        result = []
        for item in items:
            if isinstance(item, (list, tuple)):
                result.extend(flatten_recursive(item, current_depth - 1))
            else:
                result.append(item)
        return result

    return flatten_recursive(array, depth)
