"""
set-style operations over sequences whose keys may be unhashable (dicts, lists).
membership is a linear scan with ==, which is fine at helper-library sizes.
"""
from __future__ import annotations
from itertools import chain
from .types import *


def _identity(value: Any) -> Any:
    return value


def _contains(keys: List[Any], key: Any) -> bool:
    return any(key == candidate for candidate in keys)


def difference(array: Iterable[T], values: Iterable[T],
               key_selector: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """elements of array whose key is not among the keys of values. duplicates in array are kept."""
    key = key_selector or _identity
    excluded = [key(value) for value in values]
    return [item for item in array if not _contains(excluded, key(item))]


def intersection(arrays: Iterable[Iterable[T]],
                 key_selector: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """distinct elements of the first array whose key occurs in every other array"""
    key = key_selector or _identity
    materialized = [list(array) for array in arrays]
    if not materialized:
        return []

    first, *others = materialized
    other_keys = [[key(item) for item in other] for other in others]
    result, seen = [], []
    for item in first:
        item_key = key(item)
        if _contains(seen, item_key):
            continue
        if all(_contains(keys, item_key) for keys in other_keys):
            seen.append(item_key)
            result.append(item)
    return result


def union(arrays: Iterable[Iterable[T]],
          key_selector: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """distinct elements of all arrays, in order of first appearance"""
    key = key_selector or _identity
    result, seen = [], []
    # chain walks the inputs without building an intermediate concatenated list
    for item in chain.from_iterable(arrays):
        item_key = key(item)
        if not _contains(seen, item_key):
            seen.append(item_key)
            result.append(item)
    return result
