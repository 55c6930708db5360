"""
container-preserving map / flat_map / filter.

lists stay lists, tuples stay tuples, sets stay sets and dicts stay dicts.
for dicts the callback receives (key, value) pairs and must produce pairs.
any other value is returned unchanged.
"""
from __future__ import annotations
from .types import *


def flat_map(value: Any, callback: Callable[[Any], Iterable[Any]]) -> Any:
    """
    flat_map([1, 2], lambda v: [v, v * 10]) -> [1, 10, 2, 20]
    flat_map({'a': 'b'}, lambda kv: [kv, (kv[0] + '2', kv[1])]) -> {'a': 'b', 'a2': 'b'}
    """
    if isinstance(value, list):
        return [result for item in value for result in callback(item)]
    if isinstance(value, tuple):
        return tuple(result for item in value for result in callback(item))
    if isinstance(value, (set, frozenset)):
        return type(value)(result for item in value for result in callback(item))
    if isinstance(value, dict):
        return {new_key: new_value
                for entry in value.items()
                for new_key, new_value in callback(entry)}
    return value


def map_(value: Any, callback: Callable[[Any], Any]) -> Any:
    """map_({'a': 'b'}, lambda kv: (kv[1], kv[0])) -> {'b': 'a'}"""
    return flat_map(value, lambda item: [callback(item)])


def filter_(value: Any, predicate: Predicate[Any]) -> Any:
    return flat_map(value, lambda item: [item] if predicate(item) else [])
