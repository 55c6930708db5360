from __future__ import annotations
from collections import defaultdict
from .types import *
from .array import sort_by
from .encoding import canonical_json
from .guards import ensure_array

_VALUE_KINDS = (Kind.NULL, Kind.BOOLEAN, Kind.NUMBER, Kind.STRING)


def group_by(array: Iterable[T], key_selector: KeySelector[T, K]) -> List[Group]:
    """
    group elements by a key of any shape (numbers, strings, lists, dicts...).
    keys are bucketed by their canonical json, so [3, False] built twice lands in one group.
    groups come back ordered by key (not by first occurrence), items keep their input order.

    ex: group_by([6.1, 4.2, 6.3], math.floor) -> [(4, [4.2]), (6, [6.1, 6.3])]
    """
    groups: Dict[str, Group] = {}
    for item in array:
        key = key_selector(item)
        bucket = canonical_json(key)
        if bucket not in groups:
            groups[bucket] = Group(key, [])
        groups[bucket].items.append(item)
    return sort_by(groups.values(), lambda group: group.key)


def index_by(array: Iterable[T], key_selector: Callable[[T], Union[K, Sequence[K]]]) -> Dict[K, List[T]]:
    """
    build a lookup of key -> items. a selector returning a list or tuple
    indexes the item under every key it returns.
    """
    index = defaultdict(list)
    for item in array:
        for key in ensure_array(key_selector(item)):
            index[key].append(item)
    return dict(index)


def deduplicate_by(array: Iterable[T], key_selector: KeySelector[T, Any]) -> List[T]:
    """
    keep the first element for each key. str/number/bool/None keys compare by value
    (True and 1 stay distinct), every other key by identity.
    """
    seen_values = set()
    # hold the key objects so their ids cannot be recycled mid-scan
    seen_refs: Dict[int, Any] = {}
    result = []
    for item in array:
        key = key_selector(item)
        kind = kind_of(key)
        if kind in _VALUE_KINDS:
            marker = (kind, key)
            if marker in seen_values: continue
            seen_values.add(marker)
        else:
            if id(key) in seen_refs: continue
            seen_refs[id(key)] = key
        result.append(item)
    return result


def deduplicate(array: Iterable[T]) -> List[T]:
    """deduplicate([obj, 1, '5', True, 5, 1, obj, False, True]) -> [obj, 1, '5', True, 5, False]"""
    return deduplicate_by(array, lambda v: v)


def chunk(array: Iterable[T], size: int) -> List[List[T]]:
    """split into chunks of at most size elements. the last chunk may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    data = list(array)
    return [data[i:i + size] for i in range(0, len(data), size)]
