from __future__ import annotations
import json
import logging
from .types import *
from .array import sort_by
from .guards import is_plain_object

logger = logging.getLogger(__name__)

_ARRAY_POLICIES = ('overwrite', 'merge')


def is_equal(a: Any, b: Any) -> bool:
    """
    deep structural equality over dates, lists/tuples and plain dicts.
    primitives must share a kind, so is_equal(1, True) is False.
    anything else is only equal to itself.
    """
    if a is b:
        return True

    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is not kind_b:
        return False

    if kind_a is Kind.DATE:
        return epoch_ms(a) == epoch_ms(b)
    if kind_a is Kind.ARRAY:
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if kind_a is Kind.OBJECT:
        return len(a) == len(b) and all(k in b and is_equal(v, b[k]) for k, v in a.items())
    if kind_a is Kind.OTHER:
        return False
    return a == b


def clone(value: T, recursive: bool = True) -> T:
    """copy plain dicts, lists and tuples. other values are returned as-is."""
    copy = (lambda v: clone(v, True)) if recursive else (lambda v: v)
    if is_plain_object(value):
        return {k: copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy(v) for v in value]
    if type(value) is tuple:
        return tuple(copy(v) for v in value)
    return value


def _merge(target: Any, source: Any, skip_nulls: bool, array_policy: ArrayPolicy) -> Any:
    if source is None and skip_nulls:
        return target

    if is_plain_object(target) and is_plain_object(source):
        result = dict(target)
        for key, value in source.items():
            if value is None and skip_nulls:
                continue
            result[key] = _merge(target[key], value, skip_nulls, array_policy) if key in target else clone(value)
        return result

    if kind_of(target) is Kind.ARRAY and kind_of(source) is Kind.ARRAY:
        if callable(array_policy):
            return array_policy(target, source)
        if array_policy == 'merge':
            return [*clone(list(target)), *clone(list(source))]
        return clone(list(source))

    return clone(source)


def merge(target: Any, source: Any, *, skip_nulls: bool = False,
          array_policy: ArrayPolicy = 'overwrite') -> Any:
    """
    recursive right-biased merge returning new containers; neither input is mutated.

    :param skip_nulls: None values in source keep the target value.
    :param array_policy: 'overwrite' replaces lists, 'merge' concatenates target + source,
        a callable receives (target, source) and returns the merged list.
    """
    if not callable(array_policy) and array_policy not in _ARRAY_POLICIES:
        raise ValueError(f"unknown array policy: '{array_policy}'")
    return _merge(target, source, skip_nulls, array_policy)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard json constant: {name}")


def parse_json_or_raw(value: Any) -> Any:
    """json-decode strings, keeping the raw value when it is not valid json"""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return value


def convert_to_nested(flat: Mapping[str, Any], *, separator: str = '.',
                      transform_key: Optional[Callable[[str], str]] = None,
                      transform_value: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
    """
    builds a nested dict from flat delimited keys, e.g. environment variables.
    values are json-decoded where possible. shorter paths are merged first, so
    a more specific key wins over a json object set on its parent.
    keys that end up with an empty segment after transform_key are dropped.

    ex: convert_to_nested({'a.b': 2, 'a': '{"b": 1}'}) -> {'a': {'b': 2}}
    """
    key_transform = transform_key or (lambda segment: segment)
    value_transform = transform_value or parse_json_or_raw

    entries = []
    for key, value in flat.items():
        path = [key_transform(segment) for segment in str(key).split(separator)]
        if any(segment == '' for segment in path):
            logger.debug(f"convert_to_nested: dropping key '{key}' with an empty segment")
            continue
        entries.append((path, value_transform(value)))

    result: Dict[str, Any] = {}
    for path, value in sort_by(entries, lambda entry: len(entry[0])):
        nested = value
        for segment in reversed(path):
            nested = {segment: nested}
        result = merge(result, nested)
    return result


def _list_index(segment: Any) -> Optional[int]:
    if type(segment) is int:
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def get_by_key(target: Any, path: Union[str, Sequence[Any]]) -> Any:
    """
    walk nested dicts and lists. path is 'a.b.1.a' or ['a', 'b', 1, 'a'].
    returns None as soon as a step is missing.
    """
    segments = path.split('.') if isinstance(path, str) else list(path)
    current = target
    for segment in segments:
        if kind_of(current) is Kind.ARRAY:
            index = _list_index(segment)
            if index is None or index >= len(current):
                return None
            current = current[index]
        elif isinstance(current, Mapping):
            if segment in current:
                current = current[segment]
            elif str(segment) in current:
                current = current[str(segment)]
            else:
                return None
        else:
            return None
    return current
