from __future__ import annotations
from .types import *


def is_number(value: Any) -> bool:
    """int or float, but not bool. [1, 'b', 2.5] filtered -> [1, 2.5]"""
    return kind_of(value) is Kind.NUMBER


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    """list or tuple"""
    return kind_of(value) is Kind.ARRAY


def is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


def is_none(value: Any) -> bool:
    return value is None


def is_plain_object(value: Any) -> bool:
    """
    true only for plain dicts. subclasses (OrderedDict, defaultdict, ...), lists,
    dates and class instances are not plain objects.
    """
    return type(value) is dict


def is_empty(value: Any) -> bool:
    """
    emptiness by kind: False, '', 0, [] / (), {} are empty.
    None and any other object are not.
    """
    kind = kind_of(value)
    if kind is Kind.BOOLEAN: return value is False
    if kind is Kind.STRING: return value == ''
    if kind is Kind.NUMBER: return value == 0
    if kind is Kind.ARRAY or kind is Kind.OBJECT: return len(value) == 0
    return False


def is_not(guard: Predicate[T]) -> Predicate[T]:
    """inverse guard. filter(is_not(is_error), values)"""
    def inverse(value: T) -> bool:
        return not guard(value)
    return inverse


def assert_error(value: Union[T, BaseException]) -> T:
    """
    lets real errors halt the flow: raises value if it is an exception,
    otherwise hands it back unchanged.
    """
    if isinstance(value, BaseException):
        raise value
    return value


# reads better at call sites that assert the value is usable
assert_not_error = assert_error


def ensure_array(value: Any) -> Union[list, tuple]:
    """value itself when it is a list or tuple, otherwise [value]"""
    return value if kind_of(value) is Kind.ARRAY else [value]
