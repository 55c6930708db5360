from __future__ import annotations
import inspect
import logging
from functools import reduce, wraps
from typing import overload
from .types import *

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
E = TypeVar('E')
F = TypeVar('F')
G = TypeVar('G')
H = TypeVar('H')

HOLE = Hole.HOLE

# distinguishes "no default given" from an explicit default of None
_MISSING = object()


# --- pipe / compose ---

@overload
def pipe(value: A, op1: Callable[[A], B]) -> B: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C]) -> C: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C], op3: Callable[[C], D]) -> D: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C], op3: Callable[[C], D],
         op4: Callable[[D], E]) -> E: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C], op3: Callable[[C], D],
         op4: Callable[[D], E], op5: Callable[[E], F]) -> F: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C], op3: Callable[[C], D],
         op4: Callable[[D], E], op5: Callable[[E], F], op6: Callable[[F], G]) -> G: ...
@overload
def pipe(value: A, op1: Callable[[A], B], op2: Callable[[B], C], op3: Callable[[C], D],
         op4: Callable[[D], E], op5: Callable[[E], F], op6: Callable[[F], G],
         op7: Callable[[G], H]) -> H: ...
@overload
def pipe(value: Any, *operations: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, *operations: Callable[[Any], Any]) -> Any:
    """
    left-to-right application, each operation receives the result of the previous.
    pipe([1.5, 5.6], lambda v: [round(x) for x in v], sum) -> 8
    """
    return reduce(lambda acc, operation: operation(acc), operations, value)


def compose(*operations: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """right-to-left composition: compose(f, g)(x) == f(g(x))"""
    ordered = tuple(reversed(operations))
    return lambda value: pipe(value, *ordered)


# --- curry ---

def _required_arity(fn: Callable[..., Any]) -> int:
    """number of positional parameters without a default"""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 0
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(1 for p in parameters if p.kind in positional and p.default is inspect.Parameter.empty)


def _fill(args: Tuple[Any, ...], new_args: Tuple[Any, ...], placeholder: Any) -> Tuple[Any, ...]:
    """new args fill open slots left to right, the rest are appended"""
    pending = iter(new_args)
    filled = [next(pending, placeholder) if arg is placeholder else arg for arg in args]
    filled.extend(pending)
    return tuple(filled)


def curry(fn: Callable[..., T], arity: Optional[int] = None, placeholder: Any = HOLE) -> Callable[..., Any]:
    """
    partial application in any grouping of arguments.

    every call returns a new curried function until the collected positional
    arguments number at least `arity` and contain no open slots; then fn is
    called with them. pass `placeholder` to leave a slot open for a later call:

        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3) == add3(1, 2)(3) == add3(HOLE, 2)(1, 3) == 6

    keyword arguments are collected too and forwarded, but never count toward arity.
    """
    required = _required_arity(fn) if arity is None else arity

    def curried_with(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Callable[..., Any]:
        @wraps(fn)
        def curried(*new_args: Any, **new_kwargs: Any) -> Any:
            merged = _fill(args, new_args, placeholder)
            merged_kwargs = {**kwargs, **new_kwargs}
            if len(merged) >= required and not any(arg is placeholder for arg in merged):
                return fn(*merged, **merged_kwargs)
            return curried_with(merged, merged_kwargs)

        return curried

    return curried_with((), {})


# --- try_catch ---

def _recover(error: Exception, default: Any) -> Any:
    logger.debug(f"try_catch captured {type(error).__name__}: {error}")
    return error if default is _MISSING else default


async def _settle(awaitable: Awaitable[T], default: Any) -> Any:
    try:
        return await awaitable
    except Exception as e:
        return _recover(e, default)


def try_catch(fn: Callable[[], T], default: Any = _MISSING) -> Any:
    """
    call fn and turn a raised exception into a return value: the default when one
    was passed (None included), otherwise the exception itself.
    when fn returns an awaitable, a coroutine with the same behaviour is returned;
    awaiting it never raises.
    """
    try:
        result = fn()
    except Exception as e:
        return _recover(e, default)
    if inspect.isawaitable(result):
        return _settle(result, default)
    return result
