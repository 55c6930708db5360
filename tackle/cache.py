from __future__ import annotations
import asyncio
import inspect
import logging
from functools import wraps
from .types import *
from .encoding import canonical_json

logger = logging.getLogger(__name__)


def cache(fn: Callable[..., T]) -> Callable[..., T]:
    """
    memoise fn by the canonical json of its arguments, so unhashable
    arguments (lists, dicts) work too.

    awaitable results are wrapped in a future that every caller with the same
    arguments awaits, so concurrent calls share one execution. a future that
    fails is evicted and the next call retries.
    """
    cached_calls: Dict[str, Any] = {}

    def evict_on_failure(args_key: str, future: asyncio.Future) -> None:
        if future.cancelled() or future.exception() is not None:
            logger.debug(f"cache: evicting failed result of {getattr(fn, '__name__', fn)!r}")
            cached_calls.pop(args_key, None)

    @wraps(fn)
    def cached(*args: Any, **kwargs: Any) -> T:
        args_key = canonical_json([list(args), kwargs])
        if args_key in cached_calls:
            logger.debug(f"cache: hit for {getattr(fn, '__name__', fn)!r}")
            return cached_calls[args_key]

        result = fn(*args, **kwargs)
        if inspect.isawaitable(result):
            future = asyncio.ensure_future(result)
            future.add_done_callback(lambda f: evict_on_failure(args_key, f))
            result = future
        cached_calls[args_key] = result
        return result

    return cached
