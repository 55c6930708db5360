"""
timer-based helpers on top of the running asyncio loop.
durations are milliseconds. wrappers that need to schedule a call must be used
from inside a running event loop.
"""
from __future__ import annotations
import asyncio
import logging
import time
from functools import partial, wraps
from .types import *

logger = logging.getLogger(__name__)


async def delay(ms: float) -> None:
    """suspend the current task for ms milliseconds without blocking the loop"""
    await asyncio.sleep(ms / 1000)


def debounce(fn: Callable[..., Any], ms: float) -> Callable[..., None]:
    """
    postpone fn until ms milliseconds have passed without another call.
    only the arguments of the last call are used; the return value of fn is dropped.
    """
    timer: Optional[asyncio.TimerHandle] = None

    @wraps(fn)
    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal timer
        loop = asyncio.get_running_loop()
        if timer is not None:
            timer.cancel()
        timer = loop.call_later(ms / 1000, partial(fn, *args, **kwargs))

    return debounced


class _ThrottleState:
    """per-wrapper record: pending trailing timer, last invocation time, latest call"""

    def __init__(self):
        self.timer: Optional[asyncio.TimerHandle] = None
        self.last_invoked: Optional[float] = None
        self.args: Tuple[Any, ...] = ()
        self.kwargs: Dict[str, Any] = {}


def throttle(fn: Callable[..., Any], ms: float, *, leading: bool = True,
             trailing: bool = True) -> Callable[..., None]:
    """
    invoke fn at most once per ms milliseconds.

    - leading: the very first call runs immediately.
    - a call arriving after the window has elapsed runs immediately.
    - trailing: a call inside the window schedules one run at the end of it,
      which uses the arguments of the latest call made before it fires.
    - otherwise the call is dropped.

    with leading=False and trailing=False fn never runs.
    """
    window = ms / 1000
    state = _ThrottleState()

    def invoke() -> None:
        state.last_invoked = time.monotonic()
        fn(*state.args, **state.kwargs)

    def fire_trailing() -> None:
        state.timer = None
        logger.debug(f"throttle: trailing call to {getattr(fn, '__name__', fn)!r}")
        invoke()

    @wraps(fn)
    def throttled(*args: Any, **kwargs: Any) -> None:
        state.args, state.kwargs = args, kwargs
        now = time.monotonic()

        if state.last_invoked is None and leading:
            invoke()
            return

        if state.last_invoked is not None and now - state.last_invoked >= window:
            if state.timer is not None:
                state.timer.cancel()
                state.timer = None
            invoke()
            return

        if trailing and state.timer is None:
            elapsed = 0.0 if state.last_invoked is None else now - state.last_invoked
            remaining = max(window - elapsed, 0.0)
            logger.debug(f"throttle: scheduling trailing call in {remaining:.3f}s")
            state.timer = asyncio.get_running_loop().call_later(remaining, fire_trailing)

    return throttled
