from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from verdict.models.result import Err, Ok
from verdict.result_async import ResultAsync

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Generator

    from verdict.models.result import Result

logger = logging.getLogger(__name__)


@overload
def safe_try[T, E](routine: Callable[[], Generator[Any, Any, Result[T, E]]]) -> Result[T, E]: ...
@overload
def safe_try(routine: Callable[[], AsyncGenerator[Any, Any]]) -> ResultAsync[Any, Any]: ...
def safe_try(routine: Callable[[], Generator[Any, Any, Any] | AsyncGenerator[Any, Any]]) -> Result[Any, Any] | ResultAsync[Any, Any]:
    """Run ``routine`` until it finishes or one of its steps produces an Err.

    A generator routine unwraps each step with ``yield from``; the first Err
    closes the generator, running its pending ``finally`` blocks, and is
    returned. Otherwise the routine's own return value is returned::

        def transfer():
            account = yield from load_account(id)
            yield from check_balance(account, amount)
            return ok(account.id)

        result = safe_try(transfer)

    An async generator routine yields its steps instead, which may be Results
    or awaitables of Results (a ResultAsync, a coroutine). An awaitable that
    raises has its exception thrown back into the routine at that ``yield``.
    Async generators cannot return a value, so the last Result yielded is the
    outcome. The async form returns a ResultAsync::

        async def transfer():
            account = yield fetch_account(id)
            yield ok(account.id)

        result = await safe_try(transfer)

    """
    gen = routine()

    if inspect.isasyncgen(gen) or hasattr(gen, "__anext__"):
        return ResultAsync(_run_async(gen))

    return _run_sync(gen)


def _run_sync(gen: Generator[Any, Any, Any]) -> Result[Any, Any]:
    value: Any = None
    while True:
        try:
            yielded = gen.send(value)
        except StopIteration as stop:
            return stop.value

        match yielded:
            case Ok(value):
                continue
            case Err(error):
                logger.debug("safe_try short-circuited on %r", yielded)
                gen.close()
                return Err(error)
            case _:
                gen.close()
                msg = f"safe_try routines must yield Result values, got {type(yielded).__name__}"
                raise TypeError(msg)


async def _run_async(gen: AsyncGenerator[Any, Any]) -> Result[Any, Any]:
    last: Result[Any, Any] = Ok(None)
    resume = gen.asend(None)
    while True:
        try:
            step = await resume
        except StopAsyncIteration:
            return last

        if inspect.isawaitable(step):
            try:
                step = await step
            except Exception as e:
                # rethrown at the yield that produced the awaitable
                resume = gen.athrow(e)
                continue

        match step:
            case Ok(value):
                last = step
                resume = gen.asend(value)
            case Err(error):
                logger.debug("safe_try short-circuited on %r", step)
                await gen.aclose()
                return Err(error)
            case _:
                await gen.aclose()
                msg = f"safe_try routines must yield Result values, got {type(step).__name__}"
                raise TypeError(msg)
