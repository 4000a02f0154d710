from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Never

from verdict.models.result import Err, Ok
from verdict.result_async import ResultAsync

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from verdict.models.result import Result


def from_throwable[**P, T, E](fn: Callable[P, T], map_err: Callable[[Exception], E]) -> Callable[P, Result[T, E]]:
    """Wrap ``fn`` so that calling it returns a Result instead of raising.

    Only ``Exception`` subclasses are caught; ``KeyboardInterrupt`` and
    friends still propagate::

        parse = from_throwable(json.loads, lambda e: f"bad json: {e}")
        parse('{"a": 1}')  # Ok({'a': 1})

    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as e:
            return Err(map_err(e))

    return wrapper


def try_catch[T, E](fn: Callable[[], T], map_err: Callable[[Exception], E]) -> Result[T, E]:
    try:
        return Ok(fn())
    except Exception as e:
        return Err(map_err(e))


def from_nullable[T, E](value: T | None, on_nullable: Callable[[], E]) -> Result[T, E]:
    if value is None:
        return Err(on_nullable())
    return Ok(value)


def from_predicate[T, E](value: T, predicate: Callable[[T], bool], on_false: Callable[[T], E]) -> Result[T, E]:
    if predicate(value):
        return Ok(value)
    return Err(on_false(value))


def from_awaitable[T, E](awaitable: Awaitable[T], map_err: Callable[[Exception], E]) -> ResultAsync[T, E]:
    return ResultAsync.from_awaitable(awaitable, map_err)


def from_safe_awaitable[T](awaitable: Awaitable[T]) -> ResultAsync[T, Never]:
    return ResultAsync.from_safe_awaitable(awaitable)


def from_async_throwable[**P, T, E](fn: Callable[P, Awaitable[T]], map_err: Callable[[Exception], E]) -> Callable[P, ResultAsync[T, E]]:
    return ResultAsync.from_throwable(fn, map_err)
