from __future__ import annotations

import asyncio
import functools
import threading
from typing import TYPE_CHECKING, Any, Never

from verdict import combinators
from verdict.models.result import Err, Ok, OkErr, Result
from verdict.utils import report_suppressed, resolve

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine, Generator

    from verdict.models.wire import ResultJSON


class ResultAsync[T, E]:
    """Awaitable that always settles to a Result.

    Awaiting a ResultAsync never raises because of the wrapped producer: every
    constructor converts a failing awaitable into an Err. The producer runs at
    most once, so the same instance can be awaited repeatedly and shared
    between chains. Exceptions raised by callbacks passed to ``map``,
    ``and_then``, ``inspect`` and friends are not caught, exactly like their
    synchronous counterparts; only ``and_tee`` and ``or_tee`` suppress them.

    Example::

        async def fetch_user(id: str) -> dict: ...

        user = await ResultAsync.from_awaitable(fetch_user("42"), lambda e: "unreachable")
        name = await ResultAsync.ok(" ada ").map(str.strip).map(str.title).unwrap_or("anonymous")

    """

    __slots__ = ("_future", "_source")

    def __init__(self, source: Awaitable[Result[T, E]] | Result[T, E]) -> None:
        self._source = source
        self._future: asyncio.Future[Result[T, E]] | None = None

        # inside a running loop the producer starts right away, otherwise on first await
        if not isinstance(source, OkErr) and _running_loop() is not None:
            self._future = asyncio.ensure_future(source)

    def __repr__(self) -> str:
        if isinstance(self._source, OkErr):
            return f"ResultAsync({self._source!r})"
        if self._future is not None and self._future.done() and not self._future.cancelled() and self._future.exception() is None:
            return f"ResultAsync({self._future.result()!r})"
        return "ResultAsync(<pending>)"

    def __await__(self) -> Generator[Any, None, Result[T, E]]:
        return self._resolve().__await__()

    async def _resolve(self) -> Result[T, E]:
        if isinstance(self._source, OkErr):
            return self._source
        if self._future is None:
            self._future = asyncio.ensure_future(self._source)
        return await self._future

    # constructors

    @classmethod
    def ok(cls, value: T) -> ResultAsync[T, Never]:
        return cls(Ok(value))

    @classmethod
    def err(cls, error: E) -> ResultAsync[Never, E]:
        return cls(Err(error))

    @classmethod
    def from_awaitable[U, F](cls, awaitable: Awaitable[U], map_err: Callable[[Exception], F]) -> ResultAsync[U, F]:
        async def run() -> Result[U, F]:
            try:
                value = await awaitable
            except Exception as e:
                return Err(map_err(e))
            return Ok(value)

        return cls(run())

    @classmethod
    def from_safe_awaitable[U](cls, awaitable: Awaitable[U]) -> ResultAsync[U, Never]:
        """Wrap an awaitable that is not expected to fail.

        Should it raise anyway, the exception itself becomes the Err.
        """

        async def run() -> Result[U, Any]:
            try:
                value = await awaitable
            except Exception as e:
                return Err(e)
            return Ok(value)

        return cls(run())

    @classmethod
    def from_result[U, F](cls, awaitable: Awaitable[Result[U, F]]) -> ResultAsync[U, F]:
        async def run() -> Result[U, Any]:
            try:
                return await awaitable
            except Exception as e:
                return Err(e)

        return cls(run())

    @classmethod
    def from_throwable[**P, U, F](
        cls,
        fn: Callable[P, Awaitable[U]],
        map_err: Callable[[Exception], F],
    ) -> Callable[P, ResultAsync[U, F]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> ResultAsync[U, F]:
            async def run() -> Result[U, F]:
                try:
                    value = await fn(*args, **kwargs)
                except Exception as e:
                    return Err(map_err(e))
                return Ok(value)

            return cls(run())

        return wrapper

    @classmethod
    def from_callback[U, F](cls, fn: Callable[[Callable[..., None]], Any]) -> ResultAsync[U, F]:
        """Adapt a single-callback API.

        ``fn`` receives ``callback(error, value=None)``. A non-``None`` error
        settles to Err, otherwise to Ok(value). Only the first call counts and
        the callback may be invoked from any thread. If ``fn`` raises before
        calling back, the exception becomes the Err; if it raises after, the
        exception is suppressed and reported like a failing ``and_tee``.
        """

        async def run() -> Result[U, F]:
            loop = asyncio.get_running_loop()
            future: asyncio.Future[Result[U, F]] = loop.create_future()
            lock = threading.Lock()
            called = False

            def claim() -> bool:
                nonlocal called
                with lock:
                    first = not called
                    called = True
                return first

            def settle(result: Result[U, F]) -> None:
                if not future.done():
                    future.set_result(result)

            def callback(error: F | None, value: U | None = None) -> None:
                if claim():
                    result: Result[Any, Any] = Err(error) if error is not None else Ok(value)
                    loop.call_soon_threadsafe(settle, result)

            try:
                fn(callback)
            except Exception as e:
                if claim():
                    settle(Err(e))
                else:
                    report_suppressed("from_callback", e)

            return await future

        return cls(run())

    @classmethod
    def race(cls, *results: ResultAsync[Any, Any]) -> ResultAsync[Any, Any]:
        """Settle to the first of ``results`` to settle; the others keep running."""
        if not results:
            msg = "race requires at least one ResultAsync"
            raise ValueError(msg)

        async def run() -> Result[Any, Any]:
            futures = [asyncio.ensure_future(r._resolve()) for r in results]
            done, _ = await asyncio.wait(futures, return_when=asyncio.FIRST_COMPLETED)

            # several may settle in the same loop iteration, argument order breaks the tie
            return next(f for f in futures if f in done).result()

        return cls(run())

    all_ = staticmethod(combinators.all_)
    all_settled = staticmethod(combinators.all_settled)
    any_ = staticmethod(combinators.any_)
    collect = staticmethod(combinators.collect)
    for_each = staticmethod(combinators.for_each)
    partition = staticmethod(combinators.partition)
    zip_or_accumulate = staticmethod(combinators.zip_or_accumulate)

    # transformations

    def _then[U, F](self, step: Callable[[Result[T, E]], Coroutine[Any, Any, Result[U, F]]]) -> ResultAsync[U, F]:
        async def run() -> Result[U, F]:
            return await step(await self)

        return ResultAsync(run())

    def map[U](self, f: Callable[[T], Awaitable[U] | U]) -> ResultAsync[U, E]:
        async def step(result: Result[T, E]) -> Result[U, E]:
            match result:
                case Ok(value):
                    return Ok(await resolve(f(value)))
                case Err():
                    return result

        return self._then(step)

    def map_err[F](self, f: Callable[[E], Awaitable[F] | F]) -> ResultAsync[T, F]:
        async def step(result: Result[T, E]) -> Result[T, F]:
            match result:
                case Err(error):
                    return Err(await resolve(f(error)))
                case Ok():
                    return result

        return self._then(step)

    def map_both[U, F](self, on_ok: Callable[[T], Awaitable[U] | U], on_err: Callable[[E], Awaitable[F] | F]) -> ResultAsync[U, F]:
        async def step(result: Result[T, E]) -> Result[U, F]:
            match result:
                case Ok(value):
                    return Ok(await resolve(on_ok(value)))
                case Err(error):
                    return Err(await resolve(on_err(error)))

        return self._then(step)

    def flatten[U](self: ResultAsync[Result[U, E], E]) -> ResultAsync[U, E]:
        async def step(result: Result[Result[U, E], E]) -> Result[U, E]:
            return result.flatten()

        return self._then(step)

    def flip(self) -> ResultAsync[E, T]:
        async def step(result: Result[T, E]) -> Result[E, T]:
            return result.flip()

        return self._then(step)

    # chaining

    def and_then[U, F](self, f: Callable[[T], ResultAsync[U, F] | Awaitable[Result[U, F]] | Result[U, F]]) -> ResultAsync[U, E | F]:
        async def step(result: Result[T, E]) -> Result[U, E | F]:
            match result:
                case Ok(value):
                    return await resolve(f(value))
                case Err():
                    return result

        return self._then(step)

    def or_else[U, F](self, f: Callable[[E], ResultAsync[U, F] | Awaitable[Result[U, F]] | Result[U, F]]) -> ResultAsync[T | U, F]:
        async def step(result: Result[T, E]) -> Result[T | U, F]:
            match result:
                case Err(error):
                    return await resolve(f(error))
                case Ok():
                    return result

        return self._then(step)

    def and_tee(self, f: Callable[[T], Awaitable[Any] | Any]) -> ResultAsync[T, E]:
        """Run ``f`` on the value for its side effect.

        Both a raise from ``f`` and a failure of the awaitable it returns are
        suppressed and reported like ``Ok.and_tee``.
        """

        async def step(result: Result[T, E]) -> Result[T, E]:
            if isinstance(result, Ok):
                try:
                    await resolve(f(result.value))
                except Exception as e:
                    report_suppressed("and_tee", e)
            return result

        return self._then(step)

    def or_tee(self, f: Callable[[E], Awaitable[Any] | Any]) -> ResultAsync[T, E]:
        async def step(result: Result[T, E]) -> Result[T, E]:
            if isinstance(result, Err):
                try:
                    await resolve(f(result.error))
                except Exception as e:
                    report_suppressed("or_tee", e)
            return result

        return self._then(step)

    def and_through[F](self, f: Callable[[T], ResultAsync[Any, F] | Awaitable[Result[Any, F]] | Result[Any, F]]) -> ResultAsync[T, E | F]:
        async def step(result: Result[T, E]) -> Result[T, E | F]:
            match result:
                case Ok(value):
                    match await resolve(f(value)):
                        case Err(error):
                            return Err(error)
                        case _:
                            return result
                case Err():
                    return result

        return self._then(step)

    def inspect(self, f: Callable[[T], Awaitable[Any] | Any]) -> ResultAsync[T, E]:
        async def step(result: Result[T, E]) -> Result[T, E]:
            if isinstance(result, Ok):
                await resolve(f(result.value))
            return result

        return self._then(step)

    def inspect_err(self, f: Callable[[E], Awaitable[Any] | Any]) -> ResultAsync[T, E]:
        async def step(result: Result[T, E]) -> Result[T, E]:
            if isinstance(result, Err):
                await resolve(f(result.error))
            return result

        return self._then(step)

    # extraction

    async def match[A, B](self, on_ok: Callable[[T], Awaitable[A] | A], on_err: Callable[[E], Awaitable[B] | B]) -> A | B:
        match await self:
            case Ok(value):
                return await resolve(on_ok(value))
            case Err(error):
                return await resolve(on_err(error))

    async def unwrap_or[U](self, default: U) -> T | U:
        return (await self).unwrap_or(default)

    async def unwrap_or_else[U](self, f: Callable[[E], Awaitable[U] | U]) -> T | U:
        match await self:
            case Ok(value):
                return value
            case Err(error):
                return await resolve(f(error))

    async def to_nullable(self) -> T | None:
        return (await self).to_nullable()

    async def to_undefined(self) -> T | None:
        return (await self).to_undefined()

    async def into_tuple(self) -> tuple[None, T] | tuple[E, None]:
        return (await self).into_tuple()

    async def merge(self) -> T | E:
        return (await self).merge()

    async def to_json(self) -> ResultJSON:
        return (await self).to_json()


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
