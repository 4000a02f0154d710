from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import pytest

from verdict import ResultAsync, ResultProtocolError, err, ok, safe_try

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


def test_returns_routine_result() -> None:
    def routine() -> Generator[Any, Any, Any]:
        a = yield from ok(1)
        b = yield from ok(2)
        return ok(a + b)

    assert safe_try(routine) == ok(3)


def test_short_circuits_on_err() -> None:
    reached: list[str] = []

    def routine() -> Generator[Any, Any, Any]:
        x = yield from ok(1)
        yield from err("stop")
        reached.append("after err")
        return ok(x)

    assert safe_try(routine) == err("stop")
    assert reached == []


def test_finally_runs_on_short_circuit() -> None:
    cleanup: list[str] = []

    def routine() -> Generator[Any, Any, Any]:
        try:
            yield from err("stop")
            return ok(1)
        finally:
            cleanup.append("closed")

    assert safe_try(routine) == err("stop")
    assert cleanup == ["closed"]


def test_routine_without_yields() -> None:
    def routine() -> Generator[Any, Any, Any]:
        return err("early")
        yield  # unreachable, makes this a generator

    assert safe_try(routine) == err("early")


def test_rejects_non_result_yields() -> None:
    def routine() -> Generator[Any, Any, Any]:
        yield 42
        return ok(1)

    with pytest.raises(TypeError, match="int"):
        safe_try(routine)


def test_resuming_past_err_is_a_protocol_error() -> None:
    gen = iter(err("x"))
    assert next(gen) == err("x")
    with pytest.raises(ResultProtocolError):
        next(gen)


def test_ok_yields_nothing() -> None:
    assert list(ok(1)) == []


def test_async_routine() -> None:
    async def fetch(v: int) -> Any:
        await asyncio.sleep(0)
        return ok(v)

    async def routine() -> AsyncGenerator[Any, Any]:
        a = yield fetch(1)
        b = yield ResultAsync.ok(2)
        yield ok(a + b)

    result = safe_try(routine)
    assert isinstance(result, ResultAsync)
    assert asyncio.run(_await(result)) == ok(3)


def test_async_routine_short_circuits() -> None:
    reached: list[str] = []
    cleanup: list[str] = []

    async def routine() -> AsyncGenerator[Any, Any]:
        try:
            yield ok(1)
            yield ResultAsync.err("stop")
            reached.append("after err")
            yield ok(2)
        finally:
            cleanup.append("closed")

    assert asyncio.run(_await(safe_try(routine))) == err("stop")
    assert reached == []
    assert cleanup == ["closed"]


def test_async_routine_without_yields() -> None:
    async def routine() -> AsyncGenerator[Any, Any]:
        if False:
            yield ok(1)

    assert asyncio.run(_await(safe_try(routine))) == ok(None)


async def _await(result: ResultAsync[Any, Any]) -> Any:
    return await result


def test_plain_yield_resumes_with_value() -> None:
    def routine() -> Generator[Any, Any, Any]:
        a = yield ok(20)
        b = yield ok(22)
        return ok(a + b)

    assert safe_try(routine) == ok(42)


async def _boom() -> Any:
    await asyncio.sleep(0)
    msg = "boom"
    raise ValueError(msg)


def test_async_routine_can_catch_a_failing_step() -> None:
    async def routine() -> AsyncGenerator[Any, Any]:
        try:
            yield _boom()
        except ValueError:
            yield ok("recovered")

    assert asyncio.run(_await(safe_try(routine))) == ok("recovered")


def test_async_routine_uncaught_step_failure_propagates() -> None:
    cleanup: list[str] = []

    async def routine() -> AsyncGenerator[Any, Any]:
        try:
            yield _boom()
            yield ok(1)
        finally:
            cleanup.append("closed")

    with pytest.raises(ValueError, match="boom"):
        asyncio.run(_await(safe_try(routine)))
    assert cleanup == ["closed"]
