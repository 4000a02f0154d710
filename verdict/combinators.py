from __future__ import annotations

from typing import TYPE_CHECKING, Any

from verdict.models.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from verdict.models.result import Result


def all_(*results: Result[Any, Any]) -> Result[list[Any], Any]:
    """Ok with every value in order, or the first Err; later inputs are not inspected."""
    values: list[Any] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
    return Ok(values)


def all_settled(*results: Result[Any, Any]) -> Result[list[Any], list[Any]]:
    values: list[Any] = []
    errors: list[Any] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)

    if errors:
        return Err(errors)
    return Ok(values)


def zip_or_accumulate(*results: Result[Any, Any]) -> Result[list[Any], list[Any]]:
    """Like ``all_settled``; when it fails the error list is never empty."""
    return all_settled(*results)


def any_(*results: Result[Any, Any]) -> Result[Any, list[Any]]:
    errors: list[Any] = []
    for result in results:
        match result:
            case Ok(value):
                return Ok(value)
            case Err(error):
                errors.append(error)
    return Err(errors)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    oks: list[T] = []
    errs: list[E] = []
    for result in results:
        match result:
            case Ok(value):
                oks.append(value)
            case Err(error):
                errs.append(error)
    return (oks, errs)


def for_each[T, U, E](items: Iterable[T], f: Callable[[T, int], Result[U, E]]) -> Result[list[U], E]:
    """Map ``items`` through ``f``, stopping at the first Err before calling ``f`` again."""
    values: list[U] = []
    for i, item in enumerate(items):
        match result := f(item, i):
            case Ok(value):
                values.append(value)
            case Err():
                return result
    return Ok(values)


def collect[E](results: Mapping[str, Result[Any, E]]) -> Result[dict[str, Any], E]:
    values: dict[str, Any] = {}
    for key, result in results.items():
        match result:
            case Ok(value):
                values[key] = value
            case Err():
                return result
    return Ok(values)
