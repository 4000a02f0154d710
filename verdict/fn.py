"""Standalone, curried forms of the Result methods for use with ``pipe``.

Each function takes the callback or argument first and returns a function of
the Result::

    from verdict import fn

    total = fn.pipe(
        ok(" 41 "),
        fn.map(str.strip),
        fn.and_then(parse_int),
        fn.map(lambda n: n + 1),
        fn.unwrap_or(0),
    )

This module shadows ``map`` and a few other builtins, import it as a module.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.models.result import Result

type Step = Callable[[Any], Any]


def pipe(value: Any, *fns: Step) -> Any:
    """Thread ``value`` through ``fns`` from left to right."""
    return functools.reduce(lambda acc, f: f(acc), fns, value)


def _method(name: str, *args: Any) -> Callable[[Result[Any, Any]], Any]:
    def apply(result: Result[Any, Any]) -> Any:
        return getattr(result, name)(*args)

    apply.__name__ = name
    return apply


# transformations


def map(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:  # noqa: A001
    return _method("map", f)


def map_err(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("map_err", f)


def map_both(on_ok: Callable[[Any], Any], on_err: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("map_both", on_ok, on_err)


def flatten(result: Result[Any, Any]) -> Result[Any, Any]:
    return result.flatten()


def flip(result: Result[Any, Any]) -> Result[Any, Any]:
    return result.flip()


# logical


def and_(other: Result[Any, Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("and_", other)


def or_(other: Result[Any, Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("or_", other)


# chaining


def and_then(f: Callable[[Any], Result[Any, Any]]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("and_then", f)


def or_else(f: Callable[[Any], Result[Any, Any]]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("or_else", f)


def and_tee(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("and_tee", f)


def or_tee(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("or_tee", f)


def and_through(f: Callable[[Any], Result[Any, Any]]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("and_through", f)


def inspect(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("inspect", f)


def inspect_err(f: Callable[[Any], Any]) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    return _method("inspect_err", f)


# extraction


def match(on_ok: Callable[[Any], Any], on_err: Callable[[Any], Any]) -> Step:
    return _method("match", on_ok, on_err)


def unwrap_or(default: Any) -> Step:
    return _method("unwrap_or", default)


def unwrap_or_else(f: Callable[[Any], Any]) -> Step:
    return _method("unwrap_or_else", f)


def map_or(default: Any, f: Callable[[Any], Any]) -> Step:
    return _method("map_or", default, f)


def map_or_else(default_f: Callable[[Any], Any], f: Callable[[Any], Any]) -> Step:
    return _method("map_or_else", default_f, f)


def contains(value: Any) -> Callable[[Result[Any, Any]], bool]:
    return _method("contains", value)


def contains_err(error: Any) -> Callable[[Result[Any, Any]], bool]:
    return _method("contains_err", error)


# conversion


def to_nullable(result: Result[Any, Any]) -> Any:
    return result.to_nullable()


def to_undefined(result: Result[Any, Any]) -> Any:
    return result.to_undefined()


def into_tuple(result: Result[Any, Any]) -> tuple[Any, Any]:
    return result.into_tuple()


def merge(result: Result[Any, Any]) -> Any:
    return result.merge()


def to_option(result: Result[Any, Any]) -> Any:
    return result.to_option()


def to_option_err(result: Result[Any, Any]) -> Any:
    return result.to_option_err()


def to_json(result: Result[Any, Any]) -> Any:
    return result.to_json()
