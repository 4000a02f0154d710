from __future__ import annotations

from typing import TYPE_CHECKING, Any

from verdict.models.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from verdict.models.result import Result

type Context = dict[str, Any]


def do() -> Ok[Context]:
    """Start a Do chain with an empty context.

    Steps built with ``bind`` and ``let_`` are composed with ``and_then``::

        result = (
            do()
            .and_then(bind("user", lambda ctx: load_user(user_id)))
            .and_then(let_("name", lambda ctx: ctx["user"].name.title()))
            .and_then(bind("order", lambda ctx: place_order(ctx["user"])))
        )

    Each step returns a new context; earlier contexts are never modified.
    Reusing a name overwrites the earlier field, keeping names unique is up
    to the caller.
    """
    return Ok({})


def bind[E](name: str, f: Callable[[Mapping[str, Any]], Result[Any, E]]) -> Callable[[Mapping[str, Any]], Result[Context, E]]:
    def step(ctx: Mapping[str, Any]) -> Result[Context, E]:
        match result := f(ctx):
            case Ok(value):
                return Ok({**ctx, name: value})
            case Err():
                return result
            case _:
                msg = f"bind step {name!r} must return a Result, got {type(result).__name__}"
                raise TypeError(msg)

    return step


def let_(name: str, f: Callable[[Mapping[str, Any]], Any]) -> Callable[[Mapping[str, Any]], Ok[Context]]:
    def step(ctx: Mapping[str, Any]) -> Ok[Context]:
        return Ok({**ctx, name: f(ctx)})

    return step
