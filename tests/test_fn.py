from __future__ import annotations

from typing import Any

import pytest

from verdict import NONE, err, fn, ok, some


def _parse(s: str) -> Any:
    return ok(int(s)) if s.isdigit() else err(f"not a number: {s}")


def test_pipe() -> None:
    assert fn.pipe(1) == 1
    assert fn.pipe(1, lambda v: v + 1, lambda v: v * 3) == 6


@pytest.mark.parametrize(("text", "expected"), [(" 41 ", 42), (" x ", 0)])
def test_pipeline(text: str, expected: int) -> None:
    total = fn.pipe(
        ok(text),
        fn.map(str.strip),
        fn.and_then(_parse),
        fn.map(lambda n: n + 1),
        fn.unwrap_or(0),
    )
    assert total == expected


def test_curried_forms_match_methods() -> None:
    for r in (ok(2), err("e")):
        assert fn.map(lambda v: v * 2)(r) == r.map(lambda v: v * 2)
        assert fn.map_err(str.upper)(r) == r.map_err(str.upper)
        assert fn.map_both(str, str.upper)(r) == r.map_both(str, str.upper)
        assert fn.and_then(lambda v: ok(v))(r) == r.and_then(lambda v: ok(v))
        assert fn.or_else(lambda e: ok(0))(r) == r.or_else(lambda e: ok(0))
        assert fn.and_through(lambda v: ok(None))(r) == r
        assert fn.and_(ok(9))(r) == r.and_(ok(9))
        assert fn.or_(ok(9))(r) == r.or_(ok(9))
        assert fn.flip(r) == r.flip()
        assert fn.match(lambda v: ("ok", v), lambda e: ("err", e))(r) == r.match(lambda v: ("ok", v), lambda e: ("err", e))
        assert fn.unwrap_or_else(len)(r) == r.unwrap_or_else(len)
        assert fn.map_or(0, lambda v: v + 1)(r) == r.map_or(0, lambda v: v + 1)
        assert fn.map_or_else(len, lambda v: v + 1)(r) == r.map_or_else(len, lambda v: v + 1)
        assert fn.contains(2)(r) == r.contains(2)
        assert fn.contains_err("e")(r) == r.contains_err("e")
        assert fn.to_nullable(r) == r.to_nullable()
        assert fn.to_undefined(r) == r.to_undefined()
        assert fn.into_tuple(r) == r.into_tuple()
        assert fn.merge(r) == r.merge()
        assert fn.to_option(r) == r.to_option()
        assert fn.to_option_err(r) == r.to_option_err()
        assert fn.to_json(r) == r.to_json()


def test_flatten() -> None:
    assert fn.flatten(ok(ok(1))) == ok(1)


def test_side_effects() -> None:
    seen: list[Any] = []
    assert fn.pipe(ok(1), fn.inspect(seen.append), fn.and_tee(seen.append)) == ok(1)
    assert fn.pipe(err("x"), fn.inspect_err(seen.append), fn.or_tee(seen.append)) == err("x")
    assert seen == [1, 1, "x", "x"]


def test_option_conversions() -> None:
    assert fn.to_option(ok(1)) == some(1)
    assert fn.to_option(err("x")) is NONE
