from __future__ import annotations

import pytest

import verdict
from verdict import UnwrapError, err, ok
from verdict.unsafe import unwrap, unwrap_err


def test_unwrap() -> None:
    assert unwrap(ok(1)) == 1

    with pytest.raises(UnwrapError) as info:
        unwrap(err("nope"))
    assert info.value.context == {"tag": "Err", "payload": "nope"}


def test_unwrap_err() -> None:
    assert unwrap_err(err("x")) == "x"

    with pytest.raises(UnwrapError) as info:
        unwrap_err(ok(1))
    assert info.value.context == {"tag": "Ok", "payload": 1}


def test_not_exported_from_package_root() -> None:
    assert not hasattr(verdict, "unwrap")
    assert "unwrap" not in verdict.__all__
