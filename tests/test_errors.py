from __future__ import annotations

import pickle

import pytest

from verdict import ResultProtocolError, UnwrapError, VerdictError


@pytest.mark.parametrize(
    "error",
    [
        VerdictError("foo"),
        UnwrapError("bar", "Err", {"code": 1}),
        UnwrapError("baz", "None"),
        ResultProtocolError(),
    ],
)
def test_errors_pickle(error: VerdictError) -> None:
    restored = pickle.loads(pickle.dumps(error))  # noqa: S301
    assert type(restored) is type(error)
    assert str(restored) == str(error)
    assert restored.mesg == error.mesg


def test_unwrap_error() -> None:
    e = UnwrapError("user must exist", "Err", "not found")
    assert isinstance(e, VerdictError)
    assert e.context == {"tag": "Err", "payload": "not found"}
    assert str(e) == "user must exist [Err: 'not found']"
