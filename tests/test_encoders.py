from __future__ import annotations

import warnings
from dataclasses import dataclass
from types import NoneType
from typing import Any

import pytest

from verdict import NONE, err, none, ok, some
from verdict.encoders import JsonEncoder, JsonPickleEncoder
from verdict.models.encoder import Encoder


@dataclass
class Point:
    x: int
    y: int


@pytest.mark.parametrize("encoder", [JsonEncoder(), JsonPickleEncoder()])
def test_encoders_satisfy_protocol(encoder: Any) -> None:
    assert isinstance(encoder, Encoder)


@pytest.mark.parametrize(
    "value",
    [
        ok(1),
        ok("foo"),
        ok([0, 1, 2]),
        ok({"foo": 0, "bar": 1}),
        ok(None),
        err("bar"),
        err({"code": 404}),
        some(1),
        none(),
        None,
    ],
)
@pytest.mark.parametrize("encoder", [JsonEncoder(), JsonPickleEncoder()])
def test_round_trip(encoder: Any, value: Any) -> None:
    encoded = encoder.encode(value)
    assert isinstance(encoded, (str, NoneType))
    assert encoder.decode(encoded) == value


def test_json_encoder_emits_wire_form() -> None:
    assert JsonEncoder().encode(ok(1)) == '{"tag": "Ok", "schemaVersion": 1, "value": 1}'
    assert JsonEncoder().decode('{"tag": "None"}') is NONE


def test_json_encoder_flattens_exceptions() -> None:
    encoder = JsonEncoder()

    decoded = encoder.decode(encoder.encode(err(ValueError("bad input"))))
    assert decoded is not None
    assert decoded.is_err()

    # all exceptions are flattened to Exception
    error = decoded.merge()
    assert type(error) is Exception
    assert str(error) == "bad input"


def test_json_encoder_rejects_arbitrary_objects() -> None:
    with pytest.raises(TypeError, match="Point"):
        JsonEncoder().encode(ok(Point(1, 2)))


def test_jsonpickle_encoder_keeps_python_objects() -> None:
    encoder = JsonPickleEncoder()

    assert encoder.decode(encoder.encode(ok(Point(1, 2)))) == ok(Point(1, 2))
    assert encoder.decode(encoder.encode(some((1, 2)))) == some((1, 2))


def test_jsonpickle_encoder_keeps_non_string_keys() -> None:
    encoder = JsonPickleEncoder()

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        encoded = encoder.encode(ok({1: "one", (2, 3): "pair"}))
        assert encoder.decode(encoded) == ok({1: "one", (2, 3): "pair"})
