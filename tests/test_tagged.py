from __future__ import annotations

import dataclasses
import pickle

import pytest

from verdict import TaggedError, assert_never, create_error, create_error_group, err


def test_create_error() -> None:
    NotFound = create_error("NotFound")  # noqa: N806
    e = NotFound(resource="user", id="42")

    assert isinstance(e, TaggedError)
    assert e.tag == "NotFound"
    assert e["tag"] == "NotFound"
    assert e.resource == "user"
    assert e["id"] == "42"
    assert dict(e) == {"resource": "user", "id": "42", "tag": "NotFound"}
    assert e == {"tag": "NotFound", "resource": "user", "id": "42"}
    assert NotFound.__name__ == "NotFound"


def test_fields_are_spread_after_the_tag() -> None:
    e = create_error("Timeout")(tag="Other", after=5)
    assert e.tag == "Other"
    assert list(e) == ["tag", "after"]

    grouped = create_error_group("Http").create("Timeout")(namespace="Db")
    assert grouped.namespace == "Db"
    assert grouped.tag == "Timeout"


def test_records_are_immutable() -> None:
    e = create_error("Oops")(detail="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.detail = "y"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        del e.detail
    with pytest.raises(TypeError):
        e["detail"] = "y"  # type: ignore[index]
    with pytest.raises(AttributeError):
        _ = e.missing


def test_records_pickle() -> None:
    e = create_error("Oops")(detail="x")
    assert pickle.loads(pickle.dumps(e)) == e  # noqa: S301


def test_records_work_with_match() -> None:
    e = create_error("Conflict")(version=3)
    match err(e).error:
        case {"tag": "Conflict", "version": version}:
            assert version == 3
        case _:
            pytest.fail("record did not match")


def test_error_group() -> None:
    http = create_error_group("Http")
    NotFound = http.create("NotFound")  # noqa: N806
    Timeout = http.create("Timeout")  # noqa: N806

    e = NotFound(url="/users/1")
    assert e.namespace == "Http"
    assert e.tag == "NotFound"
    assert e.url == "/users/1"

    assert http.is_(e)
    assert http.is_(Timeout(after=5))
    assert not http.is_(create_error_group("Db").create("NotFound")())
    assert not http.is_(create_error("NotFound")())
    assert not http.is_(None)
    assert not http.is_("Http")

    is_not_found = http.is_tag("NotFound")
    assert is_not_found(e)
    assert not is_not_found(Timeout(after=5))
    assert not is_not_found({"tag": "NotFound"})


def test_assert_never() -> None:
    with pytest.raises(AssertionError, match="Unexpected value: 'surprise'"):
        assert_never("surprise")  # type: ignore[arg-type]
    with pytest.raises(AssertionError, match="custom"):
        assert_never(1, "custom")  # type: ignore[arg-type]
