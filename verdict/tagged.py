from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import FrozenInstanceError
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Never, final

from verdict.utils import truncate

if TYPE_CHECKING:
    from collections.abc import Callable


@final
class TaggedError(Mapping[str, Any]):
    """An immutable error record discriminated by its ``tag`` field.

    Fields are readable both as keys and as attributes::

        NotFound = create_error("NotFound")
        e = NotFound(resource="user", id="42")
        assert e.tag == e["tag"] == "NotFound"
        assert e.id == "42"

    Records compare equal to any mapping with the same items.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_fields", MappingProxyType(dict(fields)))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattr__(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            msg = f"{self!r} has no field {name!r}"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"cannot assign to field {name!r}"
        raise FrozenInstanceError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"cannot delete field {name!r}"
        raise FrozenInstanceError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (TaggedError, (dict(self._fields),))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"TaggedError({fields})"


def create_error(tag: str) -> Callable[..., TaggedError]:
    def factory(**fields: Any) -> TaggedError:
        # a field named tag replaces the discriminant
        return TaggedError({"tag": tag, **fields})

    factory.__name__ = tag
    factory.__qualname__ = tag
    return factory


@final
class ErrorGroup:
    """Factories and tests for errors sharing a ``namespace``."""

    __slots__ = ("namespace",)

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace

    def __repr__(self) -> str:
        return f"ErrorGroup({self.namespace!r})"

    def create(self, tag: str) -> Callable[..., TaggedError]:
        namespace = self.namespace

        def factory(**fields: Any) -> TaggedError:
            return TaggedError({"namespace": namespace, "tag": tag, **fields})

        factory.__name__ = tag
        factory.__qualname__ = f"{namespace}.{tag}"
        return factory

    def is_(self, value: Any) -> bool:
        return isinstance(value, Mapping) and value.get("namespace") == self.namespace

    def is_tag(self, tag: str) -> Callable[[Any], bool]:
        def check(value: Any) -> bool:
            return self.is_(value) and value.get("tag") == tag

        return check


def create_error_group(namespace: str) -> ErrorGroup:
    return ErrorGroup(namespace)


def assert_never(value: Never, message: str | None = None) -> Never:
    """Mark a branch the type checker has proven unreachable.

    Reaching it at runtime means the value bypassed the type system, so this
    always raises ``AssertionError``.
    """
    if message is None:
        message = f"Unexpected value: {truncate(repr(value), 200)}"
    raise AssertionError(message)
