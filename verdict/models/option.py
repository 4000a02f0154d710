from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal, Never, final

from verdict.brand import _OPTION_BRAND, Brand
from verdict.errors import UnwrapError
from verdict.models.result import Err, Ok
from verdict.models.wire import SCHEMA_VERSION

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.models.result import Result
    from verdict.models.wire import NoneJSON, SomeJSON

type Option[T] = Some[T] | Nothing


@final
@dataclass(frozen=True, repr=False)
class Some[T]:
    """The present variant of an Option, holding ``value``."""

    value: T
    _brand: Brand = field(default=_OPTION_BRAND, init=False, repr=False, compare=False)

    tag: ClassVar[Literal["Some"]] = "Some"

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NONE

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        if not isinstance(self.value, (Some, Nothing)):
            msg = f"flatten requires a Some holding an Option, got {type(self.value).__name__}"
            raise TypeError(msg)
        return self.value

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        match other:
            case Some(value):
                return Some((self.value, value))
            case _:
                return NONE

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        match other:
            case Some(value):
                return Some(f(self.value, value))
            case _:
                return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def or_else(self, f: Callable[[], Option[Any]]) -> Some[T]:
        return self

    def match[A, B](self, on_some: Callable[[T], A], on_none: Callable[[], B]) -> A:
        return on_some(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def to_result(self, on_none: Callable[[], Any]) -> Ok[T]:
        return Ok(self.value)

    def to_nullable(self) -> T:
        return self.value

    def to_undefined(self) -> T:
        return self.value

    def to_json(self) -> SomeJSON:
        return {"tag": "Some", "schemaVersion": SCHEMA_VERSION, "value": self.value}

    def transpose[U, E](self: Some[Result[U, E]]) -> Result[Some[U], E]:
        match self.value:
            case Ok(value):
                return Ok(Some(value))
            case Err(error):
                return Err(error)
            case other:
                msg = f"transpose requires a Some holding a Result, got {type(other).__name__}"
                raise TypeError(msg)


@final
@dataclass(frozen=True, repr=False)
class Nothing:
    """
    The absent variant of an Option.

    There is one canonical instance, ``NONE``. ``Nothing()`` and ``none()`` both
    return it, and copies and unpickled values resolve back to it.
    """

    _brand: Brand = field(default=_OPTION_BRAND, init=False, repr=False, compare=False)

    tag: ClassVar[Literal["None"]] = "None"
    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        return "NONE"

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:
        return self

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def is_some_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    def map(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Nothing:
        return self

    def flatten(self) -> Nothing:
        return self

    def zip(self, other: Option[Any]) -> Nothing:
        return self

    def zip_with(self, other: Option[Any], f: Callable[[Any, Any], Any]) -> Nothing:
        return self

    def and_then(self, f: Callable[[Any], Option[Any]]) -> Nothing:
        return self

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def match[A, B](self, on_some: Callable[[Any], A], on_none: Callable[[], B]) -> B:
        return on_none()

    def unwrap_or[U](self, default: U) -> U:
        return default

    def expect(self, message: str) -> Never:
        raise UnwrapError(message, "None")

    def to_result[E](self, on_none: Callable[[], E]) -> Err[E]:
        return Err(on_none())

    def to_nullable(self) -> None:
        return None

    def to_undefined(self) -> None:
        return None

    def to_json(self) -> NoneJSON:
        return {"tag": "None", "schemaVersion": SCHEMA_VERSION}

    def transpose(self) -> Ok[Nothing]:
        return Ok(self)


NONE: Final = Nothing()


def some[T](value: T) -> Some[T]:
    return Some(value)


def none() -> Nothing:
    return NONE


def from_optional[T](value: T | None) -> Option[T]:
    return NONE if value is None else Some(value)
