from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal, Never, final

from verdict.brand import _RESULT_BRAND, Brand
from verdict.errors import ResultProtocolError, UnwrapError
from verdict.models.wire import SCHEMA_VERSION
from verdict.utils import report_suppressed

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Generator

    from verdict.models.option import Nothing, Option, Some
    from verdict.models.wire import ErrJSON, OkJSON
    from verdict.result_async import ResultAsync

type Result[T, E] = Ok[T] | Err[E]


@final
@dataclass(frozen=True, repr=False)
class Ok[T]:
    """
    The success variant of a Result, holding ``value``.

    Instances are frozen: assigning, deleting or adding attributes raises
    ``dataclasses.FrozenInstanceError``.
    """

    value: T
    _brand: Brand = field(default=_RESULT_BRAND, init=False, repr=False, compare=False)

    tag: ClassVar[Literal["Ok"]] = "Ok"

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __iter__(self) -> Generator[Never, Any, T]:
        return self.value
        yield  # unreachable, marks this method as a generator

    # guards

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def is_err_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    # transformations

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def map_both[U](self, on_ok: Callable[[T], U], on_err: Callable[[Any], Any]) -> Ok[U]:
        return Ok(on_ok(self.value))

    def flatten[U, F](self: Ok[Result[U, F]]) -> Result[U, F]:
        if not isinstance(self.value, OkErr):
            msg = f"flatten requires an Ok holding a Result, got {type(self.value).__name__}"
            raise TypeError(msg)
        return self.value

    def flip(self) -> Err[T]:
        return Err(self.value)

    # logical

    def and_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def or_(self, other: Result[Any, Any]) -> Ok[T]:
        return self

    # chaining

    def and_then[U, F](self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return f(self.value)

    def or_else(self, f: Callable[[Any], Result[Any, Any]]) -> Ok[T]:
        return self

    def and_tee(self, f: Callable[[T], Any]) -> Ok[T]:
        """
        Call ``f`` with the value for its side effect and return self.

        Exceptions raised by ``f`` are suppressed; they are only reported
        through logging and the ``on_suppressed`` hook. Use ``inspect`` when
        a failing side effect must not go unnoticed.
        """
        try:
            f(self.value)
        except Exception as e:
            report_suppressed("and_tee", e)
        return self

    def or_tee(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_through[F](self, f: Callable[[T], Result[Any, F]]) -> Result[T, F]:
        """
        Run a fallible side operation, keeping the original value when it succeeds.

        If ``f`` returns an Err, that error is propagated and the original value
        is discarded. The payload of a successful side operation is ignored.
        """
        match f(self.value):
            case Err(error):
                return Err(error)
            case _:
                return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    # extraction

    def match[A, B](self, on_ok: Callable[[T], A], on_err: Callable[[Any], B]) -> A:
        return on_ok(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], Any]) -> T:
        return self.value

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else[U](self, default_f: Callable[[Any], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def contains(self, value: Any) -> bool:
        return self.value == value

    def contains_err(self, error: Any) -> Literal[False]:
        return False

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> Never:
        raise UnwrapError(message, "Ok", self.value)

    # conversion

    def to_nullable(self) -> T:
        return self.value

    def to_undefined(self) -> T:
        return self.value

    def into_tuple(self) -> tuple[None, T]:
        return (None, self.value)

    def merge(self) -> T:
        return self.value

    # bridges

    def to_async(self) -> ResultAsync[T, Never]:
        from verdict.result_async import ResultAsync

        return ResultAsync.ok(self.value)

    def async_map[U](self, f: Callable[[T], Awaitable[U] | U]) -> ResultAsync[U, Never]:
        return self.to_async().map(f)

    def async_and_then[U, F](self, f: Callable[[T], ResultAsync[U, F] | Awaitable[Result[U, F]] | Result[U, F]]) -> ResultAsync[U, F]:
        return self.to_async().and_then(f)

    def to_option(self) -> Some[T]:
        from verdict.models.option import Some

        return Some(self.value)

    def to_option_err(self) -> Nothing:
        from verdict.models.option import NONE

        return NONE

    def transpose[U](self: Ok[Option[U]]) -> Option[Ok[U]]:
        from verdict.models.option import NONE, Nothing, Some

        match self.value:
            case Some(value):
                return Some(Ok(value))
            case Nothing():
                return NONE
            case other:
                msg = f"transpose requires an Ok holding an Option, got {type(other).__name__}"
                raise TypeError(msg)

    # serialization

    def to_json(self) -> OkJSON:
        return {"tag": "Ok", "schemaVersion": SCHEMA_VERSION, "value": self.value}


@final
@dataclass(frozen=True, repr=False)
class Err[E]:
    """
    The failure variant of a Result, holding ``error``.

    Instances are frozen: assigning, deleting or adding attributes raises
    ``dataclasses.FrozenInstanceError``.
    """

    error: E
    _brand: Brand = field(default=_RESULT_BRAND, init=False, repr=False, compare=False)

    tag: ClassVar[Literal["Err"]] = "Err"

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __iter__(self) -> Generator[Err[E], Any, Never]:
        yield self
        # a runner must close the generator instead of resuming it
        raise ResultProtocolError

    # guards

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self.error)

    # transformations

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def map_both[F](self, on_ok: Callable[[Any], Any], on_err: Callable[[E], F]) -> Err[F]:
        return Err(on_err(self.error))

    def flatten(self) -> Err[E]:
        return self

    def flip(self) -> Ok[E]:
        return Ok(self.error)

    # logical

    def and_(self, other: Result[Any, Any]) -> Err[E]:
        return self

    def or_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    # chaining

    def and_then(self, f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        return self

    def or_else[U, F](self, f: Callable[[E], Result[U, F]]) -> Result[U, F]:
        return f(self.error)

    def and_tee(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def or_tee(self, f: Callable[[E], Any]) -> Err[E]:
        """
        Call ``f`` with the error for its side effect and return self.

        Exceptions raised by ``f`` are suppressed, see ``Ok.and_tee``.
        """
        try:
            f(self.error)
        except Exception as e:
            report_suppressed("or_tee", e)
        return self

    def and_through(self, f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        return self

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        f(self.error)
        return self

    # extraction

    def match[A, B](self, on_ok: Callable[[Any], A], on_err: Callable[[E], B]) -> B:
        return on_err(self.error)

    def unwrap_or[U](self, default: U) -> U:
        return default

    def unwrap_or_else[U](self, f: Callable[[E], U]) -> U:
        return f(self.error)

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:
        return default

    def map_or_else[U](self, default_f: Callable[[E], U], f: Callable[[Any], U]) -> U:
        return default_f(self.error)

    def contains(self, value: Any) -> Literal[False]:
        return False

    def contains_err(self, error: Any) -> bool:
        return self.error == error

    def expect(self, message: str) -> Never:
        exc = UnwrapError(message, "Err", self.error)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def expect_err(self, message: str) -> E:
        return self.error

    # conversion

    def to_nullable(self) -> None:
        return None

    def to_undefined(self) -> None:
        return None

    def into_tuple(self) -> tuple[E, None]:
        return (self.error, None)

    def merge(self) -> E:
        return self.error

    # bridges

    def to_async(self) -> ResultAsync[Never, E]:
        from verdict.result_async import ResultAsync

        return ResultAsync.err(self.error)

    def async_map(self, f: Callable[[Any], Any]) -> ResultAsync[Never, E]:
        return self.to_async()

    def async_and_then(self, f: Callable[[Any], Any]) -> ResultAsync[Never, E]:
        return self.to_async()

    def to_option(self) -> Nothing:
        from verdict.models.option import NONE

        return NONE

    def to_option_err(self) -> Some[E]:
        from verdict.models.option import Some

        return Some(self.error)

    def transpose(self) -> Some[Err[E]]:
        from verdict.models.option import Some

        return Some(self)

    # serialization

    def to_json(self) -> ErrJSON:
        return {"tag": "Err", "schemaVersion": SCHEMA_VERSION, "error": self.error}


# for isinstance checks against either variant
OkErr: Final = (Ok, Err)


def ok[T](value: T) -> Ok[T]:
    return Ok(value)


def err[E](error: E) -> Err[E]:
    return Err(error)
