from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal

from verdict.models.option import NONE, Some
from verdict.models.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.models.option import Option
    from verdict.models.result import Result

VENDOR: Final = "verdict"


def from_json(data: Mapping[str, Any]) -> Result[Any, Any]:
    """Rebuild a Result from its wire form.

    Records without ``schemaVersion`` are accepted as the legacy format;
    the version is not otherwise checked.
    """
    match _tag(data, "Result"):
        case "Ok":
            return Ok(data.get("value"))
        case "Err":
            return Err(data.get("error"))
        case tag:
            msg = f"Invalid Result JSON: expected tag 'Ok' or 'Err', got {tag!r}"
            raise TypeError(msg)


def from_option_json(data: Mapping[str, Any]) -> Option[Any]:
    match _tag(data, "Option"):
        case "Some":
            return Some(data.get("value"))
        case "None":
            return NONE
        case tag:
            msg = f"Invalid Option JSON: expected tag 'Some' or 'None', got {tag!r}"
            raise TypeError(msg)


def _tag(data: Any, family: str) -> Any:
    if not isinstance(data, Mapping):
        msg = f"Invalid {family} JSON: expected a mapping, got {type(data).__name__}"
        raise TypeError(msg)

    return data.get("tag")


@dataclass(frozen=True)
class StandardSchema[T]:
    """A validator in the shape generic validation frameworks consume."""

    validate: Callable[[Any], dict[str, Any]]
    version: Literal[1] = 1
    vendor: str = VENDOR


def to_schema[T, E](validate: Callable[[Any], Result[T, E]]) -> StandardSchema[T]:
    def run(value: Any) -> dict[str, Any]:
        match validate(value):
            case Ok(v):
                return {"value": v}
            case Err(error):
                return {"issues": [{"message": str(error)}]}
            case other:
                msg = f"validator must return a Result, got {type(other).__name__}"
                raise TypeError(msg)

    return StandardSchema(validate=run)


def from_wire(data: Mapping[str, Any]) -> Result[Any, Any] | Option[Any]:
    """Rebuild either family, dispatching on ``tag``."""
    match _tag(data, "Result or Option"):
        case "Ok" | "Err":
            return from_json(data)
        case "Some" | "None":
            return from_option_json(data)
        case tag:
            msg = f"Invalid JSON: expected tag 'Ok', 'Err', 'Some' or 'None', got {tag!r}"
            raise TypeError(msg)
