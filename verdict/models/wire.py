from __future__ import annotations

from typing import Any, Final, Literal

from typing_extensions import NotRequired, TypedDict

SCHEMA_VERSION: Final = 1


class OkJSON(TypedDict):
    tag: Literal["Ok"]
    schemaVersion: NotRequired[int]
    value: Any


class ErrJSON(TypedDict):
    tag: Literal["Err"]
    schemaVersion: NotRequired[int]
    error: Any


class SomeJSON(TypedDict):
    tag: Literal["Some"]
    schemaVersion: NotRequired[int]
    value: Any


class NoneJSON(TypedDict):
    tag: Literal["None"]
    schemaVersion: NotRequired[int]


type ResultJSON = OkJSON | ErrJSON
type OptionJSON = SomeJSON | NoneJSON
