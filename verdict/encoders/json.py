from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from verdict.interop import from_wire

if TYPE_CHECKING:
    from verdict.models.option import Option
    from verdict.models.result import Result


class JsonEncoder:
    """Encode Results and Options as JSON text using their wire form.

    Exceptions held as payloads are encoded by message only and decode to a
    plain ``Exception``.
    """

    def encode(self, obj: Result[Any, Any] | Option[Any] | None) -> str | None:
        if obj is None:
            return None

        return json.dumps(obj.to_json(), default=_encode_exception)

    def decode(self, obj: str | None) -> Result[Any, Any] | Option[Any] | None:
        if obj is None:
            return None

        return from_wire(json.loads(obj, object_hook=_decode_exception))


def _encode_exception(obj: Any) -> dict[str, Any]:
    if isinstance(obj, BaseException):
        return {"__error__": str(obj)}
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def _decode_exception(obj: dict[str, Any]) -> Any:
    if "__error__" in obj:
        return Exception(obj["__error__"])
    return obj
