from __future__ import annotations

from typing import TYPE_CHECKING, Any

import jsonpickle

from verdict.interop import from_wire

if TYPE_CHECKING:
    from verdict.models.option import Option
    from verdict.models.result import Result


class JsonPickleEncoder:
    """Like ``JsonEncoder`` but payloads round-trip as arbitrary Python objects.

    Only decode data from trusted sources, jsonpickle can construct any
    importable type.
    """

    def encode(self, obj: Result[Any, Any] | Option[Any] | None) -> str | None:
        if obj is None:
            return None

        data = jsonpickle.encode(obj.to_json(), unpicklable=True, keys=True)
        assert data
        return data

    def decode(self, obj: str | None) -> Result[Any, Any] | Option[Any] | None:
        if obj is None:
            return None

        return from_wire(jsonpickle.decode(obj, keys=True))  # noqa: S301
