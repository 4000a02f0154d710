from __future__ import annotations

from typing import Any, Literal

type VariantTag = Literal["Ok", "Err", "Some", "None"]


class VerdictError(Exception):
    def __init__(self, mesg: str) -> None:
        super().__init__(mesg)
        self.mesg = mesg

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg,))


class UnwrapError(VerdictError):
    """Raised when a value is extracted from the wrong variant.

    ``context`` carries the tag and payload of the variant that was actually
    present, e.g. ``{"tag": "Err", "payload": "not found"}``.
    """

    def __init__(self, mesg: str, tag: VariantTag, payload: Any = None) -> None:
        super().__init__(mesg)
        self.tag = tag
        self.payload = payload

    @property
    def context(self) -> dict[str, Any]:
        return {"tag": self.tag, "payload": self.payload}

    def __str__(self) -> str:
        return f"{self.mesg} [{self.tag}: {self.payload!r}]"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.tag, self.payload))


class ResultProtocolError(VerdictError):
    def __init__(self, mesg: str = "generator resumed after yielding an Err") -> None:
        super().__init__(mesg)
