from __future__ import annotations

from typing import Any, Final, final


@final
class Brand:
    """Per-family marker stamped on every genuine Result and Option instance."""

    __slots__ = ("_family",)

    def __init__(self, family: str) -> None:
        self._family = family

    def __repr__(self) -> str:
        return f"<{self._family} brand>"

    def __reduce__(self) -> str:
        # copies and unpickled instances resolve to the module-level token
        return f"_{self._family.upper()}_BRAND"

    def __copy__(self) -> Brand:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Brand:
        return self


_RESULT_BRAND: Final = Brand("Result")
_OPTION_BRAND: Final = Brand("Option")


def has_brand(value: object, brand: Brand) -> bool:
    return getattr(value, "_brand", None) is brand
