from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typing_extensions import TypeIs

from verdict.brand import _OPTION_BRAND, _RESULT_BRAND, has_brand
from verdict.models.option import Nothing, Some
from verdict.models.result import OkErr

if TYPE_CHECKING:
    from verdict.models.option import Option
    from verdict.models.result import Result
    from verdict.result_async import ResultAsync


def is_result(value: Any) -> TypeIs[Result[Any, Any]]:
    """True only for instances built by this library.

    An object with the same ``tag`` and ``value`` attributes is not enough,
    even when it carries a marker read off a genuine Result, and an Option is
    never a Result.
    """
    return isinstance(value, OkErr) and has_brand(value, _RESULT_BRAND)


def is_option(value: Any) -> TypeIs[Option[Any]]:
    return isinstance(value, (Some, Nothing)) and has_brand(value, _OPTION_BRAND)


def is_result_async(value: Any) -> TypeIs[ResultAsync[Any, Any]]:
    # structural, so wrappers from other copies of the library are recognized
    return hasattr(value, "__await__") and callable(getattr(value, "match", None))
