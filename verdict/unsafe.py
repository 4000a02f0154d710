"""Throwing accessors, kept out of the package root so their use is easy to audit.

Prefer ``match``, ``unwrap_or`` or ``expect`` with a meaningful message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from verdict.errors import UnwrapError
from verdict.models.result import Err, Ok

if TYPE_CHECKING:
    from verdict.models.result import Result


def unwrap[T, E](result: Result[T, E]) -> T:
    match result:
        case Ok(value):
            return value
        case Err(error):
            exc = UnwrapError("Called unwrap on Err", "Err", error)
            if isinstance(error, BaseException):
                raise exc from error
            raise exc


def unwrap_err[T, E](result: Result[T, E]) -> E:
    match result:
        case Err(error):
            return error
        case Ok(value):
            raise UnwrapError("Called unwrap_err on Ok", "Ok", value)
