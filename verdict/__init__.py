from __future__ import annotations

from .combinators import all_, all_settled, any_, collect, for_each, partition, zip_or_accumulate
from .constructors import from_async_throwable, from_awaitable, from_nullable, from_predicate, from_safe_awaitable, from_throwable, try_catch
from .do import bind, do, let_
from .errors import ResultProtocolError, UnwrapError, VerdictError
from .guards import is_option, is_result, is_result_async
from .interop import StandardSchema, from_json, from_option_json, to_schema
from .logging import logger
from .models.option import NONE, Nothing, Option, Some, from_optional, none, some
from .models.result import Err, Ok, Result, err, ok
from .options import Options, configure, get_options, reset
from .result_async import ResultAsync
from .safe_try import safe_try
from .tagged import ErrorGroup, TaggedError, assert_never, create_error, create_error_group
from .utils import verdict_version

__version__ = verdict_version()

__all__ = [
    "NONE",
    "Err",
    "ErrorGroup",
    "Nothing",
    "Ok",
    "Option",
    "Options",
    "Result",
    "ResultAsync",
    "ResultProtocolError",
    "Some",
    "StandardSchema",
    "TaggedError",
    "UnwrapError",
    "VerdictError",
    "all_",
    "all_settled",
    "any_",
    "assert_never",
    "bind",
    "collect",
    "configure",
    "create_error",
    "create_error_group",
    "do",
    "err",
    "for_each",
    "from_async_throwable",
    "from_awaitable",
    "from_json",
    "from_nullable",
    "from_option_json",
    "from_optional",
    "from_predicate",
    "from_safe_awaitable",
    "from_throwable",
    "get_options",
    "is_option",
    "is_result",
    "is_result_async",
    "let_",
    "logger",
    "none",
    "ok",
    "partition",
    "reset",
    "safe_try",
    "some",
    "to_schema",
    "try_catch",
    "zip_or_accumulate",
]
