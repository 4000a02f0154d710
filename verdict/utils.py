from __future__ import annotations

import inspect
import logging
from importlib.metadata import version
from typing import Any

from verdict.options import get_options

logger = logging.getLogger(__name__)


def report_suppressed(op: str, e: Exception) -> None:
    """Surface an exception swallowed by a tee callback.

    The Result returned by the tee operation is never affected; this only
    feeds logging and the configured ``on_suppressed`` hook.
    """
    opts = get_options()

    if opts.log_suppressed:
        logger.debug("Exception suppressed in %s: %r", op, e, exc_info=e)

    if opts.on_suppressed is not None:
        try:
            opts.on_suppressed(op, e)
        except Exception:
            logger.exception("on_suppressed hook failed while reporting %s", op)


async def resolve[T](value: T | Any) -> T:
    if inspect.isawaitable(value):
        return await value
    return value


def verdict_version() -> str:
    try:
        return version("verdict")
    except Exception:
        return "unknown"


def truncate(s: str, n: int) -> str:
    if len(s) > n:
        return s[:n] + "..."
    return s
