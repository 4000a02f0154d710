from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Options:
    log_suppressed: bool = True
    on_suppressed: Callable[[str, Exception], None] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.log_suppressed, bool):
            msg = f"log_suppressed must be `bool`, got {type(self.log_suppressed).__name__}"
            raise TypeError(msg)

        if self.on_suppressed is not None and not callable(self.on_suppressed):
            msg = f"on_suppressed must be `Callable | None`, got {type(self.on_suppressed).__name__}"
            raise TypeError(msg)

    def merge(
        self,
        *,
        log_suppressed: bool | None = None,
        on_suppressed: Callable[[str, Exception], None] | None = None,
    ) -> Options:
        return Options(
            log_suppressed=log_suppressed if log_suppressed is not None else self.log_suppressed,
            on_suppressed=on_suppressed if on_suppressed is not None else self.on_suppressed,
        )


_options = Options()


def get_options() -> Options:
    return _options


def configure(
    *,
    log_suppressed: bool | None = None,
    on_suppressed: Callable[[str, Exception], None] | None = None,
) -> Options:
    """Update the process-wide options and return the new value.

    Unset arguments keep their current value. Use ``reset()`` to go back to
    the defaults, which is the only way to remove an ``on_suppressed`` hook.
    """
    global _options  # noqa: PLW0603
    _options = _options.merge(log_suppressed=log_suppressed, on_suppressed=on_suppressed)
    return _options


def reset() -> Options:
    global _options  # noqa: PLW0603
    _options = Options()
    return _options
