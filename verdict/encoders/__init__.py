from __future__ import annotations

from .json import JsonEncoder
from .jsonpickle import JsonPickleEncoder

__all__ = ["JsonEncoder", "JsonPickleEncoder"]
