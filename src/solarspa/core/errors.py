from __future__ import annotations

from typing import Optional


class SolarSpaError(Exception):
    """Base error."""


class InputRangeError(SolarSpaError, ValueError):
    """Raised when a parameter lies outside the range the algorithm is valid for."""

    def __init__(self, field: str, value: float, low: Optional[float], high: Optional[float], detail: str = "") -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        lo = "-inf" if low is None else f"{low:g}"
        hi = "inf" if high is None else f"{high:g}"
        msg = f"{field}={value!r} is outside [{lo}, {hi}]"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
