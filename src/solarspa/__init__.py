"""solarspa public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import calculate, julian_day
from .core.errors import InputRangeError, SolarSpaError
from .core.types import SpaIntermediate, SpaOptions, SpaParams, SpaResult
from .reference.sun_events import NO_EVENT

__all__ = [
    "calculate",
    "julian_day",
    "SpaParams",
    "SpaOptions",
    "SpaResult",
    "SpaIntermediate",
    "SolarSpaError",
    "InputRangeError",
    "NO_EVENT",
]
