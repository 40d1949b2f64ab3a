from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional, Sequence

from ..reference.nutation import NutationArgs
from ..reference.sun_events import NO_EVENT


@dataclass(frozen=True)
class SpaParams:
    """
    Observer instant and site.

    Date/time fields are the civil (local) calendar reading at UTC offset
    ``timezone`` hours; ``second`` may carry a fraction. Angles are degrees,
    longitude positive east, elevation in metres, pressure in millibars,
    temperature in degrees Celsius.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    timezone: float = 0.0
    delta_ut1: float = 0.0  # UT1-UTC, seconds
    delta_t: float = 0.0    # TT-UT1, seconds
    longitude: float = 0.0
    latitude: float = 0.0
    elevation: float = 0.0
    pressure: float = 1013.0
    temperature: float = 15.0
    slope: float = 0.0
    azm_rotation: float = 0.0  # from south, negative east
    atmos_refract: float = 0.5667

    @classmethod
    def from_datetime(
        cls,
        dt: datetime,
        *,
        longitude: float,
        latitude: float,
        timezone: Optional[float] = None,
        second: Optional[float] = None,
        **kwargs,
    ) -> "SpaParams":
        """
        Build from a ``datetime``. Unless given explicitly, the UTC offset is
        taken from ``dt.utcoffset()`` (0 for naive datetimes) and ``second``
        from ``dt.second`` plus microseconds.
        """
        if timezone is None:
            off = dt.utcoffset()
            timezone = 0.0 if off is None else off.total_seconds() / 3600.0
        if second is None:
            second = dt.second + dt.microsecond / 1e6
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=float(second),
            timezone=float(timezone),
            longitude=longitude,
            latitude=latitude,
            **kwargs,
        )

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "SpaParams":
        """
        Positional construction, missing trailing values default to 0:

          year, month, day, hour, minute, second, delta_ut1, delta_t, timezone,
          longitude, latitude, elevation, pressure, temperature, slope,
          azm_rotation, atmos_refract
        """
        v = list(values) + [0] * max(0, 17 - len(values))
        return cls(
            year=int(v[0]),
            month=int(v[1]),
            day=int(v[2]),
            hour=int(v[3]),
            minute=int(v[4]),
            second=float(v[5]),
            delta_ut1=float(v[6]),
            delta_t=float(v[7]),
            timezone=float(v[8]),
            longitude=float(v[9]),
            latitude=float(v[10]),
            elevation=float(v[11]),
            pressure=float(v[12]),
            temperature=float(v[13]),
            slope=float(v[14]),
            azm_rotation=float(v[15]),
            atmos_refract=float(v[16]),
        )


@dataclass(frozen=True)
class SpaOptions:
    incidence: bool = True   # compute the surface incidence angle
    sun_events: bool = True  # compute EOT and sun transit/rise/set
    validate: bool = True    # reject out-of-range inputs before computing


@dataclass(frozen=True)
class SpaResult:
    zenith: float
    azimuth_astro: float  # westward from south
    azimuth: float        # eastward from north
    incidence: Optional[float] = None
    sun_transit: Optional[float] = None  # local hours, NO_EVENT in polar day/night
    sunrise: Optional[float] = None
    sunset: Optional[float] = None

    @property
    def has_sun_events(self) -> bool:
        return self.sun_transit is not None and self.sun_transit != NO_EVENT


@dataclass
class SpaIntermediate:
    """
    Scratch record of every derived value of one calculation.

    Pass an instance to ``calculate(..., intermediate=...)`` to inspect the
    reduction; it is cleared at the start of each call and filled stage by
    stage. Field names follow the SPA report (degrees unless noted).
    """
    jd: Optional[float] = None
    jc: Optional[float] = None
    jde: Optional[float] = None
    jce: Optional[float] = None
    jme: Optional[float] = None

    l: Optional[float] = None
    b: Optional[float] = None
    r: Optional[float] = None  # AU

    theta: Optional[float] = None
    beta: Optional[float] = None

    x: Optional[NutationArgs] = None

    del_psi: Optional[float] = None
    del_eps: Optional[float] = None
    epsilon0: Optional[float] = None  # arcsec
    epsilon: Optional[float] = None

    del_tau: Optional[float] = None
    lamda: Optional[float] = None
    nu0: Optional[float] = None
    nu: Optional[float] = None

    alpha: Optional[float] = None
    delta: Optional[float] = None

    h: Optional[float] = None
    xi: Optional[float] = None
    del_alpha: Optional[float] = None
    del_prime: Optional[float] = None
    alpha_prime: Optional[float] = None
    h_prime: Optional[float] = None

    e0: Optional[float] = None
    del_e: Optional[float] = None
    e: Optional[float] = None

    eot: Optional[float] = None  # minutes
    srha: Optional[float] = None
    ssha: Optional[float] = None
    sta: Optional[float] = None

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, None)
