from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .core.errors import InputRangeError
from .core.types import SpaIntermediate, SpaOptions, SpaParams, SpaResult
from .core.validation import validate_params
from .reference import geocentric as geo
from .reference import refraction as refr
from .reference import sun_events as ev
from .reference import surface as surf
from .reference import time_scales as ts
from .reference import topocentric as topo

_log = logging.getLogger(__name__)

DEFAULT_OPTIONS = SpaOptions()


def _resolve_options(
    options: Optional[SpaOptions],
    incidence: Optional[bool],
    sun_events: Optional[bool],
    validate: Optional[bool],
) -> SpaOptions:
    opts = options if options is not None else DEFAULT_OPTIONS
    overrides = {
        k: v
        for k, v in (("incidence", incidence), ("sun_events", sun_events), ("validate", validate))
        if v is not None
    }
    return replace(opts, **overrides) if overrides else opts


def julian_day(p: SpaParams) -> float:
    """JD (UT1) of the instant described by ``p``."""
    return ts.julian_day(p.year, p.month, p.day, p.hour, p.minute, p.second, p.timezone, p.delta_ut1)


def _record_geocentric(it: SpaIntermediate, g: geo.GeocentricSun) -> None:
    it.jd = g.time.jd
    it.jc = g.time.jc
    it.jde = g.time.jde
    it.jce = g.time.jce
    it.jme = g.time.jme
    it.l = g.helio.L_deg
    it.b = g.helio.B_deg
    it.r = g.helio.R_au
    it.theta = g.ecliptic.theta_deg
    it.beta = g.ecliptic.beta_deg
    it.x = g.args
    it.del_psi = g.nutation.del_psi_deg
    it.del_eps = g.nutation.del_eps_deg
    it.epsilon0 = g.eps0_arcsec
    it.epsilon = g.eps_deg
    it.del_tau = g.del_tau_deg
    it.lamda = g.lambda_deg
    it.nu0 = g.nu0_deg
    it.nu = g.nu_deg
    it.alpha = g.alpha_deg
    it.delta = g.delta_deg


def _record_topocentric(it: SpaIntermediate, t: topo.TopocentricSun, e: refr.RefractedElevation) -> None:
    it.h = t.H_deg
    it.xi = t.xi_deg
    it.del_alpha = t.del_alpha_deg
    it.del_prime = t.delta_prime_deg
    it.alpha_prime = t.alpha_prime_deg
    it.h_prime = t.H_prime_deg
    it.e0 = e.e0_deg
    it.del_e = e.del_e_deg
    it.e = e.e_deg


def calculate(
    params: SpaParams,
    options: Optional[SpaOptions] = None,
    *,
    intermediate: Optional[SpaIntermediate] = None,
    incidence: Optional[bool] = None,
    sun_events: Optional[bool] = None,
    validate: Optional[bool] = None,
) -> SpaResult:
    """
    Solar position (and optionally surface incidence and sun rise/transit/set)
    for one observer instant.

    Keyword toggles override the matching ``options`` fields. When
    ``intermediate`` is given it is cleared and then filled with every derived
    value of this call.

    With validation off no range checks run; out-of-range values still give
    finite numbers but carry no accuracy guarantee. At exactly -273 C the
    refraction correction is taken as 0.

    Raises:
        InputRangeError: validation is on and a parameter is out of range.
    """
    opts = _resolve_options(options, incidence, sun_events, validate)
    it = intermediate
    if it is not None:
        it.clear()

    if opts.validate:
        try:
            validate_params(params, incidence=opts.incidence)
        except InputRangeError as e:
            _log.debug("rejected SPA input: %s", e)
            raise

    # 1) JD -> apparent geocentric sun
    g = geo.geocentric_sun(julian_day(params), params.delta_t)

    # 2) parallax, refraction
    t = topo.topocentric_sun(
        g.nu_deg, g.alpha_deg, g.delta_deg, g.helio.R_au,
        params.longitude, params.latitude, params.elevation,
    )
    e = refr.refracted_elevation(
        params.latitude, t.delta_prime_deg, t.H_prime_deg,
        params.pressure, params.temperature, params.atmos_refract,
    )

    # 3) zenith / azimuth / incidence
    s = surf.surface_angles(
        e.e_deg, t.H_prime_deg, t.delta_prime_deg, params.latitude,
        slope=params.slope, azm_rotation=params.azm_rotation, incidence=opts.incidence,
    )

    if it is not None:
        _record_geocentric(it, g)
        _record_topocentric(it, t, e)

    if not opts.sun_events:
        return SpaResult(
            zenith=s.zenith_deg,
            azimuth_astro=s.azimuth_astro_deg,
            azimuth=s.azimuth_deg,
            incidence=s.incidence_deg,
        )

    # 4) equation of time, sun transit / rise / set
    eot = ev.equation_of_time_minutes(g)
    rts = ev.rise_transit_set(
        params.year, params.month, params.day,
        longitude=params.longitude,
        latitude=params.latitude,
        delta_t=params.delta_t,
        timezone=params.timezone,
        atmos_refract=params.atmos_refract,
    )

    if it is not None:
        it.eot = eot
        it.srha = rts.srha_deg
        it.ssha = rts.ssha_deg
        it.sta = rts.sta_deg

    return SpaResult(
        zenith=s.zenith_deg,
        azimuth_astro=s.azimuth_astro_deg,
        azimuth=s.azimuth_deg,
        incidence=s.incidence_deg,
        sun_transit=rts.sun_transit,
        sunrise=rts.sunrise,
        sunset=rts.sunset,
    )
