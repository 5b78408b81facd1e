# atmosphere/num.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical collaborators for atmosphere.

The package does not implement its own quadrature nor its own root
bracketing. This module wraps the SciPy primitives behind two small
functions with a fixed contract:

integrate
    Definite integral of a scalar function, possibly over infinite
    bounds, with ``scipy.integrate.quad``.
find_root
    Root of a scalar function over a bracketing interval with
    ``scipy.optimize.brentq``.

Both report failure with :class:`atmosphere.exceptions.NumericFailure`
instead of warnings or degraded values.
"""

import math
from typing import Callable, Optional

import numpy
from numpy import inf, nan
from scipy.integrate import quad
from scipy.optimize import brentq

from atmosphere.config import get_config, get_logger
from atmosphere.exceptions import NumericFailure

ScalarFunction = Callable[[float], float]

_logger = get_logger()

eps = float(numpy.finfo(numpy.float64).eps)
fmax = float(numpy.finfo(numpy.float64).max)

# ..................................................


def safe_exp(u: float) -> float:
    """``exp(u)`` returning inf or 0.0 instead of raising on overflow/underflow."""
    if u > 709.0:
        return inf
    if u < -745.0:
        return 0.0
    return math.exp(u)


def integrate(
    func: ScalarFunction,
    a: float,
    b: float,
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
    limit: Optional[int] = None,
) -> float:
    """
    Integrate ``func`` over ``[a, b]``.

    Parameters
    ----------
    func : callable
        Scalar integrand ``func(x: float) -> float``.
    a, b : float
        Integration bounds, possibly infinite.
    rtol, atol : float, optional
        Relative and absolute tolerances (``epsrel`` and ``epsabs`` of
        ``quad``). Defaults are taken from the configuration.
    limit : int, optional
        Upper bound on the number of subintervals used by QUADPACK.

    Returns
    -------
    float
        Value of the integral.

    Raises
    ------
    NumericFailure
        If QUADPACK reports that the requested accuracy was not reached,
        or if the result is not finite.
    """
    a = float(a)
    b = float(b)
    if a == b:
        return 0.0

    config = get_config()
    rtol = config.rtol if rtol is None else rtol
    atol = config.atol if atol is None else atol
    limit = config.quad_limit if limit is None else limit

    # With full_output, quad appends a message only when QUADPACK
    # flags the result (ier > 0); process-wide warning filters stay untouched.
    out = quad(func, a, b, epsabs=atol, epsrel=rtol, limit=limit, full_output=1)
    if len(out) > 3:
        _logger.debug("quad failed on [%g, %g]: %s", a, b, out[3])
        raise NumericFailure(f"Integration over [{a}, {b}] failed: {out[3]}")

    value = float(out[0])
    if not math.isfinite(value):
        _logger.debug("quad returned %r on [%g, %g]", value, a, b)
        raise NumericFailure(f"Integration over [{a}, {b}] returned {value}.")
    return value


def _same_sign(u: float, v: float) -> bool:
    return math.copysign(1.0, u) == math.copysign(1.0, v)


def find_root(
    func: ScalarFunction,
    low: float,
    high: float,
    xtol: Optional[float] = None,
    rtol: Optional[float] = None,
    maxiter: Optional[int] = None,
) -> float:
    """
    Find a root of ``func`` in ``[low, high]``.

    Parameters
    ----------
    func : callable
        Continuous scalar function.
    low, high : float
        Finite bracket with ``low < high``. ``func(low)`` and
        ``func(high)`` must have opposite signs (or one of them be zero).
    xtol, rtol, maxiter : optional
        Passed to ``brentq``. Defaults are taken from the configuration.

    Returns
    -------
    float
        A root of ``func``.

    Raises
    ------
    NumericFailure
        If the interval does not bracket a root, if brentq does not
        converge within ``maxiter`` iterations, or if the root is NaN.

    Notes
    -----
    brentq works with differences of the bracket ends. When ``high - low``
    overflows (e.g. with the bracket ``(-fmax, fmax)``), the interval is
    halved at ``low / 2 + high / 2`` until its width is finite, keeping
    the half where ``func`` changes sign.
    """
    low = float(low)
    high = float(high)
    config = get_config()
    xtol = config.xtol if xtol is None else xtol
    rtol = config.root_rtol if rtol is None else rtol
    maxiter = config.maxiter if maxiter is None else maxiter

    f_low = func(low)
    if f_low == 0.0:
        return low
    f_high = func(high)
    if f_high == 0.0:
        return high
    if math.isnan(f_low) or math.isnan(f_high) or _same_sign(f_low, f_high):
        _logger.debug(
            "No sign change on [%g, %g]: f(low)=%r, f(high)=%r", low, high, f_low, f_high
        )
        raise NumericFailure(
            f"[{low}, {high}] does not bracket a root: f(low)={f_low}, f(high)={f_high}."
        )

    while not math.isfinite(high - low):
        mid = low / 2 + high / 2
        f_mid = func(mid)
        if f_mid == 0.0:
            return mid
        if _same_sign(f_mid, f_low):
            low, f_low = mid, f_mid
        else:
            high, f_high = mid, f_mid

    root, r = brentq(
        func, low, high, xtol=xtol, rtol=rtol, maxiter=maxiter,
        full_output=True, disp=False,
    )
    if not r.converged:
        _logger.debug("brentq stopped after %d iterations: %s", r.iterations, r.flag)
        raise NumericFailure(
            f"Root finding on [{low}, {high}] did not converge "
            f"after {r.iterations} iterations ({r.flag})."
        )
    root = float(root)
    if math.isnan(root):
        raise NumericFailure("Root finding returned NaN.")
    return root


__all__ = ["safe_exp", "integrate", "find_root", "inf", "nan", "eps", "fmax"]
