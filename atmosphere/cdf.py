# atmosphere/cdf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Cumulative distribution functions.

This module defines the CDF capability and its implementations: numeric
engines built on a density, and closed-form CDFs of the gamma family.

Defined objects
---------------
CDF
    Abstract cumulative distribution function, ``cdf(x)`` in [0, 1]
    with NaN passthrough.
FunctionCDF, to_cdf
    Adapter from a plain callable.
NumericCDF
    CDF computed by integrating a density from a lower bound.
NumericCCDF
    Complementary CDF computed by integrating a density up to an upper
    bound.
GammaCDF, InverseGammaCDF, GeneralizedGammaCDF
    Closed-form CDFs based on the regularized incomplete gamma function.

Notes
-----
The numeric engines split the real line with a sorted sequence of
breakpoints and integrate the density over every sub-interval once, at
construction. An evaluation then costs one binary search over the
breakpoints plus one ``scipy.integrate.quad`` call, over a single
sub-interval or, beyond the outermost breakpoint, over an infinite tail,
whatever the distance between ``x`` and the anchor bound.
Engines are immutable once built and can be shared between threads.
"""

import math
from abc import ABC, abstractmethod
from itertools import accumulate
from typing import Optional, Sequence

from scipy.special import gammainc, gammaincc

from atmosphere.config import get_config, get_logger
from atmosphere.exceptions import InvalidArgumentError
from atmosphere.num import integrate, safe_exp
from atmosphere.pdf import to_pdf
from atmosphere.utils import (
    check_breakpoints,
    check_finite,
    check_positive,
    convert_to,
    count_greater,
    count_less,
)

_logger = get_logger()


class CDF(ABC):
    """Cumulative distribution function interface."""

    @abstractmethod
    def __call__(self, x: float) -> float:
        """Evaluate the CDF at ``x``."""


class FunctionCDF(CDF):
    """CDF backed by a plain callable."""

    def __init__(self, func):
        self.func = func

    def __call__(self, x: float) -> float:
        return float(self.func(x))

    def __repr__(self):
        return f"FunctionCDF({self.func!r})"


def to_cdf(func) -> CDF:
    """Convert a callable to a :class:`CDF` (CDF instances are returned as is)."""
    return convert_to(CDF, func, FunctionCDF)


# ==============================================================
#                       Numeric engines
# ==============================================================


def _check_tolerances(rtol, atol):
    config = get_config()
    rtol = float(config.rtol if rtol is None else rtol)
    atol = float(config.atol if atol is None else atol)
    if not (math.isfinite(rtol) and math.isfinite(atol)):
        raise InvalidArgumentError("rtol and atol must be finite.")
    if rtol < 0 or atol < 0:
        raise InvalidArgumentError("rtol and atol must be nonnegative.")
    if rtol == 0 and atol == 0:
        raise InvalidArgumentError("rtol and atol cannot both be zero.")
    return rtol, atol


class _NumericEngine(CDF):
    """Shared construction and evaluation logic of NumericCDF and NumericCCDF.

    Subclasses provide the sub-intervals to integrate at construction
    (``_subintervals``), the unbounded interval beyond the outermost
    breakpoint (``_outer_interval``) and the evaluation at a finite point
    (``_evaluate``). Infinite inputs are mapped to ``value_at_neginf`` and
    ``value_at_posinf`` without integrating.
    """

    value_at_neginf = 0.0
    value_at_posinf = 1.0

    def __init__(self, pdf, breakpoints, lower, upper, rtol, atol):
        self.pdf = to_pdf(pdf)
        self.rtol, self.atol = _check_tolerances(rtol, atol)
        self.breakpoints = check_breakpoints(breakpoints, lower, upper)
        self.partials = tuple(
            self._integrate(lo, hi) for lo, hi in self._subintervals()
        )
        self.outer = self._integrate(*self._outer_interval())
        _logger.debug(
            "%s: %d sub-intervals integrated, total mass %.12g",
            type(self).__name__,
            len(self.partials),
            math.fsum(self.partials + (self.outer,)),
        )

    def _integrate(self, lo: float, hi: float) -> float:
        return integrate(self.pdf, lo, hi, rtol=self.rtol, atol=self.atol)

    @abstractmethod
    def _subintervals(self):
        """Pairs ``(lo, hi)`` whose integrals are the partials."""

    @abstractmethod
    def _outer_interval(self):
        """Unbounded interval beyond the outermost breakpoint."""

    @abstractmethod
    def _evaluate(self, x: float) -> float:
        """Evaluate at a finite ``x``."""

    def __call__(self, x: float) -> float:
        x = float(x)
        if math.isnan(x):
            return math.nan
        if x == -math.inf:
            return self.value_at_neginf
        if x == math.inf:
            return self.value_at_posinf
        return self._evaluate(x)


class NumericCDF(_NumericEngine):
    """
    CDF of a density, integrated from a lower bound ``a``.

    Parameters
    ----------
    pdf : PDF or callable
        Density to integrate. Plain callables are converted with
        :func:`atmosphere.pdf.to_pdf`.
    breakpoints : sequence of float
        Non-empty, finite, strictly increasing, all greater than ``a``.
    a : float, optional
        Lower integration bound, ``-inf`` by default.
    rtol, atol : float, optional
        Integration tolerances. Default to the configuration values
        (``1e-6`` and ``0``).

    Attributes
    ----------
    breakpoints : tuple of float
        Validated breakpoints.
    partials : tuple of float
        ``partials[0]`` is the integral over ``[a, breakpoints[0]]`` and
        ``partials[i]`` the integral over
        ``[breakpoints[i-1], breakpoints[i]]``.
    outer : float
        Integral over ``[breakpoints[-1], inf]``.

    Raises
    ------
    InvalidArgumentError
        On malformed breakpoints, bound or tolerances. Validation happens
        before any integration.

    Notes
    -----
    ``cdf(x)`` sums the partials of the breakpoints strictly less than
    ``x`` and integrates the density from the last of them (or from
    ``a``) to ``x``. When ``x`` equals a breakpoint, that breakpoint's own
    partial is not in the prefix: it is recomputed by the residual
    integral, which gives the same value as the cached one.

    Beyond the last breakpoint, ``cdf(x)`` is the total cached mass minus
    the integral over ``[x, inf]``. ``quad`` maps an infinite bound onto
    a finite interval, whereas on a long bounded interval such as
    ``[breakpoints[-1], 1e6]`` it samples no point near the mass and
    returns about 0.

    ``cdf(-inf) = 0``, ``cdf(inf) = 1``, ``cdf(nan)`` is NaN and
    ``cdf(x) = 0`` for ``x <= a``.
    """

    def __init__(
        self,
        pdf,
        breakpoints: Sequence[float],
        a: float = -math.inf,
        rtol: Optional[float] = None,
        atol: Optional[float] = None,
    ):
        a = float(a)
        if math.isnan(a) or a == math.inf:
            raise InvalidArgumentError(f"Lower bound must be -inf or finite, got {a}.")
        self.a = a
        super().__init__(pdf, breakpoints, a, math.inf, rtol, atol)
        # _prefix[i] = sum(partials[:i])
        self._prefix = tuple(accumulate(self.partials, initial=0.0))

    def _subintervals(self):
        lows = (self.a,) + self.breakpoints[:-1]
        return zip(lows, self.breakpoints)

    def _outer_interval(self):
        return self.breakpoints[-1], math.inf

    def _evaluate(self, x: float) -> float:
        if x <= self.a:
            return 0.0
        i = count_less(self.breakpoints, x)
        if i == len(self.breakpoints):
            return self._prefix[i] + self.outer - self._integrate(x, math.inf)
        lo = self.breakpoints[i - 1] if i > 0 else self.a
        return self._prefix[i] + self._integrate(lo, x)

    def __repr__(self):
        return (
            f"NumericCDF(pdf={self.pdf!r}, breakpoints={list(self.breakpoints)}, "
            f"a={self.a}, rtol={self.rtol}, atol={self.atol})"
        )


class NumericCCDF(_NumericEngine):
    """
    Complementary CDF of a density, integrated up to an upper bound ``b``.

    Parameters
    ----------
    pdf : PDF or callable
        Density to integrate.
    breakpoints : sequence of float
        Non-empty, finite, strictly increasing, all less than ``b``.
    b : float, optional
        Upper integration bound, ``inf`` by default.
    rtol, atol : float, optional
        Integration tolerances.

    Attributes
    ----------
    breakpoints : tuple of float
        Validated breakpoints.
    partials : tuple of float
        ``partials[-1]`` is the integral over ``[breakpoints[-1], b]`` and
        ``partials[i]`` the integral over
        ``[breakpoints[i], breakpoints[i+1]]``.
    outer : float
        Integral over ``[-inf, breakpoints[0]]``.

    Notes
    -----
    ``ccdf(x)`` sums the partials of the breakpoints strictly greater than
    ``x`` and integrates the density from ``x`` to the first of them (or
    to ``b``). Before the first breakpoint, it is the total cached mass
    minus the integral over ``[-inf, x]``.

    ``ccdf(-inf) = 1``, ``ccdf(inf) = 0``, ``ccdf(nan)`` is NaN and
    ``ccdf(x) = 0`` for ``x >= b``. The infinite-input values are the
    class attributes ``value_at_neginf`` and ``value_at_posinf``.
    """

    value_at_neginf = 1.0
    value_at_posinf = 0.0

    def __init__(
        self,
        pdf,
        breakpoints: Sequence[float],
        b: float = math.inf,
        rtol: Optional[float] = None,
        atol: Optional[float] = None,
    ):
        b = float(b)
        if math.isnan(b) or b == -math.inf:
            raise InvalidArgumentError(f"Upper bound must be inf or finite, got {b}.")
        self.b = b
        super().__init__(pdf, breakpoints, -math.inf, b, rtol, atol)
        # _suffix[k] = sum(partials[k:])
        self._suffix = tuple(reversed(tuple(accumulate(reversed(self.partials), initial=0.0))))

    def _subintervals(self):
        highs = self.breakpoints[1:] + (self.b,)
        return zip(self.breakpoints, highs)

    def _outer_interval(self):
        return -math.inf, self.breakpoints[0]

    def _evaluate(self, x: float) -> float:
        if x >= self.b:
            return 0.0
        k = len(self.breakpoints) - count_greater(self.breakpoints, x)
        if k == 0:
            return self._suffix[0] + self.outer - self._integrate(-math.inf, x)
        hi = self.breakpoints[k] if k < len(self.breakpoints) else self.b
        return self._suffix[k] + self._integrate(x, hi)

    def __repr__(self):
        return (
            f"NumericCCDF(pdf={self.pdf!r}, breakpoints={list(self.breakpoints)}, "
            f"b={self.b}, rtol={self.rtol}, atol={self.atol})"
        )


# ==============================================================
#                     Closed-form CDFs
# ==============================================================


class GammaCDF(CDF):
    """Gamma CDF, ``P(shape, x / scale)``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)

    def __call__(self, x: float) -> float:
        x = float(x)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        return float(gammainc(self.shape, x / self.scale))


class InverseGammaCDF(CDF):
    """Inverse-gamma CDF, ``Q(shape, scale / x)``."""

    def __init__(self, shape: float, scale: float):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)

    def __call__(self, x: float) -> float:
        x = float(x)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        return float(gammaincc(self.shape, self.scale / x))


class GeneralizedGammaCDF(CDF):
    """
    Generalized gamma CDF.

    Parameters
    ----------
    shape : float
        Shape parameter, positive.
    power : float
        Power parameter, finite and non-zero.
    scale : float, optional
        Scale parameter, positive.

    Notes
    -----
    ``P(shape, (x/scale)^power)`` for a positive power and
    ``Q(shape, (x/scale)^power)`` for a negative one, so that the CDF is
    increasing in both cases.
    """

    def __init__(self, shape: float, power: float, scale: float = 1.0):
        self.shape = check_positive("shape", shape)
        self.power = check_finite("power", power)
        if self.power == 0:
            raise InvalidArgumentError("power must be non-zero.")
        self.scale = check_positive("scale", scale)

    def __call__(self, x: float) -> float:
        x = float(x)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        z = x / self.scale
        if z == 0:
            return 0.0
        t = safe_exp(self.power * math.log(z))
        if self.power > 0:
            return float(gammainc(self.shape, t))
        return float(gammaincc(self.shape, t))


__all__ = [
    "CDF",
    "FunctionCDF",
    "to_cdf",
    "NumericCDF",
    "NumericCCDF",
    "GammaCDF",
    "InverseGammaCDF",
    "GeneralizedGammaCDF",
]
