# atmosphere/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities shared by the pdf, cdf and quantile modules.

This file hosts:
- Breakpoint validation at engine construction time
- Insertion-index search over sorted breakpoints
- Conversion of plain callables to the capability classes
- Parameter checks for the closed-form families
"""
import math
from bisect import bisect_left, bisect_right
from typing import Sequence, Tuple

from atmosphere.exceptions import InvalidArgumentError


def check_breakpoints(
    breakpoints: Sequence[float],
    lower: float = -math.inf,
    upper: float = math.inf,
) -> Tuple[float, ...]:
    """Validate a breakpoint sequence and return it as a tuple of floats.

    Parameters
    ----------
    breakpoints : sequence of float
        Candidate breakpoints.
    lower, upper : float, optional
        Every breakpoint must lie in the open interval ``(lower, upper)``.

    Returns
    -------
    tuple of float
        The validated breakpoints.

    Raises
    ------
    InvalidArgumentError
        If the sequence is empty, contains a non-finite value, is not
        strictly increasing, or has a value outside ``(lower, upper)``.
    """
    try:
        bp = tuple(float(t) for t in breakpoints)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError("breakpoints must be a sequence of reals.") from exc

    if len(bp) == 0:
        raise InvalidArgumentError("breakpoints must not be empty.")
    for t in bp:
        if not math.isfinite(t):
            raise InvalidArgumentError(f"breakpoints must be finite, got {t}.")
    for left, right in zip(bp, bp[1:]):
        if not left < right:
            raise InvalidArgumentError(
                f"breakpoints must be strictly increasing, got {left} before {right}."
            )
    if not bp[0] > lower:
        raise InvalidArgumentError(
            f"breakpoints must be greater than the lower bound {lower}, got {bp[0]}."
        )
    if not bp[-1] < upper:
        raise InvalidArgumentError(
            f"breakpoints must be less than the upper bound {upper}, got {bp[-1]}."
        )
    return bp


def count_less(sorted_values: Sequence[float], x: float) -> int:
    """Number of elements strictly less than x (an equal element is not counted)."""
    return bisect_left(sorted_values, x)


def count_greater(sorted_values: Sequence[float], x: float) -> int:
    """Number of elements strictly greater than x (an equal element is not counted)."""
    return len(sorted_values) - bisect_right(sorted_values, x)


def convert_to(interface, func, adapter):
    """Return ``func`` as an instance of ``interface``.

    Instances of ``interface`` are returned unchanged; other callables are
    wrapped with ``adapter(func)``.
    """
    if isinstance(func, interface):
        return func
    if not callable(func):
        raise InvalidArgumentError(
            f"Cannot convert {type(func).__name__} to {interface.__name__}: not callable."
        )
    return adapter(func)


def check_finite(name: str, value: float) -> float:
    """Return ``value`` as a float, raising InvalidArgumentError unless it is finite."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a real number.") from exc
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}.")
    return value


def check_positive(name: str, value: float) -> float:
    """Return ``value`` as a float, raising InvalidArgumentError unless it is finite and > 0."""
    value = check_finite(name, value)
    if not value > 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}.")
    return value
