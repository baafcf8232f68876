"""Gamma and upper incomplete gamma functions for half-integral arguments.

All functions take ``two_s``, twice the value of the ``s`` argument, so that
``gamma_half(3)`` is Gamma(3/2) and ``incomplete_gamma(-1, x)`` is
Gamma(-1/2, x).  Poles of the gamma function are reported as the largest
representable float, as is the singular value Gamma(0, 0).
"""

from __future__ import annotations

import math
import operator
import sys

__all__ = [
    "gamma_half",
    "incomplete_gamma",
    "incomplete_gamma_pair",
    "exponential_integral",
]

_FLOAT_MAX = sys.float_info.max
_SQRT_PI = math.sqrt(math.pi)
_EPSILON = 10.0 * sys.float_info.epsilon
_EULER_GAMMA = 0.5772156649015328606065121

# Ei(k) for k = 7, 8, ..., 50, used by the argument addition series.
_EI_TABLE = (
    1.915047433355013959531e2, 4.403798995348382689974e2, 1.037878290717089587658e3,
    2.492228976241877759138e3, 6.071406374098611507965e3, 1.495953266639752885229e4,
    3.719768849068903560439e4, 9.319251363396537129882e4, 2.349558524907683035782e5,
    5.955609986708370018502e5, 1.516637894042516884433e6, 3.877904330597443502996e6,
    9.950907251046844760026e6, 2.561565266405658882048e7, 6.612718635548492136250e7,
    1.711446713003636684975e8, 4.439663698302712208698e8, 1.154115391849182948287e9,
    3.005950906525548689841e9, 7.842940991898186370453e9, 2.049649711988081236484e10,
    5.364511859231469415605e10, 1.405991957584069047340e11, 3.689732094072741970640e11,
    9.694555759683939661662e11, 2.550043566357786926147e12, 6.714640184076497558707e12,
    1.769803724411626854310e13, 4.669055014466159544500e13, 1.232852079912097685431e14,
    3.257988998672263996790e14, 8.616388199965786544948e14, 2.280446200301902595341e15,
    6.039718263611241578359e15, 1.600664914324504111070e16, 4.244796092136850759368e16,
    1.126348290166966760275e17, 2.990444718632336675058e17, 7.943916035704453771510e17,
    2.111342388647824195000e18, 5.614329680810343111535e18, 1.493630213112993142255e19,
    3.975442747903744836007e19, 1.058563689713169096306e20,
)


def gamma_half(two_s: int) -> float:
    """Return Gamma(two_s / 2); poles give the largest float."""
    two_s = operator.index(two_s)
    if two_s <= 0 and two_s % 2 == 0:
        return _FLOAT_MAX
    if two_s > 0:
        value = 1.0 if two_s % 2 == 0 else _SQRT_PI
        for t in range(2 if two_s % 2 == 0 else 1, two_s, 2):
            value *= 0.5 * (t + 2) - 1
        return value
    value = _SQRT_PI
    for t in range(-1, two_s - 1, -2):
        value /= 0.5 * t
    return value


def _continued_fraction_ei(x: float) -> float:
    am1, a0, bm1, b0 = 1.0, 0.0, 0.0, 1.0
    a = math.exp(x)
    b = -x + 1.0
    ap1 = b * a0 + a * am1
    bp1 = b * b0 + a * bm1
    j = 1
    while abs(ap1 * b0 - a0 * bp1) > _EPSILON * abs(a0 * bp1):
        if abs(bp1) > 1.0:
            am1 = a0 / bp1
            a0 = ap1 / bp1
            bm1 = b0 / bp1
            b0 = 1.0
        else:
            am1, a0, bm1, b0 = a0, ap1, b0, bp1
        a = -float(j * j)
        b += 2.0
        ap1 = b * a0 + a * am1
        bp1 = b * b0 + a * bm1
        j += 1
    return -ap1 / bp1


def _power_series_ei(x: float) -> float:
    xn = -x
    sn = -x
    sm1 = 0.0
    hsum = 1.0
    y = 1.0
    factorial = 1.0
    while abs(sn - sm1) > _EPSILON * abs(sm1):
        sm1 = sn
        y += 1.0
        xn *= -x
        factorial *= y
        hsum += 1.0 / y
        sn += hsum * xn / factorial
    return _EULER_GAMMA + math.log(abs(x)) - math.exp(x) * sn


def _argument_addition_series_ei(x: float) -> float:
    k = int(x + 0.5)
    xx = float(k)
    dx = x - xx
    xxj = xx
    edx = math.exp(dx)
    sm = 1.0
    sn = (edx - 1.0) / xxj
    term = _FLOAT_MAX
    factorial = 1.0
    dxj = 1.0
    j = 0
    while abs(term) > _EPSILON * abs(sn):
        j += 1
        factorial *= j
        xxj *= xx
        dxj *= -dx
        sm += dxj / factorial
        term = (factorial * (edx * sm - 1.0)) / xxj
        sn += term
    return _EI_TABLE[k - 7] + sn * math.exp(xx)


def exponential_integral(x: float) -> float:
    """Return the exponential integral Ei(x); Ei(0) is the most negative float."""
    x = float(x)
    if x < -5.0:
        return _continued_fraction_ei(x)
    if x == 0.0:
        return -_FLOAT_MAX
    if x < 6.8:
        return _power_series_ei(x)
    if x < 50.0:
        return _argument_addition_series_ei(x)
    return _continued_fraction_ei(x)


def incomplete_gamma(two_s: int, x: float) -> float:
    """Return the upper incomplete gamma function Gamma(two_s / 2, x)."""
    two_s = operator.index(two_s)
    x = float(x)
    if two_s > 0:
        if two_s % 2 == 0:
            start, value = 2, math.exp(-x)
        else:
            start, value = 1, _SQRT_PI * math.erfc(math.sqrt(x))
        for t in range(start + 2, two_s + 1, 2):
            value = (0.5 * t - 1) * value + math.pow(x, 0.5 * t - 1) * math.exp(-x)
        return value
    if two_s % 2 == 0:
        start, value = 0, -exponential_integral(-x)
    else:
        start, value = 1, _SQRT_PI * math.erfc(math.sqrt(x))
    for t in range(start - 2, two_s - 1, -2):
        value = (value - math.pow(x, 0.5 * t) * math.exp(-x)) / (0.5 * t)
    return value


def incomplete_gamma_pair(two_s: int, x: float) -> tuple[float, float]:
    """Return (Gamma(two_s / 2, x), Gamma(two_s / 2 + 1, x))."""
    two_s = operator.index(two_s)
    x = float(x)
    if two_s >= 0:
        value = incomplete_gamma(two_s, x)
        return value, (0.5 * two_s) * value + math.pow(x, 0.5 * two_s) * math.exp(-x)
    upper = incomplete_gamma(two_s + 2, x)
    return (upper - math.pow(x, 0.5 * two_s) * math.exp(-x)) / (0.5 * two_s), upper