"""Cubic Bézier curves for paramgeom.

Provides ``CubicBezier``, a curve through absolute control points
``p0`` .. ``p3``.  Splitting is the primitive operation (de Casteljau
subdivision, valid for any parameter, including extrapolation), and
sectioning is inherited from ``Sectionable``.

Arc length has no closed form; it is the integral of the speed
``|B'(t)|``, evaluated with :func:`mpmath.quad` and refined by halving
the interval until the quadrature's own error estimate is within the
requested accuracy.  The inverse, ``arc_length_to_param``, is the
default search of :class:`paramgeom.parametric.ArcLength`.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import mpmath as mpm

from paramgeom.geom import add, point, scale3, sub, vlerp, vstr
from paramgeom.parametric import Codomain, Curve

logger = logging.getLogger(__name__)

## deepest interval halving before giving up on the quadrature
MAX_QUAD_DEPTH = 12


def _split(ctrl: List[list], t: float) -> Tuple[List[list], List[list]]:
    p0, p1, p2, p3 = ctrl
    p01 = vlerp(p0, p1, t)
    p12 = vlerp(p1, p2, t)
    p23 = vlerp(p2, p3, t)
    p012 = vlerp(p01, p12, t)
    p123 = vlerp(p12, p23, t)
    m = vlerp(p012, p123, t)
    return [point(p0), p01, p012, m], [point(m), p123, p23, point(p3)]


class CubicBezier(Curve):
    """Cubic Bézier curve with absolute control points."""

    codomain = Codomain.ABSOLUTE

    def __init__(self, p0, p1, p2, p3):
        self._ctrl = [point(p0), point(p1), point(p2), point(p3)]

    def __repr__(self):
        return "CubicBezier({})".format(", ".join(vstr(p) for p in self._ctrl))

    def __eq__(self, other):
        if not isinstance(other, CubicBezier):
            return NotImplemented
        return self._ctrl == other._ctrl

    def __hash__(self):
        return hash(tuple(map(tuple, self._ctrl)))

    @property
    def control_points(self) -> List[list]:
        return [point(p) for p in self._ctrl]

    def at_param(self, t):
        p0, p1, p2, p3 = self._ctrl
        s = 1.0 - t
        r = scale3(p0, s * s * s)
        r = add(r, scale3(p1, 3.0 * s * s * t))
        r = add(r, scale3(p2, 3.0 * s * t * t))
        r = add(r, scale3(p3, t * t * t))
        r[3] = 1.0
        return r

    def at_start(self):
        return point(self._ctrl[0])

    def at_end(self):
        return point(self._ctrl[3])

    def derivative(self, t):
        """first derivative ``B'(t)`` as a vector"""
        p0, p1, p2, p3 = self._ctrl
        s = 1.0 - t
        d = scale3(sub(p1, p0), 3.0 * s * s)
        d = add(d, scale3(sub(p2, p1), 6.0 * s * t))
        return add(d, scale3(sub(p3, p2), 3.0 * t * t))

    def split_at_param(self, t):
        left, right = _split(self._ctrl, t)
        return CubicBezier(*left), CubicBezier(*right)

    def _speed(self, t):
        d = self.derivative(t)
        return mpm.sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2])

    def _length(self, a, b, eps, depth):
        val, err = mpm.quad(self._speed, [a, b], error=True)
        if err <= eps:
            return float(val)
        if depth >= MAX_QUAD_DEPTH:
            raise ArithmeticError(
                'arc length on [{}, {}] not within {} after {} halvings, error {}'.format(
                    float(a), float(b), float(eps), depth, float(err)))
        logger.debug('quadrature on [%g, %g] error %g, halving', a, b, float(err))
        m = 0.5 * (a + b)
        return (self._length(a, m, eps / 2.0, depth + 1)
                + self._length(m, b, eps / 2.0, depth + 1))

    def arc_length(self, eps):
        """arc length by quadrature, raising ``ArithmeticError`` if the
        error estimate cannot be brought within ``eps``"""
        return self._length(mpm.mpf(0), mpm.mpf(1), eps, 0)
