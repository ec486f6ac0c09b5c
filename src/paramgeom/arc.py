"""Circular arcs for paramgeom.

An ``Arc`` is a circle of ``radius`` around ``center`` in the x-y
plane, swept from the ``start`` angle to the ``end`` angle, both in
degrees.  ``end < start`` sweeps clockwise, and a sweep of more than
360 degrees wraps around the circle more than once.  The parameter
maps linearly onto the angle over ``[0, 1]``, and parameters outside
that interval keep going around the circle.
"""

from __future__ import annotations

from math import cos, pi, radians, sin

from paramgeom.geom import add, isgoodnum, point, vector, vstr
from paramgeom.geom import lerp as _lerp
from paramgeom.parametric import Codomain, Curve, check_epsilon

pi2 = 2.0 * pi


class Arc(Curve):
    """Circular arc, sampled counter-clockwise from ``start`` to ``end``
    when ``end > start``."""

    codomain = Codomain.ABSOLUTE

    def __init__(self, center, radius, start=0.0, end=360.0):
        if not isgoodnum(radius) or radius < 0:
            raise ValueError('bad radius for Arc: {}'.format(radius))
        if not (isgoodnum(start) and isgoodnum(end)):
            raise ValueError('bad angles for Arc: {}, {}'.format(start, end))
        self._center = point(center)
        self._radius = float(radius)
        self._start = float(start)
        self._end = float(end)

    def __repr__(self):
        return f"Arc({vstr(self._center)}, {self._radius}, {self._start}, {self._end})"

    def __eq__(self, other):
        if not isinstance(other, Arc):
            return NotImplemented
        return (self._center == other._center and self._radius == other._radius
                and self._start == other._start and self._end == other._end)

    def __hash__(self):
        return hash((tuple(self._center), self._radius, self._start, self._end))

    @property
    def center(self):
        return point(self._center)

    @property
    def radius(self):
        return self._radius

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def sweep(self):
        """signed angular extent in degrees"""
        return self._end - self._start

    def angle_at(self, t):
        """angle in degrees at parameter ``t``, not reduced modulo 360"""
        return _lerp(self._start, self._end, t)

    def at_param(self, t):
        a = radians(self.angle_at(t))
        q = vector(self._radius * cos(a), self._radius * sin(a))
        return add(self._center, q)

    def section(self, t1, t2):
        return Arc(self._center, self._radius, self.angle_at(t1), self.angle_at(t2))

    def arc_length(self, eps):
        return self._radius * abs(self.sweep) * pi2 / 360.0

    def arc_length_to_param(self, length, eps):
        check_epsilon(eps)
        l = self.arc_length(eps)
        if l == 0:
            if length == 0:
                return 0.0
            raise ArithmeticError('degenerate arc has no parameter for arc length {}'.format(length))
        return length / l
