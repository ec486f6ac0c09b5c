"""Straight segments for paramgeom.

``Line`` is a segment between two points, evaluating to absolute
positions.  ``Offset`` is a straight displacement, evaluating to
vectors relative to its own start.  Both are parameterized over
``[0, 1]`` and extrapolate linearly outside it.
"""

from __future__ import annotations

from paramgeom.geom import (
    dist,
    mag,
    point,
    scale3,
    vector,
    vlerp,
    vstr,
)
from paramgeom.parametric import Codomain, Curve, check_epsilon


class Line(Curve):
    """Straight segment from ``start`` to ``end``."""

    codomain = Codomain.ABSOLUTE

    def __init__(self, start, end):
        self._start = point(start)
        self._end = point(end)

    def __repr__(self):
        return f"Line({vstr(self._start)}, {vstr(self._end)})"

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((tuple(self._start), tuple(self._end)))

    @property
    def start(self):
        return point(self._start)

    @property
    def end(self):
        return point(self._end)

    def at_param(self, t):
        return vlerp(self._start, self._end, t)

    def at_start(self):
        return point(self._start)

    def at_end(self):
        return point(self._end)

    def section(self, t1, t2):
        return Line(self.at_param(t1), self.at_param(t2))

    def arc_length(self, eps):
        return dist(self._start, self._end)

    def arc_length_to_param(self, length, eps):
        check_epsilon(eps)
        l = dist(self._start, self._end)
        if l == 0:
            if length == 0:
                return 0.0
            raise ArithmeticError('zero-length line has no parameter for arc length {}'.format(length))
        return length / l


class Offset(Curve):
    """Straight displacement ``v``, relative to wherever it starts."""

    codomain = Codomain.RELATIVE

    def __init__(self, v):
        self._v = vector(v)

    def __repr__(self):
        return f"Offset({vstr(self._v)})"

    def __eq__(self, other):
        if not isinstance(other, Offset):
            return NotImplemented
        return self._v == other._v

    def __hash__(self):
        return hash(tuple(self._v))

    @property
    def v(self):
        return vector(self._v)

    def at_param(self, t):
        return scale3(self._v, t)

    def split_at_param(self, t):
        return (Offset(scale3(self._v, t)), Offset(scale3(self._v, 1.0 - t)))

    def arc_length(self, eps):
        return mag(self._v)

    def arc_length_to_param(self, length, eps):
        check_epsilon(eps)
        l = mag(self._v)
        if l == 0:
            if length == 0:
                return 0.0
            raise ArithmeticError('zero offset has no parameter for arc length {}'.format(length))
        return length / l
