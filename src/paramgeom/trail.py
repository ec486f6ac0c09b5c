"""Polyline trails for paramgeom.

A ``Trail`` is a chain of straight segments through a list of
vertices.  Vertex ``i`` sits at the knot parameter ``knots[i]``; by
default the knots are ``0, 1, .., n`` so that the domain of a trail of
``n`` segments is ``[0, n]`` and parameter ``k + s`` lies on segment
``k``.  Before the first knot and after the last one the trail
extrapolates along its first and last segment of non-zero length.

Sectioning keeps the domain: the vertices of the section are the
images of the original knots it crosses, placed at the knots that the
linear reparameterization maps them to.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Optional, Sequence

from paramgeom.geom import add, dist, isgoodnum, point, scale3, sub, vlerp, vstr
from paramgeom.geom import lerp as _lerp
from paramgeom.parametric import Codomain, Curve, check_epsilon


class Trail(Curve):
    """Polyline through ``vertices`` at parameters ``knots``."""

    codomain = Codomain.ABSOLUTE

    def __init__(self, vertices: Sequence, knots: Optional[Sequence[float]] = None):
        if len(vertices) < 2:
            raise ValueError('a trail needs at least two vertices: {}'.format(vertices))
        self._verts = [point(v) for v in vertices]
        if knots is None:
            knots = range(len(self._verts))
        knots = list(knots)
        if len(knots) != len(self._verts):
            raise ValueError('trail has {} vertices but {} knots'.format(
                len(self._verts), len(knots)))
        for i, k in enumerate(knots):
            if not isgoodnum(k):
                raise ValueError('bad knot value: {}'.format(k))
            if i > 0 and k <= knots[i - 1]:
                raise ValueError('trail knots must increase: {}'.format(knots))
        self._knots = [float(k) for k in knots]
        ## first and last segments of non-zero length, used to extrapolate
        moving = [i for i, l in enumerate(self.segment_lengths()) if l > 0]
        self._first = moving[0] if moving else 0
        self._last = moving[-1] if moving else len(self._verts) - 2

    def __repr__(self):
        return f"Trail({vstr(self._verts)}, {self._knots})"

    def __eq__(self, other):
        if not isinstance(other, Trail):
            return NotImplemented
        return self._verts == other._verts and self._knots == other._knots

    def __hash__(self):
        return hash((tuple(map(tuple, self._verts)), tuple(self._knots)))

    @property
    def vertices(self) -> List[list]:
        return [point(v) for v in self._verts]

    @property
    def knots(self) -> List[float]:
        return list(self._knots)

    def __len__(self):
        """number of segments"""
        return len(self._verts) - 1

    def domain_lower(self):
        return self._knots[0]

    def domain_upper(self):
        return self._knots[-1]

    ## continue from vertex j with the velocity of segment i
    def _extend(self, i, j, t):
        k0 = self._knots[i]
        k1 = self._knots[i + 1]
        rate = scale3(sub(self._verts[i + 1], self._verts[i]), 1.0 / (k1 - k0))
        return add(self._verts[j], scale3(rate, t - self._knots[j]))

    def at_param(self, t):
        if t < self._knots[0]:
            return self._extend(self._first, 0, t)
        if t > self._knots[-1]:
            return self._extend(self._last, len(self._verts) - 1, t)
        i = min(bisect_right(self._knots, t) - 1, len(self._verts) - 2)
        k0 = self._knots[i]
        k1 = self._knots[i + 1]
        return vlerp(self._verts[i], self._verts[i + 1], (t - k0) / (k1 - k0))

    def at_start(self):
        return point(self._verts[0])

    def at_end(self):
        return point(self._verts[-1])

    def section(self, t1, t2):
        lower, upper = self.domain_bounds()
        verts = [self.at_param(t1)]
        knots = [lower]
        if t1 != t2:
            inner = [k for k in self._knots if min(t1, t2) < k < max(t1, t2)]
            if t2 < t1:
                inner.reverse()
            for k in inner:
                kk = _lerp(lower, upper, (k - t1) / (t2 - t1))
                if not knots[-1] < kk < upper:
                    continue  # lost to rounding next to t1 or t2
                verts.append(point(self._verts[self._knots.index(k)]))
                knots.append(kk)
        verts.append(self.at_param(t2))
        knots.append(upper)
        return Trail(verts, knots)

    def segment_lengths(self) -> List[float]:
        return [dist(self._verts[i], self._verts[i + 1])
                for i in range(len(self._verts) - 1)]

    def arc_length(self, eps):
        return sum(self.segment_lengths())

    def arc_length_to_param(self, length, eps):
        check_epsilon(eps)
        lengths = self.segment_lengths()
        total = sum(lengths)
        ## negative lengths extrapolate along the first moving segment,
        ## anything past the end along the last one
        if length < 0 or length > total:
            if total == 0:
                raise ArithmeticError(
                    'no trail parameter for arc length {}'.format(length))
            if length < 0:
                i, k, extra = self._first, self._knots[0], length
            else:
                i, k, extra = self._last, self._knots[-1], length - total
            return k + extra * (self._knots[i + 1] - self._knots[i]) / lengths[i]
        d = 0.0
        for i, l in enumerate(lengths):
            if l > 0 and length <= d + l:
                return _lerp(self._knots[i], self._knots[i + 1], (length - d) / l)
            d += l
        return self._knots[-1]
