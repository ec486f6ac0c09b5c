## parametric object algebra for paramgeom
## Copyright (c) 2026 paramgeom contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""base classes and functional interface for parametric objects

====================
OVERVIEW
====================

A parametric object is anything that can be viewed as a continuous
function of a scalar parameter: line segments, arcs, Bézier curves,
trails of segments.  This module defines the small set of operations
every such object supports, split into mixin classes so that a
concrete representation only implements what it must and inherits the
rest:

``Parametric``
    ``at_param(t)``, evaluation at a parameter.  Always required.

``DomainBounds``
    ``domain_lower()`` and ``domain_upper()``, the "interesting"
    parameter interval.  Defaults to ``[0,1]``.

``EndValues``
    ``at_start()`` and ``at_end()``, evaluation at the domain bounds.
    Representations may override with exact values, but must agree
    with the defaults to within floating point tolerance.

``Sectionable``
    ``split_at_param(t)``, ``section(t1,t2)`` and ``reverse_domain()``.
    ``split_at_param`` and ``section`` are each defined in terms of the
    other; a representation must override at least one of them.

``ArcLength``
    ``arc_length(eps)`` and ``arc_length_to_param(length,eps)``.  The
    former is required, the latter has a default search for objects
    that are also ``Sectionable``.

``Curve`` bundles all of the above and is the usual base class for a
concrete representation.

codomains
=========

Each representation declares the kind of value ``at_param`` returns
in its ``codomain`` class attribute:

* ``Codomain.ABSOLUTE``: points, absolute positions.
* ``Codomain.RELATIVE``: vectors, displacements from the start of the
  object.

The codomain fixes how the two halves of a split recombine, see
``combine_at_split()``.  After ``(l,r) = split_at_param(p,t)``, for
``u >= t``: ::

    at_param(p,u) == combine_at_split(p, at_param(l,1),
                                      at_param(r,(u-t)/(domain_upper(p)-t)))

Relative objects restart at the zero displacement when sectioned, so
the sectioning law reads ::

    at_param(p, lerp(t1,t2,s)) == combine_at_split(p, at_param(p,t1),
                                                  at_param(section(p,t1,t2),s))

which for absolute objects is plain equality.

functional interface
====================

The module level functions ``at_param()``, ``domain_bounds()``,
``section()``, ``arc_length()``, *etc.* check their argument and
dispatch to the corresponding method, raising ``ValueError`` for
objects that don't support the operation.

"""

from abc import ABC, abstractmethod
from enum import Enum
import logging
import sys

from paramgeom.geom import add, isgoodnum, lerp

logger = logging.getLogger(__name__)

## iteration cap for the default arc length search, shared by the
## bracketing and refinement phases
MAX_SEARCH_ITERATIONS = 200


class Codomain(Enum):
    """kind of value a parametric object evaluates to"""
    RELATIVE = 'relative'
    ABSOLUTE = 'absolute'


def check_epsilon(eps):
    """raise ``ValueError`` unless ``eps`` is a positive number"""
    if not isgoodnum(eps) or eps <= 0:
        raise ValueError('bad accuracy argument, must be > 0: {}'.format(eps))


def combine_at_split(x, a, b):
    """
    Combine the value ``a`` reached at the end of the left half of a
    split with the value ``b`` of the right half, according to the
    codomain of ``x``: vectors add, points replace.
    """
    if x.codomain is Codomain.RELATIVE:
        return add(a, b)
    return b


class Parametric(ABC):
    """objects that can be evaluated at a scalar parameter"""

    codomain = Codomain.ABSOLUTE

    @abstractmethod
    def at_param(self, t):
        """
        Return the value of the object at parameter ``t``.  ``t`` may
        lie outside the domain, where the result is an extrapolation
        defined by the representation.
        """


class DomainBounds(ABC):
    """objects with a bounded parameter domain, ``[0,1]`` by default"""

    def domain_lower(self):
        return 0.0

    def domain_upper(self):
        return 1.0

    def domain_bounds(self):
        """return the pair ``(domain_lower(), domain_upper())``"""
        return (self.domain_lower(), self.domain_upper())


class EndValues(Parametric, DomainBounds):
    """objects whose values at the ends of the domain can be queried"""

    def at_start(self):
        """value at the start of the domain,
        ``self.at_param(self.domain_lower())``"""
        return self.at_param(self.domain_lower())

    def at_end(self):
        """value at the end of the domain,
        ``self.at_param(self.domain_upper())``"""
        return self.at_param(self.domain_upper())


def _missing_sectioning_primitive(cls):
    return (cls.split_at_param is Sectionable.split_at_param
            and cls.section is Sectionable.section)


class Sectionable(DomainBounds):
    """
    Objects that can be split into sub-objects.  Subclasses must
    override ``split_at_param()``, ``section()``, or both.
    """

    def split_at_param(self, t):
        """
        Split the object at parameter ``t`` into ``(left, right)``,
        where ``left`` covers the parameters from ``domain_lower()`` to
        ``t`` and ``right`` those from ``t`` to ``domain_upper()``.
        Both halves are reparameterized onto the domain of the
        original.

        ``t`` may lie outside the domain.  Splitting past the upper
        bound gives a ``left`` that is the original extended to ``t``,
        and a ``right`` that travels backwards from there to the
        original end.
        """
        if _missing_sectioning_primitive(type(self)):
            raise NotImplementedError(
                '{} must override split_at_param() or section()'.format(
                    type(self).__name__))
        lower, upper = self.domain_bounds()
        return (self.section(lower, t), self.section(t, upper))

    def section(self, t1, t2):
        """
        Extract the part of the object between parameters ``t1`` and
        ``t2``, linearly reparameterized onto the original domain.

        The default splits at ``t2`` and then splits the left half at
        ``t1``.  When ``t2`` is ``domain_lower()`` the left half is
        degenerate, so the object is first split past its upper bound
        and the section is taken from the backward-travelling right
        half instead.
        """
        if _missing_sectioning_primitive(type(self)):
            raise NotImplementedError(
                '{} must override split_at_param() or section()'.format(
                    type(self).__name__))
        lower, upper = self.domain_bounds()
        if lower == upper:
            raise ValueError('section() of an empty domain: {}, {}'.format(lower, upper))
        if t2 == lower:
            # right half of a split at normalized 2 runs from 2 back to 1
            pivot = self.split_at_param(lerp(lower, upper, 2.0))[1]
            n1 = (t1 - lower) / (upper - lower)
            return pivot.section(lerp(lower, upper, 2.0 - n1), lerp(lower, upper, 2.0))
        # t1 expressed in the parameterization of the left half
        s = lerp(lower, upper, (t1 - lower) / (t2 - lower))
        left = self.split_at_param(t2)[0]
        return left.split_at_param(s)[1]

    def reverse_domain(self):
        """flip the direction of parameterization, keeping the domain"""
        lower, upper = self.domain_bounds()
        return self.section(upper, lower)


class ArcLength(Parametric):
    """objects with a notion of arc length"""

    @abstractmethod
    def arc_length(self, eps):
        """approximate the arc length over the domain, to within ``± eps``"""

    def arc_length_to_param(self, length, eps):
        """
        Convert the arc length ``length``, measured from the start of
        the domain, into a parameter, with an accuracy of ``± eps`` in
        arc length.  Any length is accepted: negative lengths and
        lengths beyond ``arc_length()`` give parameters outside the
        domain.

        The default searches over ``section()`` lengths and needs the
        object to be ``Sectionable``.
        """
        if not isinstance(self, Sectionable):
            raise NotImplementedError(
                '{} must override arc_length_to_param()'.format(type(self).__name__))
        return search_arc_length_param(self, length, eps)


class Curve(EndValues, Sectionable, ArcLength):
    """convenience base class implementing every parametric interface"""


## default arc length search
## -------------------------

## signed arc length from the start of the domain to the normalized
## parameter s, positive in the direction of the domain
def _signed_length(x, s, eps):
    if s == 0:
        return 0.0
    lower, upper = x.domain_bounds()
    l = x.section(lower, lerp(lower, upper, s)).arc_length(eps)
    return l if s > 0 else -l


def search_arc_length_param(x, length, eps):
    """
    Find the parameter of ``x`` at arc length ``length`` from
    ``domain_lower()`` by measuring sections of ``x``.  The search
    works on the domain normalized to ``[0,1]``: the bracket is grown
    outward until it contains the target, then narrowed with the
    Illinois variant of regula falsi.

    Raises ``ArithmeticError`` if no bracket or root is found within
    ``MAX_SEARCH_ITERATIONS`` steps, as happens for degenerate objects
    of zero length.
    """
    check_epsilon(eps)
    lower, upper = x.domain_bounds()
    if length == 0:
        return lower
    inner = eps / 4.0
    tol = eps / 2.0

    def f(s):
        return _signed_length(x, s, inner) - length

    if length > 0:
        lo, flo = 0.0, -length
        hi, fhi = 1.0, f(1.0)
        grow = 0
        while fhi < 0:
            if grow >= MAX_SEARCH_ITERATIONS:
                raise ArithmeticError(
                    'no parameter found for arc length {}'.format(length))
            lo, flo = hi, fhi
            hi = 2.0 * hi
            fhi = f(hi)
            grow += 1
    else:
        hi, fhi = 0.0, -length
        lo, flo = -1.0, f(-1.0)
        grow = 0
        while flo > 0:
            if grow >= MAX_SEARCH_ITERATIONS:
                raise ArithmeticError(
                    'no parameter found for arc length {}'.format(length))
            hi, fhi = lo, flo
            lo = 2.0 * lo
            flo = f(lo)
            grow += 1
    logger.debug('arc length %g bracketed in [%g, %g] after %d expansions',
                 length, lo, hi, grow)

    if abs(flo) <= tol:
        return lerp(lower, upper, lo)
    if abs(fhi) <= tol:
        return lerp(lower, upper, hi)

    side = 0
    for i in range(MAX_SEARCH_ITERATIONS):
        if fhi != flo:
            mid = (lo * fhi - hi * flo) / (fhi - flo)
        else:
            mid = 0.5 * (lo + hi)
        if not lo < mid < hi:
            mid = 0.5 * (lo + hi)
        fmid = f(mid)
        if abs(fmid) <= tol:
            logger.debug('arc length %g found at normalized parameter %g '
                         'after %d iterations', length, mid, i + 1)
            return lerp(lower, upper, mid)
        if fmid < 0:
            lo, flo = mid, fmid
            if side == -1:
                fhi /= 2.0
            side = -1
        else:
            hi, fhi = mid, fmid
            if side == 1:
                flo /= 2.0
            side = 1
        if hi - lo <= 4.0 * sys.float_info.epsilon * max(1.0, abs(mid)):
            logger.debug('arc length %g: bracket collapsed at %g', length, mid)
            return lerp(lower, upper, mid)
    raise ArithmeticError(
        'arc length search did not converge for length {}'.format(length))


## functional interface
## --------------------

def at_param(x, t):
    """
    Given a parametric object ``x`` and a parameter ``t``, return the
    value of ``x`` at ``t``.
    """
    if not isinstance(x, Parametric):
        raise ValueError('inappropriate type for at_param(): ' + str(x))
    return x.at_param(t)

def domain_lower(x):
    """lower bound of the domain of ``x``"""
    if not isinstance(x, DomainBounds):
        raise ValueError('inappropriate type for domain_lower(): ' + str(x))
    return x.domain_lower()

def domain_upper(x):
    """upper bound of the domain of ``x``"""
    if not isinstance(x, DomainBounds):
        raise ValueError('inappropriate type for domain_upper(): ' + str(x))
    return x.domain_upper()

def domain_bounds(x):
    """lower and upper bound of the domain of ``x`` as a pair"""
    if not isinstance(x, DomainBounds):
        raise ValueError('inappropriate type for domain_bounds(): ' + str(x))
    return x.domain_bounds()

def at_start(x):
    """value of ``x`` at the start of its domain"""
    if not isinstance(x, EndValues):
        raise ValueError('inappropriate type for at_start(): ' + str(x))
    return x.at_start()

def at_end(x):
    """value of ``x`` at the end of its domain"""
    if not isinstance(x, EndValues):
        raise ValueError('inappropriate type for at_end(): ' + str(x))
    return x.at_end()

def split_at_param(x, t):
    """split ``x`` at parameter ``t`` into a ``(left, right)`` pair"""
    if not isinstance(x, Sectionable):
        raise ValueError('inappropriate type for split_at_param(): ' + str(x))
    if not isgoodnum(t):
        raise ValueError('bad parameter argument passed to split_at_param(): ' + str(t))
    return x.split_at_param(t)

def section(x, t1, t2):
    """
    Given an object ``x``, create a new object spanning the interval
    ``t1`` to ``t2`` of the original, reparameterized onto the domain
    of ``x``.
    """
    if not isinstance(x, Sectionable):
        raise ValueError('inappropriate type for section(): ' + str(x))
    if not (isgoodnum(t1) and isgoodnum(t2)):
        raise ValueError('bad parameter arguments passed to section(): '
                         + str(t1) + ', ' + str(t2))
    return x.section(t1, t2)

def reverse_domain(x):
    """``x`` with its direction of parameterization flipped"""
    if not isinstance(x, Sectionable):
        raise ValueError('inappropriate type for reverse_domain(): ' + str(x))
    return x.reverse_domain()

def arc_length(x, eps):
    """arc length of ``x`` over its domain, to within ``± eps``"""
    if not isinstance(x, ArcLength):
        raise ValueError('inappropriate type for arc_length(): ' + str(x))
    check_epsilon(eps)
    return x.arc_length(eps)

def arc_length_to_param(x, length, eps):
    """parameter of ``x`` at arc length ``length`` from the start of
    its domain, to within ``± eps``"""
    if not isinstance(x, ArcLength):
        raise ValueError('inappropriate type for arc_length_to_param(): ' + str(x))
    check_epsilon(eps)
    return x.arc_length_to_param(length, eps)
