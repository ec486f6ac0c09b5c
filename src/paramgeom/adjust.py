## length adjustment of parametric objects
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

"""growing and shrinking parametric objects

``adjust()`` lengthens or shortens a segment, arc, curve or trail at
its start, its end, or both.  How much is controlled by an
``AdjustOptions`` record: ::

    from paramgeom.adjust import adjust, AdjustOptions, AdjustSide, ToAbsolute

    longer = adjust(seg, AdjustOptions(ToAbsolute(10.0), AdjustSide.END, 1e-10))

The default options, ``AdjustOptions.default()``, extend by a
parameter amount of 0.2 split evenly between both ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Union

from paramgeom.parametric import (
    ArcLength,
    Sectionable,
    check_epsilon,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByParam:
    """Extend by the parameter amount ``delta``, shrink if negative."""
    delta: float


@dataclass(frozen=True)
class ByAbsolute:
    """Extend by the arc length ``length``, shrink if negative."""
    length: float


@dataclass(frozen=True)
class ToAbsolute:
    """Extend or shrink until the arc length is ``length``."""
    length: float


AdjustMethod = Union[ByParam, ByAbsolute, ToAbsolute]


class AdjustSide(Enum):
    """which end of an object to adjust"""
    START = 'start'
    END = 'end'
    BOTH = 'both'


@dataclass(frozen=True)
class AdjustOptions:
    """
    How to adjust an object: the ``method``, the ``side`` it applies
    to, and the accuracy ``epsilon`` of the arc length computations.

    ``AdjustOptions.default()`` is ``AdjustOptions(ByParam(0.2),
    AdjustSide.BOTH, 1e-10)``.
    """
    method: AdjustMethod
    side: AdjustSide
    epsilon: float

    def __post_init__(self):
        if not isinstance(self.method, (ByParam, ByAbsolute, ToAbsolute)):
            raise ValueError('bad adjust method: {}'.format(self.method))
        if not isinstance(self.side, AdjustSide):
            raise ValueError('bad adjust side: {}'.format(self.side))
        check_epsilon(self.epsilon)

    @classmethod
    def default(cls) -> 'AdjustOptions':
        return cls(ByParam(0.2), AdjustSide.BOTH, 1e-10)


DEFAULT_ADJUST_OPTIONS = AdjustOptions.default()


def adjust(x, opts: AdjustOptions = DEFAULT_ADJUST_OPTIONS):
    """
    Return a copy of the sectionable object ``x`` with one or both ends
    moved according to ``opts``.  Positive ``ByParam``/``ByAbsolute``
    amounts extend an end outward, negative amounts shrink it.
    ``ToAbsolute`` computes the amount needed to reach the requested
    arc length.  With ``AdjustSide.BOTH`` each end takes half.

    The end positions are found on ``x`` for the start and on
    ``x.reverse_domain()`` for the end, then ``x`` is sectioned
    between them.
    """
    if not isinstance(x, Sectionable):
        raise ValueError('inappropriate type for adjust(): ' + str(x))
    method = opts.method
    if isinstance(method, (ByAbsolute, ToAbsolute)) and not isinstance(x, ArcLength):
        raise ValueError('adjust() by arc length needs an object with arc length: '
                         + str(x))
    eps = opts.epsilon
    both_coef = 0.5 if opts.side is AdjustSide.BOTH else 1.0

    lower, upper = x.domain_bounds()

    ## parameter of the new start of seg
    def get_param(seg):
        if isinstance(method, ByParam):
            return lower - method.delta * both_coef
        if isinstance(method, ByAbsolute):
            return seg.arc_length_to_param(-method.length * both_coef, eps)
        delta = x.arc_length(eps) - method.length
        return seg.arc_length_to_param(delta * both_coef, eps)

    if opts.side is AdjustSide.END:
        new_lower = lower
    else:
        new_lower = get_param(x)
    if opts.side is AdjustSide.START:
        new_upper = upper
    else:
        # parameter s of the reversed object is upper + lower - s on x
        new_upper = upper - (get_param(x.reverse_domain()) - lower)
    logger.debug('adjust %s: section [%g, %g] of [%g, %g]',
                 opts.side.value, new_lower, new_upper, lower, upper)
    return x.section(new_lower, new_upper)
