## scalar and vector operations for paramgeom
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

"""scalar and vector operations used by **paramgeom** curves

====================
OVERVIEW
====================

The ``paramgeom.geom`` module is the vector-space collaborator of the
parametric algebra in ``paramgeom.parametric``.  Curves evaluate to
the values constructed here, and the algebra only ever needs to add,
scale and interpolate them.

constants
=========

``epsilon`` is the comparison tolerance used by ``close()`` and
``vclose()``.  Redefine it at your peril.

scalars
=======

Scalars are ordinary Python3 ``int`` or ``float`` numbers.  Booleans
are not accepted as scalars, see ``isgoodnum()``.

points and vectors
==================

Values are lists of four numbers, ``[x,y,z,w]``.  The ``w`` coordinate
marks the kind of value:

* ``w == 1`` is a **point**, an absolute position, made with
  ``point()``.
* ``w == 0`` is a **vector**, a relative displacement, made with
  ``vector()``.

The kind matters when two values are combined: a point plus a vector
is a point, two vectors sum to a vector, and the difference of two
points is a vector.  All other operations ignore ``w``.

All of the following are valid values: ::

   pnt1 = point(0,0)
   pnt2 = point(2.0,-2.0,5.0)
   vec1 = vector(1,0)
   vec2 = [1.0, 2.0, 3.0, 0.0]

"""

from math import sqrt
import copy

## constants
epsilon = 0.000005

deepcopy = copy.deepcopy

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))

def close(a, b, tol=None):
    """ are two scalars the same within ``tol`` (default ``epsilon``)
    """
    if tol is None:
        tol = epsilon
    return abs(a - b) < tol

def lerp(a, b, t):
    """ linear interpolation between scalars, ``lerp(a,b,0) == a`` and
    ``lerp(a,b,1) == b``
    """
    return a + (b - a) * t

## operations on points and vectors
## --------------------------------

def vect(a=False, b=False, c=False, d=False):
    """Convenience function for making a four-element value from
    practically anything.  Unspecified ``w`` is set to 1.
    """
    r = [0, 0, 0, 1]
    if isgoodnum(a):
        r[0] = a
        if isgoodnum(b):
            r[1] = b
            if isgoodnum(c):
                r[2] = c
                if isgoodnum(d):
                    r[3] = d
    elif isinstance(a, (tuple, list)):
        for i in range(min(4, len(a))):
            x = a[i]
            if isgoodnum(x):
                r[i] = x
    return r

def isvect(x):
    """
    check to see if argument is a proper four-element value
    """
    return isinstance(x, list) and len(x) == 4 and all(isgoodnum(c) for c in x)

def point(x=False, y=False, z=False):
    """Point creation from a point, a sequence, or scalars"""
    if ispoint(x):
        return deepcopy(x)
    if isinstance(x, (tuple, list)):
        r = vect(x)
        r[3] = 1
    elif isgoodnum(x):
        r = vect(x, y if isgoodnum(y) else 0, z if isgoodnum(z) else 0, 1)
    else:
        raise ValueError('bad arguments to point(): {}'.format(x))
    return r

def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] == 1

def vector(x=False, y=False, z=False):
    """Vector (displacement) creation from a vector, a sequence, or scalars"""
    if isvector(x):
        return deepcopy(x)
    if isinstance(x, (tuple, list)):
        r = vect(x)
    elif isgoodnum(x):
        r = vect(x, y if isgoodnum(y) else 0, z if isgoodnum(z) else 0)
    else:
        raise ValueError('bad arguments to vector(): {}'.format(x))
    r[3] = 0
    return r

def isvector(x):
    """ is it a relative displacement?"""
    return isvect(x) and x[3] == 0

## w of a combination: vectors stay vectors, anything involving a
## point is a point
def _kind(wa, wb):
    return 0.0 if (wa == 0 and wb == 0) else 1.0

def add(a, b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0], a[1]+b[1], a[2]+b[2], _kind(a[3], b[3])]

def sub(a, b):
    """ 3 vector, `a - b`.  The difference of two points is a vector."""
    w = 0.0 if a[3] == b[3] else _kind(a[3], 0)
    return [a[0]-b[0], a[1]-b[1], a[2]-b[2], w]

def scale3(a, c):
    """ 3 vector, vector ``a`` times scalar ``c``"""
    return [a[0]*c, a[1]*c, a[2]*c, a[3]]

def vlerp(a, b, t):
    """ linear interpolation between two values of the same kind"""
    return [lerp(a[0], b[0], t), lerp(a[1], b[1], t),
            lerp(a[2], b[2], t), a[3]]

def dot(a, b):
    """ 3 vector dot product"""
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]

def mag(a):
    """ 3 vector magnitude"""
    return sqrt(dot(a, a))

def dist(a, b):
    """ distance between the xyz parts of ``a`` and ``b``"""
    return mag(sub(a, b))

## determine if two values are the same, to within epsilon
def vclose(a, b, tol=None):
    """ are the xyz parts of two values the same within ``tol``"""
    return close(dist(a, b), 0, tol)

def vstr(a):
    """ compact string form, dropping ``w`` and trailing zero ``z``"""
    if isvect(a):
        if a[2] == 0:
            return '[{}, {}]'.format(a[0], a[1])
        return '[{}, {}, {}]'.format(a[0], a[1], a[2])
    if isinstance(a, (list, tuple)):
        return '[' + ', '.join(vstr(x) for x in a) + ']'
    return str(a)
