import pytest

from paramgeom.arc import Arc
from paramgeom.bezier import CubicBezier
from paramgeom.geom import dist, lerp, point, vector, vlerp
from paramgeom.parametric import (
    ArcLength,
    Codomain,
    EndValues,
    Sectionable,
    arc_length,
    arc_length_to_param,
    at_end,
    at_param,
    at_start,
    combine_at_split,
    domain_bounds,
    domain_lower,
    domain_upper,
    reverse_domain,
    search_arc_length_param,
    section,
    split_at_param,
)
from paramgeom.segment import Line, Offset
from paramgeom.trail import Trail

## laws every parametric object must satisfy, checked against each of
## the shipped representations

EPS = 1e-8


def _close(a, b, tol=1e-6):
    assert dist(a, b) <= tol, '{} != {}'.format(a, b)


def _curves():
    return [
        Line(point(0, 0), point(3, 4)),
        Offset(vector(2, 1)),
        Arc(point(1, 1), 2.0, 30.0, 200.0),
        CubicBezier(point(0, 0), point(1, 2), point(3, 3), point(4, 0)),
        Trail([point(0, 0), point(1, 0), point(1, 2), point(3, 2)]),
    ]


CURVES = pytest.mark.parametrize('curve', _curves(), ids=repr)

## normalized parameters, mapped onto each domain
SAMPLES = [-0.5, 0.0, 0.1, 0.35, 0.5, 0.8, 1.0, 1.25]
INTERVALS = [(0.2, 0.7), (0.7, 0.2), (-0.3, 1.4), (0.0, 1.0), (1.0, 0.0)]


def _p(x, s):
    lower, upper = domain_bounds(x)
    return lerp(lower, upper, s)


## a straight line on the domain [2, 5] that only knows how to split
class SplitOnlyLine(EndValues, Sectionable):
    def __init__(self, a, b):
        self.a = a
        self.b = b

    def domain_lower(self):
        return 2.0

    def domain_upper(self):
        return 5.0

    def at_param(self, t):
        return vlerp(self.a, self.b, (t - 2.0) / 3.0)

    def split_at_param(self, t):
        m = self.at_param(t)
        return SplitOnlyLine(self.a, m), SplitOnlyLine(m, self.b)


@CURVES
def test_domain_bounds_pair(curve):
    assert domain_bounds(curve) == (domain_lower(curve), domain_upper(curve))


@CURVES
def test_end_values_match_evaluation(curve):
    _close(at_start(curve), at_param(curve, domain_lower(curve)), 1e-12)
    _close(at_end(curve), at_param(curve, domain_upper(curve)), 1e-12)


@CURVES
def test_split_law(curve):
    lower, upper = domain_bounds(curve)
    for ts in (0.3, 0.6, 1.5):
        t = _p(curve, ts)
        left, right = split_at_param(curve, t)
        assert domain_bounds(left) == domain_bounds(curve)
        assert domain_bounds(right) == domain_bounds(curve)
        for us in SAMPLES:
            u = _p(curve, us)
            if u < t:
                expect = at_param(left, lerp(lower, upper, (u - lower) / (t - lower)))
            else:
                expect = combine_at_split(
                    curve, at_param(left, upper),
                    at_param(right, lerp(lower, upper, (u - t) / (upper - t))))
            _close(at_param(curve, u), expect)


@CURVES
def test_section_law(curve):
    for ls, us in INTERVALS:
        l = _p(curve, ls)
        u = _p(curve, us)
        s = section(curve, l, u)
        assert domain_bounds(s) == domain_bounds(curve)
        start = at_param(curve, l)
        for ts in SAMPLES[1:-1]:
            expect = at_param(curve, lerp(l, u, ts))
            got = combine_at_split(curve, start, at_param(s, _p(s, ts)))
            _close(got, expect)


@CURVES
def test_reverse_twice(curve):
    rr = reverse_domain(reverse_domain(curve))
    assert domain_bounds(rr) == domain_bounds(curve)
    for ts in SAMPLES:
        _close(at_param(rr, _p(curve, ts)), at_param(curve, _p(curve, ts)))


@CURVES
def test_reverse_runs_backwards(curve):
    r = reverse_domain(curve)
    if curve.codomain is Codomain.ABSOLUTE:
        _close(at_start(r), at_end(curve))
        _close(at_end(r), at_start(curve))
    else:
        _close(at_end(r), vector(at_end(curve)[0] * -1, at_end(curve)[1] * -1))


@CURVES
def test_arc_length_round_trip(curve):
    total = arc_length(curve, EPS)
    assert total > 0
    t = arc_length_to_param(curve, total, EPS)
    assert abs(t - domain_upper(curve)) < 1e-5
    assert abs(arc_length_to_param(curve, 0.0, EPS) - domain_lower(curve)) < 1e-9


@CURVES
def test_arc_length_of_sections_adds_up(curve):
    mid = _p(curve, 0.4)
    left, right = split_at_param(curve, mid)
    total = arc_length(curve, EPS)
    assert abs(arc_length(left, EPS) + arc_length(right, EPS) - total) < 1e-6


@CURVES
def test_arc_length_to_param_extrapolates(curve):
    total = arc_length(curve, EPS)
    lower = domain_lower(curve)
    back = arc_length_to_param(curve, -0.25 * total, EPS)
    ahead = arc_length_to_param(curve, 1.25 * total, EPS)
    assert (back - lower) * (domain_upper(curve) - lower) < 0
    assert abs(arc_length(section(curve, lower, back), EPS) - 0.25 * total) < 1e-6
    assert abs(arc_length(section(curve, lower, ahead), EPS) - 1.25 * total) < 1e-6


class TestScenario:
    """the unit segment along the x axis"""

    seg = Line(point(0, 0), point(1, 0))

    def test_evaluate(self):
        assert at_param(self.seg, 0.5) == [0.5, 0.0, 0.0, 1.0]

    def test_length(self):
        assert abs(arc_length(self.seg, 1e-9) - 1.0) < 1e-9
        assert abs(arc_length_to_param(self.seg, 0.5, 1e-9) - 0.5) < 1e-9

    def test_section(self):
        _close(at_param(section(self.seg, 0, 0.5), 1.0), point(0.5, 0), 1e-12)


class TestDefaults:
    """default method bodies and the minimal definition check"""

    def test_domain_defaults(self):
        class Ray(EndValues):
            def at_param(self, t):
                return point(2 * t, 0)

        r = Ray()
        assert domain_bounds(r) == (0.0, 1.0)
        assert at_start(r) == point(0, 0)
        assert at_end(r) == point(2, 0)

    def test_missing_sectioning_primitive(self):
        class Bare(EndValues, Sectionable):
            def at_param(self, t):
                return point(t, 0)

        with pytest.raises(NotImplementedError):
            section(Bare(), 0.0, 0.5)
        with pytest.raises(NotImplementedError):
            split_at_param(Bare(), 0.5)
        with pytest.raises(NotImplementedError):
            reverse_domain(Bare())

    def test_search_needs_sectionable(self):
        class Measured(ArcLength):
            def at_param(self, t):
                return point(t, 0)

            def arc_length(self, eps):
                return 1.0

        with pytest.raises(NotImplementedError):
            arc_length_to_param(Measured(), 0.5, EPS)

    def test_derived_section_from_split(self):
        o = Offset(vector(4, 2))
        s = section(o, 0.25, 0.75)
        assert isinstance(s, Offset)
        _close(s.v, vector(2, 1), 1e-12)
        _close(reverse_domain(o).v, vector(-4, -2), 1e-9)

    @pytest.mark.parametrize('l, u', [(2.5, 4.0), (4.0, 2.5), (5.0, 2.0), (3.0, 2.0),
                                      (1.0, 6.0), (2.0, 5.0)])
    def test_derived_section_on_shifted_domain(self, l, u):
        p = SplitOnlyLine(point(1, 1), point(7, 4))
        s = section(p, l, u)
        assert domain_bounds(s) == (2.0, 5.0)
        for ts in SAMPLES:
            _close(at_param(s, lerp(2.0, 5.0, ts)), at_param(p, lerp(l, u, ts)), 1e-9)

    def test_derived_reverse_on_shifted_domain(self):
        p = SplitOnlyLine(point(1, 1), point(7, 4))
        r = reverse_domain(p)
        _close(at_start(r), point(7, 4), 1e-9)
        _close(at_end(r), point(1, 1), 1e-9)
        rr = reverse_domain(r)
        for ts in SAMPLES:
            t = lerp(2.0, 5.0, ts)
            _close(at_param(rr, t), at_param(p, t), 1e-9)

    def test_default_search_matches_closed_form(self):
        l = Line(point(0, 0), point(3, 4))
        for target in (-2.0, 0.0, 1.0, 2.5, 5.0, 12.0):
            t = search_arc_length_param(l, target, 1e-10)
            assert abs(t - l.arc_length_to_param(target, 1e-10)) < 1e-9

    def test_default_search_degenerate(self):
        l = Line(point(1, 1), point(1, 1))
        assert search_arc_length_param(l, 0.0, 1e-9) == 0.0
        with pytest.raises(ArithmeticError):
            search_arc_length_param(l, 0.5, 1e-9)


class TestFunctionalInterface:
    """argument checking in the module level functions"""

    def test_inappropriate_type(self):
        with pytest.raises(ValueError):
            at_param([point(0, 0), point(1, 1)], 0.5)
        with pytest.raises(ValueError):
            domain_bounds(point(0, 0))
        with pytest.raises(ValueError):
            section('line', 0, 1)
        with pytest.raises(ValueError):
            arc_length(42, 1e-9)

    def test_bad_parameters(self):
        l = Line(point(0, 0), point(1, 0))
        with pytest.raises(ValueError):
            section(l, 'a', 1.0)
        with pytest.raises(ValueError):
            split_at_param(l, None)

    def test_bad_epsilon(self):
        l = Line(point(0, 0), point(1, 0))
        with pytest.raises(ValueError):
            arc_length(l, 0)
        with pytest.raises(ValueError):
            arc_length_to_param(l, 0.5, -1e-9)
