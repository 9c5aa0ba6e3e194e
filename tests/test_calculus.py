import pytest

from spacetensor.calculus import (
    christoffel_partial_deriv,
    covariant_derivative,
    partial_deriv,
)
from spacetensor.tensor import Tensor


def _polar_christoffel(x):
    r = x[0]
    return Tensor(1, 2, 2, [0.0, 0.0, 0.0, -r, 0.0, 1.0 / r, 1.0 / r, 0.0])


def _polar_metric(x):
    r = x[0]
    return Tensor(0, 2, 2, [1.0, 0.0, 0.0, r * r])


def test_partial_deriv_linear_field():
    def f(x):
        return Tensor(0, 1, 2, [3.0 * x[0] + x[1], -2.0 * x[1]])

    d = partial_deriv(f, [0.7, -1.3], 1e-5)
    assert (d.upper, d.lower) == (0, 2)
    assert d.component((0, 0)) == pytest.approx(3.0, abs=1e-8)
    assert d.component((0, 1)) == pytest.approx(1.0, abs=1e-8)
    assert d.component((1, 0)) == pytest.approx(0.0, abs=1e-8)
    assert d.component((1, 1)) == pytest.approx(-2.0, abs=1e-8)


def test_partial_deriv_scalar_product():
    def f(x):
        return Tensor(0, 0, 2, [x[0] * x[1]])

    d = partial_deriv(f, [2.0, 5.0], 1e-5)
    assert d.component((0,)) == pytest.approx(5.0, abs=1e-6)
    assert d.component((1,)) == pytest.approx(2.0, abs=1e-6)


def test_partial_deriv_dimension_mismatch():
    def f(x):
        return Tensor(0, 1, 3, [0.0, 0.0, 0.0])

    with pytest.raises(ValueError):
        partial_deriv(f, [0.0, 0.0], 1e-5)


def test_partial_deriv_empty_point():
    with pytest.raises(ValueError):
        partial_deriv(lambda x: Tensor(0, 0, 1, [0.0]), [], 1e-5)


def test_christoffel_partial_deriv_polar():
    pg = christoffel_partial_deriv(_polar_christoffel, [2.0, 0.3], 1e-5)
    assert (pg.upper, pg.lower) == (1, 3)
    expected = {6: -1.0, 10: -0.25, 12: -0.25}
    for i, value in enumerate(pg.components):
        assert value == pytest.approx(expected.get(i, 0.0), abs=1e-7)


def test_christoffel_partial_deriv_rejects_wrong_rank():
    with pytest.raises(ValueError):
        christoffel_partial_deriv(lambda x: Tensor(0, 2, 2, [0.0] * 4), [1.0, 1.0], 1e-5)


def test_covariant_derivative_zero_connection_equals_partial():
    def f(x):
        return Tensor(1, 0, 2, [x[0] ** 2, x[0] * x[1]])

    point = [1.2, 0.4]
    v = f(point)
    dv = partial_deriv(f, point, 1e-5)
    zero = Tensor(1, 2, 2, [0.0] * 8)
    assert covariant_derivative(v, dv, zero) == dv


def test_metric_compatibility_polar():
    point = [2.0, 0.3]
    g = _polar_metric(point)
    dg = partial_deriv(_polar_metric, point, 1e-5)
    nabla_g = covariant_derivative(g, dg, _polar_christoffel(point))
    assert (nabla_g.upper, nabla_g.lower) == (0, 3)
    for value in nabla_g.components:
        assert value == pytest.approx(0.0, abs=1e-8)


def test_covariant_derivative_rank_mismatch():
    v = Tensor(1, 0, 2, [1.0, 0.0])
    wrong = Tensor(1, 0, 2, [0.0, 0.0])
    with pytest.raises(ValueError):
        covariant_derivative(v, wrong, Tensor(1, 2, 2, [0.0] * 8))