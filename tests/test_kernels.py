import math
import unittest

import numpy as np
import pytest

from gpmusic.core import Matrix
from gpmusic.errors import KernelParameterError, ShapeError
from gpmusic.kernel import RBF, Kernel, Periodic, RationalQuadratic

KERNELS = [
    RBF(length_scale=0.7, variance=2.0),
    RationalQuadratic(length_scale=1.3, alpha=0.5, variance=2.0),
    Periodic(length_scale=0.8, periodicity=1.5, variance=2.0),
]


@pytest.mark.parametrize("k", KERNELS, ids=lambda k: type(k).__name__)
def test_self_covariance_is_variance(k):
    for x in ([0.0], [3.2], [1.0, -2.0]):
        assert k.compute(x, x) == pytest.approx(k.variance)


@pytest.mark.parametrize("k", KERNELS, ids=lambda k: type(k).__name__)
def test_compute_is_symmetric(k):
    x, y = [0.3, 1.1], [-0.4, 2.5]
    assert k.compute(x, y) == k.compute(y, x)


@pytest.mark.parametrize("k", KERNELS, ids=lambda k: type(k).__name__)
def test_call_exactly_symmetric(k):
    X = np.random.default_rng(0).uniform(-3.0, 3.0, size=(12, 2))
    K = k.call(X)
    assert isinstance(K, Matrix)
    assert K.shape == (12, 12)
    assert K == K.transpose()
    np.testing.assert_allclose(np.diag(K.to_numpy()), k.variance)


@pytest.mark.parametrize("k", KERNELS, ids=lambda k: type(k).__name__)
def test_call_matches_compute(k):
    X1 = [[0.0], [0.5], [2.0]]
    X2 = [[1.0], [-1.0]]
    K = k(X1, X2)
    assert K.shape == (3, 2)
    for i, x1 in enumerate(X1):
        for j, x2 in enumerate(X2):
            assert K.get(i, j) == pytest.approx(k.compute(x1, x2), rel=1e-12)


@pytest.mark.parametrize("k", KERNELS, ids=lambda k: type(k).__name__)
def test_diagonal(k):
    np.testing.assert_allclose(k.diagonal(np.zeros((4, 3))), [k.variance] * 4)


class TestFormulas(unittest.TestCase):
    def test_rbf(self):
        k = RBF(length_scale=2.0, variance=3.0)
        self.assertAlmostEqual(k.compute([0.0], [1.0]), 3.0 * math.exp(-1.0 / 8.0))
        self.assertAlmostEqual(k.compute([0.0, 0.0], [3.0, 4.0]), 3.0 * math.exp(-25.0 / 8.0))

    def test_rational_quadratic(self):
        k = RationalQuadratic(length_scale=1.0, alpha=2.0, variance=1.5)
        self.assertAlmostEqual(k.compute([0.0], [2.0]), 1.5 * (1.0 + 4.0 / 4.0) ** -2.0)

    def test_rational_quadratic_tends_to_rbf(self):
        rq = RationalQuadratic(length_scale=1.2, alpha=1e6)
        rbf = RBF(length_scale=1.2)
        for h in (0.1, 0.5, 1.0, 2.0):
            self.assertAlmostEqual(rq.compute([0.0], [h]), rbf.compute([0.0], [h]), places=5)

    def test_periodic(self):
        k = Periodic(length_scale=0.5, periodicity=2.0, variance=1.0)
        h = 0.3
        expected = math.exp(-2.0 * (math.sin(math.pi * h / 2.0) / 0.5) ** 2)
        self.assertAlmostEqual(k.compute([0.0], [h]), expected)
        # one full period away is perfectly correlated
        self.assertAlmostEqual(k.compute([0.0], [2.0]), 1.0)
        self.assertAlmostEqual(k.compute([0.7], [0.7 + 4.0]), 1.0)

    def test_zero_variance(self):
        k = RBF(length_scale=1.0, variance=0.0)
        self.assertEqual(k.compute([0.0], [0.0]), 0.0)


class TestParameters(unittest.TestCase):
    def test_invalid_values(self):
        bad = [
            lambda: RBF(length_scale=0.0),
            lambda: RBF(length_scale=-1.0),
            lambda: RBF(variance=-0.1),
            lambda: RBF(length_scale=float("nan")),
            lambda: RBF(variance=float("inf")),
            lambda: RBF(length_scale="long"),
            lambda: RationalQuadratic(alpha=0.0),
            lambda: Periodic(periodicity=0.0),
        ]
        for make in bad:
            with self.assertRaises(KernelParameterError):
                make()

    def test_kernel_parameter_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Periodic(periodicity=-2.0)

    def test_parameters(self):
        self.assertEqual(
            RationalQuadratic(1.0, 2.0, 3.0).parameters(),
            {"length_scale": 1.0, "alpha": 2.0, "variance": 3.0},
        )
        self.assertEqual(
            Periodic(0.5, 4.0).parameters(),
            {"length_scale": 0.5, "periodicity": 4.0, "variance": 1.0},
        )

    def test_with_parameters(self):
        k = RBF(1.0, 1.0)
        k2 = k.with_parameters(length_scale=3.0)
        self.assertEqual(k.length_scale, 1.0)
        self.assertEqual(k2, RBF(3.0, 1.0))
        with self.assertRaises(KernelParameterError):
            k.with_parameters(periodicity=2.0)
        with self.assertRaises(KernelParameterError):
            k.with_parameters(variance=-1.0)

    def test_equality_and_hash(self):
        self.assertEqual(RBF(1.0, 2.0), RBF(1, 2))
        self.assertNotEqual(RBF(1.0, 2.0), RationalQuadratic(1.0, 1.0, 2.0))
        self.assertEqual(len({RBF(1.0), RBF(1.0), Periodic()}), 2)
        self.assertEqual(repr(RBF(1.0, 2.0)), "RBF(length_scale=1.0, variance=2.0)")

    def test_abstract(self):
        with self.assertRaises(TypeError):
            Kernel()


def test_shape_errors():
    k = RBF()
    with pytest.raises(ShapeError):
        k.compute([0.0, 1.0], [0.0])
    with pytest.raises(ShapeError):
        k.call([[0.0, 1.0]], [[0.0]])


def test_one_dimensional_points():
    k = RBF()
    K = k.call([0.0, 1.0, 2.0])
    assert K.shape == (3, 3)
    assert K.get(0, 1) == pytest.approx(math.exp(-0.5))
