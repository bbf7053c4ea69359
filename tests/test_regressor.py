import unittest
import warnings

import numpy as np
import pytest
from scipy.stats import multivariate_normal

import gpmusic as gm
from gpmusic.core import GaussianProcessRegressor, negative_log_likelihood
from gpmusic.errors import (
    NotFittedError,
    NotPositiveDefiniteError,
    ParameterError,
    ShapeError,
)
from gpmusic.kernel import RBF, Periodic, RationalQuadratic

XI = [[0.0], [1.0], [2.0], [3.0], [4.0]]
ZI = [60.0, 62.0, 64.0, 65.0, 67.0]


class TestMelodyRegression(unittest.TestCase):
    def setUp(self):
        self.gp = GaussianProcessRegressor(RBF(length_scale=1.0, variance=1.0), alpha=1e-6)
        self.gp.fit(XI, ZI)

    def test_predict_at_training_point(self):
        mean, std = self.gp.predict([[2.0]], return_std=True)
        self.assertEqual(mean.shape, (1,))
        self.assertAlmostEqual(mean[0], 64.0, delta=1e-3)
        self.assertAlmostEqual(std[0], 0.0, delta=1e-2)

    def test_interpolates_all_points(self):
        mean, std = self.gp.predict(XI, return_std=True)
        np.testing.assert_allclose(mean, ZI, atol=1e-3)
        self.assertEqual(std.shape, (5,))
        np.testing.assert_allclose(std, 0.0, atol=1e-2)

    def test_std_nonnegative(self):
        xt = np.linspace(-2.0, 6.0, 161)
        res = self.gp.predict(xt, return_std=True)
        self.assertEqual(res.std.shape, (161,))
        self.assertTrue(np.all(res.std >= 0.0))
        # far from the data the posterior reverts to the prior
        self.assertAlmostEqual(self.gp.predict([[40.0]], return_std=True).std[0], 1.0, places=6)
        self.assertAlmostEqual(self.gp.predict([[40.0]]).mean[0], 0.0, places=6)

    def test_std_not_requested(self):
        res = self.gp.predict([[0.5]])
        self.assertIsNone(res.std)

    def test_posterior_covariance(self):
        xt = [[0.5], [1.5], [7.0]]
        cov = self.gp.posterior_covariance(xt)
        self.assertEqual(cov.shape, (3, 3))
        np.testing.assert_array_equal(cov, cov.T)
        std = self.gp.predict(xt, return_std=True).std
        np.testing.assert_allclose(np.diag(cov), std**2, atol=1e-10)

    def test_log_marginal_likelihood(self):
        K = RBF(1.0, 1.0).covariance(XI) + 1e-6 * np.eye(5)
        expected = multivariate_normal(mean=np.zeros(5), cov=K).logpdf(ZI)
        self.assertAlmostEqual(
            self.gp.log_marginal_likelihood(), expected, delta=1e-6 * abs(expected)
        )
        self.assertAlmostEqual(
            negative_log_likelihood(self.gp.kernel, 1e-6, XI, ZI),
            -self.gp.log_marginal_likelihood(),
        )


class TestFitInputs(unittest.TestCase):
    def test_length_mismatch(self):
        gp = GaussianProcessRegressor(RBF(), alpha=1e-6)
        with self.assertRaises(ShapeError):
            gp.fit(XI, ZI[:4])
        self.assertFalse(gp.is_fitted)

    def test_empty(self):
        gp = GaussianProcessRegressor(RBF(), alpha=1e-6)
        with self.assertRaises(ShapeError):
            gp.fit([], [])

    def test_column_mismatch_at_prediction(self):
        gp = GaussianProcessRegressor(RBF(), alpha=1e-6).fit(XI, ZI)
        with self.assertRaises(ShapeError):
            gp.predict([[0.0, 1.0]])

    def test_one_dimensional_inputs(self):
        kernel = RationalQuadratic(1.0, 2.0)
        gp1 = GaussianProcessRegressor(kernel, alpha=1e-6).fit([0, 1, 2, 3, 4], ZI)
        gp2 = GaussianProcessRegressor(kernel, alpha=1e-6).fit(XI, np.array(ZI).reshape(-1, 1))
        np.testing.assert_allclose(gp1.predict([2.5]).mean, gp2.predict([[2.5]]).mean)

    def test_fit_returns_self(self):
        gp = GaussianProcessRegressor(RBF(), alpha=1e-6)
        self.assertIs(gp.fit(XI, ZI), gp)
        self.assertTrue(gp.is_fitted)

    def test_bad_construction(self):
        with self.assertRaises(TypeError):
            GaussianProcessRegressor(lambda x, y: 0.0)
        with self.assertRaises(ParameterError):
            GaussianProcessRegressor(RBF(), alpha=-1.0)

    def test_default_alpha(self):
        gp = GaussianProcessRegressor(RBF())
        self.assertEqual(gp.alpha, gm.config.get_config().alpha)


class TestNotFitted(unittest.TestCase):
    def test_queries_before_fit(self):
        gp = GaussianProcessRegressor(RBF())
        self.assertFalse(gp.is_fitted)
        with self.assertRaises(NotFittedError):
            gp.predict([[0.0]])
        with self.assertRaises(NotFittedError):
            gp.posterior_covariance([[0.0]])
        with self.assertRaises(NotFittedError):
            gp.sample_y([[0.0]])
        with self.assertRaises(NotFittedError):
            gp.log_marginal_likelihood()


def test_failed_refit_keeps_previous_state():
    gp = GaussianProcessRegressor(RBF(), alpha=0.0).fit([0.0, 1.0, 2.0], [1.0, 2.0, 3.0])
    before = gp.predict([0.5], return_std=True)
    with pytest.raises(NotPositiveDefiniteError) as excinfo:
        gp.fit([0.0, 0.0], [1.0, 2.0])
    assert excinfo.value.index == 1
    assert "alpha" in str(excinfo.value)
    assert gp.xi.shape == (3, 1)
    after = gp.predict([0.5], return_std=True)
    np.testing.assert_array_equal(before.mean, after.mean)
    np.testing.assert_array_equal(before.std, after.std)


def test_repeated_period_needs_alpha():
    kernel = Periodic(length_scale=1.0, periodicity=1.0)
    xi = [0.0, 0.25, 1.0]
    with pytest.raises(NotPositiveDefiniteError):
        GaussianProcessRegressor(kernel, alpha=0.0).fit(xi, [0.0, 1.0, 0.0])
    assert negative_log_likelihood(kernel, 0.0, xi, [0.0, 1.0, 0.0]) == np.inf
    gp = GaussianProcessRegressor(kernel, alpha=1e-4).fit(xi, [0.0, 1.0, 0.0])
    assert np.isfinite(gp.log_marginal_likelihood())


class TestSampleY(unittest.TestCase):
    def setUp(self):
        self.gp = GaussianProcessRegressor(RBF(1.0, 1.0), alpha=1e-6).fit(
            [0.0, 2.0, 4.0], [0.0, 1.0, -1.0]
        )
        self.xt = [[1.0], [3.0], [5.0]]

    def test_shape(self):
        s = self.gp.sample_y(self.xt, n_samples=4, rng=0)
        self.assertEqual(s.shape, (4, 3))
        self.assertEqual(self.gp.sample_y(self.xt, rng=0).shape, (1, 3))

    def test_seeded_reproducibility(self):
        s1 = self.gp.sample_y(self.xt, n_samples=3, rng=123)
        s2 = self.gp.sample_y(self.xt, n_samples=3, rng=np.random.default_rng(123))
        np.testing.assert_array_equal(s1, s2)
        s3 = self.gp.sample_y(self.xt, n_samples=3, rng=124)
        self.assertFalse(np.allclose(s1, s3))

    def test_empirical_moments(self):
        n = 20000
        s = self.gp.sample_y(self.xt, n_samples=n, rng=2024)
        mean = self.gp.predict(self.xt).mean
        cov = self.gp.posterior_covariance(self.xt)
        np.testing.assert_allclose(s.mean(axis=0), mean, atol=0.05)
        np.testing.assert_allclose(np.cov(s, rowvar=False), cov, atol=0.05)

    def test_eigh_method(self):
        s = self.gp.sample_y(self.xt, n_samples=5, rng=1, method="eigh")
        self.assertEqual(s.shape, (5, 3))
        with self.assertRaises(ValueError):
            self.gp.sample_y(self.xt, rng=1, method="svd")

    def test_samples_near_training_points(self):
        s = self.gp.sample_y([[0.0], [2.0], [4.0]], n_samples=50, rng=5)
        np.testing.assert_allclose(s, np.tile([0.0, 1.0, -1.0], (50, 1)), atol=0.02)

    def test_bad_n_samples(self):
        with self.assertRaises(ParameterError):
            self.gp.sample_y(self.xt, n_samples=0)


def test_negative_variances_are_clamped():
    gp = GaussianProcessRegressor(RBF(), alpha=1e-6).fit(XI, ZI)
    with pytest.warns(RuntimeWarning):
        v = gp._check_variances(np.array([-1e-3, 0.5]), zero_neg_variances=True)
    np.testing.assert_array_equal(v, [0.0, 0.5])

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v = gp._check_variances(np.array([-1e-14, 0.5]), zero_neg_variances=False)
    assert v[0] < 0.0


def test_str_and_repr():
    gp = GaussianProcessRegressor(RBF(), alpha=1e-6)
    assert "not fitted" in str(gp)
    gp.fit(XI, ZI)
    assert "5 points" in str(gp)
    assert "GaussianProcessRegressor" in repr(gp)
