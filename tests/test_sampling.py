import unittest

import numpy as np

import gpmini as gm
import gpmini.num as gnp
from gpmini.core import (
    NotPositiveSemidefiniteError,
    conditional_sample_paths,
    covariance_factor,
    kriging_weights,
    posterior,
    sample,
    sample_paths,
)
from gpmini.kernel import kernel_names


MEAN = np.array([1.0, -2.0, 0.5])
COV = np.array([[2.0, 0.5, 0.0], [0.5, 1.0, 0.3], [0.0, 0.3, 0.5]])


class TestSample(unittest.TestCase):
    def setUp(self):
        gnp.set_seed(1234)

    def test_moments(self):
        for method in ["eigh", "chol"]:
            zsim = sample(MEAN, COV, 10000, method=method)
            self.assertEqual(zsim.shape, (10000, 3))
            self.assertTrue(np.allclose(zsim.mean(axis=0), MEAN, atol=0.06), msg=method)
            self.assertTrue(
                np.allclose(np.cov(zsim, rowvar=False), COV, atol=0.1), msg=method
            )

    def test_shapes(self):
        self.assertEqual(sample(MEAN, COV, 0).shape, (0, 3))
        self.assertEqual(sample(MEAN, COV, 1).shape, (1, 3))
        self.assertEqual(sample([], np.zeros((0, 0)), 4).shape, (4, 0))

    def test_seed_reproducibility(self):
        gnp.set_seed(42)
        z1 = sample(MEAN, COV, 5)
        gnp.set_seed(42)
        z2 = sample(MEAN, COV, 5)
        self.assertTrue((z1 == z2).all())
        self.assertEqual(gm.config.get_config().seed, 42)

    def test_degenerate_covariance(self):
        # rank one: both coordinates are the same variable
        K = np.array([[1.0, 1.0], [1.0, 1.0]])
        zsim = sample([0.0, 0.0], K, 100)
        self.assertTrue(np.allclose(zsim[:, 0], zsim[:, 1]))
        zsim = sample([3.0, 3.0], np.zeros((2, 2)), 10)
        self.assertTrue((zsim == 3.0).all())

    def test_not_positive_semidefinite(self):
        K = np.array([[1.0, 2.0], [2.0, 1.0]])  # eigenvalues 3 and -1
        with self.assertRaises(NotPositiveSemidefiniteError):
            sample([0.0, 0.0], K, 3)
        with self.assertRaises(NotPositiveSemidefiniteError):
            sample([0.0, 0.0], K, 3, method="chol")
        with self.assertRaises(np.linalg.LinAlgError):
            sample([0.0, 0.0], K, 3)
        with self.assertLogs("gpmini", level="DEBUG") as cm:
            with self.assertRaises(NotPositiveSemidefiniteError):
                sample([0.0, 0.0], K, 3)
        self.assertTrue(any("not positive semi-definite" in line for line in cm.output))

    def test_tolerance_is_opt_in(self):
        K = np.array([[1.0, 0.0], [0.0, -1e-3]])
        with self.assertRaises(NotPositiveSemidefiniteError):
            sample([0.0, 0.0], K, 3)
        zsim = sample([0.0, 0.0], K, 3, tol=1e-2)
        self.assertTrue(np.allclose(zsim[:, 1], 0.0))

    def test_covariance_factor(self):
        for method in ["eigh", "chol"]:
            C = covariance_factor(COV, method=method)
            self.assertTrue(np.allclose(C @ C.T, COV), msg=method)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            sample(MEAN, COV[:2, :2], 3)
        with self.assertRaises(ValueError):
            sample(MEAN, np.ones((3, 2)), 3)
        with self.assertRaises(ValueError):
            sample(MEAN, COV + np.triu(np.ones((3, 3)), 1), 3)
        with self.assertRaises(ValueError):
            sample(MEAN, COV, -1)
        with self.assertRaises(TypeError):
            sample(MEAN, COV, 2.5)
        with self.assertRaises(ValueError):
            sample(MEAN, COV, 3, method="svd")
        with self.assertRaises(ValueError):
            sample(MEAN, COV, 3, tol=-1.0)


class TestSamplePaths(unittest.TestCase):
    def setUp(self):
        gnp.set_seed(1234)

    def test_prior_sample_paths(self):
        xt = gnp.linspace(-5.0, 5.0, 50)
        for name in kernel_names():
            zsim = sample_paths(name, xt, 5)
            self.assertEqual(zsim.shape, (5, 50), msg=name)
            self.assertTrue(np.all(np.isfinite(zsim)), msg=name)

    def test_conditional_paths_interpolate_data(self):
        xi = gnp.array([-4.1, -2.2, 0.0, 2.5, 4.1])
        zi = gnp.array([-2.0, 2.88, -2.96, 2.22, -3.5])
        xt = gnp.linspace(-5.0, 5.0, 20)
        xixt = np.concatenate((xi, xt))
        n = xi.shape[0]

        zsim = sample_paths("squared_exp", xixt, 7)
        lambda_t = kriging_weights("squared_exp", xi, xixt)
        zsimc = conditional_sample_paths(
            zsim, np.arange(n), zi, np.arange(xixt.shape[0]), lambda_t
        )
        self.assertEqual(zsimc.shape, (7, n + 20))
        self.assertTrue(np.allclose(zsimc[:, :n], zi, atol=1e-6))

        with self.assertRaises(ValueError):
            conditional_sample_paths(zsim, np.arange(n), zi, np.arange(3), lambda_t)

    def test_model_posterior_sample_paths(self):
        xi = gnp.array([-4.1, -2.2, 0.0, 2.5, 4.1])
        zi = gnp.array([-2.0, 2.88, -2.96, 2.22, -3.5])
        xt = gnp.linspace(-5.0, 5.0, 11)
        model = gm.Model("squared_exp", noise_variance=0.01)

        zsim = model.posterior_sample_paths(xi, zi, xt, 5000)
        self.assertEqual(zsim.shape, (5000, 11))
        zpm, zpv = model.predict(xi, zi, xt, return_type=0)
        self.assertTrue(np.allclose(zsim.mean(axis=0), zpm, atol=0.1))
        self.assertTrue(np.allclose(zsim.var(axis=0), zpv, atol=0.15))

    def test_model_posterior_sample_paths_without_data(self):
        model = gm.Model("periodic")
        zsim = model.posterior_sample_paths([], [], gnp.linspace(0.0, 1.0, 8), 3)
        self.assertEqual(zsim.shape, (3, 8))

    def test_rank_deficient_posterior_paths(self):
        xi = gnp.array([-4.1, -2.2, 0.0, 2.5, 4.1])
        zi = gnp.array([-2.0, 2.88, -2.96, 2.22, -3.5])
        xt = gnp.linspace(-5.0, 5.0, 50)
        for name in ["linear", "cos"]:
            model = gm.Model(name, jitter=1e-6)
            zsim = model.posterior_sample_paths(xi, zi, xt, 5)
            self.assertEqual(zsim.shape, (5, 50), msg=name)
            self.assertTrue(np.all(np.isfinite(zsim)), msg=name)


class TestPosteriorSample(unittest.TestCase):
    def setUp(self):
        gnp.set_seed(1234)
        self.xi = gnp.array([-4.1, -2.2, 0.0, 2.5, 4.1])
        self.zi = gnp.array([-2.0, 2.88, -2.96, 2.22, -3.5])
        self.xt = gnp.linspace(-5.0, 5.0, 50)

    def test_sample_from_posterior(self):
        # noiseless data with jitter, then noisy data
        settings = [(0.0, 0.01), (0.01, 0.0), (0.01, 1e-6)]
        for name in kernel_names():
            for noise_variance, jitter in settings:
                with self.subTest(kernel=name, noise_variance=noise_variance, jitter=jitter):
                    zpm, zpv = posterior(
                        name,
                        self.xi,
                        self.zi,
                        self.xt,
                        noise_variance=noise_variance,
                        jitter=jitter,
                    )
                    zsim = sample(zpm, zpv, 3)
                    self.assertEqual(zsim.shape, (3, 50))
                    self.assertTrue(np.all(np.isfinite(zsim)))

    def test_posterior_sample_moments(self):
        zpm, zpv = posterior("linear", self.xi, self.zi, self.xt, jitter=0.01)
        zsim = sample(zpm, zpv, 10000)
        self.assertTrue(np.allclose(zsim.mean(axis=0), zpm, atol=0.05))
        self.assertTrue(np.allclose(zsim.var(axis=0), np.diag(zpv), atol=0.05))


if __name__ == "__main__":
    unittest.main()
