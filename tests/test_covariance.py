import unittest

import gpmini.num as gnp
from gpmini.config import get_config, set_n_jobs
from gpmini.core import covariance_matrix, covariance_matrices
from gpmini.kernel import get_kernel, kernel_names


def make_points(n=12, seed=0):
    gnp.set_seed(seed)
    return 10.0 * gnp.rand(n) - 5.0


class TestCovarianceMatrix(unittest.TestCase):
    def test_shape_and_entries(self):
        k = get_kernel("rational_quadratic")
        a = gnp.array([-1.0, 0.0, 2.0])
        b = gnp.array([0.5, 1.0, 1.5, 4.0])
        K = covariance_matrix(k, a, b)
        self.assertEqual(K.shape, (3, 4))
        for i in range(3):
            for j in range(4):
                self.assertAlmostEqual(K[i, j], k(a[i], b[j]))

    def test_symmetry(self):
        x = make_points()
        for name in ["squared_exp", "rational_quadratic", "periodic", "locally_periodic"]:
            K = covariance_matrix(get_kernel(name), x)
            self.assertTrue(gnp.allclose(K, K.T, rtol=0.0, atol=1e-12), msg=name)

    def test_y_none_means_x(self):
        x = make_points(5)
        k = get_kernel("linear")
        self.assertTrue(gnp.allclose(covariance_matrix(k, x), covariance_matrix(k, x, x)))

    def test_order_preserved(self):
        x = make_points(6)
        perm = gnp.array([3, 0, 5, 1, 4, 2])
        k = get_kernel("periodic")
        K = covariance_matrix(k, x)
        Kp = covariance_matrix(k, x[perm])
        self.assertTrue(gnp.allclose(Kp, K[perm][:, perm]))

    def test_pairwise(self):
        a = make_points(7, seed=1)
        b = make_points(7, seed=2)
        k = get_kernel("locally_periodic")
        d = covariance_matrix(k, a, b, pairwise=True)
        self.assertEqual(d.shape, (7,))
        self.assertTrue(gnp.allclose(d, gnp.diag(covariance_matrix(k, a, b))))
        with self.assertRaises(ValueError):
            covariance_matrix(k, a, b[:3], pairwise=True)

    def test_input_conversion(self):
        k = get_kernel("squared_exp")
        K1 = covariance_matrix(k, [0.0, 1.0, 2.0])
        K2 = covariance_matrix(k, gnp.array([[0.0], [1.0], [2.0]]))
        self.assertTrue(gnp.allclose(K1, K2))
        with self.assertRaises(ValueError):
            covariance_matrix(k, gnp.zeros((3, 2)))

    def test_kernel_name(self):
        x = make_points(4)
        self.assertTrue(
            gnp.allclose(
                covariance_matrix("cos", x), covariance_matrix(get_kernel("cos"), x)
            )
        )
        with self.assertRaises(TypeError):
            covariance_matrix(3.0, x)

    def test_empty(self):
        K = covariance_matrix("squared_exp", [], [1.0, 2.0])
        self.assertEqual(K.shape, (0, 2))


class TestCovarianceMatrices(unittest.TestCase):
    def test_parallel_matches_serial(self):
        x = make_points(20)
        kernels = [get_kernel(name) for name in kernel_names()]
        serial = covariance_matrices(kernels, x, n_jobs=1)
        parallel = covariance_matrices(kernels, x, n_jobs=4)
        self.assertEqual(list(serial), kernel_names())
        self.assertEqual(list(parallel), kernel_names())
        for name in kernel_names():
            self.assertTrue(gnp.allclose(serial[name], parallel[name]))
            self.assertTrue(
                gnp.allclose(serial[name], covariance_matrix(get_kernel(name), x))
            )

    def test_default_n_jobs_from_config(self):
        x = make_points(5)
        previous = get_config().n_jobs
        try:
            set_n_jobs(3)
            K = covariance_matrices(["squared_exp", "periodic"], x)
            self.assertEqual(set(K), {"squared_exp", "periodic"})
        finally:
            set_n_jobs(previous)

    def test_invalid_arguments(self):
        x = make_points(5)
        with self.assertRaises(ValueError):
            covariance_matrices(["cos", get_kernel("cos", period=1.0)], x)
        with self.assertRaises(ValueError):
            covariance_matrices(["cos"], x, n_jobs=0)


if __name__ == "__main__":
    unittest.main()
