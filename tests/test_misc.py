import logging
import unittest

import numpy as np
import matplotlib.pyplot as plt

import gpmini as gm
import gpmini.num as gnp
from gpmini.config import get_config, set_max_condition_number, set_n_jobs
from gpmini.misc.series import from_series, to_series


class TestSeries(unittest.TestCase):
    def test_to_series(self):
        triples = list(to_series([0.0, 1.0], [[1.0, 2.0], [3.0, 4.0]]))
        self.assertEqual(
            triples, [(0.0, 1.0, 0), (1.0, 2.0, 0), (0.0, 3.0, 1), (1.0, 4.0, 1)]
        )

    def test_labels_and_grouping(self):
        x = gnp.linspace(0.0, 1.0, 4)
        paths = np.vstack((np.zeros(4), np.ones(4)))
        grouped = from_series(to_series(x, paths, labels=["a", "b"]))
        self.assertEqual(list(grouped), ["a", "b"])
        self.assertTrue(np.allclose(grouped["a"][0], x))
        self.assertTrue(np.allclose(grouped["b"][1], 1.0))

    def test_single_vector(self):
        triples = list(to_series([0.0, 1.0, 2.0], [5.0, 6.0, 7.0]))
        self.assertEqual(len(triples), 3)
        self.assertEqual({t[2] for t in triples}, {0})

    def test_invalid_series(self):
        # errors are raised at the call, before any iteration
        with self.assertRaises(ValueError):
            to_series([0.0, 1.0], np.zeros((2, 3)))
        with self.assertRaises(ValueError):
            to_series([0.0, 1.0], np.zeros((2, 2)), labels=["a"])
        with self.assertRaises(ValueError):
            to_series([0.0, 1.0], np.zeros((2, 2)), labels=["a", "a"])


class TestFigure(unittest.TestCase):
    def test_plotgp_and_sample_paths(self):
        from gpmini.misc.plotutils import Figure

        xi = gnp.array([-1.0, 0.5, 2.0])
        zi = gnp.array([0.3, -0.4, 1.0])
        xt = gnp.linspace(-3.0, 3.0, 30)
        model = gm.Model("squared_exp", noise_variance=0.01)
        zpm, zpv = model.predict(xi, zi, xt)
        zsim = model.posterior_sample_paths(xi, zi, xt, 3)

        fig = Figure(nrows=1, ncols=2, isinteractive=False)
        fig.plotgp(xt, zpm, zpv)
        fig.plot_sample_paths(xt, zsim, labels=["p1", "p2", "p3"])
        fig.plotdata(xi, zi)
        self.assertEqual(len(fig.ax.get_lines()), 5)
        fig.subplot(2)
        fig.imshow(model.prior(xt)[1])
        with self.assertRaises(ValueError):
            fig.plotgp(xt, zpm, zpv, colorscheme="rainbow")
        fig.close()
        plt.close("all")


class TestConfig(unittest.TestCase):
    def test_version(self):
        self.assertEqual(gm.__version__, get_config().version)
        self.assertIn(gm.__version__, repr(get_config()))

    def test_update(self):
        config = get_config()
        with self.assertRaises(AttributeError):
            config.update(not_an_entry=1)
        previous = config.seed
        config.update(seed=7)
        self.assertEqual(config.seed, 7)
        config.update(seed=previous)

    def test_dtype(self):
        config = get_config()
        self.assertIs(config.dtype_resolved, np.dtype(config.dtype).type)
        self.assertEqual(gnp.zeros(2).dtype, config.dtype_resolved)
        self.assertEqual(gnp.array([1.0, 2.0]).dtype, config.dtype_resolved)

    def test_setters(self):
        with self.assertRaises(ValueError):
            set_n_jobs(0)
        with self.assertRaises(ValueError):
            set_max_condition_number(1.0)

    def test_logger(self):
        logger = gm.config.get_logger()
        self.assertEqual(logger.name, "gpmini")
        previous = logger.level
        gm.config.set_log_level("WARNING")
        self.assertEqual(logger.level, logging.WARNING)
        logger.setLevel(previous)
        with self.assertLogs("gpmini", level="DEBUG") as cm:
            with self.assertRaises(gm.core.SingularCovarianceError):
                gm.core.posterior("squared_exp", [0.0, 0.0], [1.0, 1.0], [0.5])
        self.assertTrue(any("jitter" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
