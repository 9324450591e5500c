import os
import shutil
import tempfile
import unittest
import warnings

import numpy

from bpnn.core.logger import CoreLogger
from bpnn.data import synthetic
from bpnn.neural_network import NeuralNetwork
from bpnn.util.on_epoch import collect_errors, log_errors, plot_errors


class TestOnEpoch(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_collect_errors(self):

        errors = []
        on_epoch = collect_errors(errors)

        on_epoch(0, 0.5)
        on_epoch(1, 0.25)

        self.assertEqual([0.5, 0.25], errors)

    def test_log_errors(self):

        filename = os.path.join(self.tmp_dir, 'log.txt')
        logger = CoreLogger(filename=filename, stdout=False)

        try:
            on_epoch = log_errors(logger, n_epochs=10, every=4)
            for i in range(10):
                on_epoch(i, 0.1 * i)
        finally:
            logger.close()

        with open(filename) as f:
            lines = f.read().splitlines()

        # Epochs 4, 8 and the last one are reported
        self.assertEqual(3, len(lines))
        self.assertTrue(lines[0].endswith("(04 / 10) RMSE 0.3000000"))
        self.assertTrue(lines[2].endswith("(10 / 10) RMSE 0.9000000"))

    def test_plot_errors(self):

        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        rs = numpy.random.RandomState(1234)
        X, Y = synthetic.make(20, rs=rs)
        net = NeuralNetwork(3, 4, 2, rs=rs)

        with warnings.catch_warnings():
            # Non-interactive backends warn that figures cannot be shown
            warnings.simplefilter('ignore')
            errors = net.train(X, Y, epochs=3, on_epoch=plot_errors())

        line = plt.gca().get_lines()[0]
        self.assertTrue(numpy.allclose(errors, line.get_ydata()))
        plt.close('all')


if __name__ == '__main__':
    unittest.main()
