import logging

import matplotlib.pyplot as plt
import numpy as np

from bpnn import NeuralNetwork
from bpnn.core.logger import CoreLogger
from bpnn.data import synthetic
from bpnn.util.on_epoch import log_errors, plot_errors


random_state = np.random.RandomState(1234)
logger = CoreLogger(filename='train-log.txt', level=logging.INFO)

n_epochs = 200
X, Y = synthetic.make(500, rs=random_state)

network = NeuralNetwork(3, 16, 2, rs=random_state)
network.train(
    X, Y, epochs=n_epochs,
    on_epoch=[log_errors(logger, n_epochs, every=10), plot_errors()],
    log=logger)

plt.show()
