import numpy as np

from bpnn import NeuralNetwork
from bpnn.core.logger import CoreLogger
from bpnn.data import synthetic
from bpnn.score_functions import rmse


random_state = np.random.RandomState(1234)
logger = CoreLogger(filename='train-log.txt')


# Create a toy dataset ########################################################

n_steps = 100000
X, Y = synthetic.make(n_steps, rs=random_state)

# Train online, one example at a time #########################################

network = NeuralNetwork(3, 16, 2, rs=random_state)

for i, (x, y) in enumerate(zip(X, Y)):
    network.refine(x, y, learning_rate=0.02)

    if (i + 1) % 10000 == 0:
        logger.progress("refine steps done", i + 1, n_steps)

# Evaluate on fresh samples ###################################################

X_test, Y_test = synthetic.make(100, rs=random_state)
predictions = np.array([network.predict(x) for x in X_test])

logger.info("Test RMSE: %.5f" % rmse(predictions, Y_test))
