import logging

import numpy


logger = logging.getLogger(__name__)

N_INPUTS = 3
N_OUTPUTS = 2


def target(X):
    """ The mapping learned in the acceptance scenario

    Parameters
    ----------
    X: ndarray, shape=(n, 3)

    Returns
    -------
    Y: ndarray, shape=(n, 2)
        :code:`Y[:, 0]` is the mean of each row and
        :code:`Y[:, 1] = X[:, 0] * X[:, 1] - X[:, 2]`.
    """
    X = numpy.asarray(X, dtype=float)
    if X.ndim != 2 or X.shape[1] != N_INPUTS:
        msg = "`X` should be shape (n, {}) but was shape {}"
        raise ValueError(msg.format(N_INPUTS, X.shape))

    return numpy.c_[X.mean(axis=1), X[:, 0] * X[:, 1] - X[:, 2]]


def make(n, rs=None):
    """
    Make `n` input/output pairs with inputs drawn uniformly from the
    unit cube.

    Parameters
    ----------
    n: int
        The number of examples.

    rs: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    X, Y : ndarray, shape=(n, 3), ndarray, shape=(n, 2)
        The inputs and their respective targets (see :func:`target`).
    """
    if n < 1:
        raise ValueError("`n` should be at least 1 but was {}".format(n))

    rs = rs if rs is not None else numpy.random.RandomState()

    X = rs.rand(n, N_INPUTS)
    logger.debug("Made %d synthetic examples", n)

    return X, target(X)
