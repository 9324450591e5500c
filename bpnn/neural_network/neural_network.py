"""
A single hidden layer neural network for regression,
trained online (one example at a time) by backpropagation.

Input (R^n) => Hidden (R^h) => Output (R^m)

Both layers apply the same bounded nonlinearity, so every
output lies within the range of the chosen activation.
"""
import logging
import numbers

import numpy

from bpnn.activation import DEFAULT_ACTIVATION, get_activation
from bpnn.core.exception import (
    DimensionMismatch, InvalidDimension, InvalidLearningRate)
from bpnn.score_functions import rmse


logger = logging.getLogger(__name__)

INIT_SCALE_FLOOR = 0.3

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_EPOCHS = 500
DEFAULT_DECAY = 0.997


def _validate_size(name, value):
    if (isinstance(value, bool) or
            not isinstance(value, numbers.Integral) or value < 1):
        msg = "`{}` should be a positive integer but was {!r}"
        raise InvalidDimension(msg.format(name, value))
    return int(value)


def _validate_learning_rate(learning_rate):
    if (isinstance(learning_rate, bool) or
            not isinstance(learning_rate, numbers.Real) or
            not numpy.isfinite(learning_rate) or learning_rate <= 0):
        msg = "`learning_rate` should be a finite number > 0 but was {!r}"
        raise InvalidLearningRate(msg.format(learning_rate))
    return float(learning_rate)


def _as_vector(name, arr, size):
    try:
        vec = numpy.asarray(arr, dtype=float)
    except (TypeError, ValueError):
        msg = "`{}` could not be converted to a vector of floats"
        raise DimensionMismatch(msg.format(name))

    if vec.shape != (size,):
        msg = "`{}` should be shape ({},) but was shape {}"
        raise DimensionMismatch(msg.format(name, size, vec.shape))
    return vec


def _as_matrix(name, arr, n_cols):
    try:
        mat = numpy.asarray(arr, dtype=float)
    except (TypeError, ValueError):
        msg = "`{}` could not be converted to an array of floats"
        raise DimensionMismatch(msg.format(name))

    if mat.ndim != 2 or mat.shape[1] != n_cols or mat.shape[0] == 0:
        msg = "`{}` should be shape (n_samples, {}) but was shape {}"
        raise DimensionMismatch(msg.format(name, n_cols, mat.shape))
    return mat


class NeuralNetwork:
    """
    Single hidden layer neural network with a bounded activation applied
    at both the hidden and the output layer.

    params: W1, where W1[j, i] = weight from input i to hidden unit j.
            b1, where b1[j] = bias into hidden unit j.
            W2, where W2[k, j] = weight from hidden unit j to output k.
            b2, where b2[k] = bias into output unit k.

    For a single vector input, the computation chain is::

        a1 = f(dot(W1, input) + b1)
        output = f(dot(W2, a1) + b2)

    Note
    ----
    The network holds no lock. Calls that modify the parameters
    (`refine`, `train`, `set_params`, `randomize_params`) must not
    overlap with each other or with `predict`/`loss` on the same
    instance; serialize such calls externally. Concurrent `predict`
    and `loss` calls are safe.
    """
    def __init__(self, input_size, hidden_size, output_size, rs=None,
                 activation=DEFAULT_ACTIVATION):
        """
        Parameters
        ----------
        input_size: int
            Number of input units.

        hidden_size: int
            Number of hidden units.

        output_size: int
            Number of output units.

        rs: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results. It is
            used for parameter initialization and for shuffling in
            :meth:`train`.

        activation: str, default='tanh'
            Name of the nonlinearity in :code:`bpnn.activation.ACTIVATIONS`
        """
        self._input_size = _validate_size('input_size', input_size)
        self._hidden_size = _validate_size('hidden_size', hidden_size)
        self._output_size = _validate_size('output_size', output_size)

        self.activation = activation
        self._f, self._df, self.bounds = get_activation(activation)

        self.rs = numpy.random.RandomState() if rs is None else rs

        # This both intializes and randomizes.
        self.randomize_params()

    def __repr__(self):
        return "<NeuralNetwork input_size=%d, hidden_size=%d, " \
               "output_size=%d>" % (self.input_size, self.hidden_size,
                                    self.output_size)

    @property
    def input_size(self):
        return self._input_size

    @property
    def hidden_size(self):
        return self._hidden_size

    @property
    def output_size(self):
        return self._output_size

    def randomize_params(self):
        """
        Randomize the model parameters with IID Gaussian random variables.
        Each layer's weights and biases are scaled by
        `max(INIT_SCALE_FLOOR, 1 / n_inputs_to_layer)`.
        """
        scale1 = max(INIT_SCALE_FLOOR, 1.0 / self.input_size)
        scale2 = max(INIT_SCALE_FLOOR, 1.0 / self.hidden_size)

        self.W1 = scale1 * self.rs.randn(self.hidden_size, self.input_size)
        self.b1 = scale1 * self.rs.randn(self.hidden_size)
        self.W2 = scale2 * self.rs.randn(self.output_size, self.hidden_size)
        self.b2 = scale2 * self.rs.randn(self.output_size)

    def get_params(self, flat=False):
        """
        Parameters
        ----------
        flat: bool, default=False
            If True, the parameters are flattened into a single array.

        Returns
        -------
        params: list or array
            If `flat` is False (default), then copies of the parameters
            are returned as [W1, b1, W2, b2]. Otherwise, these are
            flattened into a single array and returned.
        """
        if flat:
            return numpy.hstack([p.ravel() for p in self.get_params()])
        else:
            return [self.W1.copy(), self.b1.copy(),
                    self.W2.copy(), self.b2.copy()]

    def set_params(self, W1, b1, W2, b2):
        """
        Set the parameter values to (copies of) those provided in the
        arguments. Nothing is changed unless all four have the right shape.
        """
        expected = [
            ('W1', W1, (self.hidden_size, self.input_size)),
            ('b1', b1, (self.hidden_size,)),
            ('W2', W2, (self.output_size, self.hidden_size)),
            ('b2', b2, (self.output_size,)),
        ]

        params = []
        for name, value, shape in expected:
            value = numpy.array(value, dtype=float)
            if value.shape != shape:
                msg = "`{}` should be shape {} but was shape {}"
                raise DimensionMismatch(msg.format(name, shape, value.shape))
            params.append(value)

        self.W1, self.b1, self.W2, self.b2 = params

    def _forward(self, x):
        a1 = self._f(numpy.dot(self.W1, x) + self.b1)
        out = self._f(numpy.dot(self.W2, a1) + self.b2)
        return a1, out

    def predict(self, x):
        """
        Parameters
        ----------
        x: array-like, shape=(input_size,)
            A single observation.

        Returns
        -------
        out: ndarray, shape=(output_size,)
            out = f(dot(W2, f(dot(W1, x) + b1)) + b2)
        """
        x = _as_vector('x', x, self.input_size)
        _, out = self._forward(x)
        return out

    def loss(self, X, Y):
        """
        Compute the squared error loss between the network's predictions
        of the rows of `X` and the rows of `Y`.

        Parameters
        ----------
        X: ndarray, shape=(nsamples, input_size)
            The input array.

        Y: ndarray, shape=(nsamples, output_size)
            The "correct" output values.

        Returns
        -------
        loss: float
            0.5 * sum((Y - predictions)**2) / nsamples
        """
        X = _as_matrix('X', X, self.input_size)
        Y = _as_matrix('Y', Y, self.output_size)
        if X.shape[0] != Y.shape[0]:
            msg = "`X` and `Y` must have same number of examples ({} != {})"
            raise DimensionMismatch(msg.format(X.shape[0], Y.shape[0]))

        diff = Y - self._predict_rows(X)
        return 0.5 * (diff * diff).sum() / X.shape[0]

    def _predict_rows(self, X):
        H = self._f(numpy.dot(X, self.W1.T) + self.b1)
        return self._f(numpy.dot(H, self.W2.T) + self.b2)

    def refine(self, x, target, learning_rate):
        """
        Present one pattern to the network and take a single stochastic
        gradient descent step on the squared error
        `0.5 * sum((target - predict(x))**2)`.

        Parameters
        ----------
        x: array-like, shape=(input_size,)
            The input pattern.

        target: array-like, shape=(output_size,)
            The desired output for `x`.

        learning_rate: float
            The step size; must be finite and strictly positive.
        """
        # Validate everything up front so a rejected call never leaves
        # the parameters partially updated.
        x = _as_vector('x', x, self.input_size)
        target = _as_vector('target', target, self.output_size)
        learning_rate = _validate_learning_rate(learning_rate)

        a1, out = self._forward(x)

        # Error terms for the output and hidden units. The hidden error
        # terms must see the pre-update W2.
        delta2 = (target - out) * self._df(out)
        delta1 = self._df(a1) * numpy.dot(self.W2.T, delta2)

        self.W2 += learning_rate * numpy.outer(delta2, a1)
        self.b2 += learning_rate * delta2

        self.W1 += learning_rate * numpy.outer(delta1, x)
        self.b1 += learning_rate * delta1

    def train(self, features, labels, learning_rate=DEFAULT_LEARNING_RATE,
              epochs=DEFAULT_EPOCHS, decay=DEFAULT_DECAY, reinitialize=True,
              on_epoch=None, log=None):
        """
        Run `epochs` passes of online training over a data set.

        Parameters
        ----------
        features: ndarray, shape=(nsamples, input_size)
            The training inputs -- examples by row.

        labels: ndarray, shape=(nsamples, output_size)
            The training outputs.

        learning_rate: float, default=0.1
            The initial step size.

        epochs: int, default=500
            Number of passes over the data. The rows are visited in a
            new random order each epoch.

        decay: float, default=0.997
            The learning rate is multiplied by `decay` after each epoch.
            A `decay` small enough that the rate reaches zero before the
            last epoch is rejected.

        reinitialize: bool, default=True
            If True, the parameters are randomized before training.

        on_epoch: callable or list of callables, default=None
            Called as :code:`callback(epoch, rmse)` after each epoch where
            `rmse` is the root-mean-squared error over the training set.
            See :code:`bpnn.util.on_epoch`.

        log: logging.Logger, default=None
            Where the start, per-epoch (DEBUG), and end messages go, e.g.,
            a :class:`bpnn.core.logger.CoreLogger`. The default uses this
            module's logger.

        Returns
        -------
        errors: ndarray, shape=(epochs,)
            The training RMSE after each epoch.
        """
        features = _as_matrix('features', features, self.input_size)
        labels = _as_matrix('labels', labels, self.output_size)
        if features.shape[0] != labels.shape[0]:
            msg = ("`features` and `labels` must have same number of "
                   "examples ({} != {})")
            raise DimensionMismatch(
                msg.format(features.shape[0], labels.shape[0]))

        learning_rate = _validate_learning_rate(learning_rate)

        if (isinstance(epochs, bool) or
                not isinstance(epochs, numbers.Integral) or epochs < 1):
            raise ValueError("`epochs` should be a positive integer")
        if (isinstance(decay, bool) or
                not isinstance(decay, numbers.Real) or not 0 < decay <= 1):
            raise ValueError("`decay` should be a number in (0, 1]")

        # The rate used in the last epoch must still be a valid step size;
        # repeated products are checked exactly as the loop computes them.
        final_rate = learning_rate
        for _ in range(epochs - 1):
            final_rate *= decay
            if final_rate <= 0:
                msg = ("`learning_rate` {!r} decays to zero within {} epochs "
                       "with `decay` {!r}")
                raise ValueError(msg.format(learning_rate, epochs, decay))

        log = logger if log is None else log

        if on_epoch is None:
            on_epoch = []
        elif callable(on_epoch):
            on_epoch = [on_epoch]

        if reinitialize:
            self.randomize_params()

        nsamples = features.shape[0]
        errors = numpy.zeros(epochs)

        log.info("Training on %d examples for %d epochs",
                    nsamples, epochs)

        for epoch in range(epochs):
            for index in self.rs.permutation(nsamples):
                self.refine(features[index], labels[index], learning_rate)

            learning_rate *= decay

            errors[epoch] = rmse(self._predict_rows(features), labels)
            log.debug("Epoch %d, learning rate %.7f, RMSE %.7f",
                         epoch, learning_rate, errors[epoch])

            for callback in on_epoch:
                callback(epoch, errors[epoch])

        log.info("Finished training, final RMSE %.7f", errors[-1])

        return errors
