import numpy

from bpnn.core.exception import DimensionMismatch


def _as_pair(predictions, targets):
    predictions = numpy.atleast_1d(numpy.asarray(predictions, dtype=float))
    targets = numpy.atleast_1d(numpy.asarray(targets, dtype=float))

    if predictions.shape != targets.shape:
        msg = "Shape of predictions {} does not match shape of targets {}"
        raise DimensionMismatch(msg.format(predictions.shape, targets.shape))

    return predictions, targets


def rmse(predictions, targets):
    """ Root of the summed squared error per pattern

    The squared errors are summed over every element and divided by the
    number of patterns (the length of the first axis) before taking the
    root. For 2d arrays of shape (n_patterns, n_outputs) this is
    :code:`sqrt(sum((predictions - targets)**2) / n_patterns)`.
    """
    predictions, targets = _as_pair(predictions, targets)
    diff = predictions - targets
    return float(numpy.sqrt((diff * diff).sum() / diff.shape[0]))


def mse(predictions, targets):
    """ Compute the mean (over all elements) of the squared error
    """
    predictions, targets = _as_pair(predictions, targets)
    diff = predictions - targets
    return float((diff * diff).mean())
