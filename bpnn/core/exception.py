class InvalidDimension(ValueError):
    """ Raised when a network is constructed with a layer size that is not
    a positive integer
    """


class DimensionMismatch(ValueError):
    """ Raised when an input, target, or parameter array does not have the
    shape the network was constructed with
    """


class InvalidLearningRate(ValueError):
    """ Raised when a training step is requested with a learning rate that
    is not a finite, strictly positive number
    """
