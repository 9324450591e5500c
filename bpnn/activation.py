""" Elementwise nonlinearities and their derivatives.

Each derivative is written in terms of the *activation* value, i.e.,
`derivative(f(z))` gives `f'(z)`, which is all that backpropagation
needs since the forward pass already stores `f(z)`.
"""
import numpy


DEFAULT_ACTIVATION = 'tanh'

# Pre-activations are clipped to this magnitude before evaluation.
ACTIVATION_CLIP = 700.0


def tanh(z):
    """ Hyperbolic tangent, range (-1, 1)
    """
    return numpy.tanh(numpy.clip(z, -ACTIVATION_CLIP, ACTIVATION_CLIP))


def tanh_derivative(a):
    return 1.0 - a * a


def logistic(z):
    """ Logistic sigmoid, 1 / (1 + exp(-z)), range (0, 1)
    """
    z = numpy.clip(z, -ACTIVATION_CLIP, ACTIVATION_CLIP)
    return 1.0 / (1.0 + numpy.exp(-z))


def logistic_derivative(a):
    return a * (1.0 - a)


ACTIVATIONS = {
    'tanh': (tanh, tanh_derivative, (-1.0, 1.0)),
    'logistic': (logistic, logistic_derivative, (0.0, 1.0)),
}


def get_activation(name):
    """ Look up an activation by name

    Parameters
    ----------
    name: str
        One of the keys of :code:`ACTIVATIONS`.

    Returns
    -------
    function, derivative, bounds: callable, callable, 2-tuple
        The activation, its derivative in terms of the activation value,
        and the open interval the activation maps into.
    """
    try:
        return ACTIVATIONS[name]
    except KeyError:
        msg = "Unknown activation `{}`; should be one of {}"
        raise ValueError(msg.format(name, sorted(ACTIVATIONS)))
