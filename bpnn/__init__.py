# flake8: noqa

from .core.exception import (
    DimensionMismatch,
    InvalidDimension,
    InvalidLearningRate,
)

from .neural_network import NeuralNetwork

# Short alias
Network = NeuralNetwork
