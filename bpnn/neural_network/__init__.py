# flake8: noqa

from .neural_network import NeuralNetwork
