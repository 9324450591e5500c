""" This module provides a few simple `on_epoch` functions that can be
used in the NeuralNetwork.train member function
"""


def collect_errors(error_list):
    """ Collects the training errors from the epochs. Errors are appended
    to :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        network.train(X, Y, on_epoch=[collect_errors(errors), ...])
    """

    def on_epoch(i, error):
        error_list.append(error)

    return on_epoch


def log_errors(logger, n_epochs, every=1):
    """ Report the training error every :code:`every` epochs through the
    :code:`progress` method of a
    :class:`bpnn.core.logger.CoreLogger`
    """

    def on_epoch(i, error):
        if (i + 1) % every == 0 or i + 1 == n_epochs:
            logger.progress("RMSE %.7f" % error, i + 1, n_epochs)

    return on_epoch


def plot_errors(line_kwargs=None):
    """ Plot the training error curve onto the current matplotlib axis,
    updating it on each epoch. :code:`line_kwargs` is a dictionary
    of keyword arguments that, if provided, is supplied to the `plot`
    function
    """

    import matplotlib.pyplot as plt
    kwargs = line_kwargs or {'color': 'red'}
    epochs = []
    errors = []
    line = plt.plot(epochs, errors, **kwargs)[0]
    plt.xlabel('Epoch')
    plt.ylabel('Training RMSE')

    def on_epoch(i, error):
        epochs.append(i)
        errors.append(error)

        line.set_data(epochs, errors)
        ax = line.axes
        ax.relim()
        ax.autoscale_view()
        plt.pause(0.01)

    return on_epoch
