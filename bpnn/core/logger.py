import logging
import os
import sys


DEFAULT_LOG_FILENAME = 'train-log.txt'
DEFAULT_LOGGER_NAME = 'bpnn training'

LINE_FMT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FMT = '%Y-%m-%d %H:%M:%S'


class CoreLogger(logging.Logger):
    """ A standalone logger for training scripts that writes to a log file
    and, optionally, to stdout. Pass it to
    :meth:`bpnn.neural_network.NeuralNetwork.train` as `log`, or to
    :func:`bpnn.util.on_epoch.log_errors`. Usage::

        with CoreLogger(filename='run.txt') as log:
            network.train(X, Y, log=log)
    """
    def __init__(self, filename=None, stdout=True, level=logging.DEBUG,
                 name=DEFAULT_LOGGER_NAME):
        """
        Parameters
        ----------
        filename: str, default=None
            The log file, overwritten on creation. The default of None
            writes `train-log.txt` in the current directory.

        stdout: bool, default=True
            If True, records are echoed to stdout as well.

        level: int, default=logging.DEBUG
            The threshold level. Per-epoch training messages are DEBUG.

        name: str
            The logger's name. It is not registered with `logging`, so two
            instances never share handlers.
        """
        super().__init__(name, level=level)

        self.file = filename or os.path.join(os.path.curdir,
                                             DEFAULT_LOG_FILENAME)
        self.stdout = stdout

        handlers = [logging.FileHandler(self.file, mode='w')]
        if self.stdout:
            handlers.append(logging.StreamHandler(sys.stdout))

        formatter = logging.Formatter(fmt=LINE_FMT, datefmt=DATE_FMT)
        for handler in handlers:
            handler.setFormatter(formatter)
            self.addHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def progress(self, msg, i, n):
        """ Log `msg` at INFO prefixed with a zero-padded `(i / n)` counter
        """
        self.info("(%0*d / %d) %s", len(str(n)), i, n, msg)

    def close(self):
        """ Flush and detach all handlers (releases the log file)
        """
        for handler in list(self.handlers):
            handler.flush()
            handler.close()
            self.removeHandler(handler)
