"""
Print messages about an election to the terminal depending on a verbosity level.

Works like a stripped-down ``logging.Logger`` and is meant to be used as a singleton
(:data:`output`). Messages can additionally be forwarded to a real logger.

The verbosity levels are:

- CRITICAL
- ERROR
- WARNING
- INFO
- DETAILS
- DEBUG
- DEBUG2

The default verbosity is `WARNING`, i.e., computing an election prints nothing.
"""

import logging
import textwrap

# same values as in the logging module
CRITICAL = 50
ERROR = 40
WARNING = 30
INFO = 20
DETAILS = 15
DEBUG = 10
DEBUG2 = 5

DEFAULT = WARNING

WIDTH = 70  # line width used for wrapping

VERBOSITY_TO_NAME = {
    CRITICAL: "CRITICAL",
    ERROR: "ERROR",
    WARNING: "WARNING",
    INFO: "INFO",
    DETAILS: "DETAILS",
    DEBUG: "DEBUG",
    DEBUG2: "DEBUG2",
}


class Output:
    """
    Print messages whose importance is at least the current verbosity level.

    Parameters
    ----------
        verbosity : int
            Minimum level of importance of messages to be printed, one of the constants
            defined in this module.

        logger : logging.Logger, optional
            Every message is also sent to this logger, regardless of `verbosity`.

            The logger's own level decides what ends up in the log.
    """

    def __init__(self, verbosity=DEFAULT, logger=None):
        self.verbosity = verbosity
        self.logger = logger

    def set_verbosity(self, verbosity=DEFAULT):
        """
        Set verbosity level.

        Parameters
        ----------
            verbosity : int
                Verbosity level.
        """
        self.verbosity = verbosity

    def set_logger(self, logger):
        """Attach a ``logging.Logger`` (or detach it with `None`)."""
        self.logger = logger

    def setup(self, verbosity=DEFAULT, logger=None):
        """
        Configure verbosity and logger at once.

        Parameters
        ----------
            verbosity : int
                Verbosity level.

            logger : logging.Logger, optional
                Logger receiving all messages.
        """
        self.set_verbosity(verbosity)
        self.set_logger(logger)

    def _print(self, verbosity, msg, wrap, indent):
        if verbosity >= self.verbosity:
            text = msg
            if wrap:
                text = "\n".join(
                    textwrap.fill(
                        line,
                        width=WIDTH,
                        break_long_words=False,
                        initial_indent=indent,
                        subsequent_indent=indent,
                    )
                    for line in msg.split("\n")
                )
            elif indent:
                text = "\n".join(indent + line for line in msg.split("\n"))
            print(text)

        if self.logger:
            # DETAILS and DEBUG2 are unknown to the logging module
            level = verbosity if verbosity not in (DETAILS, DEBUG2) else logging.DEBUG
            self.logger.log(level, msg)

    def debug2(self, msg, wrap=True, indent=""):
        """Print `msg` with verbosity level DEBUG2 (e.g., every score update)."""
        self._print(DEBUG2, msg, wrap, indent)

    def debug(self, msg, wrap=True, indent=""):
        """Print `msg` with verbosity level DEBUG (e.g., all scores of a round)."""
        self._print(DEBUG, msg, wrap, indent)

    def details(self, msg, wrap=True, indent=""):
        """
        Print a message with verbosity level DETAILS.

        Parameters
        ----------
            msg : str
                The message.

            wrap : bool, optional
                Wrap the message at `WIDTH` characters (if too long).

            indent : str, optional
                Indent each line with this string.
        """
        self._print(DETAILS, msg, wrap, indent)

    def info(self, msg, wrap=True, indent=""):
        """
        Print a message with verbosity level INFO.

        Parameters
        ----------
            msg : str
                The message.

            wrap : bool, optional
                Wrap the message at `WIDTH` characters (if too long).

            indent : str, optional
                Indent each line with this string.
        """
        self._print(INFO, msg, wrap, indent)

    def warning(self, msg, wrap=True, indent=""):
        """Print `msg` with verbosity level WARNING."""
        self._print(WARNING, msg, wrap, indent)


output = Output()
