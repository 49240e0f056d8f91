"""
    Logging setup for lisplib: colours the severity name for terminals and
    optionally mirrors records to a file.

    The library only creates module loggers under the 'lisplib' namespace; handlers
    are installed by whoever runs it (the demonstration driver, a REPL, tests).
"""

import logging
import os

from lisplib.config import get_log_level

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)-8s - %(message)s'

# colour only when stdout is attached to a terminal
has_a_tty = os.isatty(1)


def color_me(color):
    """Return a function wrapping a message in the VT-100 sequence for `color`."""
    RESET_SEQ = "\033[0m"
    COLOR_SEQ = "\033[1;%dm"
    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg):
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Formatter colouring the level name by severity
    0 = black, 1 = red, 2 = green, 3 = yellow, 4 = blue, 5 = magenta, 6 = cyan, 7 = white"""

    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

    colors = {
        'WARNING': color_me(YELLOW),
        'DEBUG': color_me(BLUE),
        'CRITICAL': color_me(RED),
        'ERROR': color_me(RED),
        'INFO': color_me(GREEN)
    }

    def __init__(self, msg, use_color=True, datefmt=None):
        logging.Formatter.__init__(self, msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        orig = record.__dict__
        record.__dict__ = record.__dict__.copy()
        levelname = record.levelname

        # pad to the longest level name so messages line up
        prn_name = levelname + ' ' * (8 - len(levelname))

        if self.use_color and (levelname in self.colors) and has_a_tty:
            record.levelname = self.colors[levelname](prn_name)
        else:
            record.levelname = prn_name

        res = logging.Formatter.format(self, record)

        # restore record, as it will be used by other formatters
        record.__dict__ = orig
        return res


def setup_loggers(def_level=None, log_fname=None):
    """Attach a coloured stream handler (and optionally a file handler) to the
    'lisplib' logger. The stream level defaults to LISPLIB_LOG_LEVEL."""
    if def_level is None:
        def_level = get_log_level()

    logger = logging.getLogger('lisplib')
    logger.setLevel(logging.DEBUG)

    sh = logging.StreamHandler()
    sh.setLevel(def_level)
    sh.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(sh)

    fh = None
    if log_fname is not None:
        fh = logging.FileHandler(log_fname)
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        fh.setLevel(logging.DEBUG)
        logger.addHandler(fh)

    return logger, sh, fh
