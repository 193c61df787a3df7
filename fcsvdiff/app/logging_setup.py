import logging
import sys


LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(verbose: bool = False, stream=None):
    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("fcsvdiff")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
    return root
