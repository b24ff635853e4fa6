import logging
import sys

# stdout carries protocol bytes, so log records go to stderr with this prefix.
LOG_FORMAT = "[plato-hook] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream=None) -> logging.Handler:
    """Send log records to stderr; stdout belongs to the host protocol.
    Returns the installed handler."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
    return handler
