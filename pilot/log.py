import logging
import sys

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'

def setup_logging(level="INFO"):
    """Route all logging to stderr; stdout carries the referee protocol."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
