"""
Shared "abc_tonal" logger.

A stdout handler is attached on first import so the library and scripts/
log in one format without further setup. Library modules only log at DEBUG,
so at the default INFO level importing programs see no abc_tonal output.
"""
import logging
import sys

LOGGER_NAME = "abc_tonal"

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.INFO)


def get_logger(module_name: str) -> logging.Logger:
    """Child logger for a module, e.g. get_logger("sonority") → abc_tonal.sonority."""
    return logger.getChild(module_name)
