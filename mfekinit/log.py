import logging
import os
from typing import Mapping, Optional

LOG_ENV_VAR = "MFEKINIT_LOG"
LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"
DEFAULT_LEVEL = logging.INFO

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def level_from_name(name: str) -> int:
    """argparse type for --log-level."""
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level: {name}")


def resolve_level(cli_level: Optional[int] = None, environ: Optional[Mapping[str, str]] = None):
    """Pick the log level: the command line wins over $MFEKINIT_LOG, which
    wins over INFO. Returns (level, rejected) where rejected is an invalid
    environment value that was ignored, or None.
    """
    if cli_level is not None:
        return cli_level, None
    if environ is None:
        environ = os.environ
    value = environ.get(LOG_ENV_VAR)
    if not value:
        return DEFAULT_LEVEL, None
    try:
        return level_from_name(value), None
    except ValueError:
        return DEFAULT_LEVEL, value


def setup_logging(level: int = DEFAULT_LEVEL):
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(__package__).setLevel(level)
