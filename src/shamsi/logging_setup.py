import logging
from logging.handlers import RotatingFileHandler
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.WARNING,
    console: bool = True,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 3,
) -> None:
    """
    Configure the `shamsi` logger once. Called by the CLI only; library
    modules just use `logging.getLogger(__name__)`.
    """
    global _configured
    if _configured:
        return

    logger = logging.getLogger("shamsi")
    logger.setLevel(level)
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=file_max_bytes, backupCount=file_backup_count)
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    _configured = True
    logger.debug("Logging initialised (level=%s)", logging.getLevelName(level))
