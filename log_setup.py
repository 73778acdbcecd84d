import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_path, level_name="WARNING", max_bytes=512 * 1024, backup_count=3, logger=None):
    """Send log records to a rotating file next to the config.

    curses owns the terminal while the app runs, so there is no console
    handler. Safe to call more than once; existing handlers on the target
    logger (the root logger by default) are replaced.
    """
    level = getattr(logging, str(level_name or "WARNING").upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    target = logger if logger is not None else logging.getLogger()
    for old in list(target.handlers):
        target.removeHandler(old)
        old.close()
    target.setLevel(level)
    target.addHandler(handler)
    return log_path
