"""
utils/__init__.py - Shared Helpers

Logger factory used by the counter and the launcher.
"""

import os
import logging


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Get a logger that writes to the console and to a log file.

    Args:
        name: Logger name (shows up in every record)
        filename: Log file name without extension (default: name)
        log_dir: Directory holding the log files, created if missing

    Handlers are attached once per name and log file. Asking for the same
    name with another log file closes the old handlers and attaches new ones.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    log_file = os.path.abspath(
        os.path.join(log_dir, f"{filename if filename else name}.log"))
    if any(getattr(h, "baseFilename", None) == log_file for h in logger.handlers):
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    fh = logging.FileHandler(log_file)
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
