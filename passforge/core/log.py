"""
passforge structured logging.

Core modules log through get_logger(); generated secrets are never logged.
CLI output (cli.py) uses print() for the user-facing results.
"""

import logging

LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'passforge'."""
    return logging.getLogger(f'passforge.{name}')


def setup_logging(level=logging.WARNING, log_file=None):
    """
    Configure the passforge root logger.

    Calling it again replaces the handlers installed by a previous call,
    so the CLI and the web server can both configure logging safely.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional file path for file logging
    """
    logger = logging.getLogger('passforge')
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
