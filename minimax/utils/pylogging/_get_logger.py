import logging


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Returns the logger of the given name, configuring the root logger with
    `level` if it has no handlers yet."""
    logging.basicConfig(level=level)
    return logging.getLogger(name)
