# file-generator/utils/logger.py
import logging
import sys


def get_logger(name, level=logging.INFO):
    """Create and configure a logger"""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        # Console handler on stderr, stdout is reserved for prompts
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        ch.setFormatter(formatter)

        logger.addHandler(ch)

    return logger
