import logging, json, sys, time, os
from .constants import DEFAULT_LOGGER_NAME, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, LOG_FILE_ENV


def resolve_level(level=None):
    """Explicit level wins; otherwise EDKEY_LOG_LEVEL, falling back to INFO."""
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        return getattr(logging, DEFAULT_LOG_LEVEL)
    return resolved


def get_logger(name=DEFAULT_LOGGER_NAME, level=None, to_file=None):
    """Unified structured logger for edkey_core modules."""
    logger = logging.getLogger(name)
    # Explicit level always applies; env default only on first setup
    if level is not None or not logger.handlers:
        logger.setLevel(resolve_level(level))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # Use UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or os.getenv(LOG_FILE_ENV)
        if to_file:
            # Ensure the directory exists before writing
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
