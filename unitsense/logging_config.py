import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "WARNING").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    logging.getLogger("unitsense").setLevel(numeric_level)

    # Expressions are user input of any length, keep log lines short.
    # Handler filters also see records propagated from child loggers.
    max_length = env.int("UNITSENSE_LOG_TRUNCATE", 120)
    for handler in logging.root.handlers:
        handler.addFilter(TruncatingFilter(max_length=max_length))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
