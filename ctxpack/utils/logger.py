import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(ctxpack_home: Path, level: str = "INFO") -> None:
    """Configure unified ctxpack logging.

    Args:
        ctxpack_home: Directory that receives ctxpack.log
        level: Logging level name for the ctxpack logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    ctxpack_home.mkdir(parents=True, exist_ok=True)
    log_file = ctxpack_home / "ctxpack.log"

    root_logger = logging.getLogger("ctxpack")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Model loaders are chatty at INFO
    logging.getLogger("sentence_transformers").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ctxpack namespace.

    Unconfigured loggers fall back to the standard library's last-resort
    handler; the CLI configures file logging at startup.
    """
    return logging.getLogger(f"ctxpack.{name}")
