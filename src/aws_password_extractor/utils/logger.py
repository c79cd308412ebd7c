# utils/logger.py
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "aws_password_extractor"

# Above CRITICAL so nothing gets through
OFF = logging.CRITICAL + 10

VERBOSITY_LEVELS = {
    "off": OFF,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}

_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    """Formatter that appends fields passed through ``extra`` as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if fields:
            line += " | " + " ".join(
                f"{key}={value}" for key, value in sorted(fields.items())
            )
        return line


def resolve_level(level: str) -> int:
    """Map a verbosity name (Off/Debug/Info/Warn/Error/Fatal) to a logging level."""
    try:
        return VERBOSITY_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown verbosity '{level}'. "
            f"Expected one of: Off, Debug, Info, Warn, Error, Fatal"
        ) from None


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[str] = None,
    level: str = "Warn",
    enable_rotation: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Setup logger with console output and an optional rotating log file"""
    logger = logging.getLogger(name)
    numeric_level = resolve_level(level)
    logger.setLevel(numeric_level)

    # Replace handlers from an earlier call instead of stacking duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = KeyValueFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(numeric_level)
    logger.addHandler(stream_handler)

    if log_file:
        logs_dir = Path("logs")
        log_path = Path(log_file)
        if not log_path.is_absolute() and log_path.parent == Path("."):
            log_path = logs_dir / log_path

        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            if enable_rotation:
                file_handler = logging.handlers.RotatingFileHandler(
                    log_path,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
            else:
                file_handler = logging.FileHandler(log_path, encoding="utf-8")

            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)  # All levels to file
            logger.addHandler(file_handler)

        except (OSError, PermissionError) as e:
            logger.warning(
                "Failed to create log file, logging to console only",
                extra={"log_path": str(log_path), "error": str(e)},
            )

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger that inherits handlers and level from the package logger."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
