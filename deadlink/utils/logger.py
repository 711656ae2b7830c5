import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure deadlink logging.

    Args:
        home: Path to deadlink home directory. If None, derived from environment.
        level: Logging level name for the ``deadlink`` logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("DEADLINK_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".deadlink"

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "deadlink.log"

    root_logger = logging.getLogger("deadlink")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(f"deadlink.{name}")
