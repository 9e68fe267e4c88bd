import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def is_known_log_level(level: str) -> bool:
    return isinstance(level, str) and level.strip().upper() in LOG_LEVELS


def normalize_log_level(level: str) -> str:
    """Return the upper-case level name, e.g. 'debug' -> 'DEBUG'.

    Raises:
        RuntimeError: if the level is not one of LOG_LEVELS.
    """
    if not is_known_log_level(level):
        raise RuntimeError(f"log_level must be one of {', '.join(LOG_LEVELS)} (got {level!r})")
    return level.strip().upper()


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Optional[Path]:
    """Configure root logger for an audit run.

    Args:
        level: One of LOG_LEVELS, case-insensitive.
        log_dir: If provided, also write vlan-audit-log_<timestamp>.log there.

    Returns:
        Path of the log file, or None when logging to the console only.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(normalize_log_level(level))
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if not log_dir:
        return None

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d__%H_%M_%S")
        log_file = log_dir / f"vlan-audit-log_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as exc:
        # Console handler stays active.
        root.error("File logging disabled (cannot create log file under %s): %s", log_dir, exc)
        return None

    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    root.info("Logging to file: %s", log_file)
    return log_file
