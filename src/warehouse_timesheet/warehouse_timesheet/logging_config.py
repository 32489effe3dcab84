from __future__ import annotations

import logging
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

SESSION_ID = datetime.now().strftime("%Y%m%d_%H%M%S")
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_error_log_path: Optional[Path] = None


def setup_logging(log_dir: str | Path, *, level: str = "INFO", console: bool = True) -> Path:
    """Configure app-wide logging: console plus a per-session error log file."""
    global _error_log_path

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    error_log = log_dir / f"errors_{SESSION_ID}.log"

    file_handler = logging.FileHandler(error_log, encoding="utf-8", delay=True)
    file_handler.setLevel(logging.ERROR)

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout), file_handler] if console else [file_handler],
        force=True,
    )
    _error_log_path = error_log

    logging.getLogger(__name__).info(
        "Application started. Python %s; OS: %s", platform.python_version(), platform.platform()
    )
    return error_log


def error_log_path() -> Optional[Path]:
    return _error_log_path
