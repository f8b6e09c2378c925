# led_planner/logging_setup.py

import logging
from pathlib import Path

from led_planner import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(filename=None, level=None) -> Path:
    """File + console logging. Safe to call on every Streamlit rerun."""
    log_path = Path(filename or config.LOG_FILE).resolve()
    root = logging.getLogger()
    # Don't add multiple handlers if init called twice
    if not any(isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(log_path)
               for h in root.handlers):
        logging.basicConfig(
            level=level or config.LOG_LEVEL,
            format=LOG_FORMAT,
            handlers=[logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()],
        )
    return log_path
