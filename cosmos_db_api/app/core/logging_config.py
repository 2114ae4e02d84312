"""
Logging setup for the API process.

Records go to stderr and, when ``LOG_FILE`` is set, to that file as
well.  The Azure SDK reports every HTTP round trip on the ``azure``
logger at INFO; it is held at WARNING unless the process runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SDK_LOGGER = "azure"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach handlers to the root logger once; later calls are no-ops.

    ``level`` is a level name in any case; unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        # uvicorn or an earlier create_app() got here first
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        logging.getLogger(SDK_LOGGER).setLevel(logging.WARNING)
