from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FILE_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
) -> Optional[str]:
    """Configure root logging for the gate and installer entrypoints.

    Log records always go to stderr; stdout carries only the JSON summary
    the CLIs print. A file handler is added only when ``log_path`` is given,
    so a plain gate run leaves the working tree untouched.

    Calling this more than once is a no-op. Returns the log file path, if any.
    """

    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, "_apk_release_configured", False):
        return getattr(root, "_apk_release_log_path", None)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    root.addHandler(console)

    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATEFMT))
        root.addHandler(file_handler)

    setattr(root, "_apk_release_configured", True)
    setattr(root, "_apk_release_log_path", log_path)

    logging.getLogger(__name__).debug("Logging initialized (file=%s)", log_path or "-")
    return log_path
