from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.settings import LOGGING


def setup_logging(
    *,
    log_path: str | Path | None = None,
    level: int | str | None = None,
) -> None:
    """Configure root logging once: console plus a rotating file under the data dir."""
    path = Path(log_path or LOGGING.path)
    path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level or LOGGING.level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    handler = RotatingFileHandler(
        str(path),
        maxBytes=LOGGING.max_bytes,
        backupCount=LOGGING.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # flet's own transport is chatty at INFO.
    logging.getLogger("flet_core").setLevel(logging.WARNING)
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.captureWarnings(True)
