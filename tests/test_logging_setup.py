import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logging.handlers import RotatingFileHandler

from core.logging_setup import setup_logging


def test_setup_logging_writes_rotating_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_path = tmp_path / "logs" / "todo.log"
    try:
        setup_logging(log_path=log_path, level=logging.DEBUG)
        setup_logging(log_path=log_path, level=logging.DEBUG)
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1

        logging.getLogger("services.auth_session").debug("Auth status -> %s", "Loading()")
        for h in root.handlers:
            h.flush()
        content = log_path.read_text(encoding="utf-8")
        assert "[DEBUG] services.auth_session: Auth status -> Loading()" in content
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
