"""
Workflow utilities: logging setup and structured (JSON) log lines for the CLI scripts.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def setup_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging config once. No-op when the root logger already has handlers."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit one JSON object as a log line."""
    record = {"level": level, **kwargs}
    line = json.dumps(record, default=str)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    else:
        logger.info("%s", line)
