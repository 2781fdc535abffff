from __future__ import annotations

import json
import logging
import sys
import uuid
from typing import Any, TextIO

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] run=%(run_id)s %(message)s"


def new_run_id() -> str:
    return uuid.uuid4().hex[:12]


class RunIdFilter(logging.Filter):
    """Stamps every record passing the handler with the id of this generation run."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", ""),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_data"):
            entry["data"] = record.extra_data
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    fmt: str = "text",
    stream: TextIO | None = None,
    run_id: str | None = None,
) -> str:
    """Install a single root handler and return the run id it stamps on records."""
    run_id = run_id or new_run_id()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in root.handlers[:]:
        root.removeHandler(h)

    # stdout is reserved for the confirmation line
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(RunIdFilter(run_id))
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    return run_id
