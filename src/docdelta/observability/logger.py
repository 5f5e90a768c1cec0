"""Structured JSON logging for docdelta.

Each record is written as one JSON object per line so diff runs can be
followed in a log pipeline without extra parsing::

    {"ts": "2026-10-16T09:12:03.511902+00:00", "level": "INFO",
     "logger": "docdelta.diff", "message": "section changes recorded",
     "op": "create_section_changes", "draft_id": 42, "updated": 2,
     "inserted": 1, "deleted": 0}

Structured fields travel in ``extra={"extra_fields": {...}}``; the
:func:`log_fields` helper builds that mapping.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_ROOT_LOGGER = "docdelta"


class StructuredFormatter(logging.Formatter):
    """Render a :class:`logging.LogRecord` as a single-line JSON object.

    Guaranteed keys are ``ts`` (UTC, ISO-8601), ``level``, ``logger`` and
    ``message``.  Caller-supplied ``extra_fields`` are merged at the top
    level; they never overwrite the guaranteed keys.  Exception and stack
    information are included when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {}

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)

        entry.update(
            ts=datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def log_fields(op: str, **fields: Any) -> dict[str, Any]:
    """Return an ``extra`` mapping carrying structured fields for *op*."""
    return {"extra_fields": {"op": op, **fields}}


def get_logger(name: str = _ROOT_LOGGER, *, stream: Any | None = None) -> logging.Logger:
    """Return the logger *name*, attaching a JSON handler to the package root.

    Only the ``"docdelta"`` logger receives a handler; child loggers such as
    ``"docdelta.diff"`` propagate to it.  The handler is attached once, so
    repeated calls never duplicate output.  The logger level is left to the
    application; the package never calls :func:`logging.basicConfig`.

    Parameters
    ----------
    name:
        Logger name, ``"docdelta"`` or one of its children.
    stream:
        Output stream for the root handler when it is first created.
        Defaults to ``sys.stderr``.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    if not any(getattr(h, "_docdelta_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        handler._docdelta_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
        root.propagate = False
    return logging.getLogger(name)
