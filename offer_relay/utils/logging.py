"""Logging setup for the relay.

Diagnostics are attached to records through ``extra=``; :class:`ContextFormatter`
renders them after the message as ``key=value`` pairs so that webhook URLs,
status codes and downstream error bodies end up in the log lines.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "offer_relay"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def _log_dir() -> Path:
    return Path(
        os.getenv("OFFER_RELAY_LOG_DIR", Path(__file__).resolve().parents[2] / "logs")
    )


class ContextFormatter(logging.Formatter):
    """Formatter appending the record's ``extra`` fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line

        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} | {rendered}{sep}{tail}"


def _handlers(log_dir: Path) -> list[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / os.getenv("OFFER_RELAY_LOG_FILE", "relay.log"),
        maxBytes=int(os.getenv("OFFER_RELAY_LOG_MAX_BYTES", 5 * 1024 * 1024)),
        backupCount=int(os.getenv("OFFER_RELAY_LOG_BACKUP_COUNT", 5)),
        encoding="utf-8",
    )
    handlers: list[logging.Handler] = [file_handler, logging.StreamHandler()]
    formatter = ContextFormatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """Attach handlers to the ``offer_relay`` logger once per process."""

    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:
        # Already configured (tests, reloads).
        return

    root.setLevel(level or os.getenv("OFFER_RELAY_LOG_LEVEL", "INFO").upper())
    for handler in _handlers(log_dir or _log_dir()):
        root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(ROOT_LOGGER).getChild(name)


__all__ = ["ContextFormatter", "LOG_FORMAT", "configure_logging", "get_logger"]
