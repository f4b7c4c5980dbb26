# src/comphub/utils/logging_config.py
"""
File logging for CompHub.

Usage:
    from comphub.utils.logging_config import Logger, LogFiles

    Logger.info("Seeded 40 tasks", file=LogFiles.STORE)
    Logger.error("Write failed", file=LogFiles.ERROR)
    Logger.info("General message")          # logs/comphub.log

Configuration via environment variables:
    COMPHUB_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    COMPHUB_LOG_DIR: base directory for log files (default: logs/)
    COMPHUB_LOG_MAX_BYTES: max size per log file before rotation (default: 10MB)
    COMPHUB_LOG_BACKUP_COUNT: rotated files to keep (default: 5)
"""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

import yaml

_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "comphub.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(trace_id)s] %(filename)s:%(lineno)d - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONFIG_FILE = Path(__file__).parent / "log_config.yaml"

_DEFAULT_FILES = {
    "api": "api/api.log",
    "store": "store/store.log",
    "activity": "activity/activity.log",
    "error": "errors/error.log",
}


class _LogFilesMeta(type):
    """Allow LogFiles.STORE style access to names from log_config.yaml."""

    def __getattr__(cls, name: str) -> str:
        files = cls._load()
        key = name if name in files else name.lower()
        if key in files:
            return files[key]
        raise AttributeError(f"Log file '{name}' not found in config")


class LogFiles(metaclass=_LogFilesMeta):
    """Log file paths, relative to the log directory.

    Add a topic by adding an entry under ``files`` in log_config.yaml.
    """

    _files: Optional[Dict[str, str]] = None

    @classmethod
    def _load(cls) -> Dict[str, str]:
        if cls._files is not None:
            return cls._files
        files = dict(_DEFAULT_FILES)
        try:
            with open(LOG_CONFIG_FILE, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            files.update(config.get("files") or {})
        except (OSError, yaml.YAMLError):
            pass
        cls._files = files
        return files

    @classmethod
    def get(cls, name: str) -> str:
        files = cls._load()
        return files.get(name) or files.get(name.lower()) or f"{name}/{name}.log"


class _TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = _trace_id_var.get() or "-"
        return True


_config: Dict[str, object] = {}
_loggers: Dict[str, logging.Logger] = {}


def _get_config() -> Dict[str, object]:
    return {
        "level": os.environ.get("COMPHUB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        "base_dir": os.environ.get("COMPHUB_LOG_DIR", DEFAULT_LOG_DIR),
        "max_bytes": int(os.environ.get("COMPHUB_LOG_MAX_BYTES", DEFAULT_MAX_BYTES)),
        "backup_count": int(os.environ.get("COMPHUB_LOG_BACKUP_COUNT", DEFAULT_BACKUP_COUNT)),
    }


def _resolve_file_path(file: Optional[str]) -> Path:
    return Path(str(_config["base_dir"])) / (file or DEFAULT_LOG_FILE)


def _file_logger(file: Optional[str]) -> logging.Logger:
    path = _resolve_file_path(file)
    key = str(path)
    if key in _loggers:
        return _loggers[key]

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=key,
        maxBytes=int(_config["max_bytes"]),
        backupCount=int(_config["backup_count"]),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.addFilter(_TraceIdFilter())

    log = logging.getLogger(f"comphub.file.{key}")
    log.propagate = False
    log.setLevel(str(_config["level"]))
    log.addHandler(handler)
    _loggers[key] = log
    return log


class Logger:
    """Static logger writing to per-topic rotating files."""

    @staticmethod
    def init(
        level: Optional[str] = None,
        base_dir: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
    ) -> None:
        if _config:
            return
        _config.update(_get_config())
        if level:
            _config["level"] = level.upper()
        if base_dir:
            _config["base_dir"] = base_dir
        if max_bytes:
            _config["max_bytes"] = max_bytes
        if backup_count:
            _config["backup_count"] = backup_count

    @staticmethod
    def _log(level: int, message: str, file: Optional[str]) -> None:
        Logger.init()
        # stacklevel 3: skip _log and the public wrapper so filename/lineno point at the caller
        _file_logger(file).log(level, message, stacklevel=3)

    @staticmethod
    def debug(message: str, file: Optional[str] = None) -> None:
        Logger._log(logging.DEBUG, message, file)

    @staticmethod
    def info(message: str, file: Optional[str] = None) -> None:
        Logger._log(logging.INFO, message, file)

    @staticmethod
    def warning(message: str, file: Optional[str] = None) -> None:
        Logger._log(logging.WARNING, message, file)

    @staticmethod
    def error(message: str, file: Optional[str] = None) -> None:
        Logger._log(logging.ERROR, message, file)

    @staticmethod
    def set_level(level: str) -> None:
        Logger.init()
        _config["level"] = level.upper()
        for log in _loggers.values():
            log.setLevel(level.upper())

    @staticmethod
    def close() -> None:
        for log in _loggers.values():
            for handler in list(log.handlers):
                handler.close()
                log.removeHandler(handler)
        _loggers.clear()
        _config.clear()


# ============================================================================
# Trace ID Management
# ============================================================================

def generate_trace_id() -> str:
    return f"req-{uuid.uuid4().hex[:12]}"


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """Set (or generate) the trace id for the current request context."""
    tid = trace_id or generate_trace_id()
    _trace_id_var.set(tid)
    return tid


def get_trace_id() -> Optional[str]:
    return _trace_id_var.get()


def clear_trace_id() -> None:
    _trace_id_var.set(None)
