from pathlib import Path

from comphub.utils import logging_config
from comphub.utils.logging_config import LogFiles, Logger, clear_trace_id, get_trace_id, set_trace_id


def test_log_files_resolve_configured_topics():
    assert LogFiles.STORE == "store/store.log"
    assert LogFiles.ACTIVITY == "activity/activity.log"
    assert LogFiles.get("unknown") == "unknown/unknown.log"


def test_trace_id_roundtrip():
    tid = set_trace_id()
    assert tid.startswith("req-")
    assert get_trace_id() == tid
    clear_trace_id()
    assert get_trace_id() is None


def test_logger_writes_trace_id_to_topic_file(tmp_path: Path, monkeypatch):
    Logger.close()
    monkeypatch.setenv("COMPHUB_LOG_DIR", str(tmp_path))
    try:
        set_trace_id("req-test")
        Logger.info("hello store", file=LogFiles.STORE)
        clear_trace_id()
        for log in logging_config._loggers.values():
            for handler in log.handlers:
                handler.flush()

        content = (tmp_path / "store" / "store.log").read_text(encoding="utf-8")
        assert "hello store" in content
        assert "[req-test]" in content
        assert "test_logging_config.py" in content
    finally:
        Logger.close()
