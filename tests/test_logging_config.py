import logging

from flexacc.logging_config import get_log_level, setup_logging


def test_get_log_level_reads_environment(monkeypatch):
    monkeypatch.setenv("FLEXACC_LOG_LEVEL", "debug")
    assert get_log_level("FLEXACC_LOG_LEVEL") == logging.DEBUG


def test_get_log_level_falls_back_on_unknown_names(monkeypatch):
    monkeypatch.setenv("FLEXACC_LOG_LEVEL", "chatty")
    assert get_log_level("FLEXACC_LOG_LEVEL", default=logging.WARNING) == logging.WARNING
    monkeypatch.delenv("FLEXACC_LOG_LEVEL")
    assert get_log_level("FLEXACC_LOG_LEVEL") == logging.INFO


def test_setup_logging_writes_dated_file(tmp_path, monkeypatch):
    from flexacc import logging_config

    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(level=logging.DEBUG, log_file="flexacc.log", console=False)
        logging.getLogger("flexacc.test").debug("hello log")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    files = list(tmp_path.glob("*_flexacc.log"))
    assert len(files) == 1
    assert "hello log" in files[0].read_text(encoding="utf-8")
