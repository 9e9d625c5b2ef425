import json

from loguru import logger
from monadic import logging_config
from monadic.api import main


def test_file_sinks_write_json_lines(monkeypatch, tmp_path):
    monkeypatch.delenv("MONADIC_DISABLE_FILE_LOGS", raising=False)
    monkeypatch.setenv("MONADIC_LOG_DIR", str(tmp_path))
    logging_config._CONFIGURED = False
    try:
        logging_config.configure_logging(version="9.9.9", environment="test")
        logger.info("file sink check")
        logger.complete()

        info_files = list(tmp_path.glob("*/info.json"))
        assert len(info_files) == 1
        records = [json.loads(line) for line in info_files[0].read_text().splitlines() if line]
        assert any(r["record"]["message"] == "file sink check" for r in records)
        record = records[-1]["record"]
        assert record["level"]["name"] == "INFO"
        assert record["extra"]["service"] == "monadic"
        assert record["extra"]["version"] == "9.9.9"
        assert record["extra"]["env"] == "test"
        assert (info_files[0].parent / "debug.json").exists()
        assert (info_files[0].parent / "error.json").exists()
    finally:
        logger.remove()
        logging_config._CONFIGURED = False

def test_configure_is_idempotent(monkeypatch, tmp_path):
    monkeypatch.delenv("MONADIC_DISABLE_FILE_LOGS", raising=False)
    monkeypatch.setenv("MONADIC_LOG_DIR", str(tmp_path))
    logging_config._CONFIGURED = False
    try:
        logging_config.configure_logging()
        monkeypatch.setenv("MONADIC_LOG_DIR", str(tmp_path / "other"))
        logging_config.configure_logging()
        assert not (tmp_path / "other").exists()
    finally:
        logger.remove()
        logging_config._CONFIGURED = False

def test_cli_logs_start_and_finish(monkeypatch):
    logging_config._CONFIGURED = False
    messages = []
    try:
        logging_config.configure_logging()
        logger.add(lambda msg: messages.append(msg.record["message"]), level="INFO")
        assert main(["--no-laws"]) == 0
        assert main(["--laws"]) == 0
    finally:
        logger.remove()
        logging_config._CONFIGURED = False
    assert any(m.startswith("monadic walkthrough invoked") for m in messages)
    assert messages.count("monadic walkthrough finished") == 1
    assert any(m.startswith("monadic walkthrough finished checks=") for m in messages)
