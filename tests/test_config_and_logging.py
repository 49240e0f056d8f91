import logging

import pytest

from lisplib import config
from lisplib.evaluation.evaluator import evaluate
from lisplib.log_support import ColoredFormatter, setup_loggers
from lisplib.reader.parser import parse
from lisplib.types.environment import Environment


@pytest.mark.parametrize(
    "raw,expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("10", 10), (" error ", logging.ERROR)],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LISPLIB_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


def test_log_level_default(monkeypatch):
    monkeypatch.delenv("LISPLIB_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.WARNING


def test_log_level_invalid(monkeypatch):
    monkeypatch.setenv("LISPLIB_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        config.get_log_level()


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("0", False), ("off", False)])
def test_color_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("LISPLIB_COLOR", raw)
    assert config.color_enabled() is expected


def test_color_flag_invalid(monkeypatch):
    monkeypatch.setenv("LISPLIB_COLOR", "maybe")
    with pytest.raises(ValueError):
        config.color_enabled()


def test_parser_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="lisplib"):
        parse("(+ 1 2)")
    assert "parsed '(+ 1 2)'" in caplog.text


def test_define_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="lisplib"):
        evaluate(parse("(define x 42)"), Environment())
    assert "define x = Int(42)" in caplog.text


def test_plain_formatter_pads_level_name():
    formatter = ColoredFormatter("%(levelname)s|%(message)s", use_color=False)
    record = logging.LogRecord("lisplib", logging.INFO, __file__, 1, "hello", None, None)
    assert formatter.format(record) == "INFO    |hello"
    # the record itself is left untouched
    assert record.levelname == "INFO"


def test_setup_loggers_writes_file(tmp_path):
    log_file = tmp_path / "lisplib.log"
    logger, sh, fh = setup_loggers(logging.ERROR, log_fname=str(log_file))
    try:
        assert logger.name == "lisplib"
        assert sh.level == logging.ERROR
        evaluate(parse("(define y 1)"), Environment())
        fh.flush()
        assert "define y = Int(1)" in log_file.read_text()
    finally:
        logger.removeHandler(sh)
        logger.removeHandler(fh)
        fh.close()
        logger.setLevel(logging.NOTSET)
