import logging

from sheetmap.utils.logging_setup import ColourFormatter, setup_logging


def test_setup_logging_console_and_file(tmp_path):
    logger = setup_logging("warning", tmp_path, component="unit")

    assert logger is logging.getLogger()
    assert logger.level == logging.DEBUG
    console, file_handler = logger.handlers
    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    assert list(tmp_path.glob("unit_*.log"))


def test_setup_logging_without_file(tmp_path):
    logger = setup_logging("INFO", "")
    assert len(logger.handlers) == 1
    assert not list(tmp_path.iterdir())


def test_colour_formatter_leaves_record_untouched():
    record = logging.LogRecord("sheetmap", logging.ERROR, __file__, 1, "boom", None, None)
    text = ColourFormatter("%(levelname)s %(message)s").format(record)

    assert "\033[31m" in text
    assert text.endswith("boom")
    assert record.levelname == "ERROR"


def test_repeated_setup_closes_previous_handlers(tmp_path):
    first = setup_logging("INFO", tmp_path / "first")
    old_file_handler = first.handlers[1]
    assert old_file_handler.stream is not None

    setup_logging("INFO", tmp_path / "second")

    assert old_file_handler.stream is None
    assert old_file_handler not in logging.getLogger().handlers
