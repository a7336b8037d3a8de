"""
Test suite for display module

Tests the logging and in-memory sinks.
"""

import logging

from bank_account.display import LoggingSink, ListSink, START_MARKER, END_MARKER


class TestListSink:
    """Test ListSink"""

    def test_collects_lines(self):
        sink = ListSink()
        sink("first")
        sink("second")
        assert sink.lines == ["first", "second"]

    def test_clear(self):
        sink = ListSink()
        sink("line")
        sink.clear()
        assert sink.lines == []


class TestLoggingSink:
    """Test LoggingSink"""

    def test_default_logger(self):
        """Test the account logger is used by default"""
        sink = LoggingSink()
        assert sink.logger.name == "bank_account.accounts"
        assert sink.level == logging.INFO

    def test_writes_at_level(self, caplog):
        """Test lines are logged at the configured level"""
        logger = logging.getLogger("bank_account_test_sink")
        sink = LoggingSink(logger, level=logging.WARNING)

        with caplog.at_level(logging.DEBUG, logger="bank_account_test_sink"):
            sink(START_MARKER)
            sink(END_MARKER)

        assert [r.getMessage() for r in caplog.records] == [
            "Start displaying operations", "End displaying operations"
        ]
        assert all(r.levelno == logging.WARNING for r in caplog.records)
