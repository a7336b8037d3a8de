"""
Display sinks for operation statements.

A sink is any callable that accepts one line of text.
"""

import logging
from typing import Callable, List, Optional

LineSink = Callable[[str], None]

START_MARKER = "Start displaying operations"
END_MARKER = "End displaying operations"


class LoggingSink:
    """Writes each line to a logger"""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("bank_account.accounts")
        self.level = level

    def __call__(self, line: str) -> None:
        self.logger.log(self.level, line)


class ListSink:
    """Collects lines in memory"""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()
