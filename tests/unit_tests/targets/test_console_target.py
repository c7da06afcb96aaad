"""
Console target tests.
"""

from __future__ import annotations

import io

from metalog.levels import LogLevel
from metalog.targets import ConsoleTarget


class TestConsoleTarget:
    def test_writes_plain_line(self) -> None:
        stream = io.StringIO()
        target = ConsoleTarget(level=LogLevel.DEBUG, timestamp=False, colorize=False, stream=stream)

        target.log(LogLevel.INFO, "fac", ["hello %s", "world"], {})

        assert stream.getvalue() == "info: [fac] hello world\n"

    def test_colorizes_by_level(self) -> None:
        stream = io.StringIO()
        target = ConsoleTarget(level=LogLevel.DEBUG, timestamp=False, stream=stream)

        target.log(LogLevel.WARN, None, ["careful"], {})

        assert stream.getvalue() == "\033[33mwarn: careful\033[0m\n"

    def test_defaults_to_stdout(self, capsys) -> None:
        target = ConsoleTarget(timestamp=False, colorize=False)

        target.log(LogLevel.ERROR, None, ["boom"], {})
        target.log(LogLevel.DEBUG, None, ["hidden"], {})

        assert capsys.readouterr().out == "error: boom\n"
