"""
File target tests.
"""

from __future__ import annotations

import re

from metalog.levels import LogLevel
from metalog.targets import AppendOnlyFile, FileTarget


class TestAppendOnlyFile:
    def test_opens_lazily(self, tmp_path) -> None:
        path = tmp_path / "lazy.log"
        handle = AppendOnlyFile(path)

        assert not path.exists()
        assert not handle.initialized

        handle.write("x")

        assert handle.initialized
        assert path.read_text() == "x"

    def test_open_is_idempotent(self, tmp_path) -> None:
        handle = AppendOnlyFile(tmp_path / "twice.log")

        handle.open()
        first = handle._file
        handle.open()

        assert handle._file is first
        handle.close()

    def test_seed_only_for_new_files(self, tmp_path) -> None:
        path = tmp_path / "seeded.log"
        path.write_text("existing")

        handle = AppendOnlyFile(path, seed="{}")
        handle.write("!")
        handle.close()

        assert path.read_text() == "existing!"

    def test_creates_missing_parent_directories(self, tmp_path) -> None:
        path = tmp_path / "nested" / "deeper" / "seeded.json"
        handle = AppendOnlyFile(path, seed="{}")

        handle.write(",1")
        handle.close()

        assert path.read_text() == "{},1"


class TestFileTarget:
    def test_does_not_create_file_before_first_record(self, tmp_path) -> None:
        path = tmp_path / "construct.log"

        FileTarget(path, level=LogLevel.DEBUG)

        assert not path.exists()

    def test_close_before_write_is_noop(self, tmp_path) -> None:
        target = FileTarget(tmp_path / "unused.log")

        target.close()
        target.close()

    def test_writes_one_line_per_record(self, tmp_path) -> None:
        path = tmp_path / "multi.log"
        target = FileTarget(path, level=LogLevel.DEBUG, timestamp=False)

        target.log(LogLevel.INFO, None, ["msg1"], {})
        target.log(LogLevel.DEBUG, "fac", ["msg2"], {"key": "value"})
        target.close()

        assert path.read_text() == "info: msg1\ndebug: [fac] (key=value) msg2\n"

    def test_writes_into_missing_directory(self, tmp_path) -> None:
        path = tmp_path / "logs" / "app.log"
        target = FileTarget(path, timestamp=False)

        target.log(LogLevel.INFO, None, ["hello"], {})
        target.close()

        assert path.read_text() == "info: hello\n"

    def test_appends_to_existing_content(self, tmp_path) -> None:
        path = tmp_path / "append.log"
        path.write_text("earlier\n")
        target = FileTarget(path, timestamp=False)

        target.log(LogLevel.ERROR, None, ["later"], {})
        target.close()

        assert path.read_text() == "earlier\nerror: later\n"

    def test_filters_before_opening(self, tmp_path) -> None:
        path = tmp_path / "filtered.log"
        target = FileTarget(path, level=LogLevel.INFO, facilities=["test"])

        target.log(LogLevel.DEBUG, "test", ["msg"], {})
        target.log(LogLevel.INFO, "fac", ["msg"], {})

        assert not path.exists()

    def test_timestamp_prefix(self, tmp_path) -> None:
        path = tmp_path / "timestamp.log"
        target = FileTarget(path)

        target.log(LogLevel.INFO, "fac", ["msg"], {"key": "value"})
        target.close()

        line = path.read_text().rstrip("\n")
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} info: \[fac\] \(key=value\) msg", line)
