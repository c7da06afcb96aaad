"""
Structured record file target tests.
"""

from __future__ import annotations

from datetime import datetime

from metalog.levels import LogLevel
from metalog.logger import Logger
from metalog.targets import JsonFileTarget, MemoryTarget, read_json_log


class TestJsonFileTarget:
    def test_does_not_create_file_before_first_record(self, tmp_path) -> None:
        path = tmp_path / "construct.json"

        JsonFileTarget(path, level=LogLevel.DEBUG)

        assert not path.exists()

    def test_on_disk_shape(self, tmp_path) -> None:
        path = tmp_path / "shape.json"
        target = JsonFileTarget(path, level=LogLevel.DEBUG)

        target.log(LogLevel.INFO, None, ["msg"], {})
        target.close()

        content = path.read_text()
        assert content.startswith("{},{")
        assert not content.endswith("\n")

    def test_round_trip(self, tmp_path) -> None:
        path = tmp_path / "multi.json"
        target = JsonFileTarget(path, level=LogLevel.DEBUG, timestamp=False)

        target.log(LogLevel.INFO, None, ["msg1"], {})
        target.log(LogLevel.DEBUG, "fac", ["testStr %s: %d", "sub", 42], {"key": "value"})
        target.close()

        log = read_json_log(path)

        assert len(log) == 3
        assert log[0] == {}
        assert log[1]["level"] == LogLevel.INFO
        assert log[1]["facility"] is None
        assert log[1]["msg"] == ["msg1"]
        assert log[1]["meta"] == {}
        assert isinstance(log[1]["timestamp"], float)
        assert log[2]["level"] == LogLevel.DEBUG
        assert log[2]["facility"] == "fac"
        assert log[2]["msg"] == ["testStr %s: %d", "sub", 42]
        assert log[2]["meta"] == {"key": "value"}

    def test_existing_file_is_not_reseeded(self, tmp_path) -> None:
        path = tmp_path / "reopen.json"

        first = JsonFileTarget(path)
        first.log(LogLevel.INFO, None, ["one"], {})
        first.close()

        second = JsonFileTarget(path)
        second.log(LogLevel.INFO, None, ["two"], {})
        second.close()

        assert [record["msg"] for record in read_json_log(path)[1:]] == [["one"], ["two"]]

    def test_filters(self, tmp_path) -> None:
        path = tmp_path / "filtered.json"
        target = JsonFileTarget(path, level=LogLevel.INFO, facilities=["test"])

        target.log(LogLevel.INFO, "test", ["msg"], {})
        target.log(LogLevel.DEBUG, "test", ["too verbose"], {})
        target.log(LogLevel.INFO, "fac", ["other facility"], {})
        target.close()

        log = read_json_log(path)
        assert len(log) == 2
        assert log[1]["facility"] == "test"

    def test_serializes_dates_in_meta(self, tmp_path) -> None:
        path = tmp_path / "dates.json"
        target = JsonFileTarget(path)

        target.log(LogLevel.INFO, None, ["msg"], {"at": datetime(2024, 1, 2, 3, 4, 5)})
        target.close()

        assert read_json_log(path)[1]["meta"]["at"].startswith("2024-01-02T03:04:05")

    def test_integer_beyond_64_bits(self, tmp_path) -> None:
        path = tmp_path / "big.json"
        target = JsonFileTarget(path)

        target.log(LogLevel.INFO, None, ["id %d", 2**70], {"big": 2**70})
        target.close()

        record = read_json_log(path)[1]
        assert record["msg"] == ["id %d", "1180591620717411303424"]
        assert record["meta"] == {"big": "1180591620717411303424"}

    def test_large_integer_does_not_stop_later_targets(self, tmp_path) -> None:
        memory = MemoryTarget(level=LogLevel.DEBUG)
        logger = Logger().to_json_file(tmp_path / "fanout.json").to("memory", memory)

        logger.info("id %d", 2**70)
        logger.close()

        assert [m.message for m in memory.get_messages()] == ["id 1180591620717411303424"]
