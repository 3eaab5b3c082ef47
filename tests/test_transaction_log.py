"""
Unit tests for the append-only TransactionLog.
"""

import pytest

from allocator import PersistenceError, TransactionLog


class TestTransactionLog:
    """Test appending records to memory and to disk."""

    def test_memory_only(self, memory_log):
        memory_log.append("first")
        memory_log.append("second")

        assert memory_log.records == ["first", "second"]
        assert len(memory_log) == 2

    def test_file_lines(self, file_log):
        file_log.append("Resource R1 is now in use.")
        file_log.append("Resource R1 is under maintenance.")

        with open(file_log.path, encoding="utf-8") as f:
            assert f.read() == "Resource R1 is now in use.\nResource R1 is under maintenance.\n"

    def test_appends_to_existing_file(self, tmp_path):
        path = tmp_path / "resource_log.txt"
        path.write_text("earlier session\n", encoding="utf-8")

        TransactionLog(str(path)).append("this session")

        assert path.read_text(encoding="utf-8") == "earlier session\nthis session\n"

    def test_write_failure(self, tmp_path):
        log = TransactionLog(str(tmp_path))

        with pytest.raises(PersistenceError):
            log.append("lost")

        assert log.records == []

    def test_encoding_failure(self, file_log):
        with pytest.raises(PersistenceError):
            file_log.append("Resource R\udcff is now in use.")

        assert file_log.records == []
