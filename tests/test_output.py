"""Tests for result aggregation and persistence."""

import threading
from pathlib import Path

import pytest

from juck.modules.subdomains import (
    FileWriteFailed,
    ResultSet,
    dedupe_subdomains,
    format_lines,
    output_path,
    write_results,
)

SUBDOMAINS = ["mail.example.com", "a.example.com", "mail.example.com"]


class TestResultSet:
    """Test the locked accumulator."""

    def test_flattens_in_declared_source_order(self):
        results = ResultSet(["threatcrowd", "crtsh", "urlscan"])
        results.add("urlscan", ["u1", "u2"])
        results.add("threatcrowd", ["t1"])
        results.add("crtsh", ["c1", "c2"])

        assert results.records() == ["t1", "c1", "c2", "u1", "u2"]
        assert len(results) == 5

    def test_unknown_source_is_appended_last(self):
        results = ResultSet(["a"])
        results.add("extra", ["e1"])
        results.add("a", ["a1"])

        assert results.records() == ["a1", "e1"]

    def test_concurrent_adds_keep_every_record(self):
        sources = [f"s{i}" for i in range(8)]
        results = ResultSet(sources)

        def worker(name: str) -> None:
            for i in range(250):
                results.add(name, [f"{name}-{i}"])

        threads = [threading.Thread(target=worker, args=(name,)) for name in sources]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        records = results.records()
        assert len(records) == 8 * 250
        assert records[:3] == ["s0-0", "s0-1", "s0-2"]

    def test_dedupe_keeps_first_occurrence(self):
        assert dedupe_subdomains(SUBDOMAINS) == ["mail.example.com", "a.example.com"]


class TestWriteResults:
    """Test the <domain>_subdomains.txt output file."""

    def test_format_lines(self):
        assert format_lines(["a.example.com", ""]) == ["http://a.example.com", "http://"]

    def test_default_path_is_current_directory(self, isolated_config: Path):
        assert output_path("example.com") == isolated_config / "example.com_subdomains.txt"

    def test_writes_one_url_per_line(self, temp_dir: Path):
        path = write_results("example.com", SUBDOMAINS, temp_dir)

        assert path == temp_dir / "example.com_subdomains.txt"
        assert path.read_text(encoding="utf-8") == (
            "http://mail.example.com\nhttp://a.example.com\nhttp://mail.example.com\n"
        )

    def test_overwrites_existing_file(self, temp_dir: Path):
        stale = temp_dir / "example.com_subdomains.txt"
        stale.write_text("http://old.example.com\n" * 10)

        write_results("example.com", ["new.example.com"], temp_dir)

        assert stale.read_text() == "http://new.example.com\n"

    def test_repeated_writes_are_identical(self, temp_dir: Path):
        first = write_results("example.com", SUBDOMAINS, temp_dir).read_bytes()
        second = write_results("example.com", SUBDOMAINS, temp_dir).read_bytes()

        assert first == second

    def test_empty_result_writes_empty_file(self, temp_dir: Path):
        path = write_results("example.com", [], temp_dir)
        assert path.read_bytes() == b""

    def test_missing_directory_raises(self, temp_dir: Path):
        with pytest.raises(FileWriteFailed) as exc_info:
            write_results("example.com", SUBDOMAINS, temp_dir / "missing")
        assert exc_info.value.path == temp_dir / "missing" / "example.com_subdomains.txt"
