"""Tests for home directory scanning."""

import pytest

from mcp_tools.db.files import FileCategory, categorize, list_supported_files
from mcp_tools.errors import ConfigurationError


class TestCategorize:
    @pytest.mark.parametrize(
        "filename, category",
        [
            ("warehouse.duckdb", FileCategory.DATABASE),
            ("legacy.db", FileCategory.DATABASE),
            ("orders.csv", FileCategory.CSV),
            ("events.parquet", FileCategory.PARQUET),
            ("refunds.json", FileCategory.JSON),
            ("budget.xlsx", FileCategory.EXCEL),
            ("SHOUTING.CSV", FileCategory.CSV),
        ],
    )
    def test_supported(self, filename, category):
        assert categorize(filename) is category

    @pytest.mark.parametrize("filename", ["notes.txt", "archive.csv.gz", "Makefile", "old.xls"])
    def test_unsupported(self, filename):
        assert categorize(filename) is None


class TestListSupportedFiles:
    def test_groups_and_sorts(self, data_dir):
        catalog = list_supported_files(data_dir)
        assert catalog.to_dict() == {
            "DuckDB Databases": ["legacy.db", "warehouse.duckdb"],
            "CSV Files": ["a.csv", "b.csv"],
            "Parquet Files": ["events.parquet"],
            "JSON Files": ["refunds.json"],
            "Excel Files": ["budget.xlsx"],
        }
        assert catalog.total == 7

    def test_skips_directories_with_supported_names(self, data_dir):
        catalog = list_supported_files(data_dir)
        assert "nested.csv" not in catalog.files["CSV Files"]

    def test_empty_directory(self, tmp_path):
        catalog = list_supported_files(tmp_path)
        assert catalog.to_dict() == {}
        assert catalog.total == 0

    def test_empty_categories_omitted(self, tmp_path):
        (tmp_path / "only.parquet").write_text("")
        assert list(list_supported_files(tmp_path).files) == ["Parquet Files"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="failed to read directory"):
            list_supported_files(tmp_path / "missing")
