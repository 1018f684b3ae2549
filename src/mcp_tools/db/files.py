"""Home directory scanning for files DuckDB can work with."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mcp_tools.errors import ConfigurationError


class FileCategory(str, Enum):
    """Closed set of file categories, in display order."""

    DATABASE = "DuckDB Databases"
    CSV = "CSV Files"
    PARQUET = "Parquet Files"
    JSON = "JSON Files"
    EXCEL = "Excel Files"


_EXTENSION_MAP: dict[str, FileCategory] = {
    ".db": FileCategory.DATABASE,
    ".duckdb": FileCategory.DATABASE,
    ".csv": FileCategory.CSV,
    ".parquet": FileCategory.PARQUET,
    ".json": FileCategory.JSON,
    ".xlsx": FileCategory.EXCEL,
}


def categorize(filename: str) -> FileCategory | None:
    """Return the category for a file name, or None if unsupported."""
    return _EXTENSION_MAP.get(Path(filename).suffix.lower())


@dataclass
class FileCatalog:
    """Supported files grouped by category label."""

    files: dict[str, list[str]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(len(names) for names in self.files.values())

    def to_dict(self) -> dict[str, list[str]]:
        return {label: list(names) for label, names in self.files.items()}


def list_supported_files(home_dir: str | Path) -> FileCatalog:
    """Scan a directory (non-recursively) and group supported files.

    Subdirectories and unsupported extensions are skipped. Categories with no
    files are left out; file names within a category are sorted.

    Raises:
        ConfigurationError: If the directory cannot be read.
    """
    try:
        entries = sorted(Path(home_dir).iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ConfigurationError(f"failed to read directory: {e}") from e

    grouped: dict[FileCategory, list[str]] = {}
    for entry in entries:
        if entry.is_dir():
            continue
        category = categorize(entry.name)
        if category is None:
            continue
        grouped.setdefault(category, []).append(entry.name)

    return FileCatalog(
        files={
            category.value: grouped[category] for category in FileCategory if category in grouped
        }
    )
