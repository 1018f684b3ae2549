"""Tool response models for the DuckDB server."""

from pydantic import BaseModel, Field


class ConfigureResponse(BaseModel):
    """Result of the ``configure`` tool."""

    success: bool
    message: str = ""
    connected: bool = False
    db_path: str | None = Field(default=None, description="Connected database path")
    home_dir: str | None = Field(default=None, description="Configured home directory")
    read_only: bool = False
    available_files: dict[str, list[str]] | None = Field(
        default=None, description="Supported files found in the home directory, by category"
    )
    total_files: int | None = None

    def to_dict(self) -> dict:
        """Convert to a dictionary, dropping fields that were not set."""
        return self.model_dump(exclude_none=True)


class QueryResponse(BaseModel):
    """Result of the SQL ``query`` tool."""

    success: bool
    results: str | None = Field(default=None, description="Rendered result table")
    error: str | None = Field(default=None, description="Execution error, if any")
    db_path: str = ""

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class HomeDirectoryListing(BaseModel):
    """Supported files in the configured home directory."""

    home_dir: str
    available_files: dict[str, list[str]] = Field(default_factory=dict)
    total_files: int = 0


class ListFilesResponse(HomeDirectoryListing):
    """Result of the ``list_files`` tool."""

    success: bool = True
    message: str = ""

    def to_dict(self) -> dict:
        return self.model_dump()
