"""Pydantic models for gists and the rendered list."""

from typing import Any, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict


class GistFile(BaseModel):
    """Represents a single file within a gist."""

    model_config = ConfigDict(extra="ignore")

    filename: str | None = None
    type: str | None = None
    language: str | None = None
    raw_url: str | None = None
    size: int | None = None


class Gist(BaseModel):
    """Represents a GitHub Gist as returned by the list endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: str
    # Shown as-is only when it is a string
    description: Any = None
    files: dict[str, GistFile] | None = None
    html_url: str | None = None
    updated_at: AwareDatetime | None = None
    created_at: AwareDatetime | None = None


class GistRow(BaseModel):
    """One display row of the gist table."""

    id: str
    description: str
    html_url: str | None = None
    file_count: int
    updated: str
    created: str


class GistListView(BaseModel):
    """Everything needed to render the gist list for one filter value."""

    username: str
    status: Literal["loading", "errored", "ready"]
    loading: bool
    errored: bool
    error_message: str = ""
    since_threshold: str
    since_date: str
    filter: str = ""
    total_count: int | None = None
    matched_count: int = 0
    gists: list[GistRow] = []
    message: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = "1.0.0"
    github_api_reachable: bool = True
    gists_status: str | None = None
