"""Admin-specific schemas."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from kontactshare.schemas.profiles import ProfileResponse


class BulkAction(StrEnum):
    """Supported bulk moderation actions."""

    BAN = "ban"
    UNBAN = "unban"
    DELETE = "delete"


class BulkActionRequest(BaseModel):
    """Bulk moderation request. Validated by the service, not by pydantic."""

    action: str | None = None
    unique_codes: list[str] | None = Field(None, validation_alias="uniqueCodes")


class BulkActionResponse(BaseModel):
    """Bulk moderation result.

    ``count`` is the number of codes requested; ``affected`` is the number of
    rows the database reports as changed.
    """

    success: bool = True
    message: str
    count: int
    affected: int


class StatusChangeResponse(BaseModel):
    """Result of a single ban/unban."""

    success: bool = True
    status: str


class Pagination(BaseModel):
    """Pagination block for admin listings."""

    page: int
    limit: int
    total: int
    pages: int


class AdminProfileListResponse(BaseModel):
    """Response schema for admin profile listing."""

    profiles: list[ProfileResponse]
    pagination: Pagination


class DashboardStatsResponse(BaseModel):
    """Dashboard counters."""

    total_profiles: int = Field(alias="totalProfiles")
    active_profiles: int = Field(alias="activeProfiles")
    banned_profiles: int = Field(alias="bannedProfiles")
    today_profiles: int = Field(alias="todayProfiles")
    week_profiles: int = Field(alias="weekProfiles")

    model_config = ConfigDict(populate_by_name=True)
