"""Admin-only moderation endpoints."""

import math

from fastapi import APIRouter, Query

from kontactshare.dependencies import CurrentAdmin, DatabaseSession
from kontactshare.schemas.admin import (
    AdminProfileListResponse,
    BulkActionRequest,
    BulkActionResponse,
    DashboardStatsResponse,
    Pagination,
    StatusChangeResponse,
)
from kontactshare.schemas.profiles import ProfileResponse
from kontactshare.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get(
    "/profiles",
    response_model=AdminProfileListResponse,
    summary="List profiles (admin only)",
)
async def list_profiles(
    db: DatabaseSession,
    admin: CurrentAdmin,
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=100, description="Items per page"),
    search: str | None = Query(None, description="Search name, email, id or code"),
    status: str | None = Query(None, description="Filter by status"),
) -> AdminProfileListResponse:
    """
    Get paginated list of profiles, newest first.

    Args:
        db: Database session
        admin: Authenticated admin
        page: Page number
        limit: Items per page
        search: Case-insensitive substring filter
        status: Exact status filter

    Returns:
        Profiles in client shape plus pagination metadata
    """
    rows, total = await AdminService.list_profiles(
        db, page=page, limit=limit, search=search, status=status
    )

    return AdminProfileListResponse(
        profiles=[ProfileResponse.model_validate(row) for row in rows],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit),
        ),
    )


@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    summary="Dashboard statistics (admin only)",
)
async def get_stats(db: DatabaseSession, admin: CurrentAdmin) -> DashboardStatsResponse:
    """Profile counters for the admin dashboard."""
    stats = await AdminService.get_dashboard_stats(db)
    return DashboardStatsResponse(**stats)


@router.post(
    "/profiles/bulk",
    response_model=BulkActionResponse,
    summary="Bulk ban, unban or delete (admin only)",
)
async def bulk_action(
    request: BulkActionRequest,
    db: DatabaseSession,
    admin: CurrentAdmin,
) -> BulkActionResponse:
    """Apply one action to a list of public codes."""
    return await AdminService.apply_bulk_action(db, request)


@router.post(
    "/profiles/{unique_code}/ban",
    response_model=StatusChangeResponse,
    summary="Ban profile (admin only)",
)
async def ban_profile(
    unique_code: str,
    db: DatabaseSession,
    admin: CurrentAdmin,
) -> StatusChangeResponse:
    """Ban a profile; its owner can no longer verify by external id."""
    new_status = await AdminService.ban_profile(db, unique_code)
    return StatusChangeResponse(status=new_status)


@router.post(
    "/profiles/{unique_code}/unban",
    response_model=StatusChangeResponse,
    summary="Unban profile (admin only)",
)
async def unban_profile(
    unique_code: str,
    db: DatabaseSession,
    admin: CurrentAdmin,
) -> StatusChangeResponse:
    """Restore a banned profile to active."""
    new_status = await AdminService.unban_profile(db, unique_code)
    return StatusChangeResponse(status=new_status)
