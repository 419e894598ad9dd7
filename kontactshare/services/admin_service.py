"""Admin service for moderation, listing and dashboard counters."""

from datetime import timedelta

import structlog
from sqlalchemy import Select, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from kontactshare.core.exceptions import BadRequestException, ProfileNotFoundException
from kontactshare.models.profiles import (
    PROFILE_STATUS_ACTIVE,
    PROFILE_STATUS_BANNED,
    profiles,
    utcnow,
)
from kontactshare.schemas.admin import BulkAction, BulkActionRequest, BulkActionResponse

logger = structlog.get_logger()

BULK_PAST_TENSE = {
    BulkAction.BAN: "banned",
    BulkAction.UNBAN: "unbanned",
    BulkAction.DELETE: "deleted",
}


class AdminService:
    """Service for admin-only profile operations."""

    @staticmethod
    async def set_status(db: AsyncSession, unique_code: str, new_status: str) -> str:
        """Ban or unban a single profile. Re-applying the same status is allowed."""
        query = (
            update(profiles)
            .where(profiles.c.unique_code == unique_code)
            .values(status=new_status, updated_at=utcnow())
            .returning(profiles.c.unique_code, profiles.c.status)
        )
        result = await db.execute(query)
        await db.commit()
        row = result.mappings().first()

        if not row:
            raise ProfileNotFoundException()

        logger.info("profile_status_changed", unique_code=unique_code, status=row["status"])
        return row["status"]

    @staticmethod
    async def ban_profile(db: AsyncSession, unique_code: str) -> str:
        """Ban a profile."""
        return await AdminService.set_status(db, unique_code, PROFILE_STATUS_BANNED)

    @staticmethod
    async def unban_profile(db: AsyncSession, unique_code: str) -> str:
        """Restore a banned profile."""
        return await AdminService.set_status(db, unique_code, PROFILE_STATUS_ACTIVE)

    @staticmethod
    async def apply_bulk_action(db: AsyncSession, request: BulkActionRequest) -> BulkActionResponse:
        """
        Apply one moderation action to many profiles in a single statement.

        Codes that match no profile are skipped silently. ``count`` echoes the
        number of codes requested; ``affected`` is what the database reports.

        Raises:
            BadRequestException: If the action or code list is invalid
        """
        if not request.action or not request.unique_codes:
            raise BadRequestException("Invalid bulk operation parameters")

        try:
            action = BulkAction(request.action)
        except ValueError:
            raise BadRequestException("Invalid action")

        codes = request.unique_codes
        where = profiles.c.unique_code.in_(codes)

        if action is BulkAction.DELETE:
            statement = delete(profiles).where(where)
        else:
            new_status = PROFILE_STATUS_BANNED if action is BulkAction.BAN else PROFILE_STATUS_ACTIVE
            statement = update(profiles).where(where).values(status=new_status, updated_at=utcnow())

        result = await db.execute(statement)
        await db.commit()
        affected = result.rowcount  # type: ignore[attr-defined]

        logger.info(
            "bulk_action_applied",
            action=action.value,
            requested=len(codes),
            affected=affected,
        )

        return BulkActionResponse(
            message=f"{len(codes)} profiles {BULK_PAST_TENSE[action]} successfully",
            count=len(codes),
            affected=affected,
        )

    @staticmethod
    async def list_profiles(
        db: AsyncSession,
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        status: str | None = None,
    ) -> tuple[list[dict], int]:
        """Get a page of profiles, newest first, with the total match count."""
        query: Select = select(profiles)
        count_query: Select = select(func.count()).select_from(profiles)

        if search:
            search_pattern = f"%{search}%"
            condition = or_(
                profiles.c.full_name.ilike(search_pattern),
                profiles.c.email.ilike(search_pattern),
                profiles.c.admin_id.ilike(search_pattern),
                profiles.c.unique_code.ilike(search_pattern),
            )
            query = query.where(condition)
            count_query = count_query.where(condition)

        if status:
            query = query.where(profiles.c.status == status)
            count_query = count_query.where(profiles.c.status == status)

        total_result = await db.execute(count_query)
        total = total_result.scalar_one()

        offset = (page - 1) * limit
        query = query.order_by(profiles.c.created_at.desc()).offset(offset).limit(limit)

        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()], total

    @staticmethod
    async def _count(db: AsyncSession, *conditions) -> int:
        query = select(func.count()).select_from(profiles)
        if conditions:
            query = query.where(*conditions)
        result = await db.execute(query)
        return result.scalar_one()

    @staticmethod
    async def get_dashboard_stats(db: AsyncSession) -> dict[str, int]:
        """
        Dashboard counters.

        Each counter is a separate query, so under concurrent writes the five
        numbers may describe slightly different instants.
        """
        now = utcnow()
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_ago = now - timedelta(days=7)

        return {
            "total_profiles": await AdminService._count(db),
            "active_profiles": await AdminService._count(
                db, profiles.c.status == PROFILE_STATUS_ACTIVE
            ),
            "banned_profiles": await AdminService._count(
                db, profiles.c.status == PROFILE_STATUS_BANNED
            ),
            "today_profiles": await AdminService._count(db, profiles.c.created_at >= today_start),
            "week_profiles": await AdminService._count(db, profiles.c.created_at >= week_ago),
        }
