"""Profile service for business logic."""

import structlog
from fastapi import UploadFile
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from kontactshare.config import Settings
from kontactshare.core.exceptions import (
    BadRequestException,
    InvalidCredentialsException,
    ProfileBannedException,
    ProfileNotFoundException,
    UnauthorizedException,
)
from kontactshare.core.identifiers import (
    generate_external_id,
    generate_pin,
    generate_unique_code,
    is_valid_pin,
)
from kontactshare.core.storage import PhotoStorage
from kontactshare.models.profiles import PROFILE_STATUS_BANNED, profiles, utcnow
from kontactshare.schemas.profiles import CredentialCheck, PinChange, ProfileCreate, ProfileUpdate

logger = structlog.get_logger()

# Placeholder values stored when an admin creates a profile without them
PROFILE_DEFAULTS: dict[str, str] = {
    "full_name": "Default Name",
    "email": "default@example.com",
    "job_title": "Default Job Title",
    "company_name": "Default Company",
    "mobile_primary": "000-000-0000",
    "landline_number": "000-000-0000",
    "address": "Default Address",
    "facebook_link": "Update your Facebook Link",
    "instagram_link": "Update your Instagram Link",
    "tiktok_link": "Update your TikTok Link",
    "whatsapp_number": "Update your WhatsApp Number",
    "viber_number": "Update your Viber Number",
    "website_link": "Update your web link",
    "about_text": "Update your About",
}


def database_error_message(exc: IntegrityError) -> str:
    """Raw driver message for a constraint violation."""
    return str(exc.orig) if exc.orig is not None else str(exc)


class ProfileService:
    """Service for profile operations."""

    @staticmethod
    async def get_profile_by_code(db: AsyncSession, unique_code: str) -> dict | None:
        """Get profile by public code."""
        query = select(profiles).where(profiles.c.unique_code == unique_code)
        result = await db.execute(query)
        profile = result.mappings().first()
        return dict(profile) if profile else None

    @staticmethod
    async def get_profile_by_external_id(db: AsyncSession, admin_id: str) -> dict | None:
        """Get profile by admin-assigned external id."""
        query = select(profiles).where(profiles.c.admin_id == admin_id)
        result = await db.execute(query)
        profile = result.mappings().first()
        return dict(profile) if profile else None

    @staticmethod
    async def create_profile(
        db: AsyncSession, settings: Settings, profile_data: ProfileCreate
    ) -> dict:
        """Create a new profile, generating any missing identifiers."""
        if profile_data.pin is not None and not is_valid_pin(profile_data.pin):
            raise BadRequestException("PIN must be exactly 5 digits")

        values = {
            column: getattr(profile_data, column) or default
            for column, default in PROFILE_DEFAULTS.items()
        }
        values.update(
            admin_id=profile_data.admin_id or generate_external_id(),
            unique_code=profile_data.unique_code or generate_unique_code(),
            pin=profile_data.pin or generate_pin(),
            profile_photo_url=profile_data.profile_photo_url or settings.default_profile_photo,
        )

        query = profiles.insert().values(**values).returning(profiles)

        try:
            result = await db.execute(query)
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning("profile_create_rejected", error=database_error_message(e))
            raise BadRequestException(database_error_message(e))

        profile = result.mappings().first()
        if not profile:
            raise ValueError("Failed to create profile")

        logger.info("profile_created", unique_code=profile["unique_code"])
        return dict(profile)

    @staticmethod
    async def update_profile(
        db: AsyncSession, unique_code: str, profile_data: ProfileUpdate
    ) -> dict:
        """Update the supplied contact fields of a profile."""
        update_data = profile_data.model_dump(exclude_unset=True, exclude={"pin"})
        if is_valid_pin(profile_data.pin):
            update_data["pin"] = profile_data.pin
        update_data["updated_at"] = utcnow()

        query = (
            update(profiles)
            .where(profiles.c.unique_code == unique_code)
            .values(**update_data)
            .returning(profiles)
        )

        try:
            result = await db.execute(query)
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise BadRequestException(database_error_message(e))

        profile = result.mappings().first()
        if not profile:
            raise ProfileNotFoundException()

        return dict(profile)

    @staticmethod
    async def delete_profile(db: AsyncSession, unique_code: str) -> bool:
        """Delete a profile (hard delete)."""
        query = delete(profiles).where(profiles.c.unique_code == unique_code)
        result = await db.execute(query)
        await db.commit()

        deleted = result.rowcount > 0  # type: ignore[attr-defined]
        logger.info("profile_deleted", unique_code=unique_code, deleted=deleted)
        return deleted

    @staticmethod
    async def set_profile_photo(
        db: AsyncSession, storage: PhotoStorage, unique_code: str, upload: UploadFile
    ) -> dict:
        """Store an uploaded photo and point the profile at it."""
        photo_url = await storage.save_image(upload)

        query = (
            update(profiles)
            .where(profiles.c.unique_code == unique_code)
            .values(profile_photo_url=photo_url, updated_at=utcnow())
            .returning(profiles)
        )
        try:
            result = await db.execute(query)
            await db.commit()
        except Exception:
            storage.remove(photo_url)
            raise
        profile = result.mappings().first()

        if not profile:
            storage.remove(photo_url)
            raise ProfileNotFoundException()

        return dict(profile)

    @staticmethod
    async def verify_scoped(db: AsyncSession, unique_code: str, credentials: CredentialCheck) -> None:
        """
        Verify external id + PIN for the profile behind a public code.

        Ban status is not consulted here. A non-string id or PIN never matches.

        Raises:
            InvalidCredentialsException: If code, id and PIN do not all match one profile
        """
        supplied = (credentials.id, credentials.pin)
        if not all(isinstance(value, str) and value for value in supplied):
            raise InvalidCredentialsException()

        query = select(profiles.c.id).where(
            profiles.c.unique_code == unique_code,
            profiles.c.admin_id == credentials.id,
            profiles.c.pin == credentials.pin,
        )
        result = await db.execute(query)
        if result.first() is None:
            raise InvalidCredentialsException()

    @staticmethod
    async def verify_by_id(db: AsyncSession, credentials: CredentialCheck) -> str:
        """
        Verify external id + PIN without a public code.

        The ban check runs before the PIN comparison, so a banned owner never
        learns whether their PIN is still right.

        Returns:
            The profile's public code

        Raises:
            BadRequestException: If id or PIN is missing
            ProfileNotFoundException: If no profile has this external id
            ProfileBannedException: If the profile is banned
            InvalidCredentialsException: If the PIN does not match, including a
                PIN sent as a number
        """
        if not credentials.id or not credentials.pin:
            raise BadRequestException("id and pin are required")

        profile = None
        if isinstance(credentials.id, str):
            profile = await ProfileService.get_profile_by_external_id(db, credentials.id)

        if not profile:
            raise ProfileNotFoundException()

        if profile["status"] == PROFILE_STATUS_BANNED:
            raise ProfileBannedException()

        if profile["pin"] != credentials.pin:
            raise InvalidCredentialsException()

        return profile["unique_code"]

    @staticmethod
    async def change_pin(db: AsyncSession, unique_code: str, pin_change: PinChange) -> None:
        """Replace the PIN after checking the current one."""
        query = select(profiles.c.pin).where(profiles.c.unique_code == unique_code)
        result = await db.execute(query)
        current = result.mappings().first()

        if not current:
            raise ProfileNotFoundException()

        if current["pin"] != pin_change.current_pin:
            raise UnauthorizedException("Current PIN is incorrect")

        if not is_valid_pin(pin_change.new_pin):
            raise BadRequestException("New PIN must be exactly 5 digits")

        await db.execute(
            update(profiles)
            .where(profiles.c.unique_code == unique_code)
            .values(pin=pin_change.new_pin, updated_at=utcnow())
        )
        await db.commit()
        logger.info("profile_pin_changed", unique_code=unique_code)
