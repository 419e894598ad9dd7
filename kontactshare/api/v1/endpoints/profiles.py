"""Profile endpoints."""

from fastapi import APIRouter, File, UploadFile, status

from kontactshare.core.exceptions import InvalidUploadException, ProfileNotFoundException
from kontactshare.dependencies import AppSettings, CurrentAdmin, DatabaseSession, PhotoStorageDep
from kontactshare.schemas.profiles import (
    CredentialCheck,
    OperationResult,
    PinChange,
    ProfileCreate,
    ProfileCreatedResponse,
    ProfileLookupResult,
    ProfileResponse,
    ProfileUpdate,
)
from kontactshare.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.post(
    "/verify",
    response_model=ProfileLookupResult,
    summary="Verify owner credentials by external id",
)
async def verify_by_id(credentials: CredentialCheck, db: DatabaseSession) -> ProfileLookupResult:
    """Check an external id + PIN pair and return the owner's public code."""
    unique_code = await ProfileService.verify_by_id(db, credentials)
    return ProfileLookupResult(message="Credentials verified", unique_code=unique_code)


@router.get("/{unique_code}", response_model=ProfileResponse, summary="Public profile")
async def get_profile(unique_code: str, db: DatabaseSession) -> ProfileResponse:
    """Get a profile by its public code."""
    profile = await ProfileService.get_profile_by_code(db, unique_code)

    if not profile:
        raise ProfileNotFoundException()

    return ProfileResponse.model_validate(profile)


@router.post(
    "",
    response_model=ProfileCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create profile (admin only)",
)
async def create_profile(
    profile_data: ProfileCreate,
    db: DatabaseSession,
    settings: AppSettings,
    admin: CurrentAdmin,
) -> ProfileCreatedResponse:
    """Create a profile, generating code, external id and PIN when absent."""
    profile = await ProfileService.create_profile(db, settings, profile_data)
    profile_link = f"{settings.public_profile_base_url.rstrip('/')}/{profile['unique_code']}"
    return ProfileCreatedResponse.model_validate({**profile, "profile_link": profile_link})


@router.put("/{unique_code}", response_model=ProfileResponse, summary="Update profile (owner)")
async def update_profile(
    unique_code: str,
    profile_data: ProfileUpdate,
    db: DatabaseSession,
) -> ProfileResponse:
    """Update contact fields; only the fields present in the body change."""
    profile = await ProfileService.update_profile(db, unique_code, profile_data)
    return ProfileResponse.model_validate(profile)


@router.delete(
    "/{unique_code}",
    response_model=OperationResult,
    summary="Delete profile (admin only)",
)
async def delete_profile(
    unique_code: str,
    db: DatabaseSession,
    admin: CurrentAdmin,
) -> OperationResult:
    """Hard delete a profile. Deleting an unknown code is not an error."""
    await ProfileService.delete_profile(db, unique_code)
    return OperationResult(message="Profile deleted successfully")


@router.post(
    "/{unique_code}/upload",
    response_model=ProfileResponse,
    summary="Upload profile photo",
)
async def upload_photo(
    unique_code: str,
    db: DatabaseSession,
    storage: PhotoStorageDep,
    photo: UploadFile | None = File(None),
) -> ProfileResponse:
    """Store an image (5 MB max) and set it as the profile photo."""
    if photo is None:
        raise InvalidUploadException("No file uploaded")

    profile = await ProfileService.set_profile_photo(db, storage, unique_code, photo)
    return ProfileResponse.model_validate(profile)


@router.post(
    "/{unique_code}/verify",
    response_model=OperationResult,
    summary="Verify owner credentials for a profile",
)
async def verify_scoped(
    unique_code: str,
    credentials: CredentialCheck,
    db: DatabaseSession,
) -> OperationResult:
    """Check external id + PIN against the profile behind this public code."""
    await ProfileService.verify_scoped(db, unique_code, credentials)
    return OperationResult(message="Credentials verified")


@router.put(
    "/{unique_code}/pin",
    response_model=OperationResult,
    summary="Change PIN",
)
async def change_pin(
    unique_code: str,
    pin_change: PinChange,
    db: DatabaseSession,
) -> OperationResult:
    """Replace the PIN; the current PIN must be supplied."""
    await ProfileService.change_pin(db, unique_code, pin_change)
    return OperationResult(message="PIN updated successfully")
