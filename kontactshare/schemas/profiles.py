"""Profile schemas for request/response validation.

Field names match the ``profiles`` table columns. The camelCase keys used by
clients are declared per field. Inbound models read only the camelCase key.
Outbound models accept either form, so they validate straight from a table row
and still survive the alias dump and re-validation FastAPI applies to
``response_model`` values.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# ============================================================================
# Inbound
# ============================================================================


class ProfileContactIn(BaseModel):
    """Owner-editable contact fields."""

    model_config = ConfigDict(extra="ignore")

    profile_photo_url: str | None = Field(None, validation_alias="profilePhoto")
    full_name: str | None = Field(None, validation_alias="fullName")
    email: str | None = Field(None, validation_alias="email")
    job_title: str | None = Field(None, validation_alias="jobTitle")
    company_name: str | None = Field(None, validation_alias="companyName")
    mobile_primary: str | None = Field(None, validation_alias="mobilePrimary")
    landline_number: str | None = Field(None, validation_alias="landlineNumber")
    address: str | None = Field(None, validation_alias="address")
    facebook_link: str | None = Field(None, validation_alias="facebookLink")
    instagram_link: str | None = Field(None, validation_alias="instagramLink")
    tiktok_link: str | None = Field(None, validation_alias="tiktokLink")
    whatsapp_number: str | None = Field(None, validation_alias="whatsappNumber")
    viber_number: str | None = Field(None, validation_alias="viberNumber")
    website_link: str | None = Field(None, validation_alias="websiteLink")
    about_text: str | None = Field(None, validation_alias="aboutText")


class ProfileCreate(ProfileContactIn):
    """Schema for creating a profile; missing identifiers are generated."""

    admin_id: str | None = Field(None, validation_alias="id")
    unique_code: str | None = Field(None, validation_alias="uniqueCode")
    pin: str | None = Field(None, validation_alias="pin")


class ProfileUpdate(ProfileContactIn):
    """Schema for an owner update.

    The PIN is taken as sent and applied only if it is a 5 digit string, so a
    malformed or numeric PIN is ignored instead of failing the whole update.
    """

    pin: Any = Field(None, validation_alias="pin")


class CredentialCheck(BaseModel):
    """External id + PIN pair supplied by a profile owner.

    Values are kept as sent; anything other than a string never matches.
    """

    id: Any = None
    pin: Any = None


class PinChange(BaseModel):
    """PIN change request; non-string PINs fail the match or format check."""

    current_pin: Any = Field(None, validation_alias="currentPin")
    new_pin: Any = Field(None, validation_alias="newPin")


# ============================================================================
# Outbound
# ============================================================================


class ProfileResponse(BaseModel):
    """Profile as returned to clients."""

    admin_id: str = Field(
        validation_alias=AliasChoices("admin_id", "id"), serialization_alias="id"
    )
    pin: str
    unique_code: str = Field(alias="uniqueCode")
    profile_photo_url: str | None = Field(None, alias="profilePhoto")
    full_name: str | None = Field(None, alias="fullName")
    email: str | None = None
    status: str
    job_title: str | None = Field(None, alias="jobTitle")
    company_name: str | None = Field(None, alias="companyName")
    mobile_primary: str | None = Field(None, alias="mobilePrimary")
    landline_number: str | None = Field(None, alias="landlineNumber")
    address: str | None = None
    facebook_link: str | None = Field(None, alias="facebookLink")
    instagram_link: str | None = Field(None, alias="instagramLink")
    tiktok_link: str | None = Field(None, alias="tiktokLink")
    whatsapp_number: str | None = Field(None, alias="whatsappNumber")
    viber_number: str | None = Field(None, alias="viberNumber")
    website_link: str | None = Field(None, alias="websiteLink")
    about_text: str | None = Field(None, alias="aboutText")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProfileCreatedResponse(ProfileResponse):
    """Created profile plus the shareable link."""

    profile_link: str = Field(alias="profileLink")


class OperationResult(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
    message: str


class ProfileLookupResult(OperationResult):
    """Successful id + PIN verification with the owner's public code."""

    unique_code: str = Field(alias="uniqueCode")

    model_config = ConfigDict(populate_by_name=True)
