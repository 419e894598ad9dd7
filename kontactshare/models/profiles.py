"""Contact profile model definition using SQLAlchemy Core."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    func,
    text,
)

PROFILE_STATUS_ACTIVE = "active"
PROFILE_STATUS_BANNED = "banned"


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(UTC)


metadata = MetaData()

profiles = Table(
    "profiles",
    metadata,
    # Internal ID, never exposed to clients
    Column("id", Uuid(as_uuid=True), primary_key=True, default=uuid4),
    # Owner credentials
    Column("admin_id", String, nullable=False, unique=True, index=True),
    Column("pin", String, nullable=False),
    # Public lookup code
    Column("unique_code", String, nullable=False, unique=True, index=True),
    # Contact card
    Column("profile_photo_url", Text),
    Column("full_name", String, server_default=text("'Default Name'")),
    Column("email", String, server_default=text("'default@example.com'")),
    Column("job_title", String, server_default=text("'Default Job'")),
    Column("company_name", String, server_default=text("'Default Company'")),
    Column("mobile_primary", String),
    Column("landline_number", String),
    Column("address", Text),
    Column("facebook_link", Text),
    Column("instagram_link", Text),
    Column("tiktok_link", Text),
    Column("whatsapp_number", String),
    Column("viber_number", String, server_default=text("'Update your Viber Number'")),
    Column("website_link", Text),
    Column("about_text", Text, server_default=text("'Update your About'")),
    # Moderation
    Column(
        "status",
        String(20),
        nullable=False,
        server_default=text(f"'{PROFILE_STATUS_ACTIVE}'"),
        index=True,
    ),
    # Audit
    Column("created_at", DateTime(timezone=True), default=utcnow, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), default=utcnow, server_default=func.now()),
)
