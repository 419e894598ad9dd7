"""Admin account model definition using SQLAlchemy Core."""

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

from kontactshare.models.profiles import utcnow

metadata = MetaData()

admins = Table(
    "admins",
    metadata,
    Column("id", Uuid(as_uuid=True), primary_key=True, default=uuid4),
    Column("email", String(255), nullable=False, unique=True, index=True),
    Column("password_hash", Text, nullable=False),
    Column("role", String(50), server_default=text("'admin'")),
    Column("created_at", DateTime(timezone=True), default=utcnow, server_default=func.now()),
)
