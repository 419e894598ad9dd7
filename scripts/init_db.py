"""Script to initialize the database."""

import asyncio

from kontactshare.config import get_settings
from kontactshare.database import Database
from kontactshare.models import metadata


async def init_db() -> None:
    """Initialize the database by creating all tables."""
    database = Database(get_settings())
    try:
        async with database.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    finally:
        await database.dispose()

    print("✓ Database initialized successfully!")


if __name__ == "__main__":
    asyncio.run(init_db())
