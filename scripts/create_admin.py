"""Create an admin account.

Usage:
  python scripts/create_admin.py --email admin@example.com --password '...'
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from kontactshare.config import get_settings
from kontactshare.core.security import get_password_hash
from kontactshare.database import Database
from kontactshare.models.admins import admins
from kontactshare.schemas.auth import AdminCreate


async def create_admin(admin_data: AdminCreate) -> dict:
    """Insert an admin row with a bcrypt password hash."""
    database = Database(get_settings())
    try:
        async with database.session_factory() as session:
            result = await session.execute(
                admins.insert()
                .values(
                    email=admin_data.email,
                    password_hash=get_password_hash(admin_data.password),
                    role=admin_data.role,
                )
                .returning(admins.c.id, admins.c.email, admins.c.role)
            )
            await session.commit()
            return dict(result.mappings().one())
    finally:
        await database.dispose()


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--role", default="admin")
    args = ap.parse_args()

    try:
        admin_data = AdminCreate(email=args.email, password=args.password, role=args.role)
    except ValidationError as e:
        print(f"✗ Invalid admin data: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        admin = asyncio.run(create_admin(admin_data))
    except IntegrityError:
        print(f"✗ Admin {admin_data.email} already exists", file=sys.stderr)
        sys.exit(1)

    print("✓ Created admin:")
    print(admin)


if __name__ == "__main__":
    main()
