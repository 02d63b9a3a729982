import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.user import User
from app.services.passwords import hash_password
from app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

SEED_ADMIN_ID = str(uuid.uuid5(uuid.NAMESPACE_DNS, "user-admin"))


async def seed_data(session: AsyncSession) -> None:
    """Create the default administrator on an empty users table."""
    result = await session.execute(select(User.id).limit(1))
    if result.first() is not None:
        return

    session.add(User(
        id=SEED_ADMIN_ID,
        username=settings.admin_username.lower(),
        password_hash=hash_password(settings.admin_password),
        first_name="Administrador",
        role="admin",
        is_active=True,
        created_at=now_iso(),
    ))
    await session.commit()
    logger.info("Seeded default administrator %s", settings.admin_username)
