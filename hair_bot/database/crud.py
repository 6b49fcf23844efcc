# hair_bot/database/crud.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import StoredValue

ACCESS_CODE_KEY = "hair_app_access_code"


async def get_value(session: AsyncSession, telegram_id: int, key: str) -> Optional[str]:
    """Retrieve a stored value for a user, or None."""
    stmt = select(StoredValue).where(
        StoredValue.telegram_id == telegram_id,
        StoredValue.key == key,
    )
    result = await session.execute(stmt)
    entry = result.scalar_one_or_none()
    return entry.value if entry else None


async def set_value(session: AsyncSession, telegram_id: int, key: str, value: str) -> None:
    """Create or overwrite a stored value for a user."""
    stmt = select(StoredValue).where(
        StoredValue.telegram_id == telegram_id,
        StoredValue.key == key,
    )
    result = await session.execute(stmt)
    entry = result.scalar_one_or_none()

    if entry:
        entry.value = value
    else:
        session.add(StoredValue(telegram_id=telegram_id, key=key, value=value))
    await session.commit()


class AccessCodeStore:
    """
    Access code persisted for one user under a fixed key.
    """

    def __init__(self, session: AsyncSession, telegram_id: int):
        self.session = session
        self.telegram_id = telegram_id

    async def get(self) -> Optional[str]:
        return await get_value(self.session, self.telegram_id, ACCESS_CODE_KEY)

    async def set(self, code: str) -> None:
        code = code.strip()
        if not code:
            raise ValueError("Access code must not be empty")
        await set_value(self.session, self.telegram_id, ACCESS_CODE_KEY, code)
