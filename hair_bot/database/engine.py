# hair_bot/database/engine.py

import os
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from .models import Base

# DATABASE_URL looks like "sqlite+aiosqlite:///path/to/hair_bot.db"
# By default the DB lives in the project root.
DB_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "hair_bot.db")
DB_URL = os.getenv("DATABASE_URL") or f"sqlite+aiosqlite:///{DB_PATH}"


class Database:
    def __init__(self, db_url: str = DB_URL):
        self.engine = create_async_engine(db_url)
        self.session_maker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    async def init_db(self):
        """Initializes the database and creates tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        await self.engine.dispose()


db = Database()
