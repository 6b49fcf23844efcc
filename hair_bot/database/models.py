# hair_bot/database/models.py

import datetime
from sqlalchemy import BigInteger, String, DateTime, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


class StoredValue(Base):
    """
    A durable key-value entry owned by a Telegram user.
    """
    __tablename__ = "stored_values"
    __table_args__ = (UniqueConstraint("telegram_id", "key", name="uq_stored_values_owner_key"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    telegram_id: Mapped[int] = mapped_column(BigInteger, index=True, nullable=False)
    key: Mapped[str] = mapped_column(String(64), nullable=False)
    value: Mapped[str] = mapped_column(String, nullable=False)

    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        default=datetime.datetime.utcnow,
        onupdate=datetime.datetime.utcnow,
        server_default=func.now()
    )

    def __repr__(self):
        return f"<StoredValue(telegram_id={self.telegram_id}, key='{self.key}')>"
