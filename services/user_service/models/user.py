from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, Text

from user_service.core.database import Base


class User(Base):
    """A user record; timestamps are epoch microseconds."""

    __tablename__ = "users"
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False, index=True)
    updated_at = Column(BigInteger, nullable=False)


__all__ = ["User"]
