from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, Text

from listing_service.core.database import Base


class Listing(Base):
    """A listing record owned by a user of the user service."""

    __tablename__ = "listings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Lives in another service, so there is no foreign key and no existence check.
    user_id = Column(Integer, nullable=False, index=True)
    listing_type = Column(Text, nullable=False)
    price = Column(BigInteger, nullable=False)
    created_at = Column(BigInteger, nullable=False, index=True)
    updated_at = Column(BigInteger, nullable=False)


__all__ = ["Listing"]
