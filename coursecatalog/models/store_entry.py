"""Key-value store table definitions."""

from sqlalchemy import Column, DateTime, String, Text, func
from coursecatalog.database import Base


class StoreEntry(Base):
    """One bucket of the key-value store: a key and its serialized JSON document."""
    __tablename__ = "store_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
