import uuid

from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import UUID

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


class Profile(Base):
    """Directory profile. Display name resolves full_name -> username -> "Unknown"."""
    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    full_name = Column(String(255), nullable=True)
    username = Column(String(255), nullable=True, unique=True, index=True)
    headline = Column(Text, nullable=True)  # "Title | skill, skill" or free text
    avatar_url = Column(String(1000), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
