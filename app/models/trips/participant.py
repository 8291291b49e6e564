from sqlalchemy import Column, String, Boolean, ForeignKey, DateTime, Integer
from sqlalchemy.orm import relationship
from app.core.database import Base
from datetime import datetime, timezone
import uuid


class Participant(Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)

    name = Column(String, nullable=True)
    email = Column(String, nullable=False)
    is_owner = Column(Boolean, nullable=False, default=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)

    # Index within the request that created the trip; invitations added later keep 0
    position = Column(Integer, nullable=False, default=0)
    # Set client side for microsecond resolution, participants are listed by it
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    trip = relationship("Trip", back_populates="participants")
