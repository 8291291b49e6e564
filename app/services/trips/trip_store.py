from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant


class TripStore:
    """Persistence for trips and their participants, bound to one session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_trip(self, trip_id: str) -> Optional[Trip]:
        result = await self.db.execute(
            select(Trip).where(Trip.id == trip_id).execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create_trip_with_owner(
        self,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        owner_name: str,
        owner_email: str,
        emails_to_invite: Sequence[str],
    ) -> Trip:
        """Trip, owner and invitees are committed together or not at all."""
        trip = Trip(
            destination=destination,
            starts_at=starts_at,
            ends_at=ends_at,
            is_confirmed=False,
        )
        participants = [
            Participant(
                name=owner_name,
                email=owner_email,
                is_owner=True,
                is_confirmed=True,
                position=0,
            )
        ]
        participants.extend(
            Participant(email=email, is_owner=False, is_confirmed=False, position=index)
            for index, email in enumerate(emails_to_invite, start=1)
        )
        trip.participants = participants

        self.db.add(trip)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(trip)
        return trip

    async def mark_trip_confirmed(self, trip_id: str) -> bool:
        """
        Flip is_confirmed from false to true.
        Returns True only for the caller whose update applied the transition.
        """
        result = await self.db.execute(
            update(Trip)
            .where(Trip.id == trip_id, Trip.is_confirmed.is_(False))
            .values(is_confirmed=True)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount == 1

    async def list_participants(self, trip_id: str, exclude_owner: bool = False) -> List[Participant]:
        query = select(Participant).where(Participant.trip_id == trip_id)
        if exclude_owner:
            query = query.where(Participant.is_owner.is_(False))
        query = query.order_by(Participant.is_owner.desc(), Participant.created_at, Participant.position)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create_participant(self, trip_id: str, email: str) -> Participant:
        participant = Participant(
            trip_id=trip_id,
            email=email,
            is_owner=False,
            is_confirmed=False,
        )
        self.db.add(participant)
        await self.db.commit()
        await self.db.refresh(participant)
        return participant
