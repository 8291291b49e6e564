from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.core.logger import logger
from app.core.mail_client import MailClient, Recipient
from app.services.trips.notifications import NotificationReport, send_all, send_one
from app.services.trips.trip_emails import (
    participant_confirmation_link,
    render_owner_email,
    render_participant_email,
    trip_confirmation_link,
    trip_redirect_url,
)
from app.services.trips.trip_store import TripStore
from app.services.trips.validation import validate_new_trip

ALREADY_CONFIRMED_REDIRECT = "/"


class TripService:
    def __init__(self, mail: MailClient):
        self.mail = mail
        # Outcome of the most recent fan-out, kept for callers that want to retry
        self.last_report: Optional[NotificationReport] = None

    async def create_trip(
        self,
        db: AsyncSession,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        owner_name: str,
        owner_email: str,
        emails_to_invite: Sequence[str],
        now: Optional[datetime] = None,
    ) -> str:
        validate_new_trip(destination, starts_at, ends_at, owner_email, emails_to_invite, now=now)

        store = TripStore(db)
        trip = await store.create_trip_with_owner(
            destination=destination,
            starts_at=starts_at,
            ends_at=ends_at,
            owner_name=owner_name,
            owner_email=owner_email,
            emails_to_invite=list(emails_to_invite),
        )
        logger.info(f"Trip {trip.id} to {destination} created by {owner_email} with {len(emails_to_invite)} invitees")

        subject, html = render_owner_email(
            destination=destination,
            starts_at=starts_at,
            ends_at=ends_at,
            owner_name=owner_name,
            owner_email=owner_email,
            emails_to_invite=emails_to_invite,
            confirmation_link=trip_confirmation_link(trip.id),
        )
        self.last_report = await send_one(self.mail, Recipient(email=owner_email, name=owner_name), subject, html)
        return trip.id

    async def confirm_trip(self, db: AsyncSession, trip_id: str) -> str:
        store = TripStore(db)
        trip = await store.find_trip(trip_id)

        if not trip:
            logger.warning(f"Confirmation requested for unknown trip {trip_id}")
            raise NotFound("Trip not found")

        if trip.is_confirmed:
            logger.warning(f"Trip {trip_id} already confirmed")
            return ALREADY_CONFIRMED_REDIRECT

        # Committed before any email goes out
        if not await store.mark_trip_confirmed(trip_id):
            logger.warning(f"Trip {trip_id} was confirmed by a concurrent request")
            return ALREADY_CONFIRMED_REDIRECT
        logger.info(f"Trip {trip_id} confirmed")

        participants = await store.list_participants(trip_id, exclude_owner=True)
        messages = []
        for participant in participants:
            subject, html = render_participant_email(
                destination=trip.destination,
                starts_at=trip.starts_at,
                ends_at=trip.ends_at,
                confirmation_link=participant_confirmation_link(participant.id),
            )
            messages.append((Recipient(email=participant.email, name=participant.name), subject, html))

        self.last_report = await send_all(self.mail, messages)
        return trip_redirect_url(trip_id)
