from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.core.logger import logger
from app.core.mail_client import MailClient, Recipient
from app.services.trips.notifications import send_one
from app.services.trips.trip_emails import render_participant_email, trip_confirmation_link
from app.services.trips.trip_store import TripStore
from app.services.trips.validation import validate_email_address


async def create_trip_invite(
        db: AsyncSession,
        mail: MailClient,
        trip_id: str,
        email: str
) -> str:
    validate_email_address(email)

    store = TripStore(db)
    trip = await store.find_trip(trip_id)

    if not trip:
        logger.warning(f"Invite requested for unknown trip {trip_id}")
        raise NotFound("Trip not found")

    # Same address may be invited more than once, and after confirmation
    participant = await store.create_participant(trip.id, email)
    logger.info(f"Participant {participant.id} invited to trip {trip.id}")

    # Points at the trip-level confirmation, not the participant one
    subject, html = render_participant_email(
        destination=trip.destination,
        starts_at=trip.starts_at,
        ends_at=trip.ends_at,
        confirmation_link=trip_confirmation_link(trip.id),
    )
    await send_one(mail, Recipient(email=participant.email), subject, html)

    return participant.id
