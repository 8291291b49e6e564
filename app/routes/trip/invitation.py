from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.trip.invite import InviteCreate, InviteCreatedResponse
from app.services.trips.invite_service import create_trip_invite
from app.core.database import get_db
from app.core.mail_client import MailClient, get_mail_client

router = APIRouter(prefix="/trips", tags=["Trip Invites"])

@router.post("/{trip_id}/invites", response_model=InviteCreatedResponse)
async def send_trip_invite(
    trip_id: str,
    invite_data: InviteCreate,
    db: AsyncSession = Depends(get_db),
    mail: MailClient = Depends(get_mail_client)
):
    participant_id = await create_trip_invite(db, mail, trip_id, invite_data.email)
    return InviteCreatedResponse(participantId=participant_id)
