from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.trip.trip_schema import TripCreate, TripCreatedResponse
from app.core.database import get_db
from app.core.mail_client import MailClient, get_mail_client
from app.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=['Trips'])

async def get_trip_service(
    mail: MailClient = Depends(get_mail_client)
) -> TripService:
    return TripService(mail)

@router.post("", response_model=TripCreatedResponse)
async def create_trip_route(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    trip_id = await trip_service.create_trip(
        db,
        destination=trip.destination,
        starts_at=trip.starts_at,
        ends_at=trip.ends_at,
        owner_name=trip.owner_name,
        owner_email=trip.owner_email,
        emails_to_invite=trip.emails_to_invite,
    )
    return TripCreatedResponse(tripId=trip_id)

@router.get("/{trip_id}/confirm")
async def confirm_trip_route(
    trip_id: str,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    target = await trip_service.confirm_trip(db, trip_id)
    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)
