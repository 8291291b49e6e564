from app.core.database import engine, Base
from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
