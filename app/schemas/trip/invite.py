from pydantic import BaseModel, EmailStr


# When the owner invites someone to an existing trip
class InviteCreate(BaseModel):
    email: EmailStr


class InviteCreatedResponse(BaseModel):
    participantId: str
