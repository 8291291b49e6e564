from datetime import datetime, timezone
from typing import Iterable, Optional

from email_validator import validate_email, EmailNotValidError

from app.core.errors import InvalidInput

MIN_DESTINATION_LENGTH = 4


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def validate_trip_window(starts_at: datetime, ends_at: datetime, now: Optional[datetime] = None) -> None:
    now = as_utc(now) if now else datetime.now(timezone.utc)
    starts_at = as_utc(starts_at)
    ends_at = as_utc(ends_at)

    if starts_at <= now:
        raise InvalidInput("starts_at must be in the future")

    if ends_at < starts_at:
        raise InvalidInput("ends_at must be after starts_at")


def validate_destination(destination: str) -> None:
    if destination is None or len(destination) < MIN_DESTINATION_LENGTH:
        raise InvalidInput(f"destination must be at least {MIN_DESTINATION_LENGTH} characters")


def validate_email_address(email: str) -> None:
    # The SMTP transport does not negotiate SMTPUTF8
    try:
        validate_email(email, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError as e:
        raise InvalidInput(f"Invalid email address '{email}': {e}") from e


def validate_new_trip(
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    owner_email: str,
    emails_to_invite: Iterable[str],
    now: Optional[datetime] = None,
) -> None:
    """Run every creation rule, raising InvalidInput on the first violation."""
    validate_destination(destination)
    validate_email_address(owner_email)
    for email in emails_to_invite:
        validate_email_address(email)
    validate_trip_window(starts_at, ends_at, now=now)
