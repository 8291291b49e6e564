from datetime import datetime
from typing import Sequence, Tuple
from app.core.config import settings


def format_date(value: datetime) -> str:
    """Long date, e.g. 'October 19, 2026'."""
    return f"{value:%B} {value.day}, {value.year}"


def trip_confirmation_link(trip_id: str) -> str:
    return f"{settings.API_BASE_URL}/trips/{trip_id}/confirm"


def participant_confirmation_link(participant_id: str) -> str:
    return f"{settings.API_BASE_URL}/participants/{participant_id}/confirm"


def trip_redirect_url(trip_id: str) -> str:
    return f"{settings.WEB_BASE_URL}/trips/{trip_id}"


def render_owner_email(
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    owner_name: str,
    owner_email: str,
    emails_to_invite: Sequence[str],
    confirmation_link: str,
) -> Tuple[str, str]:
    """
    Message sent to the trip owner right after creation.
    Returns (subject, html).
    """
    subject = f"Confirm your trip to {destination}"
    html = f"""
    <div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
      <h1>You requested a trip to {destination}</h1>
      <p>Destination: {destination}</p>
      <p>Starts at: {format_date(starts_at)}</p>
      <p>Ends at: {format_date(ends_at)}</p>
      <p>Owner name: {owner_name}</p>
      <p>Owner email: {owner_email}</p>
      <p>Emails to invite: {', '.join(emails_to_invite)}</p>
      <p><a href="{confirmation_link}">Confirm your trip</a></p>
    </div>
    """
    return subject, html


def render_participant_email(
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    confirmation_link: str,
) -> Tuple[str, str]:
    """
    Message sent to an invited participant.
    Returns (subject, html).
    """
    subject = f"Confirm your trip to {destination}"
    html = f"""
    <div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
      <h1>You have been invited to a trip to {destination}</h1>
      <p>Destination: {destination}</p>
      <p>Starts at: {format_date(starts_at)}</p>
      <p>Ends at: {format_date(ends_at)}</p>
      <p>Confirm your presence by clicking the link below:</p>
      <p><a href="{confirmation_link}">Confirm your trip</a></p>
    </div>
    """
    return subject, html
