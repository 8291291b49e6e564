"""Shared test fixtures for the planner API."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Set

import pytest
import pytest_asyncio

from app.core.database import Base, build_engine, build_session_factory
from app.core.errors import NotificationFailure
from app.core.mail_client import MailClient, Recipient
import app.models  # noqa: F401  registers tables on Base.metadata


class RecordingMailClient(MailClient):
    """Mail client double that records sends and fails for chosen addresses."""

    def __init__(self, failing: Optional[Set[str]] = None):
        super().__init__(None, 0, None, None, "Planner", "planner@me.com")
        self.failing = failing or set()
        self.sent: List[tuple] = []

    async def send(self, recipient: Recipient, subject: str, html: str) -> None:
        if recipient.email in self.failing:
            raise NotificationFailure(recipient.email, "mailbox unavailable")
        self.sent.append((recipient, subject, html))

    @property
    def recipients(self) -> List[str]:
        return [recipient.email for recipient, _, _ in self.sent]


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db(session_factory):
    session = session_factory()
    yield session
    await session.close()


@pytest.fixture
def mail():
    return RecordingMailClient()


@pytest.fixture
def tomorrow():
    return datetime.now(timezone.utc) + timedelta(days=1)


@pytest.fixture
def make_mail():
    return RecordingMailClient
