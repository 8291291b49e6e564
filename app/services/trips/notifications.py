import asyncio
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from app.core.errors import NotificationFailure
from app.core.logger import logger
from app.core.mail_client import MailClient, Recipient

# (recipient, subject, html)
Message = Tuple[Recipient, str, str]


@dataclass
class NotificationReport:
    sent: List[str] = field(default_factory=list)
    failed: List[NotificationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


async def send_all(mail: MailClient, messages: Sequence[Message]) -> NotificationReport:
    """
    Send every message concurrently and collect a result per recipient.
    One failed recipient does not stop delivery to the others.
    """
    results = await asyncio.gather(
        *(mail.send(recipient, subject, html) for recipient, subject, html in messages),
        return_exceptions=True,
    )

    report = NotificationReport()
    for (recipient, _, _), result in zip(messages, results):
        if isinstance(result, NotificationFailure):
            logger.error(f"[Notify] {result.message}")
            report.failed.append(result)
        elif isinstance(result, Exception):
            failure = NotificationFailure(recipient.email, repr(result))
            logger.error(f"[Notify] Unexpected error sending to {recipient.email}", exc_info=result)
            report.failed.append(failure)
        elif isinstance(result, BaseException):
            raise result
        else:
            report.sent.append(recipient.email)

    if report.failed:
        logger.error(f"[Notify] {len(report.failed)} of {len(messages)} emails failed")
    return report


async def send_one(mail: MailClient, recipient: Recipient, subject: str, html: str) -> NotificationReport:
    return await send_all(mail, [(recipient, subject, html)])
