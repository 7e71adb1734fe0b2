import logging
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Optional

import aiosmtplib

from portfolio_backend.errors import DeliveryError
from portfolio_backend.interfaces.notifier import INotifier

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465


def render_body(name: str, email: str, about: Optional[str], prompt: str) -> str:
    details = prompt.replace("\n", "<br>")
    return f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Name:</strong> {name}</p>
        <p><strong>Email:</strong> {email}</p>
        <p><strong>Subject (About):</strong> {about or 'Not specified'}</p>
        <h3>Details:</h3>
        <p>{details}</p>
    """


class EmailNotifier(INotifier):
    """Sends one HTML notification per submission to a fixed receiver over SMTP."""

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str,
        password: str,
        receiver: str
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.receiver = receiver

    def build_message(self, name: str, email: str, about: Optional[str], prompt: str) -> EmailMessage:
        message = EmailMessage()
        # Relays only accept our own address as sender, so the submitter goes in the display name
        message["From"] = formataddr((name, self.username))
        message["To"] = self.receiver
        message["Reply-To"] = email
        message["Subject"] = f"New Portfolio Inquiry: {about or 'General'} from {name}"
        domain = self.username.rpartition("@")[2] or None
        message["Message-ID"] = make_msgid(domain=domain)
        message.set_content(render_body(name, email, about, prompt), subtype="html")
        return message

    async def notify(self, name: str, email: str, about: Optional[str], prompt: str) -> str:
        try:
            # Header values may not contain line breaks
            message = self.build_message(name, email, about, prompt)
        except (ValueError, TypeError) as e:
            raise DeliveryError(f"Could not build notification email: {e}") from e
        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                use_tls=self.port == IMPLICIT_TLS_PORT,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise DeliveryError(f"Could not send notification email: {e}") from e
        return message["Message-ID"]
