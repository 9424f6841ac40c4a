"""SMTP email adapter: delivers through an authenticated SMTP relay.

Defaults target Gmail's submission port with STARTTLS; every network call
shares one timeout so a stalled relay surfaces as a failed delivery.
"""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from notifications.channel.email_port import DeliveryResult, EmailPort

logger = structlog.get_logger(__name__)


class SMTPEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        sender: str | None = None,
        timeout: float = 10.0,
        use_tls: bool = True,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.timeout = timeout
        self.use_tls = use_tls

    def _build_message(self, to, subject, body, html_body) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> DeliveryResult:
        message = self._build_message(to, subject, body, html_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as client:
                if self.use_tls:
                    client.starttls()
                if self.username and self.password:
                    client.login(self.username, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning("SMTP delivery failed", host=self.host, to=to, error=str(exc))
            return DeliveryResult(delivered=False, error=str(exc))

        return DeliveryResult(delivered=True, message_id=message["Message-ID"])
