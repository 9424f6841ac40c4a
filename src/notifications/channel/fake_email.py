"""Fake email adapter: keeps outgoing mail in memory for test assertions."""

from uuid import uuid4

from notifications.channel.email_port import DeliveryResult, EmailPort


class FakeEmailAdapter(EmailPort):
    def __init__(self):
        self.outbox: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Make subsequent sends succeed or fail."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> DeliveryResult:
        if not self.should_succeed:
            return DeliveryResult(delivered=False, error=self.failure_reason)

        message_id = f"mail-{uuid4().hex[:12]}"
        self.outbox.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
                "html_body": html_body,
            }
        )
        return DeliveryResult(delivered=True, message_id=message_id)

    def reset(self):
        self.outbox.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
