"""Email channel factory.

Provides get_email_channel() / set_email_channel() to swap transports:
- FakeEmailAdapter for development and testing (default)
- SMTPEmailAdapter when ``EMAIL_BACKEND=smtp``
"""

import os

from notifications.channel.email_port import EmailPort
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.channel.smtp_email import SMTPEmailAdapter

_current_channel: EmailPort | None = None


def _channel_from_env() -> EmailPort:
    backend = os.getenv("EMAIL_BACKEND", "fake").lower()
    if backend == "fake":
        return FakeEmailAdapter()
    if backend == "smtp":
        return SMTPEmailAdapter(
            host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            port=int(os.getenv("SMTP_PORT", "587")),
            username=os.getenv("EMAIL_USER"),
            password=os.getenv("EMAIL_PASS"),
            sender=os.getenv("EMAIL_FROM") or os.getenv("EMAIL_USER"),
            timeout=float(os.getenv("SMTP_TIMEOUT", "10")),
        )
    raise ValueError(f"Unknown email backend: {backend}")


def get_email_channel() -> EmailPort:
    """Return the configured email transport (singleton)."""
    global _current_channel
    if _current_channel is None:
        _current_channel = _channel_from_env()
    return _current_channel


def set_email_channel(channel: EmailPort) -> None:
    """Override the active email transport (useful for tests)."""
    global _current_channel
    _current_channel = channel


def reset_email_channel() -> None:
    """Forget the active transport; the next lookup reads the environment again."""
    global _current_channel
    _current_channel = None
