import pytest
from notifications.channel import reset_email_channel
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.notifier import reset_notifier


@pytest.fixture(autouse=True)
def _reset_registries():
    reset_email_channel()
    reset_notifier()
    yield
    reset_email_channel()
    reset_notifier()


@pytest.fixture()
def email_channel():
    return FakeEmailAdapter()
