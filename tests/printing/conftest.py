import pytest
from protean.integrations.pytest import DomainFixture


class RecordingNotifier:
    """Notifier double that remembers every call and can be told to fail."""

    def __init__(self):
        self.created: list[dict] = []
        self.status_changes: list[dict] = []
        self.fail_with = None

    def notify_order_created(self, email, payment_id, total, username, shop_name):
        if self.fail_with is not None:
            raise self.fail_with
        self.created.append(
            {"email": email, "payment_id": payment_id, "total": total, "username": username, "shop_name": shop_name}
        )

    def notify_status_changed(self, email, payment_id, shop_name, status, total, link, username):
        if self.fail_with is not None:
            raise self.fail_with
        self.status_changes.append(
            {
                "email": email,
                "payment_id": payment_id,
                "shop_name": shop_name,
                "status": status,
                "total": total,
                "link": link,
                "username": username,
            }
        )


@pytest.fixture(scope="session")
def printing_bed():
    from printing.domain import printing

    bed = DomainFixture(printing)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(printing_bed):
    with printing_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def run_around_tests(_ctx):
    """Clear stored records and the notifier singleton after every test."""
    yield

    from notifications.notifier import reset_notifier
    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    reset_notifier()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def lifecycle(notifier):
    from printing.order.lifecycle import OrderLifecycle

    return OrderLifecycle(notifier=notifier, frontend_url="https://printz.test")


@pytest.fixture()
def order_request():
    """Keyword arguments of a valid PlaceOrder command; tests override fields as needed."""

    def _build(**overrides):
        defaults = {
            "student_username": "asha",
            "shop_username": "campus-prints",
            "copies": 2,
            "page_size": "A4",
            "total_pages": 12,
            "documents": '["uploads/thesis.pdf"]',
            "color_mode": "Grayscale",
            "total": 50.0,
            "payment_id": "pay_123",
        }
        defaults.update(overrides)
        return defaults

    return _build
