import pytest

from contentdesk import create_app
from contentdesk.extensions import GATEWAY_KEY, db, get_policy, get_store
from contentdesk.gateways.notification import GatewayResponse

WEBHOOK_URL = "https://hooks.example.test/publish"


class RecordingGateway:
    """Stands in for NotificationGateway and remembers every call."""

    def __init__(self):
        self.calls = []
        self.response = GatewayResponse(status=200, body="accepted")
        self.error = None

    def notify(self, target_url, payload, timeout_ms):
        self.calls.append({
            "url": target_url,
            "payload": payload,
            "timeout_ms": timeout_ms,
        })
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway(app):
    fake = RecordingGateway()
    app.extensions[GATEWAY_KEY] = fake
    return fake


@pytest.fixture
def store(app):
    return get_store()


@pytest.fixture
def policy(app):
    return get_policy()
