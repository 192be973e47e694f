import pytest

from app import create_app


VALID_PAYLOAD = {
    'name': 'Jane Doe',
    'email': 'jane@example.com',
    'phone': '4045551234',
    'subject': 'Hello',
    'message': 'Hi there',
}


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def outbox(monkeypatch):
    """Capture dispatched emails instead of talking to an SMTP relay"""
    sent = []

    def fake_send_email(recipient, subject, body, html=False):
        sent.append({'recipient': recipient, 'subject': subject, 'body': body, 'html': html})
        return True

    monkeypatch.setattr('blueprints.contact.routes.send_email', fake_send_email)
    return sent


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)
