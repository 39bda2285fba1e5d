import pytest

from app import create_app


class RecordingMailer:
    """Stands in for ResendMailer and remembers every payload it was given"""

    def __init__(self):
        self.calls = []
        self.result = {'data': {'id': 'email_123'}, 'error': None}
        self.exc = None

    def send(self, params):
        self.calls.append(params)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def mailer(app):
    double = RecordingMailer()
    app.extensions['mailer'] = double
    return double


@pytest.fixture
def client(app, mailer):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return {
        'name': 'Al',
        'email': 'al@example.com',
        'message': 'Hello there friend',
        'honeypot': '',
    }
