"""
Models - transient contact form data

Nothing here is persisted. A submission lives for the duration of one
request and is discarded once the email provider has answered.
"""

from collections.abc import Mapping


CONTACT_FIELDS = ('name', 'email', 'message', 'honeypot')


def _as_text(value):
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


class ContactSubmission:
    """One contact form submission: name, email, message and the honeypot."""

    def __init__(self, name='', email='', message='', honeypot=''):
        self.name = name
        self.email = email
        self.message = message
        self.honeypot = honeypot

    @classmethod
    def from_payload(cls, payload):
        """Build a submission from a decoded JSON object or a form mapping"""
        if not isinstance(payload, Mapping):
            raise TypeError(f"Contact payload must be an object, got {type(payload).__name__}")
        return cls(**{field: _as_text(payload.get(field)) for field in CONTACT_FIELDS})

    @property
    def is_spam(self):
        return bool(self.honeypot)

    @property
    def subject(self):
        return f"New Message from {self.name}"

    def to_dict(self):
        return {field: getattr(self, field) for field in CONTACT_FIELDS}

    def __repr__(self):
        return f"<ContactSubmission name={self.name!r} email={self.email!r}>"
