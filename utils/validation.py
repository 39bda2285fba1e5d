"""
Validation Module - Contact form shape checks

The same rules and messages are mirrored in static/js/contact.js so the
browser can block a bad submission before any request is made.
"""

from email_validator import validate_email, EmailNotValidError
from models import ContactSubmission


NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

ERROR_MESSAGES = {
    'name': f'Name must be at least {NAME_MIN_LENGTH} characters.',
    'email': 'Please enter a valid email address.',
    'message': f'Message must be at least {MESSAGE_MIN_LENGTH} characters.',
}


def is_valid_email(value):
    """Syntax-only email check, no DNS lookup"""
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_contact(name, email, message):
    """
    Validate the three visible contact fields

    Args:
        name (str): Sender name
        email (str): Sender email address
        message (str): Message body

    Returns:
        tuple: (ContactSubmission, {}) when valid, (None, errors) otherwise.
            errors maps a field name to a human readable message.
    """
    name = (name or '').strip()
    email = (email or '').strip()
    message = (message or '').strip()

    errors = {}
    if len(name) < NAME_MIN_LENGTH:
        errors['name'] = ERROR_MESSAGES['name']
    if not is_valid_email(email):
        errors['email'] = ERROR_MESSAGES['email']
    if len(message) < MESSAGE_MIN_LENGTH:
        errors['message'] = ERROR_MESSAGES['message']

    if errors:
        return None, errors
    return ContactSubmission(name=name, email=email, message=message), {}
