import os
import re

import pytest

from models import ContactSubmission
from utils.validation import validate_contact, is_valid_email, ERROR_MESSAGES


def test_valid_submission_returns_stripped_values():
    submission, errors = validate_contact('  Al ', ' al@example.com ', '  Hello there friend ')
    assert errors == {}
    assert isinstance(submission, ContactSubmission)
    assert submission.name == 'Al'
    assert submission.email == 'al@example.com'
    assert submission.message == 'Hello there friend'
    assert submission.honeypot == ''


def test_every_field_invalid_reports_every_field():
    submission, errors = validate_contact('', 'nope', 'short')
    assert submission is None
    assert errors == ERROR_MESSAGES


@pytest.mark.parametrize('name', ['', 'A', ' A ', '   '])
def test_short_names_are_rejected(name):
    _, errors = validate_contact(name, 'al@example.com', 'Hello there friend')
    assert errors == {'name': 'Name must be at least 2 characters.'}


@pytest.mark.parametrize('message', ['', 'Too short', '    123456789   '])
def test_short_messages_are_rejected(message):
    _, errors = validate_contact('Al', 'al@example.com', message)
    assert errors == {'message': 'Message must be at least 10 characters.'}


def test_message_of_exactly_ten_characters_is_accepted():
    submission, errors = validate_contact('Al', 'al@example.com', '0123456789')
    assert errors == {}
    assert submission.message == '0123456789'


@pytest.mark.parametrize('email', [
    '',
    'plainaddress',
    '@example.com',
    'al@',
    'al@@example.com',
    'al example@example.com',
])
def test_malformed_emails_are_rejected(email):
    _, errors = validate_contact('Al', email, 'Hello there friend')
    assert errors == {'email': 'Please enter a valid email address.'}


def test_is_valid_email_skips_deliverability_lookup():
    assert is_valid_email('someone@no-such-host-4f2a9c.com')


def test_none_values_are_treated_as_empty():
    submission, errors = validate_contact(None, None, None)
    assert submission is None
    assert set(errors) == {'name', 'email', 'message'}


def _browser_email_pattern():
    path = os.path.join(os.path.dirname(__file__), '..', 'static', 'js', 'contact.js')
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    return re.compile(re.search(r'var EMAIL_PATTERN = /(.+)/;', source).group(1))


@pytest.mark.parametrize('email', [
    'al@example.com',
    'first.last+tag@mail.example.co.uk',
    'al..x@example.com',
    '.al@example.com',
    'al.@example.com',
    'al@-example.com',
    'al@example',
    'al example@example.com',
    'plainaddress',
])
def test_browser_email_check_agrees_with_server(email):
    assert bool(_browser_email_pattern().match(email)) == is_valid_email(email)
