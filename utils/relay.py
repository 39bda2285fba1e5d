"""
Relay Module - Forward a contact submission to the email provider

Used by the JSON endpoint (/api/send) and by the plain form fallback
(/contact). Each call is independent: one submission, at most one
outbound request, no retry.
"""

from flask import current_app, render_template
from models import ContactSubmission
from .notifications import build_contact_email, get_mailer
from .security import get_client_ip


GENERIC_ERROR = 'Something went wrong.'


def relay_submission(payload):
    """
    Relay one contact payload

    Args:
        payload: Decoded request body {name, email, message, honeypot}

    Returns:
        tuple: (response body dict, HTTP status code)
    """
    try:
        submission = ContactSubmission.from_payload(payload)

        # Spam looks exactly like a delivered message to the sender
        if submission.is_spam:
            current_app.logger.info(f"Honeypot triggered from {get_client_ip()}, message dropped")
            return {'success': True}, 200

        html = render_template('emails/contact.html', submission=submission)
        result = get_mailer().send(build_contact_email(submission, html))

        error = result.get('error')
        if error is not None:
            current_app.logger.warning(f"Email provider rejected contact message: {error}")
            return {'error': error}, 500

        message_id = (result.get('data') or {}).get('id')
        current_app.logger.info(f"Contact message delivered, id: {message_id}")
        return {'success': True}, 200
    except Exception:
        current_app.logger.exception('Contact relay failed')
        return {'error': GENERIC_ERROR}, 500
