"""
Notifications Module - Transactional email through the Resend HTTP API
"""

import requests
from flask import current_app


DEFAULT_API_URL = 'https://api.resend.com'
DEFAULT_TIMEOUT = 10


class MailerConfigError(RuntimeError):
    """Raised when the email provider is used without credentials"""


class ResendMailer:
    """
    Flask extension wrapping the Resend REST API

    Mirrors the shape of the official SDK response: every call returns
    {'data': ..., 'error': ...} where exactly one side is set. Transport
    failures (DNS, TLS, timeout) are not translated and propagate as
    requests exceptions.

    Settings are read from the current app on every call, so one instance
    can serve several apps.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions['mailer'] = self
        if app.config.get('RESEND_API_KEY'):
            app.logger.info('✓ Resend mailer configured')
        else:
            app.logger.warning('✗ RESEND_API_KEY is not set - contact emails will fail')

    def send(self, params):
        """
        Send one email

        Args:
            params (dict): Resend email payload (from, to, subject, html, reply_to)

        Returns:
            dict: {'data': {'id': ...}, 'error': None} on success,
                {'data': None, 'error': {...}} when the provider rejects the email
        """
        config = current_app.config
        api_key = config.get('RESEND_API_KEY')
        if not api_key:
            raise MailerConfigError('RESEND_API_KEY is not configured')

        api_url = (config.get('RESEND_API_URL') or DEFAULT_API_URL).rstrip('/')
        response = requests.post(
            f"{api_url}/emails",
            json=params,
            headers={
                'Authorization': f"Bearer {api_key}",
                'Content-Type': 'application/json',
            },
            timeout=config.get('RESEND_TIMEOUT', DEFAULT_TIMEOUT),
        )

        if 200 <= response.status_code < 300:
            return {'data': _json_or_none(response), 'error': None}

        error = _json_or_none(response)
        if not isinstance(error, dict):
            error = {
                'statusCode': response.status_code,
                'name': 'application_error',
                'message': response.text[:200] or response.reason or 'Unknown error',
            }
        current_app.logger.debug(f"Resend API error {response.status_code}: {error}")
        return {'data': None, 'error': error}


def _json_or_none(response):
    try:
        return response.json()
    except ValueError:
        return None


def build_contact_email(submission, html):
    """Resend payload for a contact form submission"""
    return {
        'from': current_app.config['CONTACT_FROM'],
        'to': list(current_app.config['CONTACT_RECIPIENTS']),
        'subject': submission.subject,
        'reply_to': submission.email,
        'html': html,
    }


def get_mailer():
    """The mailer registered on the current app"""
    return current_app.extensions['mailer']
