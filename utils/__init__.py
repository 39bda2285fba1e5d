"""
Utils Package - Centralized utility modules initialization
"""

from .data import load_data, get_default_portfolio_data, get_global_meta
from .notifications import ResendMailer, MailerConfigError, build_contact_email, get_mailer
from .relay import relay_submission, GENERIC_ERROR
from .security import get_client_ip, add_security_headers
from .validation import validate_contact, is_valid_email, ERROR_MESSAGES
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class
)

__all__ = [
    # Data
    'load_data',
    'get_default_portfolio_data',
    'get_global_meta',

    # Notifications
    'ResendMailer',
    'MailerConfigError',
    'build_contact_email',
    'get_mailer',

    # Relay
    'relay_submission',
    'GENERIC_ERROR',

    # Security
    'get_client_ip',
    'add_security_headers',

    # Validation
    'validate_contact',
    'is_valid_email',
    'ERROR_MESSAGES',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
