"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the app factory to avoid circular imports
and enable better testing.
"""

from utils.notifications import ResendMailer

# Initialize extensions without binding to app
mailer = ResendMailer()

__all__ = ['mailer']
