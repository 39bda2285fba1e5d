import os
from datetime import timedelta


def _split_recipients(value):
    return [addr.strip() for addr in (value or '').split(',') if addr.strip()]


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Request size cap for the contact form
    MAX_CONTENT_LENGTH = 64 * 1024

    # Portfolio content
    PORTFOLIO_DATA_FILE = os.environ.get('PORTFOLIO_DATA_FILE', 'data/portfolio.json')

    # Email provider (Resend)
    RESEND_API_KEY = os.environ.get('RESEND_API_KEY')
    RESEND_API_URL = os.environ.get('RESEND_API_URL', 'https://api.resend.com')
    RESEND_TIMEOUT = float(os.environ.get('RESEND_TIMEOUT', '10'))

    # Contact form routing
    CONTACT_FROM = os.environ.get('CONTACT_FROM', "Roy's Portfolio <onboarding@resend.dev>")
    CONTACT_RECIPIENTS = _split_recipients(
        os.environ.get('CONTACT_RECIPIENTS', 'roymakanjira@gmail.com'))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret'
    RESEND_API_KEY = 're_test_key'
    RESEND_API_URL = 'https://api.resend.test'
    CONTACT_FROM = 'Portfolio <onboarding@resend.dev>'
    CONTACT_RECIPIENTS = ['owner@example.com']


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
