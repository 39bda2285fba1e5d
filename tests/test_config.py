import logging

from app import create_app
from config import get_config, DevelopmentConfig, ProductionConfig, TestingConfig


def test_get_config_by_name():
    assert get_config('testing') is TestingConfig
    assert get_config('production') is ProductionConfig


def test_get_config_falls_back_to_flask_env(monkeypatch):
    monkeypatch.setenv('FLASK_ENV', 'production')
    assert get_config() is ProductionConfig


def test_unknown_config_uses_development(monkeypatch):
    monkeypatch.delenv('FLASK_ENV', raising=False)
    assert get_config('staging') is DevelopmentConfig
    assert get_config() is DevelopmentConfig


def test_create_app_applies_named_config():
    app = create_app('testing')
    assert app.config['TESTING'] is True
    assert app.config['CONTACT_RECIPIENTS'] == ['owner@example.com']


def test_log_level_is_applied(monkeypatch):
    monkeypatch.setattr(TestingConfig, 'LOG_LEVEL', 'WARNING')
    app = create_app('testing')
    assert app.logger.level == logging.WARNING


def test_production_uses_secure_cookies():
    assert ProductionConfig.SESSION_COOKIE_SECURE is True
