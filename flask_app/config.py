"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    TZ_BRIDGE_CONFIG_FILE = os.environ.get('TZ_BRIDGE_CONFIG_FILE') or 'config.ini'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    TZ_BRIDGE_CONFIG_FILE = 'config-does-not-exist.ini'
