"""
Configuration settings for the Vawmy Curtains website and admin panel
"""
import os

from dotenv import load_dotenv

# Pick up a local .env before reading the environment
load_dotenv()


def _optional_float(name):
    value = os.environ.get(name)
    return float(value) if value else None


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'vawmy-dev-only-session-key'

    # Remote content API (collections, blog, social, contact, uploads)
    API_URL = (os.environ.get('API_URL') or 'http://localhost:3001').rstrip('/')
    # None means the transport default (no timeout)
    API_TIMEOUT = _optional_float('API_TIMEOUT')

    # Site settings
    SITE_NAME = 'Vawmy Curtains'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Upload limits
    MAX_IMAGE_SIZE = 5 * 1024 * 1024
    MAX_VIDEO_SIZE = 10 * 1024 * 1024
    UPLOAD_WORKERS = 4

    # ---------------------------------------------------------------------
    # Admin Credentials
    # A single shared pair supplied at deploy time. The session token is a
    # reversible encoding of this pair, so the admin gate is an access
    # convenience and not a security boundary. The username must not contain
    # ":"; the password may.
    # ---------------------------------------------------------------------
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'changeme'

    # Pause before answering a login attempt
    LOGIN_DELAY_SECONDS = 0.5


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    API_URL = 'http://api.test'
    API_TIMEOUT = None
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'changeme'
    LOGIN_DELAY_SECONDS = 0
    UPLOAD_WORKERS = 2
