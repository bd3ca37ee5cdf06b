# config.py
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Standard Flask secret key
    SECRET_KEY = os.environ.get('SECRET_KEY', 'a-very-secret-key-for-local-development')

    # The vault state only has to survive one page visit
    PERMANENT_SESSION_LIFETIME = timedelta(hours=2)

    # Security flags for session cookies
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'False') == 'True'  # True in production (HTTPS)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    LOCALES_DIR = os.path.join(BASE_DIR, 'locales')

    # --- LANGUAGE ---
    BABEL_DEFAULT_LOCALE = os.environ.get('BABEL_DEFAULT_LOCALE', 'en')
    SUPPORTED_LANGUAGES = ['en', 'sw']

    # --- CREDITS ---
    STARTING_CREDITS = int(os.environ.get('STARTING_CREDITS', 25))
    AD_REWARD_CREDITS = int(os.environ.get('AD_REWARD_CREDITS', 1))

    # --- MOCK GATEWAY ---
    # Artificial latency (seconds) standing in for the real endpoints.
    CATALOG_LATENCY_SECONDS = float(os.environ.get('CATALOG_LATENCY_SECONDS', 0.15))
    EARN_LATENCY_SECONDS = float(os.environ.get('EARN_LATENCY_SECONDS', 0.6))
    REDEEM_LATENCY_SECONDS = float(os.environ.get('REDEEM_LATENCY_SECONDS', 0.3))
    DOWNLOAD_BASE_URL = os.environ.get('DOWNLOAD_BASE_URL', 'https://example.com/download')

    # How long a toast stays on screen
    NOTIFICATION_SECONDS = float(os.environ.get('NOTIFICATION_SECONDS', 2))

    # --- RATE LIMITING ---
    RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'True') == 'True'
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    CATALOG_LATENCY_SECONDS = 0.0
    EARN_LATENCY_SECONDS = 0.0
    REDEEM_LATENCY_SECONDS = 0.0
    RATELIMIT_ENABLED = False
