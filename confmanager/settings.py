"""Configuration classes, selected by name in the application factory."""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev_key_please_change')

    # Supabase project. The key is the service role key: the app talks to
    # the backend from the server only, and admin user creation needs it.
    SUPABASE_URL = os.environ.get('SUPABASE_URL', '')
    SUPABASE_KEY = os.environ.get('SUPABASE_KEY', '')
    SUPABASE_BUCKET = os.environ.get('SUPABASE_BUCKET', 'articulos')

    # Temporary password for accounts created from the admin panel
    DEFAULT_TEMP_PASSWORD = os.environ.get('DEFAULT_TEMP_PASSWORD', '123456')
    MIN_PASSWORD_LENGTH = 6

    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_MB', '20')) * 1024 * 1024

    BABEL_DEFAULT_LOCALE = 'es'
    LANGUAGES = ['es', 'en']

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    SUPABASE_URL = 'http://localhost:54321'
    SUPABASE_KEY = 'testing-key'
    SUPABASE_BUCKET = 'articulos'
    MAX_CONTENT_LENGTH = 1024 * 1024


class ProductionConfig(Config):
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
