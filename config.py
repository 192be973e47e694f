import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Server Settings
    PORT = int(os.environ.get('PORT', 2000))
    CORS_ORIGIN = os.environ.get('CORS_ORIGIN')
    TRUST_PROXY = _env_flag('TRUST_PROXY')

    # Request bodies (JSON and form-encoded) are capped at 10kb
    MAX_CONTENT_LENGTH = 10 * 1024

    # JSON Settings
    JSON_AS_ASCII = False

    # Mail Settings
    GMAIL_USER = os.environ.get('GMAIL_USER')
    GMAIL_APP_PASSWORD = os.environ.get('GMAIL_APP_PASSWORD')
    EMAIL_TO = os.environ.get('EMAIL_TO')
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = os.environ.get('SMTP_PORT', '587')

    # Rate Limiting (window in seconds)
    RATE_LIMIT_WINDOW = 15 * 60
    GLOBAL_RATE_LIMIT = 50
    CONTACT_RATE_LIMIT = 5

    LOG_LEVEL = 'INFO'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_LEVEL = 'INFO'


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGIN = 'https://portfolio.test'
    TRUST_PROXY = False
    GMAIL_USER = 'relay@portfolio.test'
    GMAIL_APP_PASSWORD = 'app-password'
    EMAIL_TO = 'owner@portfolio.test'
    SMTP_HOST = 'smtp.portfolio.test'
    SMTP_PORT = '587'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
