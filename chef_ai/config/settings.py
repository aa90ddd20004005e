import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _read_api_key():
    """Credential is read once at import; API_KEY wins over the Gemini/Google names."""
    for name in ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"):
        value = os.getenv(name)
        if value:
            return value
    return None


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB per upload

    # Upload settings
    ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}

    # Gemini settings
    GEMINI_API_KEY = _read_api_key()
    DEFAULT_MODEL = os.getenv("CHEF_AI_MODEL", "gemini-3-flash-preview")

    # Session settings (in-memory only; each session may hold one photo up to MAX_CONTENT_LENGTH)
    MAX_SESSIONS = int(os.getenv("CHEF_AI_MAX_SESSIONS", "32"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        logging.basicConfig(
            level=app.config.get("LOG_LEVEL", "INFO"),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        if not app.config.get("GEMINI_API_KEY"):
            logger.warning("No Gemini API key configured; set API_KEY (or GEMINI_API_KEY) before analyzing")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = "testing"
    GEMINI_API_KEY = "test-key"
    DEFAULT_MODEL = "gemini-test"
    MAX_SESSIONS = 8


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
