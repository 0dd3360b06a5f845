import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload size


class ConfigHelper:
    """Helper class for configuration management"""

    @staticmethod
    def get_app_config():
        """Get Flask application configuration from environment"""
        return {
            'DATA_FILE': os.getenv('DATA_FILE', 'db.json'),
            'UPLOAD_FOLDER': os.getenv('UPLOAD_FOLDER', 'uploads'),
            'MAX_CONTENT_LENGTH': int(os.getenv('MAX_CONTENT_LENGTH', str(DEFAULT_MAX_CONTENT_LENGTH))),
            'SECRET_KEY': os.getenv('SESSION_SECRET', 'dev-secret-key-change-in-production'),
            'ALLOWED_ORIGINS': os.getenv('ALLOWED_ORIGINS', '*'),
            # Base URL the dashboard script calls; empty means same origin
            'API_BASE': os.getenv('API_BASE', '').rstrip('/'),
            'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        }

    @staticmethod
    def get_server_config():
        """Get host/port settings used when running the development server"""
        return {
            'host': os.getenv('HOST', '0.0.0.0'),
            'port': int(os.getenv('PORT', '4000')),
            'debug': os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
        }
