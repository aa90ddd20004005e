from flask import Flask
from flask_cors import CORS
from .config.settings import Config
from .services.session.session_registry import SessionRegistry


def create_app(config_class=Config):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Logging + credential check
    config_class.init_app(app)

    # In-memory per-browser sessions
    app.extensions["chef_ai.sessions"] = SessionRegistry(app.config["MAX_SESSIONS"])

    # Register blueprints
    from .routes.analysis import analysis_bp
    from .routes.ui import ui_bp

    app.register_blueprint(analysis_bp)
    app.register_blueprint(ui_bp)

    return app
