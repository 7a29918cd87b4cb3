"""
Flask application factory for the demo HR site.

The demo site reproduces the login, sign-up and employee profile screens
the regression suite drives, including the overlays (cookie banner,
marketing popup, modal, CAPTCHA, sticky header) that make the real site
flaky to automate. It gives the suite a hermetic target.
"""

import logging
import os
from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import BASE_DIR, get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, overrides: dict | None = None) -> Flask:
    """
    Create and configure the demo HR application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        overrides: Config values applied on top of the class, e.g. an
                   in-memory database for the Flask test client.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info("Creating demo HR app with config: %s", config_class.__name__)

    # Ensure instance folder exists for the sqlite database
    try:
        os.makedirs(BASE_DIR / "instance", exist_ok=True)
    except OSError:
        pass

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from demo_hr.routes.api import api_bp
    from demo_hr.routes.auth import auth_bp
    from demo_hr.routes.profile import profile_bp
    from demo_hr.overlays import register_overlays

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    register_overlays(app)

    with app.app_context():
        if app.config.get("RESET_DATABASE"):
            db.drop_all()
        db.create_all()
        logger.info("Database tables created")
        if app.config.get("SEED_DATA"):
            from demo_hr.models import seed_defaults
            seed_defaults(
                admin_email=app.config["ADMIN_EMAIL"],
                admin_password=app.config["ADMIN_PASSWORD"],
                employee_id=app.config["EMPLOYEE_ID"],
            )

    return app
