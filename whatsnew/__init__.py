"""
What's New - changelog delta service (Flask application)
"""
from flask import Flask
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def create_app():
    """Create and configure Flask application"""
    from whatsnew.utils.error_handler import register_error_handlers
    from whatsnew.utils.logger import logger

    app = Flask(__name__)
    app.json.sort_keys = False

    register_error_handlers(app)

    # Register blueprints
    from whatsnew.routes import changelog

    app.register_blueprint(changelog.bp)

    logger.info("Flask application initialized")
    return app


# Create app instance
app = create_app()
