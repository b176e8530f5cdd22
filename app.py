#!/usr/bin/env python3
"""
Retro TV Station Scheduler - backend for the station console

Application entry point with blueprint registration.
Routes live in blueprints:
  - routes/channels.py - Channel management and channel monitor
  - routes/programs.py - Program guide CRUD with schedule shifting
  - routes/api.py - Video info, statistics, import/export
"""

import logging
import os

from flask import Flask
from flask_cors import CORS

from error_handling import register_error_handlers
from models import db

# Initialize Flask app
app = Flask(__name__)
app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///tv_station.db")
app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
app.config["VIDEO_INFO_TIMEOUT"] = int(os.getenv("VIDEO_INFO_TIMEOUT", "10"))
app.config["SEED_DEFAULTS"] = os.getenv("SEED_DEFAULTS", "true").lower() == "true"

# SQLite configuration
# - timeout: Wait up to 30 seconds for locks (default is 5)
# - check_same_thread: Allow use across the server's worker threads
app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
    "connect_args": {
        "timeout": 30,
        "check_same_thread": False,
    },
    "pool_pre_ping": True,  # Verify connections before use
}

# Initialize extensions
CORS(app)
db.init_app(app)

# Register error handlers
register_error_handlers(app)

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ============================================================================
# Register Blueprints
# ============================================================================

from routes.api import api_bp
from routes.channels import channels_bp
from routes.programs import programs_bp

app.register_blueprint(channels_bp)
app.register_blueprint(programs_bp)
app.register_blueprint(api_bp)


def prepare_database():
    """Create tables and, unless disabled, seed an empty station"""
    from services.seed_service import seed_defaults

    db.create_all()
    if app.config["SEED_DEFAULTS"]:
        seed_defaults()


# ============================================================================
# CLI Commands
# ============================================================================


@app.cli.command("init-db")
def init_db():
    """Initialize the database"""
    prepare_database()
    print("Database initialized!")


# ============================================================================
# Application Entry Point
# ============================================================================


if __name__ == "__main__":
    with app.app_context():
        prepare_database()

    port = int(os.getenv("PORT", 3001))
    debug = os.getenv("DEBUG", "False").lower() == "true"

    logger.info(f"TV station backend running on http://localhost:{port}")

    app.run(host="0.0.0.0", port=port, debug=debug)
