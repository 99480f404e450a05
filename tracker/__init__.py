import logging
import os

from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from tracker.config import config_map
from tracker.extensions import cors, db, migrate

__version__ = '0.3.0'


def create_app(config_name=None):
    """Application factory for creating the Flask app instance.

    Args:
        config_name: Configuration name ('development', 'production' or
                     'testing'). Defaults to FLASK_ENV or 'development'.

    Returns:
        Configured Flask application instance.
    """
    # Load environment variables from the appropriate .env file
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env_file = os.path.join(root_dir, f'.env.{env}')
    if os.path.exists(env_file):
        load_dotenv(env_file)

    # Also load a local .env if it exists (overrides the environment-specific one)
    dotenv_path = os.path.join(root_dir, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=True)

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)

    config_class = config_map.get(config_name, config_map['development'])
    app.config.from_object(config_class)
    app.json.sort_keys = False

    _configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r'/api/*': {'origins': app.config['ALLOWED_ORIGINS']}},
        max_age=app.config.get('CORS_MAX_AGE'),
    )

    _register_blueprints(app)
    _register_error_handlers(app)

    @app.route('/')
    def index():
        return jsonify({'name': 'interview-tracker', 'version': __version__})

    # Create database tables if they don't exist
    with app.app_context():
        from tracker import models  # noqa: F401  (register tables)
        db.create_all()

    return app


def _configure_logging(app):
    """Set up RotatingFileHandler on the root logger."""
    max_bytes = app.config.get('LOG_FILE_MAX_BYTES', 0)
    if not max_bytes:
        return

    log_dir = os.path.join(app.instance_path, 'logs')
    os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.join(log_dir, 'app.log')
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=app.config.get('LOG_FILE_BACKUP_COUNT', 3),
    )
    handler.setFormatter(logging.Formatter(
        app.config.get('LOG_FORMAT', '%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    ))
    handler.setLevel(logging.DEBUG)

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.WARNING:
        root.setLevel(logging.DEBUG)


def _register_blueprints(app):
    """Register all application blueprints."""
    from tracker.views.api import api_bp
    from tracker.views.dsa import dsa_bp
    from tracker.views.system_design import system_design_bp
    from tracker.views.interviews import interviews_bp
    from tracker.views.weak_areas import weak_areas_bp
    from tracker.views.study_sessions import study_sessions_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(dsa_bp)
    app.register_blueprint(system_design_bp)
    app.register_blueprint(interviews_bp)
    app.register_blueprint(weak_areas_bp)
    app.register_blueprint(study_sessions_bp)


def _register_error_handlers(app):
    """Return JSON errors for invalid payloads and unknown API routes."""
    from tracker.services.validation import ValidationError

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        app.logger.info(f'Rejected payload on {request.path}: {error}')
        return jsonify({'error': error.message, 'field': error.field}), 400

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405
