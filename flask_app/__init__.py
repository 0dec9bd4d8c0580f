"""
Flask application factory.
"""
from flask import Flask, jsonify

from tz_bridge.config_loader import load_config


def create_app(config_name='development', settings=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration
    if config_name == 'production':
        app.config.from_object('flask_app.config.ProductionConfig')
    elif config_name == 'testing':
        app.config.from_object('flask_app.config.TestingConfig')
    else:
        app.config.from_object('flask_app.config.DevelopmentConfig')

    # Bridge settings come from config.ini or TZ_BRIDGE_* environment variables
    if settings is None:
        settings = load_config(app.config['TZ_BRIDGE_CONFIG_FILE'])
    app.config['BRIDGE_SETTINGS'] = settings

    # Register blueprints
    from flask_app.routes.main import main_bp

    app.register_blueprint(main_bp)

    @app.errorhandler(404)
    def not_found(error):
        """Unknown routes get a JSON body instead of the HTML page."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    return app
