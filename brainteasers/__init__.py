"""
Brain Teasers Game Server Application Package

Flask + Socket.IO backend for four mini-games (word guessing, memory
matching, number sequences and crosswords) sharing one category lobby and
one score record.
"""

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.catalog_controller import catalog_bp
    from .controllers.score_controller import score_bp
    from .controllers.game_controller import game_bp

    app.register_blueprint(catalog_bp, url_prefix='/api')
    app.register_blueprint(score_bp, url_prefix='/api')
    app.register_blueprint(game_bp, url_prefix='/api')

    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(_error):
        return jsonify({'message': 'Unexpected server error'}), 500

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
