"""
Endpoint Decorators

Wraps HTTP endpoints and WebSocket handlers with action logging and the
error-to-response mapping shared by every controller.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit
from pydantic import ValidationError as PydanticValidationError

from .errors import GameError
from .game_logger import game_logger
from .helpers import validation_error_from_pydantic


def api_endpoint(action):
    """
    Decorator for HTTP endpoints.

    The wrapped view returns its payload, optionally with a status code.
    Known errors become {message[, errors]} with their status; anything
    else is logged and answered with a generic 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session_id = kwargs.get('session_id')
            game_logger.log_user_action(request, action, session_id)

            try:
                result = f(*args, **kwargs)
                response_data, status = result if isinstance(result, tuple) else (result, 200)
                game_logger.log_server_response(request, action, True, response_data, session_id)
                return jsonify(response_data), status

            except PydanticValidationError as e:
                error = validation_error_from_pydantic(e)
            except GameError as e:
                if e.status_code >= 500:
                    game_logger.log_error(request, e, action, session_id)
                error = e
            except Exception as e:
                game_logger.log_error(request, e, action, session_id)
                error = GameError()

            # 5xx details stay in the log
            error_response = error.to_dict() if error.status_code < 500 else GameError().to_dict()
            game_logger.log_server_response(request, action, False, error_response, session_id)
            return jsonify(error_response), error.status_code

        return decorated_function
    return decorator


def socket_event(action):
    """Decorator for WebSocket handlers; failures are emitted as 'error' events."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PydanticValidationError as e:
                error = validation_error_from_pydantic(e)
            except GameError as e:
                if e.status_code >= 500:
                    game_logger.log_error(None, e, action)
                error = e
            except Exception as e:
                game_logger.log_error(None, e, action)
                error = GameError()

            emit('error', error.to_dict() if error.status_code < 500 else GameError().to_dict())

        return decorated_function
    return decorator
