"""
Error Taxonomy

Exceptions raised by services and engines. Controllers turn them into
JSON error responses carrying the matching HTTP status code.
"""

from typing import Any, List, Optional


class GameError(Exception):
    """Base class for every error surfaced to API clients."""
    status_code = 500
    default_message = 'Unexpected server error'

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Any]] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    def to_dict(self):
        payload = {'message': self.message}
        if self.errors:
            payload['errors'] = self.errors
        return payload


class ValidationError(GameError):
    """Malformed request body or action parameters."""
    status_code = 400
    default_message = 'Invalid request data'


class NotFoundError(GameError):
    """Unknown category, session or card."""
    status_code = 404
    default_message = 'Not found'


class UnexpectedError(GameError):
    """Storage or runtime failure; details stay in the logs."""
    status_code = 500


class InvalidTransitionError(UnexpectedError):
    """An engine tried a gameStatus transition its table does not allow."""

    def __init__(self, current, target):
        super().__init__(f"Invalid game status transition {current.value} -> {target.value}")
        self.current = current
        self.target = target
