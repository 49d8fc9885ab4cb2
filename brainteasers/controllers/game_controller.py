"""
Game Controller

Handles session bootstrap for the four mini-games, session actions and
the health endpoint.
"""

from flask import Blueprint, current_app, request
from ..config.game_settings import get_catalog_statistics
from ..models.schemas import (
    SessionActionRequest, StartCrosswordRequest, StartGameRequest, StartMemoryRequest, StartNumberRequest
)
from ..services.game_service import get_game_service
from ..utils.decorators import api_endpoint
from ..utils.errors import NotFoundError, UnexpectedError
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_body
from ..websocket.handlers import broadcast_session_states

game_bp = Blueprint('game', __name__)


def _game_service():
    game_service = get_game_service()
    if not game_service:
        raise UnexpectedError('Game service unavailable')
    return game_service


@game_bp.route('/game/start', methods=['POST'])
@api_endpoint('start_word_game')
def start_word_game():
    """Start a word-guess session with a random word set from the category."""
    body = parse_body(StartGameRequest, request.get_json(silent=True), "Invalid game data")
    return _game_service().create_session(
        'word', body.category_id, request.remote_addr or 'unknown', word_count=body.word_count
    )


@game_bp.route('/memory/start', methods=['POST'])
@api_endpoint('start_memory_game')
def start_memory_game():
    """Start a memory-match session with a shuffled deck of pairs."""
    body = parse_body(StartMemoryRequest, request.get_json(silent=True), "Invalid game data")
    return _game_service().create_session(
        'memory', body.category_id, request.remote_addr or 'unknown',
        difficulty=body.difficulty, card_count=body.card_count
    )


@game_bp.route('/number/start', methods=['POST'])
@api_endpoint('start_number_game')
def start_number_game():
    body = parse_body(StartNumberRequest, request.get_json(silent=True), "Invalid game data")
    return _game_service().create_session('number', body.category_id, request.remote_addr or 'unknown')


@game_bp.route('/crossword/start', methods=['POST'])
@api_endpoint('start_crossword_game')
def start_crossword_game():
    body = parse_body(StartCrosswordRequest, request.get_json(silent=True), "Invalid game data")
    return _game_service().create_session(
        'crossword', body.category_id, request.remote_addr or 'unknown', difficulty=body.difficulty
    )


@game_bp.route('/sessions/<session_id>', methods=['GET'])
@api_endpoint('get_session')
def get_session(session_id):
    return _game_service().get_session_state(session_id)


@game_bp.route('/sessions/<session_id>', methods=['DELETE'])
@api_endpoint('delete_session')
def delete_session(session_id):
    """Discard a session, e.g. when the player navigates away."""
    if not _game_service().delete_session(session_id):
        raise NotFoundError("Session not found")
    return {'sessionId': session_id, 'deleted': True}


@game_bp.route('/sessions/<session_id>/actions', methods=['POST'])
@api_endpoint('session_action')
def session_action(session_id):
    """
    Apply one engine action, e.g. {"action": "guess", "letter": "A"}.

    Returns {accepted, state}; accepted is false when the action did nothing
    in the current phase of the game.
    """
    body = parse_body(SessionActionRequest, request.get_json(silent=True), "Invalid action data")
    accepted, state = _game_service().apply_action(
        session_id, body.action, body.params(), request.remote_addr or 'unknown'
    )
    broadcast_session_states(current_app.socketio, {session_id: {**state, 'accepted': accepted}})
    return {'accepted': accepted, 'state': state}


@game_bp.route('/health', methods=['GET'])
@api_endpoint('health_check')
def health_check():
    return {
        'status': 'healthy',
        'activeSessions': _game_service().active_session_count(),
        'gameTypes': _game_service().registry.game_types(),
        'catalog': get_catalog_statistics(),
        'logStats': game_logger.get_log_stats()
    }
