"""
WebSocket Event Handlers

Real-time channel for driving sessions: clients join a session room,
send actions and receive the resulting session_state broadcasts.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.schemas import SessionActionRequest
from ..services.game_service import get_game_service
from ..utils.decorators import socket_event
from ..utils.errors import UnexpectedError, ValidationError
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_body


def session_room(session_id: str) -> str:
    return f"session_{session_id}"


def _game_service():
    game_service = get_game_service()
    if not game_service:
        raise UnexpectedError('Game service unavailable')
    return game_service


def _session_id(data) -> str:
    session_id = data.get('sessionId') if isinstance(data, dict) else None
    if not session_id:
        raise ValidationError("sessionId is required")
    return session_id


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_session')
    @socket_event('join_session')
    def handle_join_session(data):
        """Join a session room and receive its current state."""
        session_id = _session_id(data)
        state = _game_service().get_session_state(session_id)
        join_room(session_room(session_id))
        game_logger.log_game_event(session_id, 'socket_joined', request.remote_addr or 'unknown',
                                   sid=request.sid)
        emit('session_state', state)

    @socketio.on('session_action')
    @socket_event('session_action')
    def handle_session_action(data):
        """Apply an engine action and broadcast the new state to everyone in the room."""
        session_id = _session_id(data)
        body = parse_body(SessionActionRequest, data, "Invalid action data")
        accepted, state = _game_service().apply_action(
            session_id, body.action, body.params(), request.remote_addr or 'unknown'
        )
        join_room(session_room(session_id))
        emit('session_state', {**state, 'accepted': accepted}, to=session_room(session_id))

    @socketio.on('leave_session')
    @socket_event('leave_session')
    def handle_leave_session(data):
        session_id = _session_id(data)
        leave_room(session_room(session_id))


def broadcast_session_states(socketio, states):
    """Push tick updates to every room whose session changed."""
    for session_id, state in states.items():
        socketio.emit('session_state', state, to=session_room(session_id))
