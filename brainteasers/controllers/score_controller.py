"""
Score Controller

Handles reading and partially updating the single user score record.
"""

from flask import Blueprint, request
from ..models.schemas import ScorePatchRequest, ScoreUpdateRequest
from ..services.storage_service import get_storage_service
from ..utils.decorators import api_endpoint
from ..utils.errors import UnexpectedError
from ..utils.helpers import parse_body

score_bp = Blueprint('score', __name__)


def _storage():
    storage = get_storage_service()
    if not storage:
        raise UnexpectedError('Storage service unavailable')
    return storage


@score_bp.route('/scores', methods=['GET'])
@api_endpoint('get_scores')
def get_scores():
    return _storage().get_user_score().to_dict()


@score_bp.route('/scores', methods=['POST'])
@api_endpoint('update_scores')
def update_scores():
    """Merge a partial update of bestScore, wordsSolved, memorySetsCompleted and categoryProgress."""
    body = parse_body(ScoreUpdateRequest, request.get_json(silent=True), "Invalid score data")
    return _storage().update_user_score(body.changes()).to_dict()


@score_bp.route('/scores', methods=['PATCH'])
@api_endpoint('patch_scores')
def patch_scores():
    """Same merge as POST, also accepting numberSequencesSolved and crosswordsCompleted."""
    body = parse_body(ScorePatchRequest, request.get_json(silent=True), "Invalid score data")
    return _storage().update_user_score(body.changes()).to_dict()
