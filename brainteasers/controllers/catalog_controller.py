"""
Catalog Controller

Handles the category lobby and word lookup endpoints.
"""

from flask import Blueprint, request, current_app
from ..services.storage_service import get_storage_service
from ..utils.decorators import api_endpoint
from ..utils.errors import NotFoundError, UnexpectedError
from ..utils.helpers import parse_category_id, parse_count

catalog_bp = Blueprint('catalog', __name__)


def _storage():
    storage = get_storage_service()
    if not storage:
        raise UnexpectedError('Storage service unavailable')
    return storage


@catalog_bp.route('/categories', methods=['GET'])
@api_endpoint('list_categories')
def list_categories():
    """List every category in the lobby."""
    return [category.to_dict() for category in _storage().get_all_categories()]


@catalog_bp.route('/categories/<category_id>', methods=['GET'])
@api_endpoint('get_category')
def get_category(category_id):
    category = _storage().get_category_by_id(parse_category_id(category_id))
    if not category:
        raise NotFoundError("Category not found")
    return category.to_dict()


@catalog_bp.route('/categories/<category_id>/words', methods=['GET'])
@api_endpoint('get_category_words')
def get_category_words(category_id):
    """Random words from a category; ?count=N defaults to the configured word count."""
    storage = _storage()
    category = storage.get_category_by_id(parse_category_id(category_id))
    if not category:
        raise NotFoundError("Category not found")

    count = parse_count(request.args.get('count'), current_app.config['DEFAULT_WORD_COUNT'])
    return [word.to_dict() for word in storage.get_random_words_by_category_id(category.id, count)]
