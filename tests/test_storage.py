import random

import pytest

from brainteasers.utils.errors import ValidationError


def test_seed_catalog_is_loaded(seeded_storage):
    categories = seeded_storage.get_all_categories()
    assert [category.game_type for category in categories] == ['word', 'memory', 'number', 'crossword']
    assert len(seeded_storage.get_words_by_category_id(1)) == 14
    assert all(word.word.isupper() for word in seeded_storage.get_words_by_category_id(1))


def test_random_words_are_capped_and_distinct(seeded_storage):
    words = seeded_storage.get_random_words_by_category_id(1, 100, rng=random.Random(7))
    assert len(words) == 14
    assert len({word.id for word in words}) == 14
    assert seeded_storage.get_random_words_by_category_id(99, 5) == []


def test_random_memory_cards_prefer_difficulty(seeded_storage):
    cards = seeded_storage.get_random_memory_cards_by_category_id(2, 6, difficulty=1, rng=random.Random(3))
    assert len(cards) == 6
    assert all(card.difficulty == 1 for card in cards)
    assert len({card.value for card in cards}) == 6


def test_partial_update_keeps_other_fields(seeded_storage):
    seeded_storage.update_user_score({'bestScore': 120, 'wordsSolved': 4})
    updated = seeded_storage.update_user_score({'wordsSolved': 5})

    assert updated.best_score == 120
    assert updated.words_solved == 5
    assert updated.memory_sets_completed == 0
    assert seeded_storage.get_user_score().to_dict()['wordsSolved'] == 5


def test_unknown_score_field_is_rejected(seeded_storage):
    with pytest.raises(ValidationError):
        seeded_storage.update_user_score({'lives': 3})


def test_score_reads_are_copies(seeded_storage):
    seeded_storage.record_category_progress(1)
    snapshot = seeded_storage.get_user_score()
    snapshot.category_progress['1'] = 50

    assert seeded_storage.get_user_score().category_progress == {'1': 1}
    assert seeded_storage.record_category_progress(1).category_progress == {'1': 2}
