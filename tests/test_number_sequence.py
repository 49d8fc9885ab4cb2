import pytest

from brainteasers.config import SEQUENCE_LEVELS
from brainteasers.games import NumberSequenceEngine
from brainteasers.models import GameStatus


@pytest.fixture()
def engine(tiny_storage):
    game = NumberSequenceEngine(tiny_storage)
    game.start(3)
    return game


def test_level_hides_answer_and_pattern(engine):
    state = engine.to_dict()
    assert state['gameStatus'] == 'playing'
    assert state['lives'] == 3
    assert state['level'] == {'sequence': [2, 4, 6, 8], 'difficulty': 1}

    engine.toggle_hint()
    assert engine.to_dict()['level']['pattern'] == 'Add 2'


def test_correct_answer_scores_and_advances(engine):
    assert engine.submit_answer('10') is True
    assert engine.score == 10
    assert engine.current_level == 1
    assert engine.feedback_message == 'Correct! +10 points'


def test_hint_halves_points_even_when_hidden_again(engine):
    engine.submit_answer(10)
    engine.toggle_hint()
    engine.toggle_hint()
    assert engine.show_hint is False

    engine.submit_answer(15)
    assert engine.score == 10 + 5
    assert engine.hint_used is False


def test_invalid_number_only_sets_feedback(engine):
    engine.submit_answer('ten')
    assert engine.feedback_message == 'Please enter a valid number'
    assert engine.lives == 3
    assert engine.current_level == 0


@pytest.mark.parametrize('value', [10, 10.0, ' 10 ', '+10'])
def test_whole_number_forms_are_accepted(engine, value):
    engine.submit_answer(value)
    assert engine.current_level == 1
    assert engine.user_answer == ''


@pytest.mark.parametrize('value', ['1_0', '10.5', 10.5, True, None, '١٠'])
def test_malformed_numbers_cost_no_life(engine, value):
    engine.submit_answer(value)
    assert engine.feedback_message == 'Please enter a valid number'
    assert engine.lives == 3
    assert engine.current_level == 0


def test_three_wrong_answers_fail_and_keep_best_score(engine, tiny_storage):
    engine.submit_answer(10)
    for _ in range(3):
        engine.submit_answer(0)

    assert engine.game_status is GameStatus.FAILURE
    assert engine.feedback_message == 'Incorrect answer, try again'
    score = tiny_storage.get_user_score()
    assert score.best_score == 10
    assert score.number_sequences_solved == 0
    assert engine.submit_answer(15) is False


def test_solving_every_level_succeeds(engine, tiny_storage):
    for level in SEQUENCE_LEVELS:
        engine.submit_answer(level['answer'])

    expected = sum(level['difficulty'] * 10 for level in SEQUENCE_LEVELS)
    assert engine.game_status is GameStatus.SUCCESS
    assert engine.score == expected
    score = tiny_storage.get_user_score()
    assert score.number_sequences_solved == 1
    assert score.best_score == expected
    assert score.category_progress == {'3': 1}


def test_restart_resets_progress(engine):
    engine.submit_answer(10)
    engine.submit_answer(0)
    engine.handle_action('restart', {})

    assert engine.current_level == 0
    assert engine.score == 0
    assert engine.lives == 3
    assert engine.feedback_message is None


def test_custom_levels_cycle(tiny_storage):
    levels = [{'sequence': [1, 2], 'answer': 3, 'pattern': 'Add 1', 'difficulty': 2}]
    game = NumberSequenceEngine(tiny_storage, levels=levels)
    game.start(3)
    game.handle_action('answer', {'value': '3'})
    assert game.game_status is GameStatus.SUCCESS
    assert game.score == 20
