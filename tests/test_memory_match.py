import pytest

from brainteasers.games import MemoryMatchEngine
from brainteasers.models import GameStatus
from brainteasers.utils.errors import NotFoundError


@pytest.fixture()
def engine(tiny_storage, rng, clock):
    game = MemoryMatchEngine(tiny_storage, rng, clock=clock, settle_delay=0.8)
    game.start(2, difficulty=1, card_count=4)
    return game


def pair_ids(game):
    """Card ids grouped by glyph."""
    pairs = {}
    for card in game.cards:
        pairs.setdefault(card.value, []).append(card.id)
    return list(pairs.values())


def test_start_deals_shuffled_pairs_with_fresh_ids(engine):
    state = engine.to_dict()
    assert state['gameStatus'] == 'playing'
    assert state['pairs'] == 2
    assert state['remainingPairs'] == 2
    assert state['timeLimit'] == 120
    assert sorted(card['id'] for card in state['cards']) == [1, 2, 3, 4]
    assert sorted(card['position'] for card in state['cards']) == [0, 1, 2, 3]
    assert all(len(ids) == 2 for ids in pair_ids(engine))


def test_matching_pair_scores_with_time_bonus(engine):
    first, second = pair_ids(engine)[0]
    assert engine.flip(first) is True
    assert engine.flip(second) is True

    assert engine.moves == 1
    assert engine.remaining_pairs == 1
    assert engine.score == 10 + 120 // 5
    assert sorted(engine.matched_cards) == sorted([first, second])
    assert engine.flipped_cards == []


def test_time_elapsed_reduces_bonus(engine):
    for _ in range(10):
        engine.tick()
    first, second = pair_ids(engine)[0]
    engine.flip(first)
    engine.flip(second)
    assert engine.score == 10 + 110 // 5


def test_clearing_every_pair_wins_and_persists(engine, tiny_storage):
    for first, second in pair_ids(engine):
        engine.flip(first)
        engine.flip(second)

    assert engine.game_status is GameStatus.WON
    assert engine.score == 68
    score = tiny_storage.get_user_score()
    assert score.memory_sets_completed == 1
    assert score.category_progress == {'2': 1}


def test_mismatch_blocks_until_settle_deadline(engine, clock):
    (a1, a2), (b1, b2) = pair_ids(engine)
    engine.flip(a1)
    engine.flip(b1)

    assert engine.checking is True
    assert engine.moves == 1
    assert engine.flip(a2) is False

    clock.advance(0.5)
    assert engine.settle() is False
    assert engine.checking is True

    clock.advance(0.4)
    assert engine.settle() is True
    assert engine.checking is False
    assert engine.flipped_cards == []
    assert not any(card.flipped for card in engine.cards)


def test_flip_settles_an_expired_mismatch_first(engine, clock):
    (a1, a2), (b1, b2) = pair_ids(engine)
    engine.flip(a1)
    engine.flip(b1)
    clock.advance(1)

    assert engine.flip(a2) is True
    assert engine.flipped_cards == [a2]


def test_tick_settles_an_expired_mismatch(engine, clock):
    (a1, _), (b1, _) = pair_ids(engine)
    engine.flip(a1)
    engine.flip(b1)

    assert engine.tick() is True
    assert engine.checking is True

    clock.advance(1)
    assert engine.tick() is True
    assert engine.checking is False
    assert engine.flipped_cards == []
    assert engine.time_elapsed == 2


def test_timeout_during_a_pending_mismatch_clears_checking(engine):
    (a1, _), (b1, _) = pair_ids(engine)
    for _ in range(119):
        engine.tick()
    engine.flip(a1)
    engine.flip(b1)
    assert engine.checking is True

    engine.tick()
    assert engine.game_status is GameStatus.TIMEUP
    assert engine.checking is False
    assert engine.settle_deadline is None
    assert engine.to_dict()['checking'] is False


def test_flipping_a_face_up_card_is_a_noop(engine):
    first, _ = pair_ids(engine)[0]
    assert engine.flip(first) is True
    assert engine.flip(first) is False
    assert engine.moves == 0


def test_running_out_of_time_ends_session(engine):
    for _ in range(120):
        engine.tick()

    assert engine.game_status is GameStatus.TIMEUP
    assert engine.time_left == 0
    assert engine.tick() is False
    first, _ = pair_ids(engine)[0]
    assert engine.flip(first) is False


def test_difficulty_tops_up_from_other_cards(tiny_storage, rng):
    game = MemoryMatchEngine(tiny_storage, rng)
    game.start(2, difficulty=3, card_count=4)
    assert game.time_limit == 60
    assert game.pairs == 2


def test_unknown_card_and_missing_cards(engine, tiny_storage):
    with pytest.raises(NotFoundError):
        engine.flip(99)
    with pytest.raises(NotFoundError, match='No memory cards'):
        MemoryMatchEngine(tiny_storage).start(1)


def test_restart_reshuffles_same_options(engine):
    first, second = pair_ids(engine)[0]
    engine.flip(first)
    engine.flip(second)

    assert engine.handle_action('restart', {}) is True
    assert engine.game_status is GameStatus.PLAYING
    assert engine.moves == 0
    assert engine.score == 0
    assert engine.remaining_pairs == 2
