import pytest

from brainteasers.games import CrosswordEngine
from brainteasers.models import ClueDirection, GameStatus
from brainteasers.utils.errors import ValidationError


@pytest.fixture()
def engine(tiny_storage, rng):
    game = CrosswordEngine(tiny_storage, rng, time_limit=600)
    game.start(4)
    return game


def fill_answers(game):
    for direction in ClueDirection:
        d_row, d_col = direction.step
        for clue in list(game.clues[direction]):
            for offset, letter in enumerate(clue.answer):
                game.input_letter(clue.row + d_row * offset, clue.col + d_col * offset, letter)


def test_grid_is_built_from_clue_spans(engine):
    assert engine.size == 10
    assert engine.grid[0][0].is_black is False
    assert engine.grid[0][0].number == 1
    assert engine.grid[1][1].is_black is True
    assert engine.grid[9][9].is_black is True
    state = engine.to_dict()
    assert state['gameStatus'] == 'playing'
    assert len(state['clues']['across']) == 5
    assert len(state['clues']['down']) == 5
    assert state['selectedCell'] is None


def test_clue_lookup_prefers_current_direction(engine):
    assert engine.find_clue_for_cell(0, 0) == (ClueDirection.ACROSS, 1)
    engine.toggle_direction()
    assert engine.find_clue_for_cell(0, 0) == (ClueDirection.DOWN, 1)
    assert engine.find_clue_for_cell(1, 0) == (ClueDirection.DOWN, 1)
    assert engine.find_clue_for_cell(9, 9) is None


def test_input_auto_advances_and_clear_does_not(engine):
    engine.input_letter(0, 0, 'm')
    assert engine.grid[0][0].letter == 'M'
    assert engine.grid[0][0].filled is True
    assert engine.selected_cell == (0, 1)

    engine.input_letter(0, 1, '')
    assert engine.grid[0][1].filled is False
    assert engine.selected_cell == (0, 1)


@pytest.mark.parametrize('bad', ['AB', '7', 'ß', 'é', ' '])
def test_input_rejects_non_letters(engine, bad):
    with pytest.raises(ValidationError):
        engine.input_letter(0, 0, bad)
    assert engine.grid[0][0].letter == ''


def test_input_rejects_off_grid_and_black_cells(engine):
    with pytest.raises(ValidationError):
        engine.input_letter(10, 0, 'A')
    assert engine.input_letter(1, 1, 'A') is False


def test_completed_clue_is_marked_solved(engine):
    for offset, letter in enumerate('MIND'):
        engine.input_letter(offset, 0, letter)
    down = {clue.number: clue for clue in engine.clues[ClueDirection.DOWN]}
    assert down[1].solved is True
    assert engine.game_status is GameStatus.PLAYING


def test_filling_every_answer_wins(engine, tiny_storage):
    fill_answers(engine)

    assert engine.game_status is GameStatus.WON
    assert engine.score == 1000 + 600
    score = tiny_storage.get_user_score()
    assert score.crosswords_completed == 1
    assert score.best_score == 1600
    assert score.category_progress == {'4': 1}


def test_hint_reveals_letter_and_costs_points(engine):
    engine.select_cell(0, 0)
    assert engine.use_hint() is True
    assert engine.grid[0][0].letter == 'M'
    assert engine.grid[0][0].is_revealed is True
    assert engine.hints == 2
    assert engine.selected_cell == (0, 1)

    fill_answers(engine)
    assert engine.score == 1000 + 600 - 50


def test_tab_on_crossing_cell_moves_hint_to_the_crossing_clue(engine):
    engine.select_cell(0, 2)
    assert engine.to_dict()['currentClue'] == {'direction': 'across', 'number': 1}

    assert engine.navigate('Tab') is True
    assert engine.to_dict()['currentClue'] == {'direction': 'down', 'number': 2}
    assert engine.use_hint() is True
    assert engine.grid[0][2].letter == 'M'
    assert engine.hints == 2
    assert engine.selected_cell == (1, 2)


def test_hint_needs_a_selection(engine):
    assert engine.use_hint() is False
    assert engine.hints == 3


def test_arrow_navigation_clamps_and_skips_black_cells(engine):
    engine.select_cell(0, 0)
    assert engine.navigate('ArrowLeft') is False
    assert engine.navigate('ArrowDown') is True
    assert engine.selected_cell == (1, 0)
    assert engine.current_direction is ClueDirection.DOWN
    assert engine.navigate('ArrowRight') is False

    assert engine.navigate('Tab') is False
    assert engine.current_direction is ClueDirection.DOWN
    with pytest.raises(ValidationError):
        engine.navigate('Enter')


def test_clock_runs_out(engine):
    for _ in range(600):
        engine.tick()
    assert engine.game_status is GameStatus.TIMEUP
    assert engine.time_elapsed == 600
    assert engine.input_letter(0, 0, 'M') is False


def test_restart_clears_grid(engine):
    engine.input_letter(0, 0, 'M')
    engine.tick()
    engine.restart()

    assert engine.grid[0][0].letter == ''
    assert engine.time_elapsed == 0
    assert engine.hints == 3
    assert engine.selected_cell is None
    assert engine.game_status is GameStatus.PLAYING
