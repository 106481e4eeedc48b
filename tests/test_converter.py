"""Tests for mapping games to stored rows and to the client view."""

from tictactoe.converter import DataConverter
from tictactoe.domain.game import create_game
from tictactoe.domain.symbols import Symbol

data_converter = DataConverter()


def test_new_game_view(clock):
    game = create_game(4, 3, clock=clock)

    view = data_converter.convert_game_to_gamemodel(game)

    assert view.id == game.game_id
    assert view.board == [[" "] * 4 for _ in range(4)]
    assert view.player_turn == "X"
    assert view.winner is None
    assert view.winning_line is None
    assert view.modified_at == clock.now


def test_in_progress_view_shows_symbols(never_flip):
    game = create_game(3, 3)
    game.make_move(0, 2, Symbol.X, never_flip)
    game.make_move(2, 0, Symbol.O, never_flip)

    view = data_converter.convert_game_to_gamemodel(game)

    assert view.board == [[" ", " ", "X"], [" ", " ", " "], ["O", " ", " "]]
    assert view.player_turn == "X"
    assert view.moves_applied == 2


def test_completed_game_view_labels():
    won = create_game(3, 3)
    won.cells = [Symbol.O] * 3 + [Symbol.NONE] * 6
    won.completed, won.winner = True, Symbol.O

    drawn = create_game(3, 3)
    drawn.completed = True

    won_view = data_converter.convert_game_to_gamemodel(won)
    drawn_view = data_converter.convert_game_to_gamemodel(drawn)

    assert won_view.winner == "O"
    assert won_view.player_turn is None
    assert won_view.winning_line == [[0, 0], [0, 1], [0, 2]]
    assert drawn_view.winner == "draw"
    assert drawn_view.player_turn is None


def test_schema_round_trip_keeps_symbols(never_flip):
    game = create_game(3, 3)
    game.make_move(1, 1, Symbol.X, never_flip)

    schema = data_converter.convert_game_to_gameschema(game)

    assert schema.cells[4] == 1
    assert schema.current_turn == 2
    assert data_converter.convert_gameschema_to_game(schema) == game


def test_naive_timestamps_are_read_as_utc():
    game = create_game(3, 3)
    schema = data_converter.convert_game_to_gameschema(game)
    schema.modified_at = schema.modified_at.replace(tzinfo=None)

    restored = data_converter.convert_gameschema_to_game(schema)

    assert restored.modified_at == game.modified_at


def test_etag_matching():
    game = create_game(3, 3)
    etag = data_converter.make_etag(game)

    assert etag.startswith('"') and etag.endswith('"')
    assert data_converter.etag_matches(game, etag)
    assert data_converter.etag_matches(game, f'"other", {etag}')
    assert data_converter.etag_matches(game, "*")
    assert not data_converter.etag_matches(game, '"2000-01-01T00:00:00+00:00"')


def test_weak_etags_never_match():
    game = create_game(3, 3)
    etag = data_converter.make_etag(game)

    assert not data_converter.etag_matches(game, f"W/{etag}")
    assert not data_converter.etag_matches(game, f'"other", W/{etag}')
