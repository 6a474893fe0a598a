from connect4 import config
from connect4.game.controller import run_game
from connect4.game.engine import initialise
from connect4.main import main
from connect4.ui.menu import run_menu


class TestRunGame:
    def test_plays_to_a_win(self, feed_input, capsys):
        feed_input("0", "0", "1", "0", "2", "0", "3")
        state = run_game(initialise(4, 4))
        assert state.status == "completed"
        assert state.winner == "X"
        assert "Player One wins!" in capsys.readouterr().out

    def test_recovers_from_bad_input(self, feed_input, capsys):
        feed_input("abc", "9", "0")
        state = run_game(initialise(1, 1))
        assert state.status == "draw"
        out = capsys.readouterr().out
        assert "could not be parsed" in out
        assert "does not have that many columns" in out
        assert "It's a draw!" in out

    def test_full_column_is_reported(self, feed_input, capsys):
        feed_input("0", "0", "1")
        state = run_game(initialise(2, 1))
        assert state.status == "draw"
        assert "Column is full." in capsys.readouterr().out

    def test_quit(self, feed_input, capsys):
        feed_input("1", "q")
        assert run_game(initialise()) is None
        assert "Game quit." in capsys.readouterr().out


class TestMenu:
    def test_exit(self, feed_input, capsys):
        feed_input("0")
        run_menu()
        assert "Thank you for playing!" in capsys.readouterr().out

    def test_unknown_option(self, feed_input, capsys):
        feed_input("7", "0")
        run_menu()
        assert "Did not recognise <7> as an option." in capsys.readouterr().out

    def test_custom_board_size(self, feed_input, capsys):
        feed_input(
            "3",
            "n", "2", "2",      # board size
            "y",                # standard rules
            "0", "0", "1", "1",
            "n",                # play again?
            "0",
        )
        run_menu()
        out = capsys.readouterr().out
        assert "Beginning a game of board size: [2,2]" in out
        assert "It's a draw!" in out
        assert "Returning to the main menu." in out

    def test_custom_rules(self, feed_input, capsys):
        feed_input(
            "2",
            "n",                # standard rules?
            "n", "y", "n", "n", # vertical only
            "0", "0", "1", "0", "2", "0", "3",
            "q",
            "n",
            "0",
        )
        run_menu(4, 4)
        out = capsys.readouterr().out
        assert "with the following win conditions: Vertical" in out
        assert "wins!" not in out
        assert "Game quit." in out

    def test_no_win_conditions(self, feed_input, capsys):
        feed_input("2", "n", "n", "n", "n", "n", "0", "n", "0")
        run_menu(1, 1)
        out = capsys.readouterr().out
        assert "can only end in a draw" in out
        assert "win conditions: none" in out
        assert "It's a draw!" in out


class TestMain:
    def test_direct_mode(self, feed_input, capsys):
        feed_input("0", "1", "0", "2", "0", "3", "0", "n", "0")
        assert main(["--mode", "normal", "--columns", "4", "--rows", "4", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "<<Normal Mode>>" in out
        assert "Player One wins!" in out

    def test_end_of_input_exits_cleanly(self, feed_input, capsys):
        feed_input()
        assert main(["--no-color"]) == 0
        assert "Goodbye." in capsys.readouterr().out

    def test_ui_flags_do_not_outlive_the_run(self, feed_input, capsys):
        feed_input("0")
        assert main(["--clear"]) == 0
        assert config.CLEAR_SCREEN is False
        assert config.USE_COLOR is False

    def test_ui_flags_apply_during_the_run(self, feed_input, capsys):
        feed_input("1", "q", "n", "0")
        assert main(["--clear", "--columns", "2", "--rows", "1"]) == 0
        assert "\033[2J\033[H" in capsys.readouterr().out
        assert config.CLEAR_SCREEN is False
