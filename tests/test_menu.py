import io
from unittest import mock

import pytest

from pyramid_quest.console import Console
from pyramid_quest.languages import Language, english, italian
from pyramid_quest.menu import Menu, MenuResult
from pyramid_quest.saves import Ending, SaveStore


def make_console(lines):
    text = "".join(f"{line}\n" for line in lines)
    return Console(io.StringIO(text), io.StringIO(), io.StringIO(), clear_command="")


@pytest.fixture
def store(tmp_path):
    saves = SaveStore(tmp_path)
    saves.wipe()
    return saves


def test_quit(store):
    menu = Menu(make_console(["4"]), store, english())
    assert menu.run() is MenuResult.QUIT


def test_continue_shows_count(store):
    store.record(Ending.LOST)
    console = make_console(["2"])
    assert Menu(console, store, english()).run() is MenuResult.CONTINUE
    assert "2. Continue - (1/5)\n" in console.stdout.getvalue()


def test_missing_saves_count(tmp_path):
    console = make_console(["4"])
    Menu(console, SaveStore(tmp_path / "absent"), english()).run()
    assert "(-1/5)" in console.stdout.getvalue()
    assert english().file_not_found in console.stderr.getvalue()


def test_invalid_choice_then_quit(store):
    console = make_console(["7", "x", "4"])
    assert Menu(console, store, english()).run() is MenuResult.QUIT
    assert console.stdout.getvalue().count(english().main_menu_error) == 2
    assert english().cin_clear_error in console.stderr.getvalue()


def test_new_game_wipes_saves(store):
    store.record(Ending.GOOD)
    console = make_console(["1", "2", ""])
    assert Menu(console, store, english()).run() is MenuResult.NEW_GAME
    assert store.count_unlocked() == 0
    assert english().wipe_success in console.stdout.getvalue()


def test_new_game_cancelled(store):
    store.record(Ending.GOOD)
    console = make_console(["1", "1", "4"])
    assert Menu(console, store, english()).run() is MenuResult.QUIT
    assert store.count_unlocked() == 1


def test_delete_saves_repeats_until_valid(store):
    store.record(Ending.BAD)
    console = make_console(["3", "0", "2", ""])
    assert Menu(console, store, english()).delete_saves() is True
    assert console.stdout.getvalue().count(english().new_game_prompt) == 3
    assert store.count_unlocked() == 0


def test_delete_saves_failure(tmp_path):
    console = make_console(["2"])
    menu = Menu(console, SaveStore(tmp_path / "absent"), english())
    assert menu.delete_saves() is False
    assert english().wipe_failure in console.stderr.getvalue()


def test_print_unlocked_finals(store):
    store.record(Ending.BASIC)
    store.record(Ending.GOOD)
    console = make_console([])
    texts = english()
    assert Menu(console, store, texts).print_unlocked_finals() == 2
    out = console.stdout.getvalue()
    assert f"{texts.finals_known[0]}{texts.status_completed}\n" in out
    assert f"{texts.finals_known[2]}{texts.status_completed}\n" in out
    assert f"{texts.finals_hidden[1]}{texts.status_incomplete}\n" in out
    assert out.endswith(f"{texts.unlocked_finals_summary}2/5\n")


def test_print_unlocked_finals_missing_dir(tmp_path):
    console = make_console([])
    menu = Menu(console, SaveStore(tmp_path / "absent"), english())
    assert menu.print_unlocked_finals() == 0
    assert english().status_incomplete not in console.stdout.getvalue()


def test_set_language_italian(store):
    menu = Menu(make_console(["1"]), store, english())
    assert menu.set_language() is Language.ITALIAN
    assert menu.texts == italian()


def test_set_language_invalid(store):
    console = make_console(["7"])
    menu = Menu(console, store, italian())
    assert menu.set_language() is None
    assert menu.texts == italian()
    assert italian().language_error in console.stderr.getvalue()


def test_options_change_language(store):
    menu = Menu(make_console(["2", "1", "", "0"]), store, english())
    menu.options()
    assert menu.texts == italian()


@mock.patch("time.sleep")
def test_options_invalid_choice(sleep, store):
    console = make_console(["9", "0"])
    Menu(console, store, english()).options()
    assert english().option_menu_error in console.stderr.getvalue()
    sleep.assert_called_once_with(2)


def test_options_from_main_menu(store):
    console = make_console(["3", "1", "", "0", "4"])
    assert Menu(console, store, english()).run() is MenuResult.QUIT
    assert english().unlocked_finals_summary + "0/5" in console.stdout.getvalue()