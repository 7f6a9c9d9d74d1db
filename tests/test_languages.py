import dataclasses

import pytest

from pyramid_quest.languages import Language, Texts, english, italian, texts_for


LANGUAGES = [Language.ENGLISH, Language.ITALIAN]


def test_english_goodbye_and_wait():
    texts = english()
    assert texts.goodbye == "See ya!"
    assert texts.wait == "\nPress ENTER to continue..."


def test_italian_goodbye_and_wait():
    texts = italian()
    assert texts.goodbye == "Alla prossima!"
    assert texts.wait == "\nPremi ENTER per continuare..."


def test_texts_for_enum_members():
    assert texts_for(Language.ENGLISH) == english()
    assert texts_for(Language.ITALIAN) == italian()


def test_texts_for_language_codes():
    assert texts_for("en") is english()
    assert texts_for("it") is italian()


def test_texts_for_unknown_language_raises():
    with pytest.raises(ValueError):
        texts_for("fr")


def test_tables_are_cached():
    first_english = english()
    first_italian = italian()
    assert first_english is english()
    assert first_italian is italian()
    assert first_english.goodbye == "See ya!"
    assert first_italian.goodbye == "Alla prossima!"


def test_tables_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        english().goodbye = "changed"


@pytest.mark.parametrize("language", LANGUAGES)
def test_story_shapes(language):
    texts = texts_for(language)
    assert len(texts.game_texts) == 18
    assert len(texts.tasks) == 9
    assert len(texts.choices) == 9
    assert all(len(pair) == 2 for pair in texts.choices)
    assert len(texts.ending_texts) == 5


@pytest.mark.parametrize("language", LANGUAGES)
def test_menu_shapes(language):
    texts = texts_for(language)
    assert len(texts.main_options) == 4
    assert len(texts.option_choices) == 4
    assert len(texts.new_game_choices) == 2
    assert len(texts.finals_known) == 5
    assert len(texts.finals_hidden) == 5


@pytest.mark.parametrize("language", LANGUAGES)
def test_every_string_is_non_empty(language):
    texts = texts_for(language)
    for field in dataclasses.fields(Texts):
        value = getattr(texts, field.name)
        if isinstance(value, str):
            assert value, field.name
        else:
            flat = [
                item
                for entry in value
                for item in (entry if isinstance(entry, tuple) else (entry,))
            ]
            assert flat and all(flat), field.name


@pytest.mark.parametrize("language", LANGUAGES)
def test_language_choices_are_native_names(language):
    texts = texts_for(language)
    assert texts.language_choices == ("Italiano", "English")


@pytest.mark.parametrize("language", LANGUAGES)
def test_finals_labels_align(language):
    texts = texts_for(language)
    for known, hidden in zip(texts.finals_known, texts.finals_hidden):
        assert len(known) == len(hidden)
        assert set(hidden.rstrip(": ")) == {"?"}


def test_english_ending_tags():
    endings = english().ending_texts
    assert endings[0].endswith("[BASIC ENDING]")
    assert endings[1].endswith("[GOOD ENDING]")
    assert endings[2].endswith("[BAD ENDING]")
    assert endings[3].endswith("[DEATH ENDING]")
    assert endings[4].endswith("[LOST ENDING]")


def test_italian_ending_tags():
    endings = italian().ending_texts
    assert endings[0].endswith("[FINALE BASE]")
    assert endings[1].endswith("[FINALE BUONO]")
    assert endings[4].endswith("[FINALE PERDUTO]")


def test_english_story_entries():
    texts = english()
    assert texts.choices[0] == ("Turn on a flashlight", "Continue in the darkness")
    assert texts.tasks[5].startswith("YOU HAVE 10 SECONDS!")
    assert texts.game_texts[-1] == "Asshole..."


def test_italian_story_entries():
    texts = italian()
    assert texts.choices[6] == ("Si", "No")
    assert texts.tasks[7] == "È una mappa! Vuoi consultarla?"
    assert texts.game_dev == "Programmatore del Gioco: "


def test_languages_differ():
    assert english().main_menu == "***** MAIN MENU *****"
    assert italian().main_menu == "***** MENU PRINCIPALE *****"