"""Main menu, option menu and the screens they lead to."""

from __future__ import annotations

from enum import Enum

from .console import Console
from .languages import Language, Texts, texts_for
from .saves import TOTAL_ENDINGS, SaveFileMissing, SaveStore


class MenuResult(Enum):
    """What the player picked in the main menu."""

    NEW_GAME = "new_game"
    CONTINUE = "continue"
    QUIT = "quit"


class Menu:
    """The menus shown before a game; ``texts`` follows language changes."""

    def __init__(self, console: Console, store: SaveStore, texts: Texts) -> None:
        self.console = console
        self.store = store
        self.texts = texts

    def _read_choice(self) -> int:
        try:
            return self.console.read_int()
        except ValueError:
            self.console.error(self.texts.cin_clear_error + "\n")
            return 0

    def _unlocked_count(self) -> int:
        try:
            return self.store.count_unlocked()
        except SaveFileMissing as exc:
            self.console.error(f"{self.texts.file_not_found}{exc.path}\n")
            return -1

    def _wait(self) -> None:
        self.console.pause(self.texts.wait_options + "\n")

    def run(self) -> MenuResult:
        """Show the main menu until the player starts a game or quits."""
        console = self.console
        while True:
            texts = self.texts
            new_game, resume, options, leave = texts.main_options
            console.clear()
            console.write(texts.main_menu + "\n")
            console.write(f"1. {new_game}\n")
            console.write(f"2. {resume} - ({self._unlocked_count()}/{TOTAL_ENDINGS})\n")
            console.write(f"3. {options}\n4. {leave}\n")
            choice = self._read_choice()
            if choice == 1:
                if self.delete_saves():
                    return MenuResult.NEW_GAME
            elif choice == 2:
                return MenuResult.CONTINUE
            elif choice == 3:
                self.options()
            elif choice == 4:
                return MenuResult.QUIT
            else:
                console.write(texts.main_menu_error + "\n")

    def delete_saves(self) -> bool:
        """Ask for confirmation and wipe the saves; True once they are wiped."""
        console = self.console
        texts = self.texts
        choice = 0
        while choice not in (1, 2):
            console.clear()
            console.write(texts.new_game_prompt + "\n")
            cancel, confirm = texts.new_game_choices
            console.write(f"1. {cancel}\n2. {confirm}\n")
            choice = self._read_choice()
        if choice == 1:
            return False
        try:
            self.store.wipe()
        except SaveFileMissing as exc:
            console.error(f"{texts.file_not_found}{exc.path}\n")
            console.error(texts.wipe_failure + "\n")
            return False
        console.write(texts.wipe_success + "\n")
        self._wait()
        return True

    def options(self) -> None:
        """Show the option menu until the player goes back."""
        console = self.console
        while True:
            texts = self.texts
            console.clear()
            console.write(texts.option_menu + "\n")
            console.write(
                "".join(f"{n}. {text}\n" for n, text in enumerate(texts.option_choices))
            )
            choice = self._read_choice()
            if choice == 0:
                return
            if choice == 1:
                self.print_unlocked_finals()
                self._wait()
            elif choice == 2:
                self.set_language()
                self._wait()
            elif choice == 3:
                self.delete_saves()
            else:
                console.error(texts.option_menu_error + "\n")
                console.sleep(2)

    def print_unlocked_finals(self) -> int:
        """List each ending as completed or not and return how many are unlocked."""
        console = self.console
        texts = self.texts
        console.clear()
        console.write(texts.option_menu + "\n")
        values = self.store.unlocked()
        for position, value in enumerate(values.values()):
            if value == 1:
                console.write(f"{texts.finals_known[position]}{texts.status_completed}\n")
            else:
                console.write(f"{texts.finals_hidden[position]}{texts.status_incomplete}\n")
        total = sum(values.values())
        console.write(f"{texts.unlocked_finals_summary}{total}/{TOTAL_ENDINGS}\n")
        return total

    def set_language(self) -> Language | None:
        """Let the player pick a language; return it, or None if the pick was invalid."""
        console = self.console
        console.clear()
        console.write(self.texts.language_menu + "\n")
        first, second = self.texts.language_choices
        console.write(f"1. {first}\n2. {second}\n")
        try:
            choice = console.read_int()
        except ValueError:
            choice = 0
        languages = {1: Language.ITALIAN, 2: Language.ENGLISH}
        language = languages.get(choice)
        if language is None:
            console.error(self.texts.language_error + "\n")
            return None
        self.texts = texts_for(language)
        return language