"""Entry point: menus, games and credits in a loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .console import Console
from .game import Adventure
from .languages import Language, Texts, texts_for
from .menu import Menu, MenuResult
from .saves import SaveStore

DEFAULT_SAVES = "code/saves"


def end_game(console: Console, texts: Texts) -> None:
    """Thank the player and wait before returning to the main menu."""
    console.write(texts.thanks_for_playing + "\n")
    console.pause(texts.wait_menu_return + "\n")
    console.clear()


def run(console: Console, store: SaveStore, texts: Texts) -> None:
    """Alternate menus and games until the player quits."""
    menu = Menu(console, store, texts)
    adventure = Adventure(console, texts, store)
    while True:
        result = menu.run()
        if result is MenuResult.QUIT:
            console.clear()
            console.write(menu.texts.goodbye + "\n")
            console.sleep(2)
            return
        adventure.texts = menu.texts
        adventure.play(fresh=result is MenuResult.NEW_GAME)
        end_game(console, menu.texts)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyramid-quest", description="A short text adventure in a pyramid."
    )
    parser.add_argument(
        "--saves", default=DEFAULT_SAVES, help="directory holding the ending records"
    )
    parser.add_argument(
        "--language",
        choices=[language.value for language in Language],
        default=Language.ENGLISH.value,
        help="language to start in",
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="never clear the terminal"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line."""
    args = _parser().parse_args(argv)
    console = Console(clear_command="" if args.no_clear else None)
    try:
        run(console, SaveStore(args.saves), texts_for(args.language))
    except EOFError:
        console.write("\n")
    except KeyboardInterrupt:
        console.write("\n")
        return 130
    return 0