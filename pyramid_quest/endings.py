"""Choosing, recording and announcing the ending of a game."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress

from .languages import Texts
from .saves import TOTAL_ENDINGS, Ending, SaveError, SaveFileMissing, SaveStore
from .state import GameState

_TEXT_INDEX = {
    Ending.BASIC: 0,
    Ending.GOOD: 1,
    Ending.BAD: 2,
    Ending.DEATH: 3,
    Ending.LOST: 4,
}


def sort_ending(state: GameState) -> Ending:
    """Decide which ending the answers in ``state`` lead to."""
    if state.death:
        return Ending.DEATH
    if state.lost:
        return Ending.LOST
    a, b, c, d, e, f, g, h, i = state.choices
    if (a, b, c, d, e, f, i) == (2, 1, 2, 2, 2, 2, 2):
        return Ending.BAD
    if (a, b, c, d, e, g, h, i) == (1, 2, 1, 1, 1, 1, 1, 1):
        return Ending.GOOD
    return Ending.BASIC


def ending_text(texts: Texts, ending: Ending | int) -> str:
    """Return the closing text of an ending."""
    return texts.ending_texts[_TEXT_INDEX[Ending(ending)]]


def conclude(
    state: GameState,
    store: SaveStore,
    texts: Texts,
    write: Callable[[str], object],
) -> Ending:
    """Sort the ending, save it, and write its text and the unlocked count."""
    ending = sort_ending(state)
    with suppress(SaveError):
        store.record(ending)
    write(ending_text(texts, ending) + "\n")
    try:
        count = store.count_unlocked()
    except SaveFileMissing as exc:
        write(f"{texts.file_not_found}{exc.path}\n")
        count = -1
    write(f"{texts.unlocked_finals_after_game}{count}/{TOTAL_ENDINGS}\n")
    return ending