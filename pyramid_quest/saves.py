"""Persistent record of which endings the player has reached."""

from __future__ import annotations

import re
from enum import IntEnum
from pathlib import Path


class Ending(IntEnum):
    """The five endings, numbered as the game sorts them."""

    BAD = 1
    GOOD = 2
    BASIC = 3
    DEATH = 4
    LOST = 5


TOTAL_ENDINGS = len(Ending)

FILE_NAMES = {
    Ending.BAD: "bad.txt",
    Ending.GOOD: "good.txt",
    Ending.BASIC: "normal.txt",
    Ending.DEATH: "death.txt",
    Ending.LOST: "lost.txt",
}

# Order in which save files are read when counting and listing.
COUNT_ORDER = (Ending.BASIC, Ending.BAD, Ending.GOOD, Ending.LOST, Ending.DEATH)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SaveError(Exception):
    """A save file could not be written."""


class SaveFileMissing(SaveError):
    """A save file could not be opened."""

    def __init__(self, path: Path) -> None:
        super().__init__(str(path))
        self.path = path


class SaveStore:
    """One small file per ending holding 1 once reached, 0 otherwise."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, ending: Ending) -> Path:
        return self.directory / FILE_NAMES[ending]

    def _read(self, ending: Ending) -> int:
        path = self._path(ending)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SaveFileMissing(path) from exc
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def record(self, ending: Ending | int) -> None:
        """Mark an ending as reached. Raises ValueError for an unknown ending."""
        path = self._path(Ending(ending))
        try:
            path.write_text("1", encoding="utf-8")
        except OSError as exc:
            raise SaveError(str(path)) from exc

    def count_unlocked(self) -> int:
        """Sum the values of all save files.

        Raises SaveFileMissing for the first file that cannot be opened.
        """
        return sum(self._read(ending) for ending in COUNT_ORDER)

    def unlocked(self) -> dict[Ending, int]:
        """Stored value of each ending in reading order, up to the first missing file."""
        values: dict[Ending, int] = {}
        for ending in COUNT_ORDER:
            try:
                values[ending] = self._read(ending)
            except SaveFileMissing:
                break
        return values

    def wipe(self) -> None:
        """Reset every ending to 0. Raises SaveFileMissing if a file cannot be written."""
        for ending in COUNT_ORDER:
            path = self._path(ending)
            try:
                path.write_text("0", encoding="utf-8")
            except OSError as exc:
                raise SaveFileMissing(path) from exc