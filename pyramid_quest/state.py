"""Mutable state of one pass through the pyramid."""

from __future__ import annotations

from dataclasses import dataclass, field

CHOICE_COUNT = 9
UNSET = -1


def _blank_choices() -> list[int]:
    return [UNSET] * CHOICE_COUNT


@dataclass
class GameState:
    """The nine answers given so far and the two secret-ending flags.

    ``choices[n]`` holds the answer (1 or 2) to question ``n + 1``, or
    ``UNSET`` while that question has not been answered.
    """

    choices: list[int] = field(default_factory=_blank_choices)
    death: bool = False
    lost: bool = False

    def reset(self) -> None:
        """Forget every answer and clear the secret-ending flags."""
        self.choices = _blank_choices()
        self.death = False
        self.lost = False