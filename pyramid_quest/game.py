"""The walk through the pyramid: nine questions and the story between them."""

from __future__ import annotations

import time
from collections.abc import Callable

from .console import Console, is_valid_choice
from .endings import conclude
from .languages import Texts
from .saves import Ending, SaveStore
from .state import CHOICE_COUNT, GameState

TIMED_QUESTION = 6
TIME_LIMIT = 10.0
COUNTDOWN = 3


class Adventure:
    """Asks the questions, tells the story and ends the game."""

    def __init__(
        self,
        console: Console,
        texts: Texts,
        store: SaveStore,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.console = console
        self.texts = texts
        self.store = store
        self.clock = clock
        self.state = GameState()

    def _read_answer(self) -> int:
        try:
            return self.console.read_int()
        except ValueError:
            self.console.error(self.texts.cin_clear_error + "\n")
            return 0

    def _too_late(self) -> None:
        console = self.console
        console.clear()
        console.write(self.texts.too_late + "\n")
        console.write(self.texts.get_ready)
        for remaining in range(COUNTDOWN, 0, -1):
            console.sleep(1)
            console.write(f"{remaining} ")
        console.clear()
        console.write("\n")

    def ask(self, number: int) -> int:
        """Ask question ``number`` (1 to 9) until it gets a valid answer and store it.

        Question 6 must be answered within ten seconds; a late answer is
        discarded and the question asked again.
        """
        if not 1 <= number <= CHOICE_COUNT:
            raise ValueError(f"no question {number}")
        task = self.texts.tasks[number - 1]
        first, second = self.texts.choices[number - 1]
        timed = number == TIMED_QUESTION
        while True:
            self.console.write(f"{task}\n1. {first}\n2. {second}\n")
            started = self.clock() if timed else 0.0
            answer = self._read_answer()
            if timed and self.clock() - started > TIME_LIMIT:
                self._too_late()
                continue
            if is_valid_choice(answer):
                break
            self.console.clear()
            self.console.error(self.texts.invalid_choice)
        self.state.choices[number - 1] = answer
        return answer

    def _say(self, number: int) -> None:
        self.console.write(self.texts.game_texts[number - 1] + "\n")

    def _pause(self) -> None:
        self.console.pause(self.texts.wait)
        self.console.clear()

    def _explore(self) -> None:
        state = self.state
        console = self.console

        self._say(1 if self.ask(1) == 1 else 2)
        self._pause()

        vase = self.ask(2)
        self._say(3 if vase == 1 else 4)
        self._pause()

        if self.ask(3) == 1:
            bitten = self.texts.game_texts[5] if vase == 1 else ""
            console.write(self.texts.game_texts[4] + bitten + "\n")
        else:
            self._say(7)
        self._pause()

        if self.ask(4) == 1:
            console.clear()
            serum = self.ask(5)
            if serum == 1 and vase == 1:
                self._say(8)
            elif serum == 1:
                self._say(9)
            else:
                self._say(10)
        else:
            state.choices[4] = 2
            self._say(11)
        self._pause()

        if self.ask(6) == 1:
            if state.choices[2] == 2:
                console.clear()
                state.death = True
                return
            self._say(12)
        else:
            self._say(13)
        self._pause()

        if self.ask(7) == 1:
            console.clear()
            self._say(14 if self.ask(8) == 1 else 15)
        else:
            state.choices[7] = 2
            self._say(16)
        self._pause()

        if state.choices[7] != 1:
            state.lost = True
            return

        self._say(17 if self.ask(9) == 1 else 18)
        self._pause()

    def play(self, fresh: bool = True) -> Ending:
        """Play one game and return the ending reached.

        A fresh game forgets the answers and flags of any earlier game.
        """
        if fresh:
            self.state.reset()
        self.console.clear()
        self.console.write(self.texts.introduction + "\n")
        self._pause()
        self._explore()
        ending = conclude(self.state, self.store, self.texts, self.console.write)
        self._pause()
        return ending