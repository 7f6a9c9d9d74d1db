"""Terminal input and output used by the menus and the story."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_valid_choice(value: int | None) -> bool:
    """Whether ``value`` is one of the two answers a question accepts."""
    return value in (1, 2)


def _default_clear_command() -> str:
    return "cls" if os.name == "nt" else "clear"


class Console:
    """Reads answers and writes text on a pair of text streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        clear_command: str | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        # None picks the platform's command; an empty string disables clearing.
        self.clear_command = (
            _default_clear_command() if clear_command is None else clear_command
        )

    def write(self, text: str) -> None:
        """Write text exactly as given."""
        self.stdout.write(text)
        self.stdout.flush()

    def error(self, text: str) -> None:
        """Write text to the error stream."""
        self.stderr.write(text)
        self.stderr.flush()

    def clear(self) -> None:
        """Clear the terminal with the configured command."""
        if self.clear_command:
            self.stdout.flush()
            subprocess.run(self.clear_command, shell=True, check=False)

    def read_line(self) -> str:
        """Read one line without its line ending. Raises EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_int(self) -> int:
        """Read an integer, skipping blank lines; the rest of the line is dropped.

        Raises ValueError when the line does not start with an integer and
        EOFError at end of input.
        """
        while True:
            line = self.read_line()
            if line.strip():
                break
        match = _LEADING_INT.match(line)
        if match is None:
            raise ValueError(f"not an integer: {line!r}")
        return int(match.group(1))

    def pause(self, text: str, presses: int = 1) -> None:
        """Show a prompt and wait for ``presses`` lines; end of input stops waiting."""
        self.write(text)
        for _ in range(presses):
            try:
                self.read_line()
            except EOFError:
                break

    def sleep(self, seconds: float) -> None:
        """Wait for a number of seconds."""
        time.sleep(seconds)