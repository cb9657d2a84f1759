"""Line-oriented prompting for numbers, points and menu choices."""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from typing import TextIO

from shapelab.figures.geometry import Point, parse_point

_MAIN_MENU = (
    "\nWhat you want to do ?\n"
    "1 - Add figure\n"
    "2 - Output figures with their parameters\n"
    "3 - Output figures with their perimeters\n"
    "4 - Output figures summary perimeter\n"
    "5 - Sort figures by perimeter in ascending power\n"
    "6 - Delete figure by number\n"
    "7 - Delete figures with perimeter bigger than...\n"
    "0 - Exit\n\n"
    "Input command"
)

_FIGURE_MENU = (
    "\nWhat figure do you want to add?\n"
    "1 - Circle\n"
    "2 - Rectangle\n"
    "3 - Trinangle\n"
    "4 - Polygon\n"
)


class Operation(IntEnum):
    """Entries of the main menu."""

    EXIT = 0
    ADD_FIGURE = 1
    OUTPUT_PARAMS = 2
    OUTPUT_PERIMETERS = 3
    OUTPUT_SUMMARY_PERIMETER = 4
    SORT = 5
    DELETE_BY_NUMBER = 6
    DELETE_BY_PERIMETER = 7


class FigureKind(IntEnum):
    """Entries of the figure menu."""

    CIRCLE = 1
    RECTANGLE = 2
    TRIANGLE = 3
    POLYGON = 4


class Prompter:
    """Reads validated values from a text stream, re-asking until they are good.

    Every read raises EOFError once the input stream is exhausted.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write a line of text."""
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next input line without its line ending."""
        if prompt:
            self._stdout.write(prompt)
            self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("input exhausted")
        return line.rstrip("\r\n")

    def _read_valid(self, convert, accept, complaint: str):
        while True:
            text = self.read_line().strip()
            try:
                value = convert(text)
            except ValueError:
                value = None
            if value is not None and accept(value):
                return value
            self.write(complaint)

    @staticmethod
    def _to_float(text: str) -> float:
        value = float(text)
        if not math.isfinite(value):
            raise ValueError(f"not a finite number: {text!r}")
        return value

    def read_int(self) -> int:
        """Read any integer."""
        return self._read_valid(
            int, lambda _: True, "You entered an incorrect value. Enter positive integer"
        )

    def read_positive_int(self) -> int:
        """Read an integer greater than zero."""
        return self._read_valid(
            int, lambda v: v > 0, "You entered an incorrect value. Enter positive integer"
        )

    def read_float(self) -> float:
        """Read any finite number."""
        return self._read_valid(
            self._to_float, lambda _: True, "You entered an incorrect value. Enter float"
        )

    def read_positive_float(self) -> float:
        """Read a finite number that is not negative."""
        return self._read_valid(
            self._to_float,
            lambda v: v >= 0,
            "You entered an incorrect value. Enter positive float",
        )

    def read_point(self) -> Point:
        """Read coordinates written as ``X;Y``."""
        text = self.read_line("Input coordinates (X; Y) : ")
        while True:
            try:
                return parse_point(text)
            except ValueError:
                self.write("You entered an incorrect value. Enter float coordinates (X; Y): ")
            text = self.read_line()

    def read_command(self) -> Operation:
        """Show the main menu and read a choice from it."""
        self.write(_MAIN_MENU)
        value = self.read_int()
        while not Operation.EXIT <= value <= Operation.DELETE_BY_PERIMETER:
            self.write("Incorrect input. Input command in range from 0 to 7")
            value = self.read_int()
        return Operation(value)

    def read_figure_kind(self) -> FigureKind:
        """Show the figure menu and read a choice from it."""
        self.write(_FIGURE_MENU)
        value = self._read_valid(
            int,
            lambda v: FigureKind.CIRCLE <= v <= FigureKind.POLYGON,
            "You entered an incorrect value. Enter command in range of 1 to 4",
        )
        return FigureKind(value)