"""Menu commands over a figure collection and the interactive loop that runs them."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod

from shapelab.figures.factory import FigureFactory
from shapelab.figures.prompts import Operation, Prompter
from shapelab.figures.shapes import FigureCollection, Polygon

_NO_FIGURES = "There's no figures"


class Command(ABC):
    """An action the user can pick from the main menu."""

    @abstractmethod
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        """Carry out the action on ``figures``, talking through ``prompter``."""


class ExitCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        prompter.write("Execution Completed")


class AddFigureCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        kind = prompter.read_figure_kind()
        factory = FigureFactory(prompter)
        figure = factory.create(kind)
        while not figure.is_valid():
            if isinstance(figure, Polygon):
                problem = figure.validation_problem()
                if problem:
                    prompter.write(problem)
            prompter.write("Incorrect input. Reinput figure please")
            figure = factory.create(kind)
        figures.add(figure)
        prompter.write("Good input. Figure added")


class OutputParamsCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES + "\n")
            return
        for number, figure in enumerate(figures, 1):
            prompter.write(f"{number}. {figure.describe()}")


class OutputPerimetersCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES + "\n")
            return
        for number, figure in enumerate(figures, 1):
            prompter.write(f"{number}. {figure.describe_perimeter()}")


class SummaryPerimeterCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES + "\n")
            return
        prompter.write("")
        prompter.write(f"\nSum of perimeters is {figures.total_perimeter():g}\n")


class SortByPerimeterCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES)
            return
        figures.sort_by_perimeter()
        prompter.write("\nFigures are sorted\n")


class DeleteByNumberCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES)
            return
        prompter.write("Input  number of figure which you want to delete")
        number = prompter.read_positive_int()
        if number <= len(figures):
            figures.remove(number - 1)
            prompter.write(f"Figure {number} is deleted")
        else:
            prompter.write("There's no figure with this number")


class DeleteByPerimeterCommand(Command):
    def execute(self, figures: FigureCollection, prompter: Prompter) -> None:
        if not figures:
            prompter.write(_NO_FIGURES)
            return
        prompter.write("Input the maximum perimeter")
        limit = prompter.read_float()
        removed = figures.remove_longer_than(limit)
        if removed == 0:
            prompter.write(f"All figures have perimeter less than {limit:g}\n")
        elif removed == 1:
            prompter.write(f"Deleted {removed} figure\n")
        else:
            prompter.write(f"Deleted {removed} figures\n")


class Facade:
    """Holds the figure collection and runs menu commands on it."""

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter
        self.figures = FigureCollection()
        self._commands = {
            Operation.EXIT: ExitCommand(),
            Operation.ADD_FIGURE: AddFigureCommand(),
            Operation.OUTPUT_PARAMS: OutputParamsCommand(),
            Operation.OUTPUT_PERIMETERS: OutputPerimetersCommand(),
            Operation.OUTPUT_SUMMARY_PERIMETER: SummaryPerimeterCommand(),
            Operation.SORT: SortByPerimeterCommand(),
            Operation.DELETE_BY_NUMBER: DeleteByNumberCommand(),
            Operation.DELETE_BY_PERIMETER: DeleteByPerimeterCommand(),
        }

    def commands(self) -> dict[Operation, Command]:
        """The command behind each menu entry."""
        return dict(self._commands)

    def execute(self, command: Command) -> None:
        command.execute(self.figures, self.prompter)

    def run(self) -> None:
        """Ask for commands and run them until the user chooses to exit."""
        while True:
            operation = self.prompter.read_command()
            self.execute(self._commands[operation])
            if operation is Operation.EXIT:
                return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive figure manager on standard input and output."""
    argparse.ArgumentParser(
        prog="shapelab-figures", description="Manage a list of plane figures."
    ).parse_args(argv)
    facade = Facade(Prompter(sys.stdin, sys.stdout))
    try:
        facade.run()
    except EOFError:
        pass
    return 0