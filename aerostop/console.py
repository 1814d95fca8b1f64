"""Console input/output for the interactive session."""

from typing import Callable, Protocol, TypeVar

import click

from aerostop.exceptions import ValidationError

T = TypeVar("T")


class Console(Protocol):
    """What a session needs from the terminal."""

    def prompt(self, text: str) -> str:
        ...

    def echo(self, text: str = "") -> None:
        ...


class ClickConsole:
    """Console backed by click prompts.

    End of input or Ctrl-C raises ``click.Abort``.
    """

    def prompt(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix="")

    def echo(self, text: str = "") -> None:
        click.echo(text)


def ask(console: Console, text: str, parser: Callable[[str], T]) -> T:
    """Prompt until ``parser`` accepts the answer.

    Each rejected answer prints the validation message and asks again;
    there is no attempt limit.
    """
    while True:
        raw = console.prompt(text)
        try:
            return parser(raw)
        except ValidationError as e:
            console.echo(str(e))
