"""CLI entrypoint that wires the mirror command into a Typer app."""

import typer

from ..commands.mirror.cli import BoolValueCommand, mirror

app = typer.Typer(add_completion=False, help="Mirror a GitHub user's repositories locally.")

app.command(cls=BoolValueCommand, add_help_option=False)(mirror)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
