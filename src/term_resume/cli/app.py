"""Typer CLI application."""

import typer
from loguru import logger
from rich.console import Console

from term_resume.config import Settings
from term_resume.log import setup_logging


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="term-resume",
        help="Browse a resume in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def view() -> None:
        """Open the resume viewer. [bold]←[/]/[bold]→[/] switch sections, [bold]q[/] quits."""
        from term_resume.cli.core.terminal import TerminalError
        from term_resume.cli.resume.viewer import run_viewer

        settings = Settings.from_env()
        setup_logging(settings)

        try:
            run_viewer(settings)
        except TerminalError as exc:
            logger.exception("Terminal failure")
            console.print(f"[red]Terminal error:[/] {exc}")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            logger.warning("Interrupted")
            raise typer.Exit(130)

    return app
