"""Typer-based CLI for ESLint Pretty Quick."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import SetupAnswers, SetupError, load_answers, save_answers
from .environment import check_environment
from .installer import NpmInstaller, NullInstaller
from .models import ProjectType, SetupResult
from .prompts import Prompter, ask_options
from .wizard import run_setup

app = typer.Typer(help="Set up ESLint, Prettier and pre-commit hooks for a JavaScript project.")
console = Console()

LOG_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss.SSS}] [{level}] {message}"


def _console_sink(message: str) -> None:
    console.print(message, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(_console_sink, level=level, format=LOG_FORMAT)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, format=LOG_FORMAT)


def _summarize(result: SetupResult, root: Path) -> None:
    table = Table(title="Generated files")
    table.add_column("File")
    table.add_column("Note")
    for path in result.written:
        note = "merged" if result.merged_from == path else ""
        table.add_row(str(path.relative_to(root)), note)
    console.print(table)
    if result.install.failed:
        console.print(
            f"[yellow]Not installed:[/yellow] {', '.join(result.install.failed)}"
        )
    if result.install.skipped:
        console.print(
            f"Install skipped; run: npm install --save-dev {' '.join(result.install.skipped)}"
        )


@app.command()
def init(
    path: Path = typer.Argument(Path("."), exists=True, file_okay=False, dir_okay=True, resolve_path=True),
    project_type: Optional[ProjectType] = typer.Option(None, "--type", case_sensitive=False, help="Project type"),
    answers_file: Optional[Path] = typer.Option(None, "--answers", help="YAML file with pre-recorded answers"),
    skip_install: bool = typer.Option(False, "--skip-install", help="Do not run npm install"),
    log_level: str = typer.Option("INFO", "--log-level", envvar="EPQ_LOG_LEVEL", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Run the setup wizard in PATH."""

    _configure_logging(log_level.upper(), log_file)
    try:
        check_environment(path)
        logger.info("Welcome to ESLint Pretty Quick! Let's set up your project.")
        answers = load_answers(answers_file) if answers_file else SetupAnswers()
        if project_type is not None:
            answers = answers.model_copy(update={"project_type": project_type})
        prompter = Prompter(console)
        options = ask_options(prompter, answers)
        installer = NullInstaller() if skip_install else NpmInstaller(path)
        result = run_setup(path, options, prompter=prompter, installer=installer)
    except SetupError as exc:
        logger.error("An error occurred: {}", exc)
        logger.opt(exception=exc).debug("Stack trace")
        raise typer.Exit(code=1)
    except Exception as exc:
        logger.error("An error occurred: {}: {}", type(exc).__name__, exc)
        logger.opt(exception=exc).debug("Stack trace")
        raise typer.Exit(code=1)

    _summarize(result, path)
    console.print("[green]Happy coding![/green]")


@app.command("init-answers")
def init_answers(path: Path = typer.Argument(..., writable=True, resolve_path=True)) -> None:
    """Write an example answers file to PATH."""

    answers = SetupAnswers(
        project_type=ProjectType.REACT,
        use_typescript=True,
        use_husky=False,
        use_strict=False,
        use_prettier=True,
    )
    try:
        save_answers(answers, path)
    except OSError as exc:
        console.print(f"[red]Unable to write {path}:[/red] {exc}")
        raise typer.Exit(code=1)
    console.print(f"[green]Wrote answers to {path}[/green]")


def main() -> None:
    app()


__all__ = ["app", "main"]


if __name__ == "__main__":
    main()
