"""Typer CLI entrypoint for abpdev."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
import yaml

from abpdev.config import AppSettings, load_settings
from abpdev.errors import NotFoundError, ProcessSpawnError, UserInputError
from abpdev.logging_utils import configure_logging
from abpdev.notifications.dispatcher import build_notification_dispatcher
from abpdev.projects.discover import scan_projects
from abpdev.projects.logs import locate_log_artifact
from abpdev.projects.select import (
    InteractiveSelection,
    SelectionStrategy,
    UsageOutcome,
    UsagePrinter,
    prompt_for_project,
    select_project,
)
from abpdev.utils.platform import open_path

EXIT_NO_MATCH = 1
EXIT_NOT_FOUND = 2
EXIT_OPEN_FAILED = 3
EXIT_NOTIFY_FAILED = 1

app = typer.Typer(
    add_completion=False,
    help="abpdev developer tools.",
    no_args_is_help=True,
)

CONFIG_FILE_OPTION = typer.Option(
    None,
    "--config-file",
    help="Optional settings YAML path.",
    exists=False,
    file_okay=True,
    dir_okay=False,
    readable=True,
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
) -> tuple[AppSettings, logging.Logger]:
    settings = load_settings(config_file=config_file)
    if configure:
        logger = configure_logging(
            settings.paths.log_file,
            level=settings.logging.level,
            console_level=settings.logging.console_level,
            max_bytes=settings.logging.max_bytes,
            backup_count=settings.logging.backup_count,
        )
    else:
        logger = logging.getLogger("abpdev")
    return settings, logger


@app.command("show-config")
def show_config(config_file: Path | None = CONFIG_FILE_OPTION) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


@app.command("logs")
def logs(
    project_name: str | None = typer.Argument(
        None,
        help="Determines the project to open logs of it.",
    ),
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Working directory of the command. Probably solution directory. Default: current directory.",
        file_okay=False,
        dir_okay=True,
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Ask for the project with a prompt when no name is given.",
    ),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Open the log file (or logs folder) of a runnable project."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    working_dir = path or Path.cwd()

    try:
        candidates = scan_projects(
            working_dir,
            settings.run.runnable_projects,
            manifest_suffix=settings.run.manifest_suffix,
            logger=logger,
        )
    except NotFoundError as exc:
        logger.info("logs.working_dir_missing working_dir=%s", working_dir)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_NOT_FOUND) from exc

    typer.echo(f"{len(candidates)} runnable projects found.")

    strategy: SelectionStrategy = InteractiveSelection(prompt=prompt_for_project) if interactive else UsagePrinter()
    try:
        selection = select_project(candidates, project_name, strategy)
    except UserInputError as exc:
        logger.info("logs.no_match project_name=%s", project_name)
        typer.echo(str(exc))
        raise typer.Exit(code=EXIT_NO_MATCH) from exc

    if isinstance(selection, UsageOutcome):
        typer.echo(selection.render())
        return

    artifact = locate_log_artifact(selection.directory)
    logger.info("logs.resolved project=%s kind=%s path=%s", selection.short_name, artifact.kind, artifact.path)
    if artifact.note:
        typer.echo(artifact.note)
    if open_path(artifact.path, logger=logger) != 0:
        logger.info("logs.open_failed path=%s", artifact.path)
        typer.echo(f"Could not open {artifact.path}", err=True)
        raise typer.Exit(code=EXIT_OPEN_FAILED)


@app.command("notify")
def notify(
    title: str = typer.Argument(..., help="Notification title."),
    message: str | None = typer.Option(None, "--message", "-m", help="Optional body text."),
    icon: str | None = typer.Option(None, "--icon", help="Optional image path shown as app logo."),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Show a desktop toast notification."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    dispatcher = build_notification_dispatcher(settings, logger=logger)

    try:
        result = asyncio.run(dispatcher.send(title, message=message, icon=icon))
    except ProcessSpawnError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_NOTIFY_FAILED) from exc
    except OSError as exc:
        logger.info("notifications.write_failed directory=%s error=%s", settings.paths.app_data_root, exc)
        typer.echo(f"Could not write notification script: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOTIFY_FAILED) from exc

    if result.status == "disabled":
        typer.echo("Notifications are disabled.")
    elif result.status == "failed":
        typer.echo(f"Notification interpreter exited with code {result.returncode}.", err=True)
        raise typer.Exit(code=EXIT_NOTIFY_FAILED)


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
