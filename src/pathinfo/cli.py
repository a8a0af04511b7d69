"""CLI commands using Typer."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from pathinfo.context import AppContext

import typer
from rich.logging import RichHandler

from pathinfo import __version__
from pathinfo.console import Reporter
from pathinfo.context import create_context
from pathinfo.exceptions import HandleTypeError, PathInfoError
from pathinfo.shell import (
    handle_for,
    shell_copy_content_to,
    shell_copy_file_into,
    shell_delete_content,
    shell_get_directory,
    shell_get_file,
    shell_move_file_into,
    shell_try_delete,
)
from pathinfo.types import DirectoryHandle, FileHandle

app = typer.Typer(
    name="pathinfo",
    help="Resolve, copy, move and clean files and directories",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

reporter = Reporter()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        reporter.console.print(f"pathinfo v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=reporter.console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each filesystem operation")
    ] = False,
) -> None:
    """Resolve, copy, move and clean files and directories."""
    configure_logging(verbose)


@contextmanager
def _reported() -> Iterator[None]:
    """Turn library errors into console messages and exit codes.

    Raises:
        typer.Exit: 2 for a handle of the wrong kind, 1 for any other failure.
    """
    try:
        yield
    except HandleTypeError as e:
        reporter.show_error(str(e))
        raise typer.Exit(2) from e
    except (PathInfoError, OSError) as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e


def _pick(value: bool | None, default: bool) -> bool:
    return default if value is None else value


# ============================================================================
# Resolution Commands
# ============================================================================


def _resolve(
    resolve_with: Callable[..., DirectoryHandle | FileHandle],
    ctx: AppContext,
    parent: Path,
    name: str,
    resolve: bool | None,
    ignore_case: bool | None,
) -> None:
    with _reported():
        settings = ctx.settings.load()
        handle = resolve_with(
            handle_for(parent, DirectoryHandle),
            name,
            resolve=_pick(resolve, settings.resolve),
            ignore_case=_pick(ignore_case, settings.ignore_case),
            resolver=ctx.resolver,
        )
    reporter.show_handle(handle)


@app.command("get-directory")
def get_directory(
    parent: Annotated[Path, typer.Argument(help="Parent directory")],
    name: Annotated[str, typer.Argument(help="Child directory name, may be nested")],
    resolve: Annotated[
        bool | None, typer.Option("--resolve/--no-resolve", help="Fail if the child is missing")
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option("--ignore-case/--match-case", help="Accept a child with different casing"),
    ] = None,
    _context=None,
) -> None:
    """Resolve a child directory."""
    ctx = _context or create_context()
    _resolve(shell_get_directory, ctx, parent, name, resolve, ignore_case)


@app.command("get-file")
def get_file(
    parent: Annotated[Path, typer.Argument(help="Parent directory")],
    name: Annotated[str, typer.Argument(help="Child file name, may be nested")],
    resolve: Annotated[
        bool | None, typer.Option("--resolve/--no-resolve", help="Fail if the child is missing")
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option("--ignore-case/--match-case", help="Accept a child with different casing"),
    ] = None,
    _context=None,
) -> None:
    """Resolve a child file."""
    ctx = _context or create_context()
    _resolve(shell_get_file, ctx, parent, name, resolve, ignore_case)


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("delete-content")
def delete_content(
    directory: Annotated[Path, typer.Argument(help="Directory to empty")],
    _context=None,
) -> None:
    """Delete everything inside a directory, keeping the directory."""
    ctx = _context or create_context()
    with _reported():
        shell_delete_content(handle_for(directory, DirectoryHandle), operator=ctx.operator)
    reporter.show_success(f"Deleted content of '{directory}'")


@app.command("copy-content")
def copy_content(
    source: Annotated[Path, typer.Argument(help="Directory to copy from")],
    destination: Annotated[Path, typer.Argument(help="Directory to copy into")],
    copy_empty_directories: Annotated[
        bool | None,
        typer.Option(
            "--copy-empty-directories/--skip-empty-directories",
            help="Recreate directories that hold no files",
        ),
    ] = None,
    overwrite: Annotated[
        bool | None, typer.Option("--overwrite/--no-overwrite", help="Replace existing files")
    ] = None,
    clean_target: Annotated[
        bool | None,
        typer.Option("--clean-target/--keep-target", help="Empty the destination first"),
    ] = None,
    _context=None,
) -> None:
    """Copy the content of one directory into another."""
    ctx = _context or create_context()
    with _reported():
        policy = ctx.settings.load().copy_policy()
        shell_copy_content_to(
            handle_for(source, DirectoryHandle),
            handle_for(destination, DirectoryHandle),
            copy_empty_directories=_pick(copy_empty_directories, policy.copy_empty_directories),
            overwrite=_pick(overwrite, policy.overwrite),
            clean_target=_pick(clean_target, policy.clean_target),
            operator=ctx.operator,
        )
    reporter.show_success(f"Copied content of '{source}' to '{destination}'")


# ============================================================================
# File Commands
# ============================================================================


@app.command("move-file")
def move_file(
    source: Annotated[Path, typer.Argument(help="File to move")],
    destination: Annotated[Path, typer.Argument(help="Destination file path")],
    overwrite: Annotated[
        bool | None, typer.Option("--overwrite/--no-overwrite", help="Replace an existing file")
    ] = None,
    _context=None,
) -> None:
    """Move a file, creating the destination directories."""
    ctx = _context or create_context()
    with _reported():
        default = ctx.settings.load().overwrite
        shell_move_file_into(
            handle_for(destination, FileHandle),
            handle_for(source, FileHandle),
            overwrite=_pick(overwrite, default),
            operator=ctx.operator,
        )
    reporter.show_success(f"Moved '{source}' to '{destination}'")


@app.command("copy-file")
def copy_file(
    source: Annotated[Path, typer.Argument(help="File to copy")],
    destination: Annotated[Path, typer.Argument(help="Destination file path")],
    overwrite: Annotated[
        bool | None, typer.Option("--overwrite/--no-overwrite", help="Replace an existing file")
    ] = None,
    _context=None,
) -> None:
    """Copy a file, creating the destination directories."""
    ctx = _context or create_context()
    with _reported():
        default = ctx.settings.load().overwrite
        shell_copy_file_into(
            handle_for(destination, FileHandle),
            handle_for(source, FileHandle),
            overwrite=_pick(overwrite, default),
            operator=ctx.operator,
        )
    reporter.show_success(f"Copied '{source}' to '{destination}'")


@app.command("try-delete")
def try_delete(
    file: Annotated[Path, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a file if it exists."""
    ctx = _context or create_context()
    with _reported():
        shell_try_delete(handle_for(file, FileHandle), operator=ctx.operator)
    reporter.show_success(f"'{file}' is absent")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    with _reported():
        settings = ctx.settings.load()
    reporter.show_settings(settings, str(ctx.settings.settings_file))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value (true/false)")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _context or create_context()
    try:
        ctx.settings.set_value(key, value)
    except ValueError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e
    reporter.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
