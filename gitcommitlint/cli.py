#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import click
import pyperclip
from rich.console import Console

from .commit_message import CommitMessageValidator
from .config import DEFAULT_CONFIG_FILENAME, Config
from .errors import ParseError
from .observers import ConsoleLogObserver, FileLogObserver

console = Console()


def read_message(message: Optional[str], message_file: Optional[TextIO]) -> Optional[str]:
    """Return the commit message text from -m or from a file/stdin."""
    if message is not None and message_file is not None:
        raise click.UsageError("Use either -m/--message or MESSAGE_FILE, not both")
    if message is not None:
        return message
    if message_file is not None:
        return message_file.read()
    return None


def print_config(config: Config, config_path: Path) -> None:
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<22} {'Value':<40} {'Source':<10}")
    console.print("-" * 74)

    def print_setting(name: str, value: Any):
        if isinstance(value, list):
            value = ", ".join(value)
        console.print(f"{name:<22} {str(value):<40} {source:<10}", markup=False)

    for name, value in config.model_dump().items():
        print_setting(name, "None" if value is None else value)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in the project root"
    )


@click.command()
@click.argument(
    "message_file",
    required=False,
    type=click.File("r", encoding="utf-8"),
)
@click.option(
    "-m",
    "--message",
    help="Commit message text to check (cannot be combined with MESSAGE_FILE)",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Directory containing .gitcommitlint.toml (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-f",
    "--format",
    "show_format",
    is_flag=True,
    help="Print the message in canonical form",
)
@click.option(
    "--copy",
    is_flag=True,
    help="Copy the canonical form of the message to the clipboard",
)
@click.option(
    "-s",
    "--strict",
    is_flag=True,
    help="Fail on style violations too (overrides config setting)",
)
@click.option(
    "--keep-comments",
    is_flag=True,
    help="Don't drop lines starting with '#' before parsing",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log check results (overrides config setting)",
)
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    message_file: Optional[TextIO],
    message: Optional[str],
    path: Path,
    show_format: bool,
    copy: bool,
    strict: bool,
    keep_comments: bool,
    log_file: Optional[Path],
    config_dir: bool,
    config_list: bool,
    version: bool,
):
    """
    Check a commit message against the conventional commit grammar.

    MESSAGE_FILE is a file holding the message ("-" reads stdin), such as
    the file git passes to a commit-msg hook.

    Structural errors (unknown type, bad scope, missing or overlong
    subject, trailing period, missing blank line) fail the check. Style
    problems (past-tense subject, long body lines, malformed footers) are
    reported as warnings unless --strict is given.

    Configuration can be set in .gitcommitlint.toml.
    Command line options override configuration file settings.
    """
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        config_root = path.absolute()
        config_path = config_root / DEFAULT_CONFIG_FILENAME

        if config_list:
            print_config(Config.load(config_root), config_path)
            return

        if config_dir:
            # Create default config file if it doesn't exist
            if not config_path.exists():
                Config().save(config_root)
                console.print(
                    "[yellow]Created new config file with default values[/yellow]"
                )

            pyperclip.copy(str(config_path))
            console.print(f"[green]Config file location:[/green] {config_path}")
            console.print("[green]Path copied to clipboard![/green]")
            return

        raw = read_message(message, message_file)
        if raw is None:
            console.print("[red]Error: no commit message given (use MESSAGE_FILE, '-' or -m)[/red]")
            sys.exit(1)

        # Load configuration
        config = Config.load(config_root)

        # Command line options override config
        if strict:
            config.strict = True
        if keep_comments:
            config.strip_comments = False
        if log_file is not None:
            config.log_file = str(log_file)

        validator = CommitMessageValidator(config)
        validator.add_observer(ConsoleLogObserver(console))

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            validator.add_observer(FileLogObserver(str(log_file_path)))

        try:
            report = validator.check(raw)
        except ParseError:
            sys.exit(1)

        if show_format or copy:
            canonical = validator.format(report.message)
            if show_format:
                click.echo(canonical)
            if copy:
                pyperclip.copy(canonical)
                console.print("[green]Canonical message copied to clipboard![/green]")

        if report.violations and config.strict:
            console.print(
                f"[red]{len(report.violations)} style violation(s) found in strict mode[/red]"
            )
            sys.exit(1)
    except click.UsageError:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
