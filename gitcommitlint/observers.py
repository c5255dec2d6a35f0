"""Observer pattern for commit message checks."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .errors import ParseError
from .models import ValidationReport


class ValidationObserver(ABC):
    """Abstract base class for check observers."""

    @abstractmethod
    def on_checked(self, report: ValidationReport) -> None:
        """Called when a message parsed, with its violations."""
        pass

    @abstractmethod
    def on_parse_error(self, error: ParseError) -> None:
        """Called when a message could not be parsed."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that reports check results to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_checked(self, report: ValidationReport) -> None:
        if report.is_clean:
            self.console.print(f"[green]Valid commit message: {escape(report.message.header)}[/green]")
            return
        for violation in report.violations:
            self.console.print(f"[yellow]Warning: {escape(str(violation))}[/yellow]")

    def on_parse_error(self, error: ParseError) -> None:
        self.console.print(f"[red]Invalid commit message ({error.kind.value}): {escape(str(error))}[/red]")


class FileLogObserver(ValidationObserver):
    """Observer that logs check results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_checked(self, report: ValidationReport) -> None:
        self._log(f"Checked: {report.message.header} ({len(report.violations)} violation(s))")
        for violation in report.violations:
            self._log(f"  {violation}")

    def on_parse_error(self, error: ParseError) -> None:
        self._log(f"Rejected ({error.kind.value}): {error}")
