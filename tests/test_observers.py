"""Tests for check observers."""
from io import StringIO

from rich.console import Console

from gitcommitlint.commit_message import CommitMessageValidator
from gitcommitlint.errors import MissingTypeError
from gitcommitlint.observers import ConsoleLogObserver, FileLogObserver


def make_console():
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_console_observer_reports_clean_message(validator):
    console, buffer = make_console()
    validator.add_observer(ConsoleLogObserver(console))

    validator.check("feat(agents): add code-reviewer agent")

    assert "Valid commit message: feat(agents): add code-reviewer agent" in buffer.getvalue()


def test_console_observer_reports_violations(validator):
    console, buffer = make_console()
    validator.add_observer(ConsoleLogObserver(console))

    validator.check("fix: added logging")

    output = buffer.getvalue()
    assert "Warning: line 1:" in output
    assert "[non-imperative-mood]" in output


def test_console_observer_reports_parse_errors():
    console, buffer = make_console()
    observer = ConsoleLogObserver(console)

    observer.on_parse_error(MissingTypeError("Header must follow format: type(scope): subject"))

    assert "Invalid commit message (missing-type)" in buffer.getvalue()


def test_file_observer_appends_lines(tmp_path, config):
    log_file = tmp_path / "logs" / "lint.log"
    validator = CommitMessageValidator(config)
    validator.add_observer(FileLogObserver(str(log_file)))

    validator.check("feat: add thing\n\n" + "x" * 80)
    try:
        validator.check("nonsense")
    except MissingTypeError:
        pass

    lines = log_file.read_text().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("Checked: feat: add thing (1 violation(s))")
    assert "[body-line-too-long]" in lines[1]
    assert "Rejected (missing-type)" in lines[2]
