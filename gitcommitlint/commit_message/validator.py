"""Commit message validation."""
from typing import List, Optional

from ..config import Config
from ..errors import ParseError
from ..models import CommitMessage, ValidationReport, Violation
from ..observers import ValidationObserver
from .formatter import format_message
from .parser import CommitMessageParser
from .validation import create_style_chain


class CommitMessageValidator:
    """Validates commit messages against the conventional commit grammar.

    Structural defects raise a ParseError from ``parse`` and ``check``.
    Style problems never block parsing; ``validate`` returns them as
    Violations ordered by line.

    Attributes:
        config (Config): Limits and word lists used by the rules
        observers (List[ValidationObserver]): Notified by ``check``
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.parser = CommitMessageParser(self.config)
        self.style_chain = create_style_chain(
            self.config.max_body_line_length,
            self.config.past_tense_words,
            self.config.footer_keys,
        )
        self.observers: List[ValidationObserver] = []

    def add_observer(self, observer: ValidationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        self.observers.remove(observer)

    def parse(self, raw: str) -> CommitMessage:
        """Parse raw text, raising the first structural ParseError."""
        return self.parser.parse(raw)

    def validate(self, message: CommitMessage) -> List[Violation]:
        """Collect every style violation of an already parsed message."""
        return sorted(self.style_chain.handle(message), key=lambda violation: violation.line)

    def format(self, message: CommitMessage) -> str:
        return format_message(message)

    def check(self, raw: str) -> ValidationReport:
        """Parse and validate raw text, notifying observers of the outcome."""
        try:
            message = self.parse(raw)
        except ParseError as error:
            for observer in self.observers:
                observer.on_parse_error(error)
            raise

        report = ValidationReport(message=message, violations=tuple(self.validate(message)))
        for observer in self.observers:
            observer.on_checked(report)
        return report
