"""Conventional commit message validator."""

__version__ = "0.1.0"

from .commit_message import CommitMessageParser, CommitMessageValidator, format_message, parse
from .config import Config
from .errors import (
    InvalidScopeError,
    MissingBlankLineSeparatorError,
    MissingSubjectError,
    MissingTypeError,
    ParseError,
    ParseErrorKind,
    SubjectTooLongError,
    TrailingPeriodError,
)
from .models import (
    CommitMessage,
    CommitType,
    FooterEntry,
    ValidationReport,
    Violation,
    ViolationKind,
)

__all__ = [
    '__version__',
    'CommitMessage',
    'CommitMessageParser',
    'CommitMessageValidator',
    'CommitType',
    'Config',
    'FooterEntry',
    'InvalidScopeError',
    'MissingBlankLineSeparatorError',
    'MissingSubjectError',
    'MissingTypeError',
    'ParseError',
    'ParseErrorKind',
    'SubjectTooLongError',
    'TrailingPeriodError',
    'ValidationReport',
    'Violation',
    'ViolationKind',
    'format_message',
    'parse',
]
