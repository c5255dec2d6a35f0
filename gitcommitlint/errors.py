"""Structural errors raised while parsing a commit message."""
from enum import Enum


class ParseErrorKind(str, Enum):
    MISSING_TYPE = "missing-type"
    MISSING_SUBJECT = "missing-subject"
    SUBJECT_TOO_LONG = "subject-too-long"
    TRAILING_PERIOD = "trailing-period"
    INVALID_SCOPE = "invalid-scope"
    MISSING_BLANK_LINE_SEPARATOR = "missing-blank-line-separator"


class ParseError(ValueError):
    """Base class for fatal commit message defects.

    Attributes:
        kind (ParseErrorKind): Which structural rule failed
        line (int): 1-based line number of the offending line
    """

    kind: ParseErrorKind

    def __init__(self, message: str, line: int = 1):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"


class MissingTypeError(ParseError):
    kind = ParseErrorKind.MISSING_TYPE


class MissingSubjectError(ParseError):
    kind = ParseErrorKind.MISSING_SUBJECT


class SubjectTooLongError(ParseError):
    kind = ParseErrorKind.SUBJECT_TOO_LONG


class TrailingPeriodError(ParseError):
    kind = ParseErrorKind.TRAILING_PERIOD


class InvalidScopeError(ParseError):
    kind = ParseErrorKind.INVALID_SCOPE


class MissingBlankLineSeparatorError(ParseError):
    kind = ParseErrorKind.MISSING_BLANK_LINE_SEPARATOR
