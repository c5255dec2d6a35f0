"""Commit message parsing, validation and formatting package."""

from .formatter import format_message
from .parser import CommitMessageParser, parse
from .validator import CommitMessageValidator

__all__ = [
    'CommitMessageParser',
    'CommitMessageValidator',
    'format_message',
    'parse',
]
