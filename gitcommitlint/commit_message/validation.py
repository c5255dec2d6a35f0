"""Commit message rules using Chain of Responsibility pattern.

Header rules stop at the first failure and produce a single ParseError.
Style rules run to the end of the chain and accumulate every Violation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..errors import (
    InvalidScopeError,
    MissingSubjectError,
    MissingTypeError,
    ParseError,
    SubjectTooLongError,
    TrailingPeriodError,
)
from ..models import CommitMessage, Violation, ViolationKind
from .grammar import COMMIT_TYPES, ISSUE_NUMBER_PATTERN, SCOPE_PATTERN, is_valid_footer_key

DEFAULT_PAST_TENSE_WORDS = ("added", "fixed", "updated", "changed", "removed")


@dataclass(frozen=True)
class HeaderParts:
    """Raw tokens of a header line, before any rule has been applied."""

    line: str
    type_token: Optional[str]
    scope: Optional[str]
    subject: str
    has_colon: bool
    scope_unclosed: bool = False


class HeaderRule(ABC):
    """Abstract base class for header rules."""

    def __init__(self, next_handler: Optional['HeaderRule'] = None):
        self.next_handler = next_handler

    def handle(self, header: HeaderParts) -> Optional[ParseError]:
        """Apply this rule and pass to the next one if it holds."""
        error = self.validate(header)
        if error or not self.next_handler:
            return error
        return self.next_handler.handle(header)

    @abstractmethod
    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        """Return the error for this rule, or None if the header passes."""
        pass


class TypeRule(HeaderRule):
    """The header starts with a recognised type followed by a colon."""

    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        if not header.line.strip():
            return MissingTypeError("Empty commit message")
        if not header.has_colon:
            return MissingTypeError("Header must follow format: type(scope): subject")
        if header.type_token not in COMMIT_TYPES:
            allowed = ", ".join(sorted(COMMIT_TYPES))
            found = header.type_token or header.line.split(":", 1)[0]
            return MissingTypeError(f"Unknown commit type '{found}' (expected one of: {allowed})")
        return None


class ScopeRule(HeaderRule):
    """A scope, when given, is a non-empty lowercase alphanumeric/hyphen token."""

    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        if header.scope_unclosed:
            return InvalidScopeError("Scope must be enclosed in parentheses right before the colon")
        if header.scope is not None and not SCOPE_PATTERN.match(header.scope):
            return InvalidScopeError(
                f"Invalid scope '{header.scope}': use lowercase letters, digits and hyphens"
            )
        return None


class SubjectPresentRule(HeaderRule):
    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        if not header.subject:
            return MissingSubjectError("Subject is missing after the colon")
        return None


class SubjectLengthRule(HeaderRule):
    """Validates the subject length."""

    def __init__(self, max_length: int = 50, next_handler: Optional[HeaderRule] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        if len(header.subject) > self.max_length:
            return SubjectTooLongError(
                f"Subject too long ({len(header.subject)} > {self.max_length})"
            )
        return None


class SubjectPeriodRule(HeaderRule):
    """Validates that the subject doesn't end with a period."""

    def validate(self, header: HeaderParts) -> Optional[ParseError]:
        if header.subject.endswith('.'):
            return TrailingPeriodError("Subject should not end with a period")
        return None


class StyleRule(ABC):
    """Abstract base class for advisory style rules."""

    def __init__(self, next_handler: Optional['StyleRule'] = None):
        self.next_handler = next_handler

    def handle(self, message: CommitMessage) -> List[Violation]:
        """Apply this rule and every rule after it."""
        violations = self.validate(message)
        if self.next_handler:
            violations.extend(self.next_handler.handle(message))
        return violations

    @abstractmethod
    def validate(self, message: CommitMessage) -> List[Violation]:
        """Return the violations found by this rule."""
        pass


class ImperativeMoodRule(StyleRule):
    """Flags subjects that open with a past-tense verb ("added" not "add")."""

    def __init__(self, past_tense_words: Iterable[str] = DEFAULT_PAST_TENSE_WORDS,
                 next_handler: Optional[StyleRule] = None):
        super().__init__(next_handler)
        self.past_tense_words = frozenset(word.lower() for word in past_tense_words)

    def validate(self, message: CommitMessage) -> List[Violation]:
        words = message.subject.split()
        first_word = words[0].lower() if words else ""
        if first_word in self.past_tense_words:
            return [Violation(
                kind=ViolationKind.NON_IMPERATIVE_MOOD,
                line=1,
                message=f"Use imperative mood in the subject ('{words[0]}' is past tense)",
            )]
        return []


class BodyLineLengthRule(StyleRule):
    """Validates body line lengths."""

    def __init__(self, max_length: int = 72, next_handler: Optional[StyleRule] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, message: CommitMessage) -> List[Violation]:
        violations = []
        for offset, line in enumerate(message.body):
            if len(line) > self.max_length:
                violations.append(Violation(
                    kind=ViolationKind.BODY_LINE_TOO_LONG,
                    line=message.body_start_line + offset,
                    message=f"Body line too long ({len(line)} > {self.max_length})",
                ))
        return violations


class FooterShapeRule(StyleRule):
    """Footer entries must read ``Key: value`` or ``Key #number``."""

    def __init__(self, footer_keys: Sequence[str] = (), next_handler: Optional[StyleRule] = None):
        super().__init__(next_handler)
        self.footer_keys = tuple(footer_keys)

    def _problem(self, entry) -> Optional[str]:
        if not entry.separator:
            return "Footer must read 'Key: value' or 'Key #number'"
        if not is_valid_footer_key(entry.key, self.footer_keys):
            return f"Invalid footer key '{entry.key}'"
        if not entry.value.strip():
            return f"Footer '{entry.key}' has no value"
        if entry.separator == " #" and not ISSUE_NUMBER_PATTERN.match(entry.value):
            return f"Footer '{entry.key}' must reference a number after '#'"
        return None

    def validate(self, message: CommitMessage) -> List[Violation]:
        violations = []
        for offset, entry in enumerate(message.footer):
            problem = self._problem(entry)
            if problem:
                violations.append(Violation(
                    kind=ViolationKind.MALFORMED_FOOTER,
                    line=message.footer_start_line + offset,
                    message=problem,
                ))
        return violations


def create_header_chain(max_subject_length: int = 50) -> HeaderRule:
    """Create the default header chain."""
    subject_period = SubjectPeriodRule()
    subject_length = SubjectLengthRule(max_subject_length, subject_period)
    subject_present = SubjectPresentRule(subject_length)
    scope = ScopeRule(subject_present)
    commit_type = TypeRule(scope)

    return commit_type


def create_style_chain(max_body_length: int = 72,
                       past_tense_words: Iterable[str] = DEFAULT_PAST_TENSE_WORDS,
                       footer_keys: Sequence[str] = ()) -> StyleRule:
    """Create the default style chain, ordered by the lines each rule inspects."""
    footer_shape = FooterShapeRule(footer_keys)
    body_length = BodyLineLengthRule(max_body_length, footer_shape)
    mood = ImperativeMoodRule(past_tense_words, body_length)

    return mood
