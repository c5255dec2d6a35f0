"""Shared models for git-commit-lint."""
import re
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

BREAKING_CHANGE_KEYS = ("BREAKING CHANGE", "BREAKING-CHANGE")
SCOPE_PATTERN = re.compile(r"^[a-z0-9-]+$")


class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    REFACTOR = "refactor"
    PERF = "perf"
    DOCS = "docs"
    TEST = "test"
    CHORE = "chore"
    CI = "ci"
    STYLE = "style"
    SYNC = "sync"


class ViolationKind(str, Enum):
    NON_IMPERATIVE_MOOD = "non-imperative-mood"
    BODY_LINE_TOO_LONG = "body-line-too-long"
    MALFORMED_FOOTER = "malformed-footer"


class FooterEntry(BaseModel):
    """A single trailer line such as ``Closes #12`` or ``BREAKING CHANGE: ...``.

    ``separator`` is ``": "`` or ``" #"`` for well-formed entries and empty
    for a footer line that has neither shape.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str = ""
    separator: str = ": "

    @field_validator("key", "value")
    @classmethod
    def _single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("footer entries must fit on one line")
        return value

    def __str__(self) -> str:
        return f"{self.key}{self.separator}{self.value}".rstrip()


class CommitMessage(BaseModel):
    """A parsed commit message. Instances are never mutated."""

    model_config = ConfigDict(frozen=True)

    type: CommitType
    scope: Optional[str] = None
    subject: str
    body: Tuple[str, ...] = ()
    footer: Tuple[FooterEntry, ...] = Field(
        default=(), description="Footer entries in message order"
    )

    @field_validator("scope")
    @classmethod
    def _check_scope(cls, scope: Optional[str]) -> Optional[str]:
        if scope is not None and not SCOPE_PATTERN.match(scope):
            raise ValueError("scope must be lowercase letters, digits and hyphens")
        return scope

    @field_validator("subject")
    @classmethod
    def _check_subject(cls, subject: str) -> str:
        # The length limit is configurable, so it is enforced by the parser
        if not subject or subject != subject.strip():
            raise ValueError("subject must be non-empty without surrounding whitespace")
        if "\n" in subject or "\r" in subject:
            raise ValueError("subject must fit on one line")
        if subject.endswith("."):
            raise ValueError("subject must not end with a period")
        return subject

    @field_validator("body")
    @classmethod
    def _check_body(cls, body: Tuple[str, ...]) -> Tuple[str, ...]:
        if body and (not body[0] or not body[-1]):
            raise ValueError("body must not start or end with a blank line")
        for line in body:
            if "\n" in line or "\r" in line:
                raise ValueError("body lines must not contain line breaks")
            if line != line.rstrip():
                raise ValueError("body lines must not end with whitespace")
        return body

    @property
    def header(self) -> str:
        if self.scope:
            return f"{self.type.value}({self.scope}): {self.subject}"
        return f"{self.type.value}: {self.subject}"

    @property
    def is_breaking(self) -> bool:
        return any(entry.key in BREAKING_CHANGE_KEYS for entry in self.footer)

    @property
    def body_start_line(self) -> Optional[int]:
        """Line number of the first body line in the canonical form."""
        return 3 if self.body else None

    @property
    def footer_start_line(self) -> Optional[int]:
        """Line number of the first footer line in the canonical form."""
        if not self.footer:
            return None
        if self.body:
            return 3 + len(self.body) + 1
        return 3


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    line: int = Field(description="1-based line number in the canonical message")
    message: str

    def __str__(self) -> str:
        return f"line {self.line}: {self.message} [{self.kind.value}]"


class ValidationReport(BaseModel):
    """A parsed message together with its advisory violations."""

    model_config = ConfigDict(frozen=True)

    message: CommitMessage
    violations: Tuple[Violation, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.violations
