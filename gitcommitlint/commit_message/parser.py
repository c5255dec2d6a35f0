"""Commit message parsing.

A message is split in a single pass into the header line, an optional
body and an optional footer block, using blank lines as separators.
"""
from typing import List, Optional, Tuple

from ..config import Config
from ..errors import MissingBlankLineSeparatorError
from ..models import CommitMessage, CommitType, FooterEntry
from .grammar import (
    OPEN_SCOPE_PATTERN,
    TYPE_PREFIX_PATTERN,
    is_known_footer_key,
    loose_footer_entry,
    split_footer_line,
)
from .validation import HeaderParts, create_header_chain

# (line number, text)
Paragraph = List[Tuple[int, str]]


def normalize(raw: str, strip_comments: bool = True) -> List[str]:
    """Split raw text into lines with trailing whitespace and outer blank lines removed."""
    lines = raw.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    if strip_comments:
        lines = [line for line in lines if not line.startswith('#')]
    lines = [line.rstrip() for line in lines]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def tokenize_header(line: str) -> HeaderParts:
    """Break a header line into type, scope and subject without judging them."""
    prefix, colon, subject = line.partition(':')
    if not colon:
        return HeaderParts(line=line, type_token=None, scope=None, subject="", has_colon=False)

    match = TYPE_PREFIX_PATTERN.match(prefix)
    if match:
        return HeaderParts(
            line=line,
            type_token=match.group('type'),
            scope=match.group('scope'),
            subject=subject.strip(),
            has_colon=True,
        )

    # "feat(scope" or "feat(scope) extra" still names a type
    match = OPEN_SCOPE_PATTERN.match(prefix)
    if match:
        return HeaderParts(
            line=line,
            type_token=match.group('type'),
            scope=None,
            subject=subject.strip(),
            has_colon=True,
            scope_unclosed=True,
        )

    return HeaderParts(line=line, type_token=None, scope=None, subject=subject.strip(), has_colon=True)


class CommitMessageParser:
    """Parses raw text into a CommitMessage or raises a ParseError."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.header_chain = create_header_chain(self.config.max_subject_length)

    def _split_paragraphs(self, lines: List[str]) -> List[Paragraph]:
        paragraphs: List[Paragraph] = []
        current: Paragraph = []
        for number, line in enumerate(lines, start=2):
            if line:
                current.append((number, line))
            elif current:
                paragraphs.append(current)
                current = []
        if current:
            paragraphs.append(current)
        return paragraphs

    def _is_footer_block(self, paragraph: Paragraph) -> bool:
        first = split_footer_line(paragraph[0][1], self.config.footer_keys)
        if first is None:
            return False
        if is_known_footer_key(first.key, self.config.footer_keys):
            return True
        return all(split_footer_line(text, self.config.footer_keys) for _, text in paragraph)

    def _check_footer_separation(self, paragraph: Paragraph) -> None:
        """Reject known trailers glued to the last line of body text."""
        keys = self.config.footer_keys
        for index in range(1, len(paragraph)):
            number, text = paragraph[index]
            entry = split_footer_line(text, keys)
            if entry is None or not is_known_footer_key(entry.key, keys):
                continue
            if all(split_footer_line(rest, keys) for _, rest in paragraph[index:]):
                raise MissingBlankLineSeparatorError(
                    "Leave one blank line between body and footer", line=number
                )

    def parse(self, raw: str) -> CommitMessage:
        """Parse a commit message.

        Raises:
            ParseError: the first structural defect found in the message
        """
        lines = normalize(raw, self.config.strip_comments)
        header_line = lines[0] if lines else ""

        header = tokenize_header(header_line)
        error = self.header_chain.handle(header)
        if error:
            raise error

        rest = lines[1:]
        if rest and rest[0]:
            raise MissingBlankLineSeparatorError("Leave one blank line after subject", line=2)

        paragraphs = self._split_paragraphs(rest)
        footer_block: Paragraph = []
        if paragraphs and self._is_footer_block(paragraphs[-1]):
            footer_block = paragraphs.pop()
        if paragraphs:
            self._check_footer_separation(paragraphs[-1])

        body: List[str] = []
        for paragraph in paragraphs:
            if body:
                body.append("")
            body.extend(text for _, text in paragraph)

        footer: List[FooterEntry] = []
        for _, text in footer_block:
            entry = split_footer_line(text, self.config.footer_keys)
            footer.append(entry or loose_footer_entry(text))

        return CommitMessage(
            type=CommitType(header.type_token),
            scope=header.scope,
            subject=header.subject,
            body=tuple(body),
            footer=tuple(footer),
        )


def parse(raw: str, config: Optional[Config] = None) -> CommitMessage:
    """Parse a commit message with the given (or default) configuration."""
    return CommitMessageParser(config).parse(raw)
