"""Lexical rules shared by the parser and the validation handlers."""
import re
from typing import Iterable, Optional

from ..models import BREAKING_CHANGE_KEYS, SCOPE_PATTERN, CommitType, FooterEntry

COMMIT_TYPES = frozenset(commit_type.value for commit_type in CommitType)

# "type" or "type(scope)", everything before the header colon
TYPE_PREFIX_PATTERN = re.compile(r"^(?P<type>[A-Za-z]+)(?:\((?P<scope>[^()]*)\))?$")
OPEN_SCOPE_PATTERN = re.compile(r"^(?P<type>[A-Za-z]+)\(")

# Git trailer style keys: Closes, Signed-off-by, Co-authored-by
TOKEN_KEY_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*$")
ISSUE_NUMBER_PATTERN = re.compile(r"^\d+$")


def is_known_footer_key(key: str, footer_keys: Iterable[str]) -> bool:
    return key.lower() in {known.lower() for known in footer_keys}


def is_valid_footer_key(key: str, footer_keys: Iterable[str]) -> bool:
    if key in BREAKING_CHANGE_KEYS or TOKEN_KEY_PATTERN.match(key):
        return True
    return is_known_footer_key(key, footer_keys)


def split_footer_line(line: str, footer_keys: Iterable[str]) -> Optional[FooterEntry]:
    """Split a line shaped like ``Key: value`` or ``Key #number``.

    Returns None when the line does not have a footer shape. Multi-word
    keys are only accepted when they are configured footer keys (or the
    breaking change marker), so that ordinary prose is not mistaken for
    a trailer. A bare ``BREAKING CHANGE:`` is a trailer with an empty
    value, left for the footer rules to report.
    """
    for key in BREAKING_CHANGE_KEYS:
        if line == key + ":":
            return FooterEntry(key=key, value="", separator=": ")

    multi_word = [key for key in (*BREAKING_CHANGE_KEYS, *footer_keys) if " " in key]
    for key in sorted(multi_word, key=len, reverse=True):
        for separator in (": ", " #"):
            prefix = key + separator
            if line.lower().startswith(prefix.lower()) and len(line) > len(prefix):
                return FooterEntry(
                    key=line[:len(key)], value=line[len(prefix):], separator=separator
                )

    for separator in (": ", " #"):
        key, found, value = line.partition(separator)
        if found and value and TOKEN_KEY_PATTERN.match(key):
            return FooterEntry(key=key, value=value, separator=separator)
    return None


def loose_footer_entry(line: str) -> FooterEntry:
    """Best-effort split of a footer block line that has no footer shape."""
    if ":" in line:
        key, _, value = line.partition(":")
        return FooterEntry(key=key.strip(), value=value.strip(), separator=": ")
    return FooterEntry(key=line, value="", separator="")
