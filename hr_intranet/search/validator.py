"""Name query validation.

A query is accepted only when it is a non-empty string of at most
``max_length`` code points made of ASCII letters, whitespace and hyphens.
"""

import re
from dataclasses import dataclass

DEFAULT_MAX_LENGTH = 20
# Whitespace as ECMAScript \s defines it, not Python's Unicode \s
# (which differs on \x1c-\x1f, \x85 and \ufeff)
WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
QUERY_PATTERN = re.compile(rf"[A-Za-z{WHITESPACE}-]+")

INVALID_QUERY_MESSAGE = (
    "Invalid query: letters, spaces and hyphens only (max {max_length} characters)."
)


@dataclass(frozen=True)
class Accepted:
    value: str


@dataclass(frozen=True)
class Rejected:
    reason: str


ValidationResult = Accepted | Rejected


def validate(raw: object, max_length: int = DEFAULT_MAX_LENGTH) -> ValidationResult:
    if raw is None:
        return Rejected("missing")
    if not isinstance(raw, str):
        return Rejected("not a string")
    if not raw:
        return Rejected("empty")
    if len(raw) > max_length:
        return Rejected("too long")
    if not QUERY_PATTERN.fullmatch(raw):
        return Rejected("forbidden characters")
    return Accepted(raw)
