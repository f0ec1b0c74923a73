"""Security sentinel: masks credentials in file excerpts before prompting.

Repository files regularly contain sample keys, connection strings and
tokens.  Excerpts are scanned with the patterns below and every match is
replaced by ``[REDACTED]`` so it never reaches the generation service.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_REDACTION = "[REDACTED]"

_SECRET_PATTERNS: dict[str, re.Pattern[str]] = {
    "aws_access_key": re.compile(r"\bAKIA[0-9A-Z]{16}\b"),
    "github_token": re.compile(r"\b(?:gh[pousr]_[A-Za-z0-9_]{36,}|github_pat_[A-Za-z0-9_]{22,})"),
    "openai_key": re.compile(r"\bsk-(?:proj-)?[A-Za-z0-9_\-]{20,}"),
    "key_assignment": re.compile(
        r"(?:api[_\-]?key|secret[_\-]?key|access[_\-]?token|auth[_\-]?token)"
        r"""\s*[:=]\s*['"]?[A-Za-z0-9_\-/+]{20,}['"]?""",
        re.IGNORECASE,
    ),
    "password_assignment": re.compile(
        r"""(?:password|passwd|secret)\s*[:=]\s*['"][^\s'"]{8,}['"]""",
        re.IGNORECASE,
    ),
    "private_key": re.compile(r"-----BEGIN (?:RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----"),
    "jwt": re.compile(r"\beyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}"),
    "connection_string": re.compile(
        r"(?:postgres(?:ql)?|mysql|mongodb(?:\+srv)?|redis)://[^\s:@/]+:[^\s@/]+@[^\s'\"]+",
        re.IGNORECASE,
    ),
    "bearer_header": re.compile(r"\bBearer\s+[A-Za-z0-9_\-.=]{20,}"),
}


@dataclass(frozen=True, slots=True)
class Redaction:
    """Text after masking plus how many matches were masked."""

    text: str
    count: int


def redact(text: str) -> Redaction:
    """Replace every secret-looking match in *text* with ``[REDACTED]``."""
    total = 0
    for pattern in _SECRET_PATTERNS.values():
        text, hits = pattern.subn(_REDACTION, text)
        total += hits
    return Redaction(text=text, count=total)
