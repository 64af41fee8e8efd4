import re
from typing import Optional, Tuple

ALPHABET = frozenset("ACGT")
DNA_RE = re.compile(r"[ACGT]+")


class InvalidInput(ValueError):
    """Malformed search request. `field` names the offending input, if any."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def normalize_sequence(s: str) -> str:
    if not s:
        return ""
    return s.strip().upper()


def check_sequences(text: str, pattern: str) -> None:
    if not text:
        raise InvalidInput("Text must be provided", field="text")
    if not pattern:
        raise InvalidInput("Pattern must be provided", field="pattern")
    if len(pattern) > len(text):
        raise InvalidInput(
            f"Pattern cannot be longer than text ({len(pattern)} > {len(text)})",
            field="pattern",
        )
    for name, seq in (("text", text), ("pattern", pattern)):
        if not DNA_RE.fullmatch(seq):
            bad = sorted(set(seq) - ALPHABET)
            raise InvalidInput(
                f"Only A, C, G, T characters are allowed in {name} (got {''.join(bad)!r})",
                field=name,
            )


def validate_inputs(text: str, pattern: str) -> Tuple[str, str]:
    """Normalize both sequences to uppercase and check them; returns the normalized pair."""
    text, pattern = normalize_sequence(text), normalize_sequence(pattern)
    check_sequences(text, pattern)
    return text, pattern
