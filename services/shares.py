# services/shares.py
"""
Cosmetic additive secret sharing for the protocol log.

Purely decorative: every share set is generated and reconstructed in the same
process, so nothing here hides anything. Values never feed back into the
search; they only tag steps for rendering.

- Field    -> integers modulo PRIME (2**31 - 1)
- Parties  -> Querying Party, Database Owner, Trusted Third Party
- Source   -> a seedable random.Random so tests and replays are reproducible
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from algorithms.trace import Step, StepKind

PRIME = 2147483647
PARTIES = ("Querying Party", "Database Owner", "Trusted Third Party")


def split_secret(secret: int, rng: random.Random, parties: int = 3) -> List[int]:
    if parties < 1:
        raise ValueError("need at least one party")
    shares, total = [], 0
    for _ in range(parties - 1):
        s = rng.randrange(PRIME)
        shares.append(s)
        total = (total + s) % PRIME
    shares.append((secret - total) % PRIME)
    return shares


def reconstruct(shares: List[int]) -> int:
    total = 0
    for s in shares:
        total = (total + s) % PRIME
    return total


class ShareAnnotator:
    """Attach illustrative share tags to steps. Same seed -> same tags."""

    def __init__(self, seed: Optional[int] = None, parties: int = 3):
        self.rng = random.Random(seed)
        self.parties = parties

    def shares_for(self, value: int) -> List[int]:
        return split_secret(value, self.rng, self.parties)

    def annotate(self, step: Step) -> Optional[Dict[str, object]]:
        if step.kind in (StepKind.COMPARE, StepKind.MATCH, StepKind.MISMATCH):
            return {
                "operation": "secure_compare",
                "textShares": self.shares_for(ord(step.text_char)),
                "patternShares": self.shares_for(ord(step.pattern_char)),
            }
        if step.kind is StepKind.SHIFT:
            return {"operation": "shift", "shares": self.shares_for(step.shift_amount)}
        if step.kind is StepKind.FOUND:
            return {"operation": "reveal", "shares": self.shares_for(step.position)}
        return None

    def bad_char_entries(self, table: Dict[str, int]) -> Dict[str, List[int]]:
        return {ch: self.shares_for(i) for ch, i in sorted(table.items())}
