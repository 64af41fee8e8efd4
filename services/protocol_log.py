# services/protocol_log.py
import logging
from typing import Dict, Iterable, List, Optional

from algorithms.boyer_moore import build_bad_char_table
from algorithms.trace import Step, StepKind, Trace
from services.shares import ShareAnnotator

logger = logging.getLogger(__name__)

SYSTEM = "System"
QUERYING = "Querying Party"
OWNER = "Database Owner"
THIRD = "Trusted Third Party"


def _entry(party: str, type_: str, message: str, crypto: Optional[Dict] = None) -> Dict[str, object]:
    e: Dict[str, object] = {"party": party, "type": type_, "message": message}
    if crypto:
        e["cryptoData"] = crypto
    return e


def describe_step(step: Step) -> Dict[str, object]:
    """One narrated log entry for a step (party, type, message)."""
    k = step.kind
    if k is StepKind.ALIGN:
        return _entry(OWNER, "info", f"Alignment at position {step.shift} ({step.window})")
    if k is StepKind.COMPARE:
        return _entry(THIRD, "compute",
                      f"Comparing Text[{step.text_index}] vs Pattern[{step.pattern_index}]")
    if k is StepKind.MATCH:
        return _entry(THIRD, "success",
                      f"Match confirmed at position ({step.text_index}, {step.pattern_index})")
    if k is StepKind.MISMATCH:
        return _entry(THIRD, "info",
                      f"Mismatch detected at position ({step.text_index}, {step.pattern_index}): "
                      f"{step.text_char} != {step.pattern_char}")
    if k is StepKind.SHIFT:
        return _entry(QUERYING, "compute",
                      f"Bad character shift: {step.shift_amount} position"
                      f"{'' if step.shift_amount == 1 else 's'}")
    if k is StepKind.FOUND:
        return _entry(SYSTEM, "success", f"Pattern match found at position {step.position}")
    return _entry(SYSTEM, "failure", "Search completed - pattern not found")


def protocol_log(trace: Iterable[Step], pattern: str,
                 annotator: Optional[ShareAnnotator] = None) -> List[Dict[str, object]]:
    """
    Narrate a finished trace as a three-party protocol log.

    With an annotator, entries also carry cosmetic share tags; without one the
    log is fully deterministic.
    """
    log = [_entry(SYSTEM, "protocol", "Initializing Boyer-Moore search protocol")]
    table = build_bad_char_table(pattern)
    shares = annotator.bad_char_entries(table) if annotator is not None else {}
    for ch, i in sorted(table.items()):
        crypto = None
        if ch in shares:
            crypto = {"operation": "bad_char_table", "shares": shares[ch]}
        log.append(_entry(QUERYING, "encrypt",
                          f"Bad character entry for '{ch}': last index {i}", crypto))
    log.append(_entry(SYSTEM, "protocol", "Beginning pattern matching phase"))
    for step in trace:
        e = describe_step(step)
        if annotator is not None:
            tag = annotator.annotate(step)
            if tag:
                e["cryptoData"] = tag
        log.append(e)
    return log


def protocol_stats(trace: Trace, text_length: int) -> Dict[str, object]:
    return {
        "totalEncryptionRounds": text_length,
        "totalComparisons": trace.count(StepKind.COMPARE),
        "alignments": trace.count(StepKind.ALIGN),
        "shifts": trace.count(StepKind.SHIFT),
        "steps": len(trace),
        "securityLevel": "none (simulation only)",
    }
