# algorithms/trace.py
"""
Step / Trace / Result model for the step-by-step Boyer-Moore search.

Steps are frozen; a Trace is built once per search and only ever appended to
while the search runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class StepKind(str, Enum):
    ALIGN = "align"
    COMPARE = "compare"
    MATCH = "match"
    MISMATCH = "mismatch"
    SHIFT = "shift"
    FOUND = "found"
    NOT_FOUND = "not_found"


TERMINAL_KINDS = (StepKind.FOUND, StepKind.NOT_FOUND)

# python attribute -> JSON key
_JSON_KEYS = {
    "kind": "kind",
    "shift": "shift",
    "window": "window",
    "text_index": "textIndex",
    "pattern_index": "patternIndex",
    "text_char": "textChar",
    "pattern_char": "patternChar",
    "shift_amount": "shiftAmount",
    "reason": "reason",
    "position": "position",
}
_ATTR_KEYS = {v: k for k, v in _JSON_KEYS.items()}


@dataclass(frozen=True)
class Step:
    kind: StepKind
    shift: Optional[int] = None
    window: Optional[str] = None
    text_index: Optional[int] = None
    pattern_index: Optional[int] = None
    text_char: Optional[str] = None
    pattern_char: Optional[str] = None
    shift_amount: Optional[int] = None
    reason: Optional[str] = None
    position: Optional[int] = None

    @classmethod
    def align(cls, shift: int, window: str) -> "Step":
        return cls(StepKind.ALIGN, shift=shift, window=window)

    @classmethod
    def pair(cls, kind: StepKind, text: str, pattern: str, shift: int, j: int) -> "Step":
        # compare / match / mismatch all carry the same position pair
        return cls(
            kind,
            text_index=shift + j,
            pattern_index=j,
            text_char=text[shift + j],
            pattern_char=pattern[j],
        )

    @classmethod
    def shifted(cls, shift: int, amount: int) -> "Step":
        return cls(StepKind.SHIFT, shift=shift, shift_amount=amount,
                   reason="bad_character_heuristic")

    @classmethod
    def found(cls, position: int) -> "Step":
        return cls(StepKind.FOUND, shift=position, position=position)

    @classmethod
    def not_found(cls) -> "Step":
        return cls(StepKind.NOT_FOUND)

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS

    def positions(self) -> Tuple[Optional[int], Optional[int]]:
        return self.text_index, self.pattern_index

    def to_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, StepKind):
                value = value.value
            out[_JSON_KEYS[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Step":
        kwargs = {_ATTR_KEYS[k]: v for k, v in data.items() if k in _ATTR_KEYS}
        kwargs["kind"] = StepKind(kwargs["kind"])
        return cls(**kwargs)


@dataclass(frozen=True)
class Result:
    found: bool
    position: Optional[int] = None
    message: str = ""

    @classmethod
    def from_terminal(cls, step: Step) -> "Result":
        if step.kind is StepKind.FOUND:
            return cls(True, step.position, f"Pattern found at position {step.position}")
        if step.kind is StepKind.NOT_FOUND:
            return cls(False, None, "Pattern not found in the sequence")
        raise ValueError(f"{step.kind.value!r} is not a terminal step")

    def to_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {"found": self.found, "message": self.message}
        if self.position is not None:
            out["position"] = self.position
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Result":
        return cls(bool(data["found"]), data.get("position"), data.get("message", ""))


@dataclass
class Trace:
    """Ordered, append-only record of the steps of one search."""

    _steps: List[Step] = field(default_factory=list)

    def append(self, step: Step) -> None:
        if self._steps and self._steps[-1].is_terminal:
            raise ValueError("trace is already terminated")
        self._steps.append(step)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index):
        return self._steps[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return self._steps == other._steps

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    @property
    def is_complete(self) -> bool:
        return bool(self._steps) and self._steps[-1].is_terminal

    @property
    def result(self) -> Result:
        if not self.is_complete:
            raise ValueError("trace has no terminal step")
        return Result.from_terminal(self._steps[-1])

    def kinds(self) -> List[StepKind]:
        return [s.kind for s in self._steps]

    def count(self, kind: StepKind) -> int:
        return sum(1 for s in self._steps if s.kind is kind)

    def alignments(self) -> List[int]:
        return [s.shift for s in self._steps if s.kind is StepKind.ALIGN]

    def to_list(self) -> List[Dict[str, object]]:
        return [s.to_dict() for s in self._steps]

    @classmethod
    def from_steps(cls, steps: Iterable[Step]) -> "Trace":
        trace = cls()
        for s in steps:
            trace.append(s)
        return trace

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, object]]) -> "Trace":
        return cls.from_steps(Step.from_dict(d) for d in data)
