import logging
import time
from typing import Callable, Dict, Iterable, Iterator, Tuple

from algorithms.trace import Result, Step, StepKind, Trace
from utils.dna import InvalidInput, check_sequences

logger = logging.getLogger(__name__)


def build_bad_char_table(p: str) -> Dict[str, int]:
    if not p:
        raise InvalidInput("Pattern must be provided", field="pattern")
    table = {}
    for i, ch in enumerate(p):
        table[ch] = i
    return table


def _walk(t: str, p: str) -> Iterator[Step]:
    assert len(p) >= 1
    table = build_bad_char_table(p)
    n, m = len(t), len(p)
    shift = 0
    while shift <= n - m:
        yield Step.align(shift, t[shift:shift + m])
        j = m - 1
        while j >= 0:
            yield Step.pair(StepKind.COMPARE, t, p, shift, j)
            if t[shift + j] == p[j]:
                yield Step.pair(StepKind.MATCH, t, p, shift, j)
                j -= 1
            else:
                yield Step.pair(StepKind.MISMATCH, t, p, shift, j)
                break
        if j < 0:
            logger.debug("pattern %s found at %d", p, shift)
            yield Step.found(shift)
            return
        # last occurrence anywhere in p, not just left of j; hence the max(1, ...)
        last = table.get(t[shift + j], -1)
        amount = max(1, j - last)
        yield Step.shifted(shift, amount)
        shift += amount
    logger.debug("pattern %s not found in %d bases", p, n)
    yield Step.not_found()


def iter_steps(t: str, p: str) -> Iterator[Step]:
    """
    Lazily yield the search steps for pattern p over text t.

    Inputs are checked immediately, so InvalidInput is raised by this call and
    not on the first next().
    """
    check_sequences(t, p)
    return _walk(t, p)


def search(t: str, p: str) -> Tuple[Result, Trace]:
    trace = Trace()
    for step in iter_steps(t, p):
        trace.append(step)
    return trace.result, trace


def replay(steps: Iterable[Step], delay: float = 0.0,
           sleep: Callable[[float], None] = time.sleep) -> Iterator[Step]:
    """Yield steps one at a time, pausing `delay` seconds between them."""
    if delay < 0:
        raise ValueError("delay must be >= 0")
    return _paced(steps, delay, sleep)


def _paced(steps, delay, sleep):
    first = True
    for step in steps:
        if not first and delay:
            sleep(delay)
        first = False
        yield step
