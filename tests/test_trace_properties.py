from hypothesis import given, strategies as st

from algorithms.boyer_moore import iter_steps, search
from algorithms.trace import StepKind

K = StepKind

dna = st.text(alphabet="ACGT", min_size=1, max_size=40)


@st.composite
def text_and_pattern(draw):
    text = draw(dna)
    if draw(st.booleans()):
        # a pattern cut from the text, so found cases show up often
        start = draw(st.integers(0, len(text) - 1))
        end = draw(st.integers(start + 1, len(text)))
        return text, text[start:end]
    pattern = draw(st.text(alphabet="ACGT", min_size=1, max_size=len(text)))
    return text, pattern


@given(text_and_pattern())
def test_terminates_within_text_length(tp):
    text, pattern = tp
    _, trace = search(text, pattern)
    assert len(trace.alignments()) <= len(text)


@given(text_and_pattern())
def test_found_position_matches(tp):
    text, pattern = tp
    result, _ = search(text, pattern)
    if result.found:
        p = result.position
        assert text[p:p + len(pattern)] == pattern


@given(text_and_pattern())
def test_first_reachable_occurrence(tp):
    text, pattern = tp
    result, trace = search(text, pattern)
    # no visited alignment before the terminal one matches
    for p in trace.alignments()[:-1] if result.found else trace.alignments():
        assert text[p:p + len(pattern)] != pattern
    # the last-occurrence shift never jumps over an occurrence
    expected = text.find(pattern)
    assert result.position == (expected if expected >= 0 else None)


@given(text_and_pattern())
def test_trace_consistency(tp):
    text, pattern = tp
    _, trace = search(text, pattern)
    steps = list(trace)
    assert steps[-1].kind in (K.FOUND, K.NOT_FOUND)
    assert sum(s.is_terminal for s in steps) == 1
    for i, s in enumerate(steps):
        if s.kind is K.COMPARE:
            nxt = steps[i + 1]
            assert nxt.kind in (K.MATCH, K.MISMATCH)
            assert nxt.positions() == s.positions()
        if s.kind is K.MISMATCH and not steps[i + 1].is_terminal:
            assert steps[i + 1].kind is K.SHIFT
            assert steps[i + 1].shift_amount >= 1


@given(text_and_pattern())
def test_alignments_strictly_increase(tp):
    text, pattern = tp
    _, trace = search(text, pattern)
    shifts = trace.alignments()
    assert shifts[0] == 0
    assert all(a < b for a, b in zip(shifts, shifts[1:]))
    assert shifts[-1] <= len(text) - len(pattern)


@given(text_and_pattern())
def test_deterministic_and_lazy_equal(tp):
    text, pattern = tp
    r1, t1 = search(text, pattern)
    r2, t2 = search(text, pattern)
    assert r1 == r2 and t1 == t2
    assert t1.to_list() == t2.to_list()
    assert list(iter_steps(text, pattern)) == list(t1)
