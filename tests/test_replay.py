import pytest

from algorithms.boyer_moore import iter_steps, replay, search


def test_replay_paces_between_steps():
    _, trace = search("TTTTACGT", "ACGT")
    slept = []
    out = list(replay(trace, 0.25, sleep=slept.append))
    assert out == list(trace)
    assert slept == [0.25] * (len(trace) - 1)


def test_replay_zero_delay_never_sleeps():
    slept = []
    out = list(replay(iter_steps("ACGT", "GGGG"), sleep=slept.append))
    assert len(out) == 5 and slept == []


def test_replay_cancel_leaves_trace_intact():
    _, trace = search("GATTACAGATTACA", "TACA")
    before = trace.to_list()
    slept = []
    it = replay(trace, 1.0, sleep=slept.append)
    next(it)
    next(it)
    it.close()
    assert len(slept) == 1
    assert trace.to_list() == before
    assert trace.is_complete


def test_replay_negative_delay():
    with pytest.raises(ValueError):
        replay([], -1)
