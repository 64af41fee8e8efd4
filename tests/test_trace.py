import pytest

from algorithms.boyer_moore import search
from algorithms.trace import Result, Step, StepKind, Trace


def test_step_to_dict_camel_case():
    _, trace = search("TTTTACGT", "ACGT")
    data = trace.to_list()
    assert data[0] == {"kind": "align", "shift": 0, "window": "TTTT"}
    assert data[1] == {"kind": "compare", "textIndex": 3, "patternIndex": 3,
                       "textChar": "T", "patternChar": "T"}
    shift = next(d for d in data if d["kind"] == "shift")
    assert shift == {"kind": "shift", "shift": 0, "shiftAmount": 1,
                     "reason": "bad_character_heuristic"}
    assert data[-1] == {"kind": "found", "shift": 4, "position": 4}


def test_trace_from_list_rebuilds():
    result, trace = search("GATTACA", "TAC")
    again = Trace.from_list(trace.to_list())
    assert again == trace
    assert again.result == result


def test_trace_rejects_steps_after_terminal():
    trace = Trace()
    trace.append(Step.align(0, "A"))
    trace.append(Step.not_found())
    with pytest.raises(ValueError):
        trace.append(Step.align(1, "A"))


def test_incomplete_trace_has_no_result():
    trace = Trace.from_steps([Step.align(0, "AC")])
    assert not trace.is_complete
    with pytest.raises(ValueError):
        trace.result


def test_steps_are_frozen():
    step = Step.found(3)
    with pytest.raises(AttributeError):
        step.position = 4


def test_result_dict():
    assert Result(True, 2, "x").to_dict() == {"found": True, "position": 2, "message": "x"}
    assert Result(False).to_dict() == {"found": False, "message": ""}
    assert Result.from_terminal(Step.not_found()).message == "Pattern not found in the sequence"
    with pytest.raises(ValueError):
        Result.from_terminal(Step.align(0, "A"))


def test_step_kind_values():
    assert [k.value for k in StepKind] == [
        "align", "compare", "match", "mismatch", "shift", "found", "not_found"]
