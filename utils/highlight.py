import html

from algorithms.trace import StepKind

MATCH_BG = "#4caf50"
MISMATCH_BG = "#f44336"
CURSOR_BG = "#ff9800"
WINDOW_BG = "#fff59d"


def replay_frame(steps, index: int):
    """
    Board state after steps[0..index]: (shift, matched, mismatched, cursor).

    matched / mismatched hold text indices compared since the last align step.
    """
    shift, matched, mismatched, cursor = 0, set(), set(), None
    for step in steps[:index + 1]:
        if step.kind is StepKind.ALIGN:
            shift, matched, mismatched, cursor = step.shift, set(), set(), None
        elif step.kind is StepKind.COMPARE:
            cursor = step.text_index
        elif step.kind is StepKind.MATCH:
            matched.add(step.text_index)
        elif step.kind is StepKind.MISMATCH:
            mismatched.add(step.text_index)
    return shift, matched, mismatched, cursor


def render_alignment_html(text: str, pattern: str, shift: int, matched=(), mismatched=(),
                          cursor: int = None):
    """Text with the aligned window marked, and the pattern drawn under it."""
    if not text:
        return "<em>No text</em>"
    cells = []
    for i, ch in enumerate(text):
        style = ""
        if i in mismatched:
            style = f"background:{MISMATCH_BG};color:white"
        elif i in matched:
            style = f"background:{MATCH_BG};color:white"
        elif i == cursor:
            style = f"background:{CURSOR_BG};color:white"
        elif shift <= i < shift + len(pattern):
            style = f"background:{WINDOW_BG}"
        cells.append(f"<span style='{style}'>{html.escape(ch)}</span>" if style else html.escape(ch))
    pad = "&nbsp;" * max(0, shift)
    return (
        "<div style='white-space:pre;font-family:monospace'>"
        + "".join(cells) + "<br>" + pad + html.escape(pattern)
        + "</div>"
    )
