# app.py
import os
import time

import streamlit as st

from algorithms.boyer_moore import search
from algorithms.trace import Result, Trace
from services.client import SearchClient
from services.protocol_log import describe_step, protocol_log, protocol_stats
from services.shares import ShareAnnotator
from utils.dna import InvalidInput, validate_inputs
from utils.highlight import render_alignment_html, replay_frame
from utils.text_io import read_files_as_sequences

BASE_DELAY = 0.6  # seconds per step at 1x

st.set_page_config(page_title="DNA Boyer-Moore Search", layout="wide")
st.title("🧬 DNA Sequence Matching (Boyer-Moore)")
st.caption(
    "Bad-character Boyer-Moore with a replayable step trace. The multi-party "
    "'shares' in the log are cosmetic; nothing is actually hidden."
)


def run_search(text, pattern, annotate, seed):
    api_url = os.getenv("DNA_SEARCH_API_URL")
    if api_url:
        data = SearchClient(api_url).search(text, pattern, annotate=annotate, seed=seed)
        return (Result.from_dict(data["result"]), Trace.from_list(data["trace"]),
                data["log"], data["stats"])
    result, trace = search(text, pattern)
    annotator = ShareAnnotator(seed) if annotate else None
    return result, trace, protocol_log(trace, pattern, annotator), protocol_stats(trace, len(text))


uploaded = st.file_uploader("DNA database (FASTA or plain text)", type=["fa", "fasta", "txt"])
default_text = "ACGTACGTACGTACGTACGTACGTACGTACGTACGT"
if uploaded:
    seqs, _ = read_files_as_sequences([uploaded])
    default_text = seqs[0] or default_text

text = st.text_area("DNA database (text)", value=default_text, height=120)
pattern = st.text_input("DNA query pattern", value="ACGTACGT")

c1, c2, c3 = st.columns(3)
speed = c1.slider("Animation speed", 0.5, 3.0, 1.0, 0.5)
annotate = c2.checkbox("Show cosmetic shares", value=False)
seed = c3.number_input("Share seed", value=0, step=1)

if st.button("Search"):
    try:
        text_n, pattern_n = validate_inputs(text, pattern)
        st.session_state["run"] = (text_n, pattern_n) + run_search(
            text_n, pattern_n, annotate, int(seed))
        st.session_state["pos"] = 0
        st.session_state["playing"] = True
    except InvalidInput as e:
        st.session_state.pop("run", None)
        st.error(f"Invalid input: {e}")

if "run" in st.session_state:
    text_n, pattern_n, result, trace, log, stats = st.session_state["run"]
    ss = st.session_state
    ss.setdefault("pos", 0)
    ss.setdefault("playing", False)
    last = len(trace) - 1

    # advance one step per rerun while playing
    if ss.pop("advance", False) and ss.playing:
        ss.pos = min(ss.pos + 1, last)

    b1, b2, b3 = st.columns(3)
    if b1.button("⏸️ Pause" if ss.playing else "▶️ Play"):
        ss.playing = not ss.playing
        if ss.playing and ss.pos >= last:
            ss.pos = 0
    if b2.button("⏭️ Step"):
        ss.playing = False
        ss.pos = min(ss.pos + 1, last)
    if b3.button("🔄 Reset"):
        ss.playing = False
        ss.pos = 0

    st.slider("Replay position", 0, last, key="pos")
    pos = min(ss.pos, last)
    shift, matched, mismatched, cursor = replay_frame(trace, pos)
    st.markdown(render_alignment_html(text_n, pattern_n, shift, matched, mismatched, cursor),
                unsafe_allow_html=True)
    st.info(f"Step {pos + 1}/{len(trace)}: {describe_step(trace[pos])['message']}")

    if result.found:
        st.success(result.message)
        window = range(result.position, result.position + len(pattern_n))
        st.markdown(render_alignment_html(text_n, pattern_n, result.position, matched=window),
                    unsafe_allow_html=True)
    else:
        st.warning(result.message)

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Comparisons", stats["totalComparisons"])
    m2.metric("Alignments", stats["alignments"])
    m3.metric("Shifts", stats["shifts"])
    m4.metric("Steps", stats["steps"])

    with st.expander("Protocol log"):
        for entry in log:
            line = f"**{entry['party']}** · {entry['message']}"
            crypto = entry.get("cryptoData")
            if crypto:
                line += f"  \n`{crypto['operation']}`"
            st.markdown(line)

    with st.expander("Raw trace"):
        st.json(trace.to_list())

    if ss.playing:
        if pos < last:
            time.sleep(BASE_DELAY / speed)
            ss.advance = True
        else:
            ss.playing = False
        st.rerun()
