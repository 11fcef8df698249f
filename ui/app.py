# -----------------------------------------------------------------------------
# Streamlit Frontend for the Notation Tracer
# Purpose:
#   Minimal UI to (1) enter an expression and a notation pair, (2) run the
#   conversion, and (3) replay its trace step by step with play/pause/step.
#
#---------------------------------------------------------------------------

import os, time
import streamlit as st
from dotenv import load_dotenv
from nconv.dispatcher import convert
from nconv.formatters import display_rows, steps_to_markdown
from nconv.playback import PlaybackController
from nconv.tokenizer import ConversionError
from nconv.types import Notation

# Load .env for playback defaults
load_dotenv()
PLAYBACK_INTERVAL_MS = int(os.getenv("PLAYBACK_INTERVAL_MS", "600"))
DEFAULT_EXPRESSION = os.getenv("DEFAULT_EXPRESSION", "A + B * C - D / E")
NOTATIONS = [n.value for n in Notation]

# Page setup and header
st.set_page_config(page_title="Notation Tracer", layout="centered")
st.title("Infix / Prefix / Postfix Step Tracer")

# ---------------- Sidebar: playback speed -------------------------------------
with st.sidebar:
    st.subheader("Playback")
    speed = st.slider("Milliseconds per step", min_value=100, max_value=2000,
                      value=PLAYBACK_INTERVAL_MS, step=100)

# ---------------- Main Form: expression + notations ---------------------------
with st.form("convert_form"):
    expr = st.text_input("Expression", value=DEFAULT_EXPRESSION)
    c_from, c_to = st.columns(2)
    source = c_from.selectbox("From", NOTATIONS, index=NOTATIONS.index("Infix"))
    target = c_to.selectbox("To", NOTATIONS, index=NOTATIONS.index("Postfix"))
    submit = st.form_submit_button("Convert")

if submit:
    try:
        res = convert(source, target, expr.strip())
    except ConversionError as e:
        # Invalid character / unsupported pair: surface the message, drop old trace
        st.session_state.pop("result", None)
        st.session_state.pop("playback", None)
        st.error(str(e))
    else:
        # Fresh controller per conversion; no playback state carries over
        st.session_state["result"] = res
        st.session_state["playback"] = PlaybackController.for_result(res, interval_ms=speed)

res = st.session_state.get("result")
ctrl = st.session_state.get("playback")
if res is None or ctrl is None:
    st.stop()

if speed != ctrl.interval_ms:
    ctrl.set_interval(speed)

st.subheader("Result")
st.code(res.result or "-", language="text")
st.caption(f"{len(res.steps)} step(s)")

b_play, b_pause, b_step, b_reset = st.columns(4)
if b_play.button("Play"):
    if ctrl.finished:
        ctrl.reset()
    ctrl.start()
if b_pause.button("Pause"):
    ctrl.pause()
if b_step.button("Step"):
    ctrl.step()
if b_reset.button("Reset"):
    ctrl.reset()

table = st.empty()

def render():
    rows = display_rows(ctrl.revealed)
    if not rows:
        table.info("Press Play or Step to reveal the trace.")
        return
    # Mark the active (latest) row
    rows[ctrl.active_index]["Iter"] = "▶ " + rows[ctrl.active_index]["Iter"]
    table.table(rows)

render()
while ctrl.running:
    time.sleep(ctrl.seconds_until_due())
    if ctrl.tick():
        render()

st.download_button("Download table as Markdown",
                   data=steps_to_markdown(ctrl.revealed or res.steps),
                   file_name="trace.md", mime="text/markdown")
