from __future__ import annotations
import traceback
import streamlit as st

def success(msg: str): st.success(msg)
def warn(msg: str): st.warning(msg)
def info(msg: str): st.info(msg)
def error(msg: str): st.error(msg)

def field_error(msg: str | None):
    """Inline error under a form input."""
    if msg:
        st.caption(f":red[{msg}]")

def status_banner(message) -> None:
    """Render a StatusMessage (or nothing) as a success/error banner."""
    if message is None:
        return
    if message.kind == "success":
        success(message.text)
    else:
        error(message.text)

def render_guarded(label: str, fn, *args, **kwargs):
    """Run a panel renderer; show the failure in place instead of blanking the page."""
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        st.error(f"{label} failed: {e}")
        with st.expander("Diagnostics"):
            st.code(traceback.format_exc())
        return None
