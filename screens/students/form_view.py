# screens/students/form_view.py
from __future__ import annotations

import streamlit as st

from core.forms import field_error
from screens.students.form_controller import FormController
from screens.students.models import FIELD_LABELS, FIELD_PLACEHOLDERS, FIELDS


def _k(s: str) -> str:
    """Per-page key namespace to avoid collisions if rendered twice."""
    return f"students__form_{s}"


def push_draft_to_widgets(form: FormController) -> None:
    """Overwrite the input widgets with the controller's draft (reset / edit / failed save)."""
    for name in FIELDS:
        st.session_state[_k(name)] = getattr(form.draft, name)


# ────────────────────────────────────────────────────────────────────────────────
# Callbacks (run before the rerun, so the next render sees the new state)
# ────────────────────────────────────────────────────────────────────────────────

def _on_field_change(form: FormController, name: str) -> None:
    form.update_field(name, st.session_state.get(_k(name), ""))


def _on_submit(form: FormController) -> None:
    # A value typed right before clicking may not have fired its on_change yet.
    for name in FIELDS:
        _on_field_change(form, name)
    form.submit()
    push_draft_to_widgets(form)


def _on_cancel(form: FormController) -> None:
    form.cancel()
    push_draft_to_widgets(form)


# ────────────────────────────────────────────────────────────────────────────────
# Render
# ────────────────────────────────────────────────────────────────────────────────

def render_form(form: FormController) -> None:
    st.subheader(form.title)
    st.caption(form.subtitle)

    # Widgets dropped while the list was showing lose their state; seed from the draft.
    for name in FIELDS:
        if _k(name) not in st.session_state:
            st.session_state[_k(name)] = getattr(form.draft, name)

    left, right = st.columns(2)
    for idx, name in enumerate(FIELDS):
        with (left if idx % 2 == 0 else right):
            st.text_input(
                FIELD_LABELS[name],
                key=_k(name),
                placeholder=FIELD_PLACEHOLDERS[name],
                on_change=_on_field_change,
                args=(form, name),
            )
            field_error(form.errors.get(name))

    c1, c2, _ = st.columns([1, 1, 2])
    with c1:
        st.button(
            form.submit_label,
            key=_k("submit"),
            type="primary",
            disabled=form.busy,
            on_click=_on_submit,
            args=(form,),
            use_container_width=True,
        )
    with c2:
        st.button(
            "✕ Cancel",
            key=_k("cancel"),
            on_click=_on_cancel,
            args=(form,),
            use_container_width=True,
        )
