# screens/students/page.py
from __future__ import annotations

import logging

import streamlit as st

from core.forms import render_guarded, status_banner
from core.settings import Settings, load_settings
from screens.students.client import StudentStoreClient
from screens.students.form_view import render_form
from screens.students.list_view import LOADING_TEXT, render_list
from screens.students.root_controller import RootController
from screens.students.state import AppState, StatusBoard, View

log = logging.getLogger(__name__)

PAGE_TITLE = "🎓 Student Management System"

# Banner refresh period; must stay below the message TTL so flashes clear on time.
STATUS_POLL_SECONDS = 0.5


def _k(s: str) -> str:
    return f"students__{s}"


def build_root(settings: Settings) -> RootController:
    client = StudentStoreClient(settings.api.base_url, timeout=settings.api.timeout_seconds)
    state = AppState(status=StatusBoard(ttl_seconds=settings.ui.message_ttl_seconds))
    log.info("Student store endpoint: %s", settings.api.base_url)
    return RootController(client, state)


def _ensure_root(settings: Settings) -> RootController:
    """One controller tree per browser session."""
    if _k("root") not in st.session_state:
        st.session_state[_k("root")] = build_root(settings)
    return st.session_state[_k("root")]


def _on_view_all(root: RootController) -> None:
    with st.spinner(LOADING_TEXT):
        root.show_list()


@st.fragment(run_every=STATUS_POLL_SECONDS)
def _render_status(root: RootController) -> None:
    status_banner(root.status())


def render(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    root = _ensure_root(settings)

    left, right = st.columns([3, 1])
    with left:
        st.title(PAGE_TITLE)
    with right:
        if root.view is View.FORM:
            st.button(
                "View All Students →", key=_k("view_all"), on_click=_on_view_all, args=(root,), use_container_width=True
            )

    _render_status(root)

    if root.view is View.FORM:
        render_guarded("Student form", render_form, root.form)
    else:
        render_guarded("Student records", render_list, root)


if __name__ == "__main__":
    render()
