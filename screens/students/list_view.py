# screens/students/list_view.py
from __future__ import annotations

import streamlit as st

from core.forms import info
from screens.students.form_view import push_draft_to_widgets
from screens.students.list_controller import ListController
from screens.students.models import StudentRecord
from screens.students.root_controller import RootController

LOADING_TEXT = "Loading students..."


def _k(s: str) -> str:
    return f"students__list_{s}"


def _always() -> bool:
    return True


# ────────────────────────────────────────────────────────────────────────────────
# Callbacks
# ────────────────────────────────────────────────────────────────────────────────

def _on_search(lst: ListController) -> None:
    lst.set_search(st.session_state.get(_k("search"), ""))


def _on_edit(root: RootController, record: StudentRecord) -> None:
    root.request_edit(record)
    push_draft_to_widgets(root.form)


def _on_confirm_delete(lst: ListController, record_id: str) -> None:
    # The Yes button is the confirmation step.
    with st.spinner(LOADING_TEXT):
        lst.request_delete(record_id, confirm=_always)


# ────────────────────────────────────────────────────────────────────────────────
# Render
# ────────────────────────────────────────────────────────────────────────────────

def _render_row(root: RootController, record: StudentRecord) -> None:
    lst = root.list
    c_name, c_age, c_roll, c_course, c_edit, c_del = st.columns([3, 1, 2, 3, 1, 1])
    c_name.markdown(f"**{record.name}**")
    c_age.write(record.age)
    c_roll.code(record.roll_no, language=None)
    c_course.write(record.course)
    c_edit.button("Edit", key=_k(f"edit_{record.id}"), on_click=_on_edit, args=(root, record))
    c_del.button("Delete", key=_k(f"del_{record.id}"), on_click=lst.mark_pending_delete, args=(record.id,))

    if lst.pending_delete == record.id:
        st.warning(f"**Are you sure you want to delete {record.name} ({record.roll_no})?**")
        y, n, _ = st.columns([1, 1, 4])
        y.button(
            "Yes, delete",
            key=_k(f"yes_{record.id}"),
            type="primary",
            on_click=_on_confirm_delete,
            args=(lst, record.id),
        )
        n.button("Cancel", key=_k(f"no_{record.id}"), on_click=lst.clear_pending_delete)


def render_list(root: RootController) -> None:
    lst = root.list

    head, back = st.columns([3, 1])
    with head:
        st.subheader("Student Records")
        st.caption(lst.summary())
    with back:
        st.button("← Back to Form", key=_k("back"), on_click=root.show_form, use_container_width=True)

    if _k("search") not in st.session_state:
        st.session_state[_k("search")] = lst.search
    st.text_input(
        "Search",
        key=_k("search"),
        placeholder="Search by name, roll no, age, or course...",
        on_change=_on_search,
        args=(lst,),
        label_visibility="collapsed",
    )

    visible = lst.visible_records()
    if not visible:
        info("📭 No students found. Try adjusting your search terms.")
        return

    header = st.columns([3, 1, 2, 3, 1, 1])
    for col, title in zip(header, ["Name", "Age", "Roll Number", "Course", "", ""]):
        col.markdown(f"**{title}**" if title else "")
    for record in visible:
        _render_row(root, record)

    st.download_button(
        "Download CSV",
        data=lst.export_csv(),
        file_name="students.csv",
        mime="text/csv",
        key=_k("csv"),
    )
