# app.py
from __future__ import annotations
import sys
import traceback
from pathlib import Path

import streamlit as st

APP_DIR = Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from core.logger import setup_logging
from core.settings import load_settings
from screens.students import page as students_page


def main():
    try:
        settings = load_settings()
    except Exception as e:
        st.set_page_config(page_title="Students", layout="wide")
        st.error(f"Could not load settings: {e}")
        with st.expander("Diagnostics"):
            st.code(traceback.format_exc())
        st.stop()

    setup_logging(settings.logging.level, settings.logging.file)

    st.set_page_config(page_title=settings.app.name, layout="wide", page_icon="🎓")

    students_page.render(settings)

    st.markdown("---")
    st.caption(f"{settings.app.name} · {settings.app.environment}")


if __name__ == "__main__":
    main()
