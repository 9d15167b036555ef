# frontend/streamlit_app/ui/layout.py
# SPDX-License-Identifier: Apache-2.0
"""Page-level configuration for the admin console.

`configure_page` must run before any other Streamlit call (Streamlit
enforces that `st.set_page_config` comes first), so `app.py` calls it at the
very top, then renders the masthead.
"""

from __future__ import annotations

import streamlit as st


def configure_page(title: str) -> None:
    """Set the browser title and wide layout.

    The visible heading is part of the masthead (see `ui.masthead`), so no
    `st.title` is rendered here.
    """
    st.set_page_config(page_title=title, page_icon="🔑", layout="wide")
