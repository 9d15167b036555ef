# frontend/streamlit_app/app.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

__doc__ = """Identity Provider Admin Console (Streamlit).

This module is the Streamlit entrypoint. It wires up the page chrome (top
navigation bar), the left sidebar (client selection, server status) and the
main tab set.

Tabs (left-to-right order):
  1) Keys           : Generate or import a client's key material.
  2) Authorization  : Permissions empty state with gated create buttons.

Design notes:
* Sibling packages (core/, services/, ui/, pages/) are imported by adding this
  directory to sys.path, so `streamlit run app.py` works from any directory.
* Each page module renders its own UI and keys its widgets through ui/keys.py.
  Page modules are side-effect free on import.
* Keep this file thin. Domain rules live in services/*.
"""

# ────────────────────── sys.path bootstrap for local packages ─────────────────
import pathlib
import sys

APP_DIR = pathlib.Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))
# ──────────────────────────────────────────────────────────────────────────────

import streamlit as st

from core.constants import CONSOLE_TITLE, TAB_TITLES
from core.logging_config import setup_logging
from pages import client_keys, permissions
from ui.layout import configure_page
from ui.masthead import render_masthead
from ui.sidebar import render_sidebar_and_status

# ─────────────────────────────── Page chrome ──────────────────────────────────
configure_page(title=CONSOLE_TITLE)
setup_logging()
render_masthead(CONSOLE_TITLE)

# The sidebar returns a context dict (client, formats, settings) that is passed
# to each tab renderer to keep state flow explicit.
ctx: dict = render_sidebar_and_status()

# ─────────────────────────────── Tabs wiring ──────────────────────────────────
# If you add a tab, add its title in core/constants.py and its block below.
keys_tab, authz_tab = st.tabs(list(TAB_TITLES))

with keys_tab:
    client_keys.render(ctx)

with authz_tab:
    permissions.render(ctx)
