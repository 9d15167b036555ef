# frontend/streamlit_app/ui/sidebar.py
# SPDX-License-Identifier: Apache-2.0
"""Sidebar composition for the admin console.

The sidebar selects which client the pages operate on and reports whether
the identity provider answered the server-info request.

Returns
-------
`render_sidebar_and_status()` returns a context dictionary containing:
- `settings`: the loaded settings dataclass instance.
- `realm`: realm from settings.
- `client_id`: human-readable clientId (also the default key alias).
- `client_uuid`: internal id used in admin API paths.
- `formats`: advertised archive formats (empty until server info loads).
- `formats_error`: error text when server info could not be loaded.

This context object is passed to page render functions.
"""

from __future__ import annotations

import logging
from typing import Any

import streamlit as st

from core.clients import get_supported_formats
from core.config import settings
from core.state import ensure_defaults
from services.admin_api import AdminApiError

log = logging.getLogger(__name__)


def _load_formats() -> tuple[list[str], str | None]:
    try:
        return get_supported_formats(), None
    except AdminApiError as e:
        log.warning("Server info unavailable: %s", e)
        return [], str(e)


def render_sidebar_and_status() -> dict[str, Any]:
    """Render the sidebar and return a context dict for page use."""
    # Ensure session keys exist before we reference them anywhere.
    ensure_defaults()

    st.sidebar.header("Client")
    st.sidebar.caption(f"Realm `{settings.KC_REALM}` at {settings.KC_BASE_URL}")

    client_id = st.sidebar.text_input("Client ID", settings.KC_TARGET_CLIENT_ID).strip()
    client_uuid = st.sidebar.text_input(
        "Client UUID", settings.KC_TARGET_CLIENT_UUID, help="Internal id used in admin API paths."
    ).strip()

    formats, formats_error = _load_formats()

    st.sidebar.markdown("---")
    st.sidebar.markdown("### Server status")
    if formats_error:
        st.sidebar.write("⚠️ Server info unavailable")
    else:
        st.sidebar.write(f"✅ Archive formats: {', '.join(formats) or '—'}")

    return dict(
        settings=settings,
        realm=settings.KC_REALM,
        client_id=client_id,
        client_uuid=client_uuid,
        formats=formats,
        formats_error=formats_error,
    )
