# frontend/streamlit_app/ui/masthead.py
# SPDX-License-Identifier: Apache-2.0
"""Top navigation bar: brand on the left, user menu on the right.

The bar renders a `services.masthead.MastheadModel`. Sign-in itself is the
host's concern; when Streamlit's built-in OIDC login is configured the
signed-in user's claims come from `st.user`, otherwise from the
`ID_TOKEN` session key (which may be empty).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import streamlit as st

from core.config import settings
from core.constants import NS_MASTHEAD
from core.messages import t
from services.masthead import MastheadFeatures, MastheadModel, MenuItem, build_masthead
from ui.keys import k


def current_claims() -> Mapping[str, Any] | None:
    """Claims of the signed-in operator, or None when nobody is known."""
    user = getattr(st, "user", None)
    if user is not None and user.get("is_logged_in"):
        return user.to_dict()
    return st.session_state.get("ID_TOKEN")


def _account_url() -> str:
    return f"{settings.KC_BASE_URL.rstrip('/')}/realms/{settings.KC_REALM}/account"


def _logout_action():
    user = getattr(st, "user", None)
    if user is not None and user.get("is_logged_in"):
        return st.logout
    return f"{settings.KC_BASE_URL.rstrip('/')}/realms/{settings.KC_REALM}/protocol/openid-connect/logout"


def _render_item(item: MenuItem) -> None:
    if item.url:
        st.link_button(item.label, item.url, use_container_width=True)
    elif st.button(item.label, key=k(NS_MASTHEAD, item.key), use_container_width=True):
        if item.on_click is not None:
            item.on_click()


def render_masthead(brand: str, features: MastheadFeatures | None = None) -> MastheadModel:
    """Render the bar and return the model it was built from."""
    model = build_masthead(
        current_claims(),
        t,
        features=features,
        manage_account=_account_url(),
        logout=_logout_action(),
    )

    left, right = st.columns([5, 1], vertical_alignment="center")
    with left:
        st.markdown(f"## 🔑 {brand}")
    with right:
        with st.popover(model.title or "☰", use_container_width=True):
            for item in model.dropdown:
                _render_item(item)
    st.divider()
    return model
