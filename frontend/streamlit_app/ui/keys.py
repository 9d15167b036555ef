# frontend/streamlit_app/ui/keys.py
# SPDX-License-Identifier: Apache-2.0
"""Centralized helpers for Streamlit widget keys.

Why this exists
---------------
Streamlit widgets require **stable** and **unique** keys to preserve state
across reruns. The console also needs the opposite: a key dialog that is
opened again must start from blank widgets, not from the values typed into
the previous activation.

Usage
-----
    from ui.keys import k, activation_key

    alias = st.text_input("Key alias", key=activation_key("generate", 3, "alias"))

Conventions
-----------
- `page` is a short, stable namespace from `core.constants` (`NS_*`).
- `name` is a concise identifier for the widget within that namespace.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


def k(page: str, name: str) -> str:
    """Return a stable, namespaced widget key of the form "<page>:<name>"."""
    return f"{page}:{name}"


def activation_key(page: str, activation: int, name: str) -> str:
    """Key a widget to one dialog activation ("<page>#<n>:<name>")."""
    return k(f"{page}#{activation}", name)


def forget_widgets(state: MutableMapping[str, Any], page: str) -> int:
    """Drop every widget value stored under `page` (any activation).

    Used when a dialog closes so typed passwords do not linger in
    `st.session_state`. Returns the number of removed keys.
    """
    prefixes = (f"{page}:", f"{page}#")
    stale = [key for key in list(state.keys()) if isinstance(key, str) and key.startswith(prefixes)]
    for key in stale:
        del state[key]
    return len(stale)
