# frontend/streamlit_app/core/state.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Session-scoped UI state helpers for the admin console.

This module centralizes the **default values** we expect to exist in
`st.session_state` and provides a single entry point to initialize them.

Design notes
------------
- Initialization is **idempotent**: calling `ensure_defaults()` multiple
  times is safe; existing values are preserved.
- Dialog objects are *not* created here. They are built lazily per page by
  `dialog_slot()`, because they need page-specific callbacks.
- Never store passwords here beyond the lifetime of an open dialog; the
  dialog drops its form on confirm/cancel.
"""

from collections.abc import Callable, Mapping
from typing import Any, Final, TypeVar

import streamlit as st

T = TypeVar("T")

# Canonical set of session keys and their initial values.
DEFAULTS: Final[Mapping[str, Any]] = {
    # Bytes + filename of the most recently generated archive (download button).
    "LAST_ARCHIVE": None,
    # Last save outcome message shown above the keys page: (level, text).
    "KEYS_NOTICE": None,
    # Parsed ID token claims of the signed-in operator (None when unknown).
    "ID_TOKEN": None,
}

__all__ = ["DEFAULTS", "ensure_defaults", "dialog_slot"]


def ensure_defaults() -> None:
    """Ensure all expected session keys exist with sane defaults.

    Safe to call on every rerun.
    """
    for key, default_value in DEFAULTS.items():
        # Use setdefault to avoid stomping on values a user or widget has set.
        st.session_state.setdefault(key, default_value)


def dialog_slot(key: str, factory: Callable[[], T]) -> T:
    """Return the session's object stored under `key`, creating it once."""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]
