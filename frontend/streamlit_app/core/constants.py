# frontend/streamlit_app/core/constants.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Console-wide constants: page titles, tab order and widget namespaces.

Archive formats and their extensions live in `services.keystore_formats`
because the domain layer needs them without importing Streamlit-side modules.
"""

from typing import Final

#: Browser/page title.
CONSOLE_TITLE: Final[str] = "Identity Provider Admin Console"

#: Tab titles in display order (keep aligned with app.py).
TAB_TITLES: Final[tuple[str, ...]] = ("Keys", "Authorization")

#: Widget key namespaces (see ui/keys.py).
NS_KEYS: Final[str] = "keys"
NS_GENERATE: Final[str] = "generate"
NS_IMPORT: Final[str] = "import"
NS_PERMISSIONS: Final[str] = "permissions"
NS_MASTHEAD: Final[str] = "masthead"
