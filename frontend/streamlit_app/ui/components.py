# frontend/streamlit_app/ui/components.py
# SPDX-License-Identifier: Apache-2.0
"""Reusable Streamlit UI components.

Currently provided:
  • gated_button(): Render a "create X" button behind a capability gate.
  • empty_state(): Render a centered empty-state block with action buttons.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import streamlit as st

from core.messages import t
from services.capability import CreateAffordance


def gated_button(
    affordance: CreateAffordance,
    *,
    key: str,
    on_create: Callable[[CreateAffordance], None] | None = None,
) -> bool:
    """Render `affordance` as a button; disabled ones carry their tooltip.

    Returns:
      True only when an *enabled* button was clicked.
    """
    clicked = st.button(
        t(affordance.label_key),
        key=key,
        disabled=affordance.disabled,
        help=t(affordance.capability.tooltip) if affordance.capability.tooltip else None,
        type="secondary",
    )
    if clicked and not affordance.disabled:
        if on_create is not None:
            on_create(affordance)
        return True
    return False


def empty_state(
    title: str,
    body: str,
    affordances: Sequence[CreateAffordance] = (),
    *,
    key_prefix: str,
    on_create: Callable[[CreateAffordance], None] | None = None,
) -> None:
    """Render an empty-state card: icon, heading, instructions, actions."""
    with st.container(border=True):
        st.markdown("### ➕")
        st.subheader(title)
        st.write(body)
        for affordance in affordances:
            gated_button(
                affordance,
                key=f"{key_prefix}:{affordance.testid}",
                on_create=on_create,
            )
