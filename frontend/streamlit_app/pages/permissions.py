# frontend/streamlit_app/pages/permissions.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit page: Authorization, permissions of the selected client.

Shows the empty-permissions state with one create button per permission
type. A button is available only when the client has something to build the
permission on (resources for resource-based, scopes for scope-based); the
availability check is capability gating and never mixes with form
validation.
"""

import logging

import streamlit as st

from core.clients import get_admin_client
from core.constants import NS_PERMISSIONS
from core.messages import t
from services.admin_api import AdminApiError
from services.capability import CreateAffordance, permission_affordances
from ui.components import empty_state
from ui.keys import k

log = logging.getLogger(__name__)


def _availability(client_uuid: str) -> tuple[bool, bool]:
    client = get_admin_client()
    return client.has_resources(client_uuid), client.has_scopes(client_uuid)


def _on_create(affordance: CreateAffordance) -> None:
    permission_type = affordance.testid.removeprefix("create-")
    log.info("Create %s-based permission requested", permission_type)
    st.info(t("permissionCreateRequested", permissionType=permission_type))


def render(ctx: dict) -> None:
    """Render the Authorization tab."""
    st.header("Authorization")

    if not ctx["client_uuid"]:
        st.info("Enter the client UUID in the sidebar to inspect its permissions.")
        return

    try:
        resources, scopes = _availability(ctx["client_uuid"])
    except AdminApiError as e:
        st.error(f"Could not load authorization settings: {e}")
        return

    empty_state(
        t("emptyPermissions"),
        t("emptyPermissionInstructions"),
        permission_affordances(resource_available=resources, scope_available=scopes),
        key_prefix=k(NS_PERMISSIONS, "empty"),
        on_create=_on_create,
    )
