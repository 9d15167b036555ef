# frontend/streamlit_app/core/clients.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Client factories for the identity provider's admin API.

- `get_admin_client()`      → `services.admin_api.AdminClient` (cached resource)
- `get_supported_formats()` → list of archive formats from server info (cached data)

`get_admin_client` is wrapped with `@st.cache_resource` so that a single
client (and its HTTP session) is reused across reruns. The server-info lookup
uses `@st.cache_data` with a short TTL: formats rarely change, but an operator
enabling a new provider should not need a restart.

Security notes:
  * The service-account secret comes from `core.config.settings` and is never
    logged. The bearer token only lives on the cached session.
  * If credentials change at runtime, clear the resource cache to force
    re-creation.

Failure behavior:
  * Both factories raise `AdminApiError`; pages catch it and show `st.error`.
"""

import logging

import streamlit as st

from services.admin_api import AdminClient, obtain_token

from .config import settings

log = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def get_admin_client() -> AdminClient:
    """Construct (once) and return a cached admin client.

    A token is requested only when a service-account secret is configured;
    otherwise the client is unauthenticated (useful against a local dev
    server behind a proxy that injects credentials).
    """
    token = None
    if settings.KC_CLIENT_SECRET:
        token = obtain_token(
            settings.KC_BASE_URL,
            settings.KC_REALM,
            settings.KC_CLIENT_ID,
            settings.KC_CLIENT_SECRET,
            timeout=settings.KC_TIMEOUT,
        )
    log.info("Admin client ready for %s (realm %s)", settings.KC_BASE_URL, settings.KC_REALM)
    return AdminClient(settings.KC_BASE_URL, settings.KC_REALM, token, timeout=settings.KC_TIMEOUT)


@st.cache_data(ttl=300, show_spinner=False)
def get_supported_formats() -> list[str]:
    """Archive formats advertised by the server, in server order."""
    return get_admin_client().supported_keystore_types()
