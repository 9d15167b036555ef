# frontend/streamlit_app/pages/client_keys.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit page: Keys, generate or import a client's key material.

Flow
----
1) "Generate new keys" opens the key dialog with store settings (alias,
   passwords). Confirm → the admin API generates a key pair and returns the
   archive, offered here as a download.
2) "Import key" opens the dialog in import mode: a file field appears, the
   password fields are hidden and the certificate-only format is offered.
   Confirm → the file is uploaded to the admin API.

The dialog hands its configuration to `save` and closes right away; failures
of the admin call are reported on this page (`KEYS_NOTICE`), not inside the
dialog.
"""

import logging
from collections.abc import Callable

import streamlit as st

from core.clients import get_admin_client
from core.constants import NS_GENERATE, NS_IMPORT, NS_KEYS
from core.messages import t
from core.state import dialog_slot
from services.admin_api import AdminApiError
from services.key_dialog import KeyConfigurationDialog
from services.key_form import KeyFormOptions, KeyStoreConfiguration
from services.keystore_formats import download_filename
from ui.key_dialog import render_key_dialog
from ui.keys import forget_widgets, k

log = logging.getLogger(__name__)


def _notify(level: str, text: str) -> None:
    st.session_state["KEYS_NOTICE"] = (level, text)


def _generate(ctx: dict) -> Callable[[KeyStoreConfiguration], None]:
    def save(config: KeyStoreConfiguration) -> None:
        try:
            archive = get_admin_client().generate_and_download(
                ctx["client_uuid"], ctx["settings"].KC_KEY_ATTR, config
            )
        except AdminApiError as e:
            _notify("error", t("generateError", error=e))
            return
        st.session_state["LAST_ARCHIVE"] = (download_filename(ctx["client_id"], config.format), archive)
        _notify("success", t("generateSuccess"))

    return save


def _import(ctx: dict) -> Callable[[KeyStoreConfiguration], None]:
    def save(config: KeyStoreConfiguration) -> None:
        try:
            get_admin_client().upload_certificate(ctx["client_uuid"], ctx["settings"].KC_KEY_ATTR, config)
        except AdminApiError as e:
            _notify("error", t("importError", error=e))
            return
        _notify("success", t("importSuccess"))

    return save


def _dialog(ctx: dict, ns: str, save, options: KeyFormOptions) -> KeyConfigurationDialog:
    """Session-scoped dialog for the current client; rebuilt if the client changes."""
    slot = k(NS_KEYS, f"{ns}_dialog")
    dialog = dialog_slot(
        slot,
        lambda: KeyConfigurationDialog(
            ctx["client_id"], save, lambda: forget_widgets(st.session_state, ns), options
        ),
    )
    if dialog.client_id != ctx["client_id"]:
        dialog.cancel()
        del st.session_state[slot]
        return _dialog(ctx, ns, save, options)
    # Rebind each rerun so the callback sees this run's context.
    dialog.bind_save(save)
    dialog.server_info_loaded(ctx["formats"])
    return dialog


def render(ctx: dict) -> None:
    """Render the Keys tab."""
    st.header(t("keys"))

    if not (ctx["client_id"] and ctx["client_uuid"]):
        st.info("Enter the client ID and UUID in the sidebar to manage its keys.")
        return
    if ctx["formats_error"]:
        st.warning(ctx["formats_error"])

    generate = _dialog(ctx, NS_GENERATE, _generate(ctx), KeyFormOptions())
    importer = _dialog(
        ctx,
        NS_IMPORT,
        _import(ctx),
        KeyFormOptions(use_file=True, has_pem=ctx["settings"].CONSOLE_ALLOW_PEM),
    )

    notice = st.session_state.get("KEYS_NOTICE")
    if notice:
        level, text = notice
        (st.error if level == "error" else st.success)(text)

    c1, c2 = st.columns(2)
    with c1:
        if st.button(t("generateKeys"), key=k(NS_KEYS, "open_generate"), use_container_width=True):
            st.session_state["KEYS_NOTICE"] = None
            generate.open()
    with c2:
        if st.button(t("importKey"), key=k(NS_KEYS, "open_import"), use_container_width=True):
            st.session_state["KEYS_NOTICE"] = None
            importer.open()

    archive = st.session_state.get("LAST_ARCHIVE")
    if archive:
        filename, data = archive
        st.download_button(
            t("downloadArchive", filename=filename),
            data=data,
            file_name=filename,
            mime="application/octet-stream",
            key=k(NS_KEYS, "download"),
        )

    render_key_dialog(
        generate,
        ns=NS_GENERATE,
        title=t("generateKeys"),
        confirm_label=t("generate"),
        description=t("generateKeysDescription"),
    )
    render_key_dialog(importer, ns=NS_IMPORT, title=t("importKey"), confirm_label=t("import"))
