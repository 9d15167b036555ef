# frontend/streamlit_app/ui/key_dialog.py
# SPDX-License-Identifier: Apache-2.0
"""Streamlit rendering of the key configuration dialog.

`render_key_dialog` draws a `services.key_dialog.KeyConfigurationDialog`
inside `st.dialog` whenever that dialog is open. Each widget writes straight
back into the dialog's form on every rerun, and the form alone decides which
widgets exist (`visible_fields`) and whether the confirm button is enabled
(`is_complete`).

Widgets are keyed per activation (`ui.keys.activation_key`), so reopening the
dialog starts from blank inputs.
"""

from __future__ import annotations

import logging

import streamlit as st

from core.messages import t
from services.key_dialog import KeyConfigurationDialog
from services.key_form import FormField, KeyConfigurationForm
from ui.keys import activation_key

log = logging.getLogger(__name__)


def render_key_form(form: KeyConfigurationForm, ns: str, activation: int) -> None:
    """Draw the visible fields of `form` and apply their values to it."""

    def key(name: str) -> str:
        return activation_key(ns, activation, name)

    if not form.formats:
        st.info(t("noFormatsLoaded"))
    else:
        selected = st.selectbox(
            t("archiveFormat"),
            options=form.formats,
            index=form.formats.index(form.format) if form.format in form.formats else 0,
            help=t("archiveFormatHelp"),
            key=key("format"),
        )
        form.set_format(selected)

    if form.is_visible(FormField.FILE):
        upload = st.file_uploader(t("importFile"), help=t("importFileHelp"), key=key("file"))
        if upload is None:
            form.file.clear()
        else:
            form.file.on_select(upload.getvalue(), upload.name)

    # Store settings are re-derived after the format was applied above.
    if form.is_visible(FormField.KEY_ALIAS):
        form.set_key_alias(
            st.text_input(t("keyAlias"), value=form.key_alias, help=t("keyAliasHelp"), key=key("alias"))
        )
    if form.is_visible(FormField.KEY_PASSWORD):
        form.set_key_password(
            st.text_input(t("keyPassword"), type="password", help=t("keyPasswordHelp"), key=key("key_pw"))
        )
    if form.is_visible(FormField.REALM_ALIAS):
        form.set_realm_alias(
            st.text_input(
                t("realmCertificateAlias"), help=t("realmCertificateAliasHelp"), key=key("realm_alias")
            )
        )
    if form.is_visible(FormField.REALM_CERTIFICATE):
        form.set_realm_certificate(
            st.toggle(t("realmCertificate"), help=t("realmCertificateHelp"), key=key("realm_cert"))
        )
    if form.is_visible(FormField.STORE_PASSWORD):
        form.set_store_password(
            st.text_input(
                t("storePassword"), type="password", help=t("storePasswordHelp"), key=key("store_pw")
            )
        )


def _render_body(dialog: KeyConfigurationDialog, ns: str, description: str | None, confirm_label: str) -> None:
    if description:
        st.write(description)

    render_key_form(dialog.form, ns, dialog.activations)

    if not dialog.submit_enabled:
        st.caption(t("incompleteKeyConfig"))

    confirm_col, cancel_col = st.columns(2)
    with confirm_col:
        confirm = st.button(
            confirm_label,
            type="primary",
            disabled=not dialog.submit_enabled,
            use_container_width=True,
            key=activation_key(ns, dialog.activations, "confirm"),
        )
    with cancel_col:
        cancel = st.button(
            t("cancel"),
            type="tertiary",
            use_container_width=True,
            key=activation_key(ns, dialog.activations, "cancel"),
        )

    if cancel:
        dialog.cancel()
        st.rerun()
    # confirm() re-checks completeness itself; a stale button can not bypass it.
    if confirm and dialog.confirm():
        st.rerun()


def render_key_dialog(
    dialog: KeyConfigurationDialog,
    *,
    ns: str,
    title: str,
    confirm_label: str,
    description: str | None = None,
) -> None:
    """Show `dialog` as a modal while it is open; do nothing otherwise."""
    if not dialog.is_open:
        return

    # Closing the modal (window button or Esc) cancels the activation.
    @st.dialog(title, width="medium", on_dismiss=dialog.cancel)
    def _modal() -> None:
        _render_body(dialog, ns, description, confirm_label)

    _modal()
