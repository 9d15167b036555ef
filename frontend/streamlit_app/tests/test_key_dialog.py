import logging

import pytest

from services.key_dialog import DialogState
from services.key_form import KeyFormOptions
from services.keystore_formats import CERT_PEM


def test_starts_closed(make_dialog):
    dialog = make_dialog()
    assert dialog.state is DialogState.CLOSED
    assert not dialog.submit_enabled
    with pytest.raises(RuntimeError):
        dialog.form


def test_open_seeds_default_alias(make_dialog):
    dialog = make_dialog()
    form = dialog.open()
    assert dialog.is_open
    assert form.key_alias == "my-client"
    assert form.format == "JKS"


def test_open_while_open_keeps_edits(make_dialog):
    dialog = make_dialog()
    dialog.open().set_key_alias("edited")
    dialog.open()
    assert dialog.form.key_alias == "edited"
    assert dialog.activations == 1


def test_generate_scenario(make_dialog, recorder):
    dialog = make_dialog(options=KeyFormOptions(hide_password=True), formats=["PKCS12", "JKS"])
    form = dialog.open()
    form.set_key_alias("")
    assert form.format == "PKCS12"
    assert not dialog.submit_enabled

    form.set_key_alias("client-key")
    assert dialog.submit_enabled
    assert dialog.confirm() is True

    assert len(recorder.saved) == 1
    saved = recorder.saved[0]
    assert saved.format == "PKCS12"
    assert saved.key_alias == "client-key"
    assert recorder.toggles == 1
    assert dialog.state is DialogState.CLOSED
    assert dialog.last_outcome is DialogState.CONFIRMED


def test_forced_confirm_while_incomplete_is_rejected(make_dialog, recorder, caplog):
    dialog = make_dialog()
    dialog.open()
    with caplog.at_level(logging.WARNING):
        assert dialog.confirm() is False
    assert recorder.saved == []
    assert recorder.toggles == 0
    assert dialog.is_open
    assert "keyPassword" in caplog.text


def test_confirm_on_closed_dialog_does_nothing(make_dialog, recorder):
    dialog = make_dialog()
    assert dialog.confirm() is False
    assert recorder.saved == []


def test_switch_to_certificate_only_enables_submit(make_dialog, recorder):
    dialog = make_dialog(options=KeyFormOptions(has_pem=True), formats=["PKCS12"])
    form = dialog.open()
    form.set_key_alias("filled")
    assert not dialog.submit_enabled

    form.set_format(CERT_PEM)
    assert dialog.submit_enabled
    assert dialog.confirm()
    assert recorder.saved[0].format == CERT_PEM


def test_cancel_discards_and_next_open_is_fresh(make_dialog, recorder):
    dialog = make_dialog()
    form = dialog.open()
    form.set_key_alias("partial")
    form.set_key_password("secret")

    dialog.cancel()
    assert recorder.saved == []
    assert recorder.toggles == 1
    assert dialog.last_outcome is DialogState.CANCELLED

    fresh = dialog.open()
    assert fresh is not form
    assert fresh.key_alias == "my-client"
    assert fresh.key_password == ""
    assert dialog.activations == 2


def test_cancel_when_closed_does_not_toggle(make_dialog, recorder):
    make_dialog().cancel()
    assert recorder.toggles == 0


def test_dialog_drops_form_after_confirm(make_dialog):
    dialog = make_dialog(options=KeyFormOptions(hide_password=True))
    dialog.open()
    dialog.confirm()
    with pytest.raises(RuntimeError):
        dialog.form


def test_server_info_reaches_open_form(make_dialog):
    dialog = make_dialog(formats=[])
    form = dialog.open()
    assert form.format is None
    dialog.server_info_loaded(["BCFKS"])
    assert form.format == "BCFKS"
    assert dialog.open().format == "BCFKS"


def test_save_outcome_is_not_inspected(make_dialog, recorder):
    def failing_save(config):
        return False

    dialog = make_dialog(options=KeyFormOptions(hide_password=True))
    dialog.bind_save(failing_save)
    dialog.open()
    assert dialog.confirm() is True
    assert dialog.state is DialogState.CLOSED
    assert recorder.toggles == 1


def test_raising_save_still_closes_and_toggles(make_dialog, recorder):
    def broken_save(config):
        raise RuntimeError("network down")

    dialog = make_dialog(options=KeyFormOptions(hide_password=True))
    dialog.bind_save(broken_save)
    dialog.open()
    with pytest.raises(RuntimeError):
        dialog.confirm()
    assert dialog.state is DialogState.CLOSED
    assert recorder.toggles == 1