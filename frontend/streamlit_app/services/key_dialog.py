# frontend/streamlit_app/services/key_dialog.py
# SPDX-License-Identifier: Apache-2.0
"""Lifecycle of the key configuration dialog.

States::

    CLOSED --open()--> OPEN --confirm()--> CONFIRMED --> CLOSED
                            --cancel()---> CANCELLED --> CLOSED

``CONFIRMED`` and ``CANCELLED`` are pass-through states: the dialog records
them as ``last_outcome`` and lands back in ``CLOSED`` within the same call.

Contracts with the caller
-------------------------
- ``save(configuration)`` is invoked exactly once per confirmed activation
  and never on cancel. Its outcome is not awaited or inspected; a failed save
  is the caller's to report.
- ``toggle_dialog()`` is invoked exactly once per activation, on confirm
  (after ``save``, even when ``save`` raises) and on cancel.

The dialog re-checks completeness inside :meth:`KeyConfigurationDialog.confirm`
even though the UI disables the submit button for incomplete forms; a stale
button state can therefore never push an incomplete configuration out.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable

from services.key_form import KeyConfigurationForm, KeyFormOptions, KeyStoreConfiguration

log = logging.getLogger(__name__)

SaveCallback = Callable[[KeyStoreConfiguration], object]


class DialogState(str, enum.Enum):
    CLOSED = "closed"
    OPEN = "open"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class KeyConfigurationDialog:
    """Owns one :class:`KeyConfigurationForm` per activation."""

    def __init__(
        self,
        client_id: str,
        save: SaveCallback,
        toggle_dialog: Callable[[], object] | None = None,
        options: KeyFormOptions | None = None,
        formats: Iterable[str] | None = None,
    ) -> None:
        self.client_id = client_id
        self.options = options or KeyFormOptions()
        self._save = save
        self._toggle_dialog = toggle_dialog or (lambda: None)
        self._formats: tuple[str, ...] = tuple(formats or ())
        self._form: KeyConfigurationForm | None = None
        self.state = DialogState.CLOSED
        self.last_outcome: DialogState | None = None
        # Bumped on every real open; lets the UI key widgets per activation.
        self.activations = 0

    @property
    def is_open(self) -> bool:
        return self.state is DialogState.OPEN

    @property
    def form(self) -> KeyConfigurationForm:
        if self._form is None:
            raise RuntimeError("key dialog is not open")
        return self._form

    @property
    def submit_enabled(self) -> bool:
        return self.is_open and self.form.is_complete()

    def bind_save(self, save: SaveCallback) -> None:
        """Replace the save callback (e.g. with one closed over fresher context)."""
        self._save = save

    def server_info_loaded(self, formats: Iterable[str] | None) -> None:
        """Record the advertised formats and hand them to an open form."""
        self._formats = tuple(formats or ())
        if self._form is not None:
            self._form.set_formats(self._formats)

    def open(self) -> KeyConfigurationForm:
        """Open with a fresh form; opening an open dialog keeps its edits."""
        if self.is_open:
            log.debug("Key dialog for %s already open", self.client_id)
            return self.form
        self._form = KeyConfigurationForm(self.client_id, self.options, self._formats)
        self.state = DialogState.OPEN
        self.last_outcome = None
        self.activations += 1
        log.debug("Opened key dialog for %s", self.client_id)
        return self._form

    def confirm(self) -> bool:
        """Hand the configuration to ``save`` and close.

        Returns:
          ``True`` when the configuration was handed off, ``False`` when the
          dialog is not open or the form is incomplete (nothing is invoked).
        """
        if not self.is_open:
            log.warning("Ignoring confirm on a closed key dialog")
            return False
        if not self.form.is_complete():
            missing = sorted(f.value for f in self.form.missing_fields())
            log.warning("Rejected incomplete key configuration, missing: %s", ", ".join(missing))
            return False

        configuration = self.form.snapshot()
        self._finish(DialogState.CONFIRMED)
        log.info("Key configuration confirmed for %s: %r", self.client_id, configuration)
        try:
            self._save(configuration)
        finally:
            self._toggle_dialog()
        return True

    def cancel(self) -> None:
        """Discard the in-progress configuration and close."""
        if not self.is_open:
            return
        self._finish(DialogState.CANCELLED)
        log.debug("Key dialog for %s cancelled", self.client_id)
        self._toggle_dialog()

    def _finish(self, outcome: DialogState) -> None:
        self._form = None
        self.last_outcome = outcome
        self.state = DialogState.CLOSED
