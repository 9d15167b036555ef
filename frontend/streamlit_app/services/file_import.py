# frontend/streamlit_app/services/file_import.py
# SPDX-License-Identifier: Apache-2.0
"""Capture of a single user-selected file for key import.

The field keeps the file's content and its display name together. It never
parses or validates the content; the identity provider that receives the
import is responsible for that (e.g. rejecting a malformed certificate).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportedFile:
    """User-supplied content paired with the name shown for it."""

    content: bytes | str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


class FileImportField:
    """Holds at most one :class:`ImportedFile`.

    A selection is replaced as a whole, so stale content can never be paired
    with a new name (or the other way around).
    """

    def __init__(self) -> None:
        self._selection: ImportedFile | None = None

    @property
    def selection(self) -> ImportedFile | None:
        return self._selection

    @property
    def has_selection(self) -> bool:
        return self._selection is not None

    def on_select(self, content: bytes | str | None, display_name: str | None) -> None:
        """Replace the current selection.

        A selection without content or without a name counts as clearing the
        field. Empty content (a zero-byte file) is still a selection.
        """
        if content is None or not display_name:
            self.clear()
            return
        self._selection = ImportedFile(content=content, filename=display_name)
        log.debug("Selected import file %s (%d bytes)", display_name, len(content))

    def clear(self) -> None:
        self._selection = None
