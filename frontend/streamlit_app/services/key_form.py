# frontend/streamlit_app/services/key_form.py
# SPDX-License-Identifier: Apache-2.0
"""In-progress key-store configuration and its field rules.

The key configuration dialog collects an archive format, a key alias, the
key/store passwords and (when importing) a file. Which of those fields are
relevant depends on the selected format and on how the dialog was
constructed:

* Store settings (alias, passwords) are relevant for every format except the
  certificate-only sentinel.
* Passwords are hidden in *hide-password* mode, used when the secrets travel
  inside an imported archive instead of being typed in.
* The file field exists only when the dialog accepts an import.

:meth:`KeyConfigurationForm.visible_fields` is the single place these rules
live. Rendering asks it what to draw and :meth:`KeyConfigurationForm.is_complete`
asks it what to check, so the two can never disagree.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from collections.abc import Iterable
from typing import Any, Final

from services.file_import import FileImportField, ImportedFile
from services.keystore_formats import is_certificate_only, selectable_formats


class FormField(str, enum.Enum):
    FORMAT = "format"
    FILE = "file"
    KEY_ALIAS = "keyAlias"
    KEY_PASSWORD = "keyPassword"
    STORE_PASSWORD = "storePassword"
    REALM_ALIAS = "realmAlias"
    REALM_CERTIFICATE = "realmCertificate"


#: Fields that must hold a value whenever they are visible.
REQUIRED: Final[frozenset[FormField]] = frozenset(
    {
        FormField.FORMAT,
        FormField.FILE,
        FormField.KEY_ALIAS,
        FormField.KEY_PASSWORD,
        FormField.STORE_PASSWORD,
    }
)


@dataclass(frozen=True)
class KeyFormOptions:
    """Construction-time switches for the form; never edited by the user.

    Attributes:
      use_file: Accept a file import. Implies hide-password mode.
      hide_password: Suppress the password fields even without an import.
      is_saml: Offer the optional realm certificate fields of SAML clients.
      has_pem: Offer the certificate-only sentinel as a format.
    """

    use_file: bool = False
    hide_password: bool = False
    is_saml: bool = False
    has_pem: bool = False

    @property
    def passwords_hidden(self) -> bool:
        return self.use_file or self.hide_password


@dataclass(frozen=True)
class KeyStoreConfiguration:
    """Finished configuration handed to the dialog's save callback."""

    format: str
    key_alias: str | None = None
    key_password: str | None = None
    store_password: str | None = None
    realm_alias: str | None = None
    realm_certificate: bool | None = None
    imported_file: ImportedFile | None = None

    def to_representation(self) -> dict[str, Any]:
        """Return the admin API's ``KeyStoreConfig`` JSON body.

        Unset values are omitted; the imported file travels separately as a
        multipart part and is never part of this body.
        """
        body: dict[str, Any] = {
            "format": self.format,
            "keyAlias": self.key_alias,
            "keyPassword": self.key_password,
            "storePassword": self.store_password,
            "realmAlias": self.realm_alias,
            "realmCertificate": self.realm_certificate,
        }
        return {key: value for key, value in body.items() if value is not None}

    def __repr__(self) -> str:
        # Passwords stay out of logs and tracebacks.
        file_name = self.imported_file.filename if self.imported_file else None
        return (
            f"KeyStoreConfiguration(format={self.format!r}, key_alias={self.key_alias!r}, "
            f"imported_file={file_name!r})"
        )


class KeyConfigurationForm:
    """Mutable configuration for one activation of the key dialog."""

    def __init__(
        self,
        default_alias: str,
        options: KeyFormOptions | None = None,
        formats: Iterable[str] | None = None,
    ) -> None:
        self.options = options or KeyFormOptions()
        self.file = FileImportField()
        self.format: str | None = None
        self.key_alias = default_alias
        self.key_password = ""
        self.store_password = ""
        self.realm_alias = ""
        self.realm_certificate = False
        self._formats: tuple[str, ...] = ()
        self.set_formats(formats)

    # ------------------------------------------------------------------ formats

    @property
    def formats(self) -> tuple[str, ...]:
        """Formats the selector currently offers."""
        return self._formats

    def set_formats(self, advertised: Iterable[str] | None) -> None:
        """Apply the server-advertised formats.

        The first offered format becomes the selection when nothing is
        selected yet or the previous selection is no longer offered.
        """
        self._formats = selectable_formats(advertised, self.options.has_pem)
        if self.format not in self._formats:
            self.format = self._formats[0] if self._formats else None

    def set_format(self, fmt: str) -> None:
        assert fmt in self._formats, f"format {fmt!r} is not offered"
        self.format = fmt

    # ------------------------------------------------------------------- fields

    def set_key_alias(self, value: str) -> None:
        self.key_alias = value or ""

    def set_key_password(self, value: str) -> None:
        self.key_password = value or ""

    def set_store_password(self, value: str) -> None:
        self.store_password = value or ""

    def set_realm_alias(self, value: str) -> None:
        self.realm_alias = value or ""

    def set_realm_certificate(self, value: bool) -> None:
        self.realm_certificate = bool(value)

    # --------------------------------------------------------------- derivation

    def visible_fields(self) -> frozenset[FormField]:
        fields = {FormField.FORMAT}
        if self.options.use_file:
            fields.add(FormField.FILE)
        if not is_certificate_only(self.format):
            fields.add(FormField.KEY_ALIAS)
            if not self.options.passwords_hidden:
                fields.update((FormField.KEY_PASSWORD, FormField.STORE_PASSWORD))
            if self.options.is_saml:
                fields.update((FormField.REALM_ALIAS, FormField.REALM_CERTIFICATE))
        return frozenset(fields)

    def is_visible(self, field: FormField) -> bool:
        return field in self.visible_fields()

    def required_fields(self) -> frozenset[FormField]:
        return self.visible_fields() & REQUIRED

    def missing_fields(self) -> frozenset[FormField]:
        """Required fields that are visible but still empty."""
        return frozenset(f for f in self.required_fields() if not self._value(f))

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def _value(self, field: FormField) -> Any:
        if field is FormField.FILE:
            return self.file.selection
        return {
            FormField.FORMAT: self.format,
            FormField.KEY_ALIAS: self.key_alias.strip(),
            FormField.KEY_PASSWORD: self.key_password,
            FormField.STORE_PASSWORD: self.store_password,
            FormField.REALM_ALIAS: self.realm_alias,
            FormField.REALM_CERTIFICATE: self.realm_certificate,
        }[field]

    # ----------------------------------------------------------------- snapshot

    def snapshot(self) -> KeyStoreConfiguration:
        """Freeze the visible values; hidden fields are left out."""
        if self.format is None:
            raise ValueError("no archive format selected")
        visible = self.visible_fields()

        def pick(field: FormField) -> Any:
            if field not in visible:
                return None
            value = self._value(field)
            return value if value not in ("", None) else None

        return KeyStoreConfiguration(
            format=self.format,
            key_alias=pick(FormField.KEY_ALIAS),
            key_password=pick(FormField.KEY_PASSWORD),
            store_password=pick(FormField.STORE_PASSWORD),
            realm_alias=pick(FormField.REALM_ALIAS),
            realm_certificate=(
                self.realm_certificate if FormField.REALM_CERTIFICATE in visible else None
            ),
            imported_file=pick(FormField.FILE),
        )
