# frontend/streamlit_app/services/keystore_formats.py
# SPDX-License-Identifier: Apache-2.0
"""Key-store archive formats offered by the key configuration dialog.

The identity provider advertises which archive formats it can produce in its
server info (``cryptoInfo.supportedKeystoreTypes``). This module turns that
list into the options the format selector shows and maps each format to the
file extension used when the generated archive is downloaded.

Everything here is a pure lookup; no I/O and no Streamlit import.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

#: Pseudo-format meaning "bare certificate, no store wrapper".
CERT_PEM: Final[str] = "Certificate PEM"

#: Archive format → file extension (without the dot).
EXTENSIONS: Final[Mapping[str, str]] = {
    "PKCS12": "p12",
    "JKS": "jks",
    "BCFKS": "bcfks",
}

_PEM_EXTENSION: Final[str] = "pem"


def get_file_extension(fmt: str) -> str | None:
    """Return the extension for ``fmt`` or ``None`` when the format is unknown."""
    return EXTENSIONS.get(fmt)


def selectable_formats(advertised: Iterable[str] | None, has_pem: bool = False) -> tuple[str, ...]:
    """Build the ordered options for the format selector.

    Args:
      advertised: Formats reported by the server, in server order. ``None`` or
        an empty iterable means server info has not loaded yet.
      has_pem: Whether the certificate-only sentinel may be offered. It is
        always appended last.

    Returns:
      A tuple of unique format identifiers.
    """
    options: list[str] = []
    for fmt in advertised or ():
        if fmt and fmt not in options and fmt != CERT_PEM:
            options.append(fmt)
    if has_pem:
        options.append(CERT_PEM)
    return tuple(options)


def is_certificate_only(fmt: str | None) -> bool:
    return fmt == CERT_PEM


def download_filename(client_id: str, fmt: str) -> str:
    """Name the archive downloaded after key generation (``<client>.<ext>``)."""
    if is_certificate_only(fmt):
        return f"{client_id}.{_PEM_EXTENSION}"
    ext = get_file_extension(fmt)
    return f"{client_id}.{ext}" if ext else client_id
