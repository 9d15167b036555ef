# frontend/streamlit_app/core/messages.py
# SPDX-License-Identifier: Apache-2.0
"""English message catalog and the `t()` lookup used by every page.

Translation proper is out of scope for the console; `t` only maps a message
key to display text and interpolates `{placeholders}`. Unknown keys come back
unchanged so a missing entry shows up as its key instead of crashing a page.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

MESSAGES: Final[Mapping[str, str]] = {
    # Masthead
    "unknownUser": "Anonymous",
    "fullName": "{givenName} {familyName}",
    "manageAccount": "Manage account",
    "signOut": "Sign out",
    "navigation": "Global navigation",
    # Key dialog
    "generateKeys": "Generate keys",
    "generateKeysDescription": (
        "If you generate new keys, you can download the keystore with the "
        "private key automatically and save it on your side."
    ),
    "generate": "Generate",
    "importKey": "Import key",
    "import": "Import",
    "cancel": "Cancel",
    "archiveFormat": "Archive format",
    "archiveFormatHelp": "Java keystore or PKCS12 archive format.",
    "importFile": "Import file",
    "importFileHelp": "File to import the key or certificate from.",
    "keyAlias": "Key alias",
    "keyAliasHelp": "Archive alias for your private key and certificate.",
    "keyPassword": "Key password",
    "keyPasswordHelp": "Password to access the private key in the archive.",
    "storePassword": "Store password",
    "storePasswordHelp": "Password to access the archive itself.",
    "realmCertificateAlias": "Realm certificate alias",
    "realmCertificateAliasHelp": "Realm certificate is stored in archive too. This is the alias to it.",
    "realmCertificate": "Realm certificate",
    "realmCertificateHelp": "Store the realm certificate in the archive as well.",
    "noFormatsLoaded": "Waiting for the server to advertise its supported archive formats.",
    "incompleteKeyConfig": "Fill in all required fields to continue.",
    "generateSuccess": "New key pair and certificate generated successfully.",
    "generateError": "Could not generate new keys: {error}",
    "importSuccess": "Key or certificate imported successfully.",
    "importError": "Could not import the key: {error}",
    "downloadArchive": "Download {filename}",
    "keys": "Keys",
    # Authorization
    "emptyPermissions": "No permissions",
    "emptyPermissionInstructions": (
        "If you want to create permissions, please click the button below to "
        "create a resource-based or scope-based permission."
    ),
    "createResourceBasedPermission": "Create resource-based permission",
    "createScopeBasedPermission": "Create scope-based permission",
    "noResourceCreateHint": "There are no resources, so you cannot create a resource-based permission.",
    "noScopeCreateHint": "There are no authorization scopes, so you cannot create a scope-based permission.",
    "permissionCreateRequested": "Create a {permissionType}-based permission from the permissions page.",
}


def t(key: str, **params: object) -> str:
    """Return the display text for `key`, formatted with `params`."""
    text = MESSAGES.get(key, key)
    if params:
        try:
            return text.format(**params)
        except (KeyError, IndexError, ValueError):
            return text
    return text
