# frontend/streamlit_app/core/config.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Centralized, immutable application configuration for the admin console.

This module defines a frozen `Settings` dataclass whose fields are populated
from environment variables (loaded via python-dotenv if a `.env` file is
present). The resulting singleton `settings` is imported by other modules to
avoid scattering `os.getenv` calls throughout the codebase.

Design goals
------------
- **Single source of truth**: All tunables live here; other modules consume
  `settings` rather than reading environment variables directly.
- **Immutability**: `@dataclass(frozen=True)` prevents accidental mutation at
  runtime. Changes require process restart (or re-instantiation in tests).
- **Fast import**: Only the dotenv load and dataclass construction. No
  network calls here; the admin API is first contacted by `core.clients`.

Security notes
--------------
- `KC_CLIENT_SECRET` is the console service account's secret. Keep it out of
  version control and never log it.

Testing
-------
- Construct `Settings(...)` directly with explicit values, or monkeypatch
  attributes on the module-level `settings` object after import.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load key-value pairs from a local `.env` file into process environment, if
# present. `override=False` by default, so pre-set env vars take precedence.
load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable (`1/true/yes/on`, case-insensitive)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Each attribute is populated from the corresponding environment variable;
    when unset, a documented default is used.
    """

    # --- Identity provider -------------------------------------------------
    # Base URL of the identity provider (admin API lives under /admin).
    KC_BASE_URL: str = os.getenv("KC_BASE_URL", "http://localhost:8080")
    # Realm the console administers.
    KC_REALM: str = os.getenv("KC_REALM", "master")

    # --- Console service account (client-credentials grant) ----------------
    KC_CLIENT_ID: str = os.getenv("KC_CLIENT_ID", "admin-console")
    KC_CLIENT_SECRET: str = os.getenv("KC_CLIENT_SECRET", "")

    # --- Client whose keys/permissions are managed --------------------------
    # Human-readable clientId; also the default key alias.
    KC_TARGET_CLIENT_ID: str = os.getenv("KC_TARGET_CLIENT_ID", "")
    # Internal id used in admin API paths.
    KC_TARGET_CLIENT_UUID: str = os.getenv("KC_TARGET_CLIENT_UUID", "")
    # Client attribute prefix holding the key material.
    KC_KEY_ATTR: str = os.getenv("KC_KEY_ATTR", "jwt.credential")

    # --- Console behaviour ---------------------------------------------------
    # Offer the certificate-only ("Certificate PEM") format on import.
    CONSOLE_ALLOW_PEM: bool = env_flag("CONSOLE_ALLOW_PEM", True)
    # DEBUG logging when set.
    CONSOLE_DEBUG: bool = env_flag("CONSOLE_DEBUG")
    # Seconds before admin API calls time out.
    KC_TIMEOUT: int = int(os.getenv("KC_TIMEOUT", "15"))


# Singleton settings object imported by consumers.
settings = Settings()
