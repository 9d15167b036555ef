# frontend/streamlit_app/services/admin_api.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Identity-provider admin REST helpers used by the console.

Covers the handful of endpoints the Keys and Authorization pages need:
  • Server info → supported key-store archive formats
  • Generate a new key pair and download it as an archive
  • Import (upload) a certificate or key-store archive
  • Client-credentials token for the console's service account
  • Whether a client has authorization resources/scopes yet

Design principles
-----------------
- Thin wrapper: one method per endpoint, JSON in/JSON out.
- Every transport or HTTP failure surfaces as :class:`AdminApiError` with the
  status code (when there is one) so pages can show a concise message.
- Secrets (tokens, passwords) are never logged.
"""

import logging
from typing import Any

import requests

from services.key_form import KeyStoreConfiguration
from services.keystore_formats import CERT_PEM

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class AdminApiError(RuntimeError):
    """Raised when the admin API is unreachable or answers with an error."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def _error_message(resp: requests.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text or resp.reason
    if isinstance(data, dict):
        return str(data.get("errorMessage") or data.get("error_description") or data.get("error") or data)
    return str(data)


def _check(resp: requests.Response, what: str) -> requests.Response:
    if not resp.ok:
        message = _error_message(resp)
        log.error("%s failed: HTTP %s %s", what, resp.status_code, message)
        raise AdminApiError(f"{what} failed: {message}", status=resp.status_code)
    return resp


def obtain_token(
    base_url: str, realm: str, client_id: str, client_secret: str, *, timeout: int = DEFAULT_TIMEOUT
) -> str:
    """Fetch an access token with the client-credentials grant."""
    url = f"{base_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    try:
        resp = requests.post(
            url,
            data={
                "grant_type": "client_credentials",
                "client_id": client_id,
                "client_secret": client_secret,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise AdminApiError(f"Token request to {url} failed: {e}") from e
    token = _check(resp, "Token request").json().get("access_token")
    if not token:
        raise AdminApiError("Token response did not contain an access_token")
    return token


class AdminClient:
    """Minimal admin REST client bound to one realm."""

    def __init__(
        self,
        base_url: str,
        realm: str,
        token: str | None = None,
        *,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.realm = realm
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.base_url}/admin{path}"

    def _client_url(self, client_uuid: str, attr: str, action: str) -> str:
        return self._url(f"/realms/{self.realm}/clients/{client_uuid}/certificates/{attr}/{action}")

    def _request(self, method: str, url: str, what: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            log.error("%s failed: %s", what, e)
            raise AdminApiError(f"{what} failed: {e}") from e
        return _check(resp, what)

    # ------------------------------------------------------------ server info

    def server_info(self) -> dict[str, Any]:
        return self._request("GET", self._url("/serverinfo"), "Server info").json()

    def supported_keystore_types(self) -> list[str]:
        """Archive formats the server can produce, in server order."""
        info = self.server_info()
        crypto = info.get("cryptoInfo") or {}
        return list(crypto.get("supportedKeystoreTypes") or [])

    # ------------------------------------------------------------------ keys

    def generate_and_download(
        self, client_uuid: str, attr: str, config: KeyStoreConfiguration
    ) -> bytes:
        """Generate a new key pair and return the archive bytes."""
        resp = self._request(
            "POST",
            self._client_url(client_uuid, attr, "generate-and-download"),
            "Key generation",
            json=config.to_representation(),
            headers={"Accept": "application/octet-stream"},
        )
        log.info("Generated %s archive for client %s", config.format, client_uuid)
        return resp.content

    def upload_certificate(
        self, client_uuid: str, attr: str, config: KeyStoreConfiguration
    ) -> dict[str, Any]:
        """Import the configuration's file as the client's certificate/keys.

        A bare certificate goes to ``upload-certificate``; a key-store archive
        goes to ``upload`` so the private key is imported too.
        """
        if config.imported_file is None:
            raise ValueError("configuration carries no imported file")
        action = "upload-certificate" if config.format == CERT_PEM else "upload"
        form = {"keystoreFormat": config.format}
        for name, value in (
            ("keyAlias", config.key_alias),
            ("keyPassword", config.key_password),
            ("storePassword", config.store_password),
        ):
            if value:
                form[name] = value
        upload = config.imported_file
        resp = self._request(
            "POST",
            self._client_url(client_uuid, attr, action),
            "Key import",
            data=form,
            files={"file": (upload.filename, upload.content)},
        )
        log.info("Imported %s for client %s", upload.filename, client_uuid)
        return resp.json() if resp.content else {}

    # --------------------------------------------------------- authorization

    def _authz_list(self, client_uuid: str, kind: str) -> list[dict[str, Any]]:
        url = self._url(f"/realms/{self.realm}/clients/{client_uuid}/authz/resource-server/{kind}")
        return list(self._request("GET", url, f"Listing {kind}s", params={"max": 1}).json())

    def has_resources(self, client_uuid: str) -> bool:
        return bool(self._authz_list(client_uuid, "resource"))

    def has_scopes(self, client_uuid: str) -> bool:
        return bool(self._authz_list(client_uuid, "scope"))
