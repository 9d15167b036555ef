import pytest
import requests

from services import admin_api
from services.admin_api import AdminApiError, AdminClient, obtain_token
from services.file_import import ImportedFile
from services.key_form import KeyStoreConfiguration
from services.keystore_formats import CERT_PEM


def client(session):
    return AdminClient("https://idp.example/", "demo", "tok", session=session)


def test_bearer_token_and_base_url(session_with):
    session = session_with()
    c = client(session)
    assert session.headers["Authorization"] == "Bearer tok"
    assert c.base_url == "https://idp.example"


def test_supported_keystore_types(session_with, response):
    session = session_with(
        response(json_data={"cryptoInfo": {"supportedKeystoreTypes": ["JKS", "PKCS12", "BCFKS"]}})
    )
    assert client(session).supported_keystore_types() == ["JKS", "PKCS12", "BCFKS"]
    method, url, _ = session.calls[0]
    assert (method, url) == ("GET", "https://idp.example/admin/serverinfo")


def test_supported_keystore_types_missing_crypto_info(session_with, response):
    session = session_with(response(json_data={}))
    assert client(session).supported_keystore_types() == []


def test_generate_and_download_posts_representation(session_with, response):
    session = session_with(response(content=b"\x30\x82archive"))
    config = KeyStoreConfiguration("PKCS12", key_alias="k", key_password="a", store_password="b")
    data = client(session).generate_and_download("uuid-1", "jwt.credential", config)
    assert data == b"\x30\x82archive"
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url.endswith(
        "/admin/realms/demo/clients/uuid-1/certificates/jwt.credential/generate-and-download"
    )
    assert kwargs["json"] == {
        "format": "PKCS12",
        "keyAlias": "k",
        "keyPassword": "a",
        "storePassword": "b",
    }


def test_upload_certificate_routes_by_format(session_with, response):
    session = session_with(response(json_data={"certificate": "MII"}), response(json_data={}))
    c = client(session)
    pem = KeyStoreConfiguration(CERT_PEM, imported_file=ImportedFile(b"pem", "c.pem"))
    assert c.upload_certificate("u", "jwt.credential", pem) == {"certificate": "MII"}
    assert session.calls[0][1].endswith("/upload-certificate")
    assert session.calls[0][2]["data"] == {"keystoreFormat": CERT_PEM}
    assert session.calls[0][2]["files"] == {"file": ("c.pem", b"pem")}

    jks = KeyStoreConfiguration("JKS", key_alias="k", imported_file=ImportedFile(b"jks", "c.jks"))
    c.upload_certificate("u", "jwt.credential", jks)
    assert session.calls[1][1].endswith("/upload")
    assert session.calls[1][2]["data"] == {"keystoreFormat": "JKS", "keyAlias": "k"}


def test_upload_without_file_is_rejected(session_with):
    with pytest.raises(ValueError):
        client(session_with()).upload_certificate("u", "a", KeyStoreConfiguration("JKS"))


def test_http_error_becomes_admin_api_error(session_with, response):
    session = session_with(response(status=403, json_data={"errorMessage": "Forbidden realm"}))
    with pytest.raises(AdminApiError) as exc:
        client(session).server_info()
    assert exc.value.status == 403
    assert "Forbidden realm" in str(exc.value)


def test_transport_error_becomes_admin_api_error(session_with):
    session = session_with(requests.ConnectionError("refused"))
    with pytest.raises(AdminApiError) as exc:
        client(session).server_info()
    assert exc.value.status is None


def test_authorization_availability(session_with, response):
    session = session_with(response(json_data=[{"name": "r"}]), response(json_data=[]))
    c = client(session)
    assert c.has_resources("u") is True
    assert c.has_scopes("u") is False
    assert session.calls[1][1].endswith("/authz/resource-server/scope")


def test_obtain_token(monkeypatch, response):
    seen = {}

    def fake_post(url, data, timeout):
        seen.update(url=url, data=data)
        return response(json_data={"access_token": "abc"})

    monkeypatch.setattr(admin_api.requests, "post", fake_post)
    assert obtain_token("https://idp", "demo", "console", "s3cret") == "abc"
    assert seen["url"] == "https://idp/realms/demo/protocol/openid-connect/token"
    assert seen["data"]["grant_type"] == "client_credentials"


def test_obtain_token_without_access_token(monkeypatch, response):
    monkeypatch.setattr(admin_api.requests, "post", lambda *a, **kw: response(json_data={}))
    with pytest.raises(AdminApiError):
        obtain_token("https://idp", "demo", "console", "s3cret")
