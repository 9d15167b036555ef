from services.keystore_formats import (
    CERT_PEM,
    download_filename,
    get_file_extension,
    selectable_formats,
)


def test_known_extensions():
    assert get_file_extension("PKCS12") == "p12"
    assert get_file_extension("JKS") == "jks"
    assert get_file_extension("BCFKS") == "bcfks"


def test_unknown_format_has_no_extension():
    assert get_file_extension("PEM") is None
    assert get_file_extension(CERT_PEM) is None


def test_selectable_formats_keeps_server_order():
    assert selectable_formats(["JKS", "PKCS12"]) == ("JKS", "PKCS12")


def test_sentinel_appended_last_when_permitted():
    assert selectable_formats(["PKCS12", "JKS"], has_pem=True) == ("PKCS12", "JKS", CERT_PEM)


def test_empty_before_server_info_loads():
    assert selectable_formats(None) == ()
    assert selectable_formats([], has_pem=True) == (CERT_PEM,)


def test_duplicates_dropped():
    assert selectable_formats(["JKS", "JKS", "PKCS12"]) == ("JKS", "PKCS12")


def test_download_filename():
    assert download_filename("my-client", "PKCS12") == "my-client.p12"
    assert download_filename("my-client", CERT_PEM) == "my-client.pem"
    assert download_filename("my-client", "UNKNOWN") == "my-client"
