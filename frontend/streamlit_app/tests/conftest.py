# frontend/streamlit_app/tests/conftest.py
# SPDX-License-Identifier: Apache-2.0
import pytest

from services.key_dialog import KeyConfigurationDialog
from services.key_form import KeyFormOptions

FORMATS = ["JKS", "PKCS12", "BCFKS"]


class Recorder:
    """Collects save/toggle invocations."""

    def __init__(self):
        self.saved = []
        self.toggles = 0

    def save(self, config):
        self.saved.append(config)

    def toggle(self):
        self.toggles += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_dialog(recorder):
    def _make(options=None, formats=FORMATS, client_id="my-client"):
        return KeyConfigurationDialog(
            client_id,
            recorder.save,
            recorder.toggle,
            options=options or KeyFormOptions(),
            formats=formats,
        )

    return _make


class FakeResponse:
    def __init__(self, status=200, json_data=None, content=b"", text=""):
        self.status_code = status
        self._json = json_data
        self.content = content if content else (b"{}" if json_data is not None else b"")
        self.text = text
        self.reason = "Error" if status >= 400 else "OK"

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("no json")
        return self._json


class FakeSession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.headers = {}

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def session_with():
    def _make(*responses):
        return FakeSession(responses)

    return _make
