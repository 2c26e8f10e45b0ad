import os
from unittest import mock

import pytest

from esmapping.config import get_settings
from esmapping.doctype import DocType
from esmapping.request import Method


class RecordingType:
    """A type that records requests instead of sending them"""

    def __init__(self, name: str = "user", response=None):
        self.name = name
        self.response = response if response is not None else {"acknowledged": True}
        self.requests: list[tuple[str, Method, dict]] = []

    def get_name(self) -> str:
        return self.name

    def request(self, path, method=Method.GET, body=None):
        self.requests.append((path, method, body))
        return self.response


@pytest.fixture()
def user_type():
    return RecordingType("user")


@pytest.fixture()
def elastic():
    client = mock.MagicMock()
    client.perform_request.return_value.body = {"acknowledged": True}
    return client


@pytest.fixture()
def doctype(elastic):
    return DocType("unittest_index", "article", elastic=elastic)


@pytest.fixture()
def settings_env(monkeypatch, tmp_path):
    """Run with a clean environment and no .env file, and reset the cached settings"""
    # load_dotenv writes to os.environ, so restore the whole environment afterwards
    with mock.patch.dict(os.environ):
        for var in ("ESMAPPING_ELASTIC_HOST", "ESMAPPING_ELASTIC_PASSWORD", "ESMAPPING_ELASTIC_VERIFY_SSL"):
            os.environ.pop(var, None)
        monkeypatch.setenv("ESMAPPING_ENV_FILE", str(tmp_path / ".env"))
        monkeypatch.chdir(tmp_path)
        get_settings.cache_clear()
        yield monkeypatch
        get_settings.cache_clear()
