"""Shared pytest fixtures for AI-Connectify tests."""

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file for tests
load_dotenv()

from tests.helpers.http_mocks import make_mock_http

API_KEY = "test-api-key-0123456789abcdef"


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests over a mock transport")


@pytest.fixture
def api_key():
    """A key that passes API key validation."""
    return API_KEY


@pytest.fixture
def mock_http():
    """HttpClient double; assign it to ``client.http_request``."""
    return make_mock_http()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside a temp directory holding an ``out`` folder and sample files."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "out").mkdir()
    (tmp_path / "image.png").write_bytes(b"\x89PNG fake image")
    (tmp_path / "mask.png").write_bytes(b"\x89PNG fake mask")
    (tmp_path / "audio.mp3").write_bytes(b"ID3 fake audio")
    (tmp_path / "data.jsonl").write_text('{"text": "hello"}\n')
    return tmp_path


@pytest.fixture
def sample_messages():
    return [{"role": "user", "content": "Hello"}]
