import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _oauth_env(monkeypatch, tmp_path):
    monkeypatch.setenv("TOKEN_PATH", str(tmp_path / "token.json"))
    monkeypatch.setenv("CREDENTIALS_PATH", str(tmp_path / "credentials.json"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client_secrets(settings):
    settings.credentials_path.write_text(
        json.dumps({"installed": {"client_id": "A", "client_secret": "B", "redirect_uris": ["http://localhost"]}}),
        encoding="utf-8",
    )
    return settings.credentials_path
