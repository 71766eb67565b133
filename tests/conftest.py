import sys
from pathlib import Path

import pytest

# Ensure local source package (src/jsonhttp) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from jsonhttp import JSON_HEADERS, HttpClient  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("JSONHTTP_BASE_URL", raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://api.test"


@pytest.fixture
def client(base_url: str) -> HttpClient:
    return HttpClient(base_url=base_url)


@pytest.fixture
def json_client(base_url: str) -> HttpClient:
    return HttpClient(base_url=base_url, headers=JSON_HEADERS)
