import sys
from pathlib import Path

import pytest

# Ensure local source package (src/restassured) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from restassured import Config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("RESTASSURED_BASE_URI", raising=False)
    monkeypatch.delenv("RESTASSURED_TIMEOUT", raising=False)
    monkeypatch.delenv("RESTASSURED_VERIFY_SSL", raising=False)
    monkeypatch.delenv("RESTASSURED_DEBUG", raising=False)
    monkeypatch.delenv("RESTASSURED_CA_BUNDLE", raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def base_url() -> str:
    return "http://localhost:9876"


@pytest.fixture
def config() -> Config:
    return Config(timeout=5.0)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
