import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest

# Ensure local source package (src/swagclient) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from swagclient import HttpClient  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("SWAGCLIENT_BASE_URL", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
async def client(base_url: str) -> AsyncGenerator[HttpClient, None]:
    async with HttpClient(base_url=base_url) as http_client:
        yield http_client
