from typing import Generator

import pytest
from click.testing import CliRunner

from sumup import ApiClient, SumUpClientOptions


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("SUMUP_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SUMUP_BASE_URL", raising=False)
    monkeypatch.delenv("SUMUP_DEBUG", raising=False)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_url() -> str:
    return "https://mocked.sumup.test"


@pytest.fixture
def secret() -> str:
    return "default-token"


@pytest.fixture
def options(base_url: str, secret: str) -> SumUpClientOptions:
    return SumUpClientOptions(base_url=base_url, access_token=secret)


@pytest.fixture
def api_client(options: SumUpClientOptions) -> Generator[ApiClient, None, None]:
    client = ApiClient(options)
    yield client
    client.close()
