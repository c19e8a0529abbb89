from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.customers.directory import CustomerDirectory

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CUSTOMERS_FILE = FIXTURES_DIR / "customers.json"


def _clear_caches() -> None:
    from app.api.deps import get_customer_directory
    from app.core.settings import get_settings

    get_settings.cache_clear()
    get_customer_directory.cache_clear()


@pytest.fixture
def directory() -> CustomerDirectory:
    return CustomerDirectory.from_file(CUSTOMERS_FILE)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("CUSTOMERS_PATH", str(CUSTOMERS_FILE))
    _clear_caches()

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client

    _clear_caches()
