import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from userstore.app import create_app

TEST_DATA_DIR = Path("data-tests")
TEST_USER = "test-user"


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-create data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    TEST_DATA_DIR.mkdir()
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def root() -> Path:
    """An existing, empty user root."""
    path = TEST_DATA_DIR / TEST_USER
    path.mkdir()
    return path


@pytest.fixture
def client(root: Path) -> TestClient:
    app = create_app(TEST_DATA_DIR, TEST_USER)
    return TestClient(app)
