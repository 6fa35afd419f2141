import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.main import create_app  # noqa: E402


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "articles.sqlite")


@pytest.fixture()
def client(db_path):
    with TestClient(create_app(db_path)) as c:
        yield c
