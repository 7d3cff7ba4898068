from pathlib import Path

import pytest

from swagger_search.config import get_settings
from swagger_search.parser.detect import parse_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("SWAGGER_URL", "SWAGGER_TIMEOUT", "SWAGGER_DEFAULT_LIMIT", "SWAGGER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def petstore_doc() -> dict:
    return parse_document((FIXTURES / "petstore.yaml").read_text(encoding="utf-8"))


@pytest.fixture
def users_doc() -> dict:
    return parse_document((FIXTURES / "users_swagger2.json").read_text(encoding="utf-8"))
