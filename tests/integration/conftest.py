# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"

AGORA_FIXO = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com relogio fixo injetado."""
    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.dependencies import get_agora
    from api.interfaces.api.main import app

    app.dependency_overrides[get_agora] = lambda: AGORA_FIXO
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
