# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit e logs em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["API_LOG_ENABLED"] = "false"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI sem rate limit."""
    from rescisao.infrastructure.config import get_settings
    get_settings.cache_clear()

    from rescisao.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def payload_referencia() -> dict[str, object]:
    """Entrada de referencia: 3000, 15/01/2020 a 15/01/2024, sem justa causa indenizado."""
    return {
        "employeeName": "Maria Souza",
        "salary": 3000,
        "startDate": "2020-01-15",
        "endDate": "2024-01-15",
        "terminationType": "SemJustaCausa",
        "noticeType": "Indenizado",
        "vacationOverdue": 0,
        "dependents": 0,
        "additionalHours": 0,
        "additionalDanger": False,
        "additionalNight": False,
        "fgtsBalance": 15000,
        "applyFine467": False,
        "applyFine477": False,
    }
