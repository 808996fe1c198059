import copy
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

SAMPLE_CONFIG = {
    "cache_time": 7200,
    "api_site": {
        "dyttzy": {
            "api": "http://caiji.dyttzyapi.com/api.php/provide/vod",
            "name": "Dytt",
            "detail": "http://caiji.dyttzyapi.com",
        },
        "ruyi": {
            "api": "https://old-relay.example.net/?url=https://cj.rycjapi.com/api.php/provide/vod",
            "name": "Ruyi",
        },
    },
    "custom_category": [{"name": "Movies", "type": "movie", "query": "hot"}],
}


@pytest.fixture(scope="session")
def client():
    from relay.server import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_config():
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def upstream():
    """Patch outbound httpx calls; set `.return_value` or `.side_effect` on the mock."""
    with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock:
        yield mock
