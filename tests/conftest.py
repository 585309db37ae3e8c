import base64
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from tracking.api.v1.dependencies import get_analytics_recorder
from tracking.auth.dependencies import get_current_actor_optional
from tracking.main import app

TRACK_URL = "/v1/analytics/track"


@pytest.fixture
def mock_recorder():
    """Mock analytics recorder wired into the app."""
    get_analytics_recorder.cache_clear()

    recorder = MagicMock()
    recorder.track_product_view = AsyncMock()
    recorder.track_bookmark = AsyncMock()
    recorder.track_cart_add = AsyncMock()
    recorder.flush = MagicMock()

    app.dependency_overrides[get_analytics_recorder] = lambda: recorder

    yield recorder

    app.dependency_overrides.clear()
    get_analytics_recorder.cache_clear()


@pytest.fixture
def signed_in_as():
    """Override the resolved actor for the duration of a test."""

    def _sign_in(actor_id):
        app.dependency_overrides[get_current_actor_optional] = lambda: actor_id

    yield _sign_in
    app.dependency_overrides.pop(get_current_actor_optional, None)


@pytest.fixture
def test_client():
    """FastAPI test client (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def track_url():
    return TRACK_URL


@pytest.fixture
def basic_auth_header():
    def _header(username, password):
        token = base64.b64encode(f"{username}:{password}".encode()).decode()
        return {"Authorization": f"Basic {token}"}

    return _header


@pytest.fixture
def auth_users():
    """Configure the HTTP Basic user table."""
    with patch(
        "tracking.auth.service.settings.auth_users",
        {"u1": "pass-u1", "u2": "pass-u2"},
    ) as users:
        yield users


@pytest.fixture
def mock_logger():
    """Mock logger used by the track endpoint."""
    with patch("tracking.api.v1.endpoints.track.get_logger") as mock_get_logger:
        mock_logger_instance = MagicMock()
        mock_get_logger.return_value = mock_logger_instance
        yield mock_logger_instance


@pytest.fixture
def mock_prometheus_metrics():
    """Mock Prometheus metrics for testing."""
    with patch("tracking.api.v1.endpoints.track.TRACKING_REQUESTS") as mock_requests, patch(
        "tracking.api.v1.endpoints.track.TRACKING_LATENCY"
    ) as mock_latency, patch(
        "tracking.api.v1.endpoints.track.RECORDER_ERRORS"
    ) as mock_errors:
        yield {
            "requests": mock_requests,
            "latency": mock_latency,
            "errors": mock_errors,
        }
