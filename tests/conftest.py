"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("PROFILE_NAME", "The Octocat")
    monkeypatch.setenv("CONTACT_EMAIL", "octocat@example.com")
    monkeypatch.setenv("CONTACT_LINKEDIN", "octocat")
    monkeypatch.setenv("LOW_CODE_WEBHOOK_URL", "https://n8n.example.com/webhook/workflows")


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def make_response():
    """Build a mock httpx Response."""
    def _make(status_code: int = 200, json_data=None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.json.return_value = json_data
        response.text = text
        return response
    return _make


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = AsyncMock()
        mock.return_value.__aenter__.return_value = client_instance
        yield client_instance


@pytest.fixture
def mock_github_repository():
    """Create a GitHub repository double with async methods."""
    repository = MagicMock()
    repository.get_github_data = AsyncMock()
    repository.get_github_user_data = AsyncMock()
    repository.get_github_user_repos = AsyncMock()
    repository.get_github_raw_file = AsyncMock()
    return repository


@pytest.fixture
def mock_low_code_repository():
    """Create a low-code repository double with async methods."""
    repository = MagicMock()
    repository.get_low_code_projects = AsyncMock()
    return repository


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def github_client():
    """Create a GithubApiService with test config."""
    from portfolio.services.github.client import GithubApiService
    return GithubApiService("https://api.test", "https://raw.test", timeout=5.0)


@pytest.fixture
def low_code_client():
    """Create a LowCodeApiService with test config."""
    from portfolio.services.lowcode.client import LowCodeApiService
    return LowCodeApiService("https://n8n.test/webhook/workflows", timeout=5.0)


@pytest.fixture
def service_factory():
    """Create a ServiceFactory from the test environment."""
    from portfolio.core.config import Settings
    from portfolio.factories.service_factory import ServiceFactory
    return ServiceFactory(Settings())


@pytest.fixture
def mocked_factory(service_factory, mock_github_repository, mock_low_code_repository):
    """ServiceFactory wired to repository doubles."""
    service_factory.set_github_repository(mock_github_repository)
    service_factory.set_low_code_repository(mock_low_code_repository)
    return service_factory


@pytest.fixture
def user_payload():
    return {
        "login": "octocat",
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "bio": None,
        "location": "San Francisco",
        "blog": "https://github.blog",
        "public_repos": 8,
        "followers": 100,
        "following": 9,
    }


@pytest.fixture
def repos_payload():
    return [
        {
            "id": 1,
            "name": "Hello-World",
            "description": "My first repository",
            "language": "Python",
            "html_url": "https://github.com/octocat/Hello-World",
        },
        {
            "id": 2,
            "name": "Spoon-Knife",
            "description": None,
            "language": None,
            "html_url": "https://github.com/octocat/Spoon-Knife",
        },
    ]


@pytest.fixture
def workflows_payload():
    return [
        {
            "id": "wf1",
            "name": "Daily digest",
            "active": True,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-02-01T00:00:00.000Z",
            "nodes": [{"name": "Schedule", "type": "n8n-nodes-base.scheduleTrigger"}],
            "connections": {},
            "settings": {"executionOrder": "v1"},
            "staticData": None,
            "meta": None,
            "pinData": {},
            "versionId": "v-1",
            "triggerCount": 1,
            "shared": [],
            "tags": [],
        }
    ]
