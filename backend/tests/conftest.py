"""
Test Configuration and Fixtures
================================
Shared fixtures for all tests
"""

import sys
from pathlib import Path
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gauge_assistant.main import app
from gauge_assistant.api.query import get_query_service
from gauge_assistant.knowledge_base import KnowledgeBase, GAUGE_KNOWLEDGE_BASE
from gauge_assistant.services.llm_service import LLMService
from gauge_assistant.services.query_service import QueryService


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    """Built-in knowledge base"""
    return KnowledgeBase(text=GAUGE_KNOWLEDGE_BASE)


@pytest.fixture
def fake_llm() -> AsyncMock:
    """LLM stand-in returning a fixed answer"""
    llm = AsyncMock(spec=LLMService)
    llm.generate.return_value = "Gauge.io offers developer experience research, strategy, and design."
    llm.model = "test-model"
    llm.is_configured = True
    return llm


@pytest.fixture
def query_service(knowledge_base: KnowledgeBase, fake_llm: AsyncMock) -> QueryService:
    """Query service with the LLM mocked out"""
    return QueryService(knowledge_base=knowledge_base, llm=fake_llm)


@pytest_asyncio.fixture
async def client(query_service: QueryService) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with the query service overridden"""
    app.dependency_overrides[get_query_service] = lambda: query_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def unconfigured_client(knowledge_base: KnowledgeBase) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose real LLM service has no API key"""
    service = QueryService(knowledge_base=knowledge_base, llm=LLMService(api_key=""))
    app.dependency_overrides[get_query_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_question() -> str:
    """Sample on-topic question"""
    return "Tell me about your UX research services"


@pytest.fixture
def pricing_question() -> str:
    """Sample pricing question"""
    return "What is your pricing for a project?"
