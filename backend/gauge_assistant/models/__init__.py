"""Models package"""
from gauge_assistant.models.schemas import (
    QueryRequest, QueryResponse, ErrorResponse,
    HealthResponse, StarterPromptsResponse
)
