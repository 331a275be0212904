"""
Pydantic Schemas for API Request/Response
==========================================
"""

from typing import List, Optional
from pydantic import BaseModel, StrictStr, field_validator


# ============================================
# Query Schemas
# ============================================

class QueryRequest(BaseModel):
    """Request for query endpoint
    - question: visitor question; must be a string with non-whitespace content
    """
    question: StrictStr

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        # Keep the original text; only reject blank input
        if not value.strip():
            raise ValueError("question must not be blank")
        return value


class QueryResponse(BaseModel):
    """Answer envelope
    blocked: True for canned guardrail replies, False for generated answers
    """
    answer: str
    blocked: bool


class ErrorResponse(BaseModel):
    """Error envelope; details only present in development mode"""
    error: str
    details: Optional[str] = None


# ============================================
# Service Schemas
# ============================================

class HealthResponse(BaseModel):
    """Detailed health check"""
    status: str
    llm_model: str
    generation_configured: bool
    knowledge_base_source: str
    knowledge_base_chars: int


class StarterPromptsResponse(BaseModel):
    """Suggested opening questions for the chat widget"""
    prompts: List[str]
