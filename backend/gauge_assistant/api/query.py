"""
Query API Endpoint
==================
POST /api/query - answer a visitor question about Gauge.io

Request body: {"question": "..."}
Responses:
- 200 {"answer": ..., "blocked": true}   guardrail reply, no LLM call
- 200 {"answer": ..., "blocked": false}  generated answer
- 400 {"error": "Question is required"}
- 405 {"error": "Method not allowed"}
- 500 {"error": ..., "details"?: ...}    generation/configuration failure
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from gauge_assistant.exceptions import QueryValidationError
from gauge_assistant.knowledge_base import STARTER_PROMPTS
from gauge_assistant.models.schemas import QueryRequest, QueryResponse, StarterPromptsResponse
from gauge_assistant.services.query_service import QueryService, create_query_service

logger = logging.getLogger(__name__)

router = APIRouter()

NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


@lru_cache
def get_query_service() -> QueryService:
    """Dependency returning the process-wide query service"""
    return create_query_service()


def parse_question(payload) -> str:
    """
    Validate the decoded JSON body and return the question text.

    Anything other than an object with a non-blank string `question`
    is rejected the same way.
    """
    if not isinstance(payload, dict):
        raise QueryValidationError("Question is required")
    try:
        return QueryRequest.model_validate(payload).question
    except ValidationError:
        raise QueryValidationError("Question is required")


@router.post("/query", response_model=QueryResponse)
async def query(
    request: Request,
    service: QueryService = Depends(get_query_service)
):
    """
    Answer a question, guardrails first.

    The body is read manually so malformed input maps to the 400 envelope
    instead of FastAPI's 422.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    question = parse_question(payload)
    return await service.answer(question)


@router.api_route("/query", methods=NON_POST_METHODS, include_in_schema=False)
async def query_method_not_allowed():
    raise QueryValidationError("Method not allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED)


@router.get("/starter-prompts", response_model=StarterPromptsResponse)
async def starter_prompts():
    """Suggested opening questions for the chat widget"""
    return StarterPromptsResponse(prompts=list(STARTER_PROMPTS))
