"""
Query Service
=============
Guardrailed, knowledge-grounded question answering

Pipeline per question:
1. Topic classification - canned reply for blocked/redirected questions
2. Prompt building      - knowledge base + guidelines + question
3. Generation           - single Groq completion
"""

import logging
from typing import Optional

from gauge_assistant.config import settings
from gauge_assistant.exceptions import GenerationError
from gauge_assistant.knowledge_base import KnowledgeBase, load_knowledge_base
from gauge_assistant.models.schemas import QueryResponse
from gauge_assistant.services.topic_classifier import TopicClassifier, topic_classifier
from gauge_assistant.services.prompt_builder import PromptBuilder, prompt_builder as default_prompt_builder
from gauge_assistant.services.llm_service import LLMService, llm_service

logger = logging.getLogger(__name__)


class QueryService:
    """
    Orchestrates classifier, prompt builder and LLM for one question.

    Holds only read-only collaborators, so a single instance serves all
    requests concurrently.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        classifier: Optional[TopicClassifier] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        llm: Optional[LLMService] = None
    ):
        self.knowledge_base = knowledge_base
        self.classifier = classifier or topic_classifier
        self.prompt_builder = prompt_builder or default_prompt_builder
        self.llm = llm or llm_service

    async def answer(self, question: str) -> QueryResponse:
        """
        Answer a validated question.

        Args:
            question: Non-blank visitor question

        Returns:
            QueryResponse with blocked=True for guardrail replies

        Raises:
            GenerationError: (incl. ConfigurationError) when generation fails;
                any other exception from the LLM is wrapped in one
        """
        classification = self.classifier.classify(question)

        if not classification.allowed:
            logger.info(f"Guardrail short-circuit: {classification.verdict.value} ({classification.matched_keyword!r})")
            return QueryResponse(answer=classification.message, blocked=True)

        prompt = self.prompt_builder.build(question, self.knowledge_base)
        logger.debug(f"Prompt built: {len(prompt)} chars")

        try:
            answer = await self.llm.generate(prompt)
        except GenerationError:
            logger.exception("Generation failed")
            raise
        except Exception as e:
            logger.exception("Unexpected generation failure")
            raise GenerationError(f"Unexpected generation failure: {e}") from e

        return QueryResponse(answer=answer, blocked=False)


def create_query_service() -> QueryService:
    """Build the service from settings; called once at startup"""
    knowledge_base = load_knowledge_base(settings.knowledge_base_path)
    logger.info(f"Knowledge base ready: source={knowledge_base.source}, {len(knowledge_base)} chars")
    return QueryService(knowledge_base=knowledge_base)
