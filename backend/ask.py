"""
Ask the Query Assistant
=======================
Runs questions through the full query pipeline and prints the answer
envelopes. Guardrail replies work without GROQ_API_KEY; allowed questions
need it.

Usage:
    python ask.py                      # starter prompts + guardrail samples
    python ask.py "What is Gauge.io?"  # a single question
"""

import sys
import asyncio
import logging
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent))

from gauge_assistant.exceptions import AssistantError
from gauge_assistant.knowledge_base import STARTER_PROMPTS
from gauge_assistant.services.query_service import create_query_service

logger = logging.getLogger(__name__)

SAMPLE_QUESTIONS = [
    *STARTER_PROMPTS,
    "What is your pricing for a project?",
    "Can we discuss engagement terms for a custom project?",
    "What's the weather today?",
]


async def ask(service, question: str):
    """Answer a single question and print the envelope"""
    print(f"\n{'='*70}")
    print(f"Q: {question}")
    print(f"{'='*70}")

    try:
        response = await service.answer(question)
        label = "GUARDRAIL" if response.blocked else "GENERATED"
        print(f"[{label}]\n{response.answer}")
    except AssistantError as e:
        print(f"ERROR: {e}")


async def main():
    service = create_query_service()
    questions = sys.argv[1:] or SAMPLE_QUESTIONS

    for question in questions:
        await ask(service, question)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
