"""
Prompt Builder
==============
Assembles the grounding prompt sent to the LLM for allowed questions.
"""

from typing import Sequence

from gauge_assistant.knowledge_base import KnowledgeBase


ROLE_PREAMBLE = (
    "You are a helpful AI assistant for Gauge.io, a user experience consultancy. "
    "Your role is to help potential clients learn about Gauge's services, case studies, and approach."
)

RESPONSE_GUIDELINES = (
    "Be helpful, professional, and enthusiastic about Gauge's work",
    "Use the knowledge base to answer questions accurately",
    "Include relevant URLs in markdown format when referencing pages (e.g., [coffee meeting](/coffee))",
    "For case studies, include the URL so users can learn more",
    "If asked about services, explain them clearly and suggest relevant case studies",
    "Suggest booking a coffee or podcast meeting when appropriate",
    "Keep responses concise but informative (2-4 paragraphs max)",
    "Use markdown formatting (bold, lists, links) to make responses scannable",
    "If unsure about something not in the knowledge base, say so and suggest booking a meeting",
    "NEVER discuss pricing, costs, or fees - always redirect to booking a meeting",
)

ANSWER_INSTRUCTION = "Provide a helpful, accurate response based on the knowledge base to the user question below."


def build_prompt(
    question: str,
    knowledge_base: KnowledgeBase,
    guidelines: Sequence[str] = RESPONSE_GUIDELINES,
    preamble: str = ROLE_PREAMBLE
) -> str:
    """
    Build the grounding prompt.

    The knowledge base text is embedded whole and unmodified, and the
    question is appended verbatim as the final line.

    Args:
        question: Visitor question, as received
        knowledge_base: Grounding document
        guidelines: Ordered response guidelines
        preamble: Role/identity statement

    Returns:
        Complete prompt string
    """
    guideline_lines = "\n".join(f"- {guideline}" for guideline in guidelines)

    return f"""{preamble}

KNOWLEDGE BASE:
{knowledge_base.text}

GUIDELINES:
{guideline_lines}

{ANSWER_INSTRUCTION}

USER QUESTION: {question}"""


class PromptBuilder:
    """Prompt builder bound to a preamble and guideline list"""

    def __init__(
        self,
        guidelines: Sequence[str] = RESPONSE_GUIDELINES,
        preamble: str = ROLE_PREAMBLE
    ):
        self.guidelines = tuple(guidelines)
        self.preamble = preamble

    def build(self, question: str, knowledge_base: KnowledgeBase) -> str:
        return build_prompt(question, knowledge_base, self.guidelines, self.preamble)


# Singleton instance
prompt_builder = PromptBuilder()
