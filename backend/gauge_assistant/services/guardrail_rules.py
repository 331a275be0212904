"""
Guardrail Rules
===============
Keyword rule sets consulted by the topic classifier.

All matching is case-insensitive substring matching against the lowercased
question, so keywords are stored lowercase. Order inside each tuple matters:
the first matching keyword decides.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


PRICING_MESSAGE = (
    "I can't discuss specific pricing or costs here. Every project is unique! "
    "I'd recommend booking a coffee meeting with the team to discuss your specific "
    "needs and get a tailored proposal. You can book a time at [/coffee](/coffee)."
)

OFF_LIMITS_MESSAGE = (
    "I'm here to help you learn about Gauge.io's services, case studies, and approach. "
    "Let me know if you have questions about those topics!"
)

BOOKING_MESSAGE = (
    "That's a great question that would be best discussed directly with the team! "
    "I'd recommend booking a coffee meeting to dive into the specifics of your project. "
    "You can book a time at [/coffee](/coffee)."
)

OFF_TOPIC_MESSAGE = (
    "I'm specifically here to help you learn about Gauge.io's services, case studies, "
    "and approach to UX research and design. Is there anything about Gauge you'd like to know?"
)


@dataclass(frozen=True)
class KeywordRule:
    """A keyword and the canned response returned when it matches"""
    keyword: str
    message: Optional[str] = None


@dataclass(frozen=True)
class GuardrailRules:
    """
    Process-wide guardrail configuration.

    - blocked: refused outright; pricing-family keywords carry PRICING_MESSAGE
    - redirect: questions that need a human conversation (booking suggestion)
    - allowed_topics: on-topic keywords that exempt a question from the off-topic check
    - off_topic: denylist applied only to longer questions with no allowed keyword
    """
    blocked: Tuple[KeywordRule, ...]
    redirect: Tuple[KeywordRule, ...]
    allowed_topics: Tuple[KeywordRule, ...]
    off_topic: Tuple[str, ...]
    off_topic_message: str = OFF_TOPIC_MESSAGE
    # Questions at or below this trimmed length are never rejected as off-topic
    off_topic_min_length: int = 10


def _rules(keywords, message=None) -> Tuple[KeywordRule, ...]:
    return tuple(KeywordRule(keyword, message) for keyword in keywords)


PRICING_KEYWORDS = ('pricing', 'cost', 'price', 'fee', 'budget', 'rate')

BLOCKED_KEYWORDS = (
    'pricing', 'cost', 'price', 'fee', 'payment', 'budget', 'rate', 'salary',
    'inappropriate', 'offensive', 'personal', 'political', 'religion',
)


DEFAULT_RULES = GuardrailRules(
    blocked=tuple(
        KeywordRule(keyword, PRICING_MESSAGE if keyword in PRICING_KEYWORDS else OFF_LIMITS_MESSAGE)
        for keyword in BLOCKED_KEYWORDS
    ),
    redirect=_rules(
        [
            'detailed pricing', 'project cost', 'engagement terms', 'contract',
            'specific requirements', 'custom project',
        ],
        BOOKING_MESSAGE,
    ),
    allowed_topics=_rules([
        'services', 'research', 'design', 'user experience', 'ux', 'case studies',
        'projects', 'portfolio', 'expertise', 'approach', 'methodology',
        'booking', 'meeting', 'coffee', 'podcast', 'introduction',
        'principles', 'philosophy', 'team', 'gauge', 'capabilities',
        'ethnography', 'data visualization', 'developer experience',
        'product design', 'strategy', 'analytics',
    ]),
    off_topic=(
        'weather', 'sports', 'news', 'recipe', 'how to make', 'what is the capital',
    ),
)
