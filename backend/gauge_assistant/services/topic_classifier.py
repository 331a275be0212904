"""
Topic Classifier Service
========================
Keyword guardrails deciding whether a question reaches the LLM.

Stages run in a fixed precedence and the first stage that matches decides:
1. blocked   - off-limits topics; pricing-family keywords get the pricing reply
2. redirect  - questions needing a human conversation; booking suggestion
3. topic     - allowed-topic keywords pass; long questions hitting the
               off-topic denylist are refused

A question matching both the blocked and redirect lists is always blocked.
Anything no stage claims is allowed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from gauge_assistant.services.guardrail_rules import GuardrailRules, KeywordRule, DEFAULT_RULES

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Guardrail outcomes"""
    ALLOWED = "allowed"
    BLOCKED = "blocked"
    REDIRECTED = "redirected"


@dataclass(frozen=True)
class Classification:
    """
    Result of a guardrail evaluation.

    message is the canned reply for BLOCKED/REDIRECTED and None for ALLOWED.
    stage and matched_keyword record what decided, for logging and tests.
    """
    verdict: Verdict
    message: Optional[str] = None
    stage: str = "default"
    matched_keyword: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.verdict is Verdict.ALLOWED


ALLOWED = Classification(Verdict.ALLOWED)


@dataclass(frozen=True)
class GuardrailStage:
    """A named predicate returning a Classification when it claims the question

    evaluate receives the lowercased question and the length of the trimmed,
    un-lowercased question.
    """
    name: str
    evaluate: Callable[[str, int], Optional[Classification]]


def _first_match(text: str, rules: Tuple[KeywordRule, ...]) -> Optional[KeywordRule]:
    for rule in rules:
        if rule.keyword in text:
            return rule
    return None


class TopicClassifier:
    """
    Ordered keyword guardrails.

    Rules are injected so tests can swap them; the default instance uses
    DEFAULT_RULES. Classification is pure: no I/O and no state besides the
    immutable rules, so one instance serves concurrent requests.
    """

    PRECEDENCE = ("blocked", "redirect", "topic")

    def __init__(self, rules: GuardrailRules = DEFAULT_RULES):
        self.rules = rules
        self.stages: Tuple[GuardrailStage, ...] = (
            GuardrailStage("blocked", self._check_blocked),
            GuardrailStage("redirect", self._check_redirect),
            GuardrailStage("topic", self._check_topic),
        )

    def _check_blocked(self, text: str, length: int) -> Optional[Classification]:
        rule = _first_match(text, self.rules.blocked)
        if rule is None:
            return None
        return Classification(Verdict.BLOCKED, rule.message, "blocked", rule.keyword)

    def _check_redirect(self, text: str, length: int) -> Optional[Classification]:
        rule = _first_match(text, self.rules.redirect)
        if rule is None:
            return None
        return Classification(Verdict.REDIRECTED, rule.message, "redirect", rule.keyword)

    def _check_topic(self, text: str, length: int) -> Optional[Classification]:
        rule = _first_match(text, self.rules.allowed_topics)
        if rule is not None:
            return Classification(Verdict.ALLOWED, None, "topic", rule.keyword)

        # Short questions get the benefit of the doubt
        if length <= self.rules.off_topic_min_length:
            return None

        for keyword in self.rules.off_topic:
            if keyword in text:
                return Classification(Verdict.BLOCKED, self.rules.off_topic_message, "topic", keyword)
        return None

    def classify(self, question: str) -> Classification:
        """
        Run the guardrail stages in precedence order.

        Args:
            question: Raw visitor question

        Returns:
            Classification from the first stage that matches, else ALLOWED
        """
        trimmed = question.strip()
        # Lowercasing can change the length of non-ASCII text
        length = len(trimmed)
        text = trimmed.lower()

        for stage in self.stages:
            result = stage.evaluate(text, length)
            if result is not None:
                break
        else:
            result = ALLOWED

        logger.info(
            f"Topic classification: query='{question[:50]}', "
            f"verdict={result.verdict.value}, stage={result.stage}, "
            f"keyword={result.matched_keyword!r}"
        )
        return result


# Singleton instance
topic_classifier = TopicClassifier()
