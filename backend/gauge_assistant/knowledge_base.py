"""
Knowledge Base
==============
Static reference text the assistant is grounded in. The whole document is
sent with every allowed question, so it is kept small and loaded once.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gauge_assistant.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


GAUGE_KNOWLEDGE_BASE = """
# Gauge.io - User Experience Consultancy

## Company Overview
Gauge.io is a user experience consultancy specializing in developer experience research, strategy and data analytics, and product and service design.

## Services Offered

### Developer Experience Research
- Specialty Recruitment: Finding and recruiting the right research participants
- Applied Ethnography: Understanding users in their natural environment
- Mixed Methods Studies: Combining qualitative and quantitative research
- Survey Design and Programming: Creating empathetic, well-designed surveys

### Strategy and Data Analytics
- Experience Mapping: Visualizing user journeys and pain points
- Audience Segmentation: Understanding different user groups
- Persona Development: Creating actionable user personas
- Community Growth and Advocacy: Building engaged user communities

### Product and Service Design
- Heuristics and UX Assessments: Evaluating product usability
- Information Architecture: Organizing information effectively
- Interaction Design and Prototyping: Creating intuitive interfaces
- Data Visualization: Making complex data understandable

## Case Studies

### 1. Visualizing Information Security Threat Vectors
**Focus:** Helping SecOps professionals visualize and prioritize security threats
**Services:** Survey Design and Programming, Mixed Methods Studies, Data Visualization
**Key Stats:** 125 analysis factors, 49 survey completions
**Approach:** Empathetic research with security professionals, humanizing risk assessment, creating radial visualizations of threat vectors
**URL:** /case-studies/visualizing-infomation-security-threat-vectors

### 2. Making the Case for Internal Tools
**Focus:** Redesigning internal tools to improve productivity
**Services:** Applied Ethnography, Experience Mapping, Interaction Design and Prototyping
**URL:** /case-studies/making-the-case-for-internal-tools

### 3. Validating Research Hypotheses at Scale
**Focus:** Combining qualitative insights with quantitative validation
**Services:** Specialty Recruitment, Mixed Methods Studies, Audience Segmentation
**URL:** /case-studies/validating-research-hypotheses-at-scale

### 4. Behavior and Identity in Virtual Worlds
**Focus:** Exploring identity and interaction patterns in virtual environments
**Services:** Applied Ethnography, Persona Development, Interaction Design and Prototyping
**URL:** /case-studies/behavior-and-identity-in-virtual-worlds

## Company Principles
Gauge.io maintains several core principles:
- Human-centric perspective in all design work
- Agile and iterative approach - "built to fail fast"
- Technology agnostic - using the best tools for each project
- Collaborative, not isolated - creating living documents and platforms for discussion
- Empathy-driven research, especially with time-pressed professionals

## Booking Meetings

### Coffee Meetings
For casual introductions and project discussions. Available at the Ferry Building in San Francisco.
**URL:** /coffee

### Podcast Introductions
For longer-form discussions about UX research, design, and industry topics.
**URL:** /podcast

## Additional Resources
- Principles page for detailed philosophy: /principles
- Case studies overview: /case-studies
- Blog with industry insights and thoughts

## Contact & Location
Based in San Francisco, with a focus on working with technical organizations and developer-focused products.
"""

# Opening questions offered by the chat widget
STARTER_PROMPTS = (
    "What services does Gauge.io offer?",
    "Show me case studies",
    "How can I book a meeting?",
    "Tell me about Gauge's approach to UX research",
)


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable grounding document"""
    text: str
    source: str = "builtin"

    def __len__(self) -> int:
        return len(self.text)


def load_knowledge_base(path: Optional[str] = None) -> KnowledgeBase:
    """
    Load the knowledge base once at startup.

    Args:
        path: Optional markdown file to use instead of the built-in document.
            The file content is used as-is.

    Returns:
        KnowledgeBase

    Raises:
        ConfigurationError: if an explicitly configured file is missing or empty
    """
    if not path:
        return KnowledgeBase(text=GAUGE_KNOWLEDGE_BASE)

    kb_file = Path(path)
    try:
        text = kb_file.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read knowledge base file {kb_file}: {e}") from e

    if not text.strip():
        raise ConfigurationError(f"Knowledge base file {kb_file} is empty")

    logger.info(f"Loaded knowledge base from {kb_file} ({len(text)} chars)")
    return KnowledgeBase(text=text, source=str(kb_file))
