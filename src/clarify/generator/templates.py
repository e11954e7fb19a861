"""Fixed question template tables used by the question generator."""

from __future__ import annotations

from dataclasses import dataclass

from clarify.model.category import Category


@dataclass(frozen=True)
class CoreTemplate:
    text: str
    category: Category
    priority: int


@dataclass(frozen=True)
class FollowUpTemplate:
    """A follow-up attached to the first core question of a matching category.

    With no keywords the follow-up is always asked once its core question
    has been answered.
    """

    text: str
    category: Category
    trigger_category: Category | None = None
    trigger_keywords: tuple[str, ...] = ()


# Wording for a question about a decision that needs clarification, keyed
# by the decision's category. Every decision category must have an entry.
DECISION_QUESTION_TEMPLATES: dict[Category, str] = {
    Category.ARCHITECTURE: 'Regarding "{title}": What architectural approach would you prefer, and what are your constraints?',
    Category.LIBRARY: 'For "{title}": Do you have preferences or requirements for the libraries/frameworks to use?',
    Category.PATTERN: 'About "{title}": What design patterns or implementation approaches should be considered?',
    Category.INTEGRATION: 'Concerning "{title}": How should this integrate with existing systems?',
    Category.DATA_MODEL: 'For "{title}": What are the data requirements and relationships to consider?',
    Category.API_DESIGN: 'Regarding "{title}": What API design principles or constraints apply?',
    Category.SECURITY: 'About "{title}": What security requirements must be addressed?',
    Category.PERFORMANCE: 'For "{title}": What performance requirements or optimizations are needed?',
}

GENERAL_DECISION_TEMPLATE = 'Can you clarify the requirements for "{title}"?'

AMBIGUITY_FALLBACK_TEMPLATE = "Can you clarify: {description}?"

CORE_TEMPLATES: tuple[CoreTemplate, ...] = (
    CoreTemplate(
        "What are the primary architectural constraints or requirements for this feature?",
        Category.ARCHITECTURE,
        1,
    ),
    CoreTemplate(
        "Are there any performance requirements or SLAs that need to be considered?",
        Category.PERFORMANCE,
        2,
    ),
    CoreTemplate(
        "How should this feature integrate with the existing system components?",
        Category.INTEGRATION,
        3,
    ),
    CoreTemplate(
        "What data needs to be stored, and what are the access patterns?",
        Category.DATA_MODEL,
        4,
    ),
    CoreTemplate(
        "Are there specific security or compliance requirements to address?",
        Category.SECURITY,
        5,
    ),
    CoreTemplate(
        "What are the expected scale requirements (users, data volume, transactions)?",
        Category.PERFORMANCE,
        6,
    ),
    CoreTemplate(
        "Are there any technology constraints or preferences for implementation?",
        Category.LIBRARY,
        7,
    ),
    CoreTemplate(
        "What trade-offs are you willing to make (speed vs. cost, simplicity vs. flexibility)?",
        Category.GENERAL,
        8,
    ),
)

FOLLOW_UP_TEMPLATES: tuple[FollowUpTemplate, ...] = (
    FollowUpTemplate(
        "Can you elaborate on the specific requirements you mentioned?",
        Category.GENERAL,
    ),
    FollowUpTemplate(
        "What happens if that dependency fails? What is the fallback behavior?",
        Category.ARCHITECTURE,
        trigger_keywords=("depends on", "relies on", "integration", "external"),
    ),
    FollowUpTemplate(
        "How should the system handle peak load scenarios?",
        Category.PERFORMANCE,
        trigger_keywords=("scale", "performance", "high traffic", "concurrent"),
    ),
    FollowUpTemplate(
        "What backward compatibility requirements exist?",
        Category.INTEGRATION,
        trigger_keywords=("existing", "legacy", "migration", "upgrade"),
    ),
    FollowUpTemplate(
        "What authentication/authorization model should be used?",
        Category.SECURITY,
        trigger_category=Category.SECURITY,
    ),
    FollowUpTemplate(
        "Should the data model support future extensibility?",
        Category.DATA_MODEL,
        trigger_category=Category.DATA_MODEL,
    ),
    FollowUpTemplate(
        "What caching strategy would be appropriate?",
        Category.PERFORMANCE,
        trigger_keywords=("performance", "latency", "fast", "cache"),
    ),
    FollowUpTemplate(
        "Are there any API versioning requirements?",
        Category.API_DESIGN,
        trigger_category=Category.API_DESIGN,
    ),
)

# Keywords that fire a follow-up on a moderately ambiguous decision with no
# listed options.
HESITATION_KEYWORDS: tuple[str, ...] = ("depends", "not sure", "unsure")


def decision_question_text(category: Category, title: str) -> str:
    """Return the clarifying question for a decision of *category*."""
    template = DECISION_QUESTION_TEMPLATES.get(category, GENERAL_DECISION_TEMPLATE)
    return template.format(title=title)
