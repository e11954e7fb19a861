"""Category and role enumerations shared across the interview model."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Decision category tag carried by decisions and questions.

    The first eight members are the decision categories produced by spec
    analysis. GENERAL is only used by questions that are not tied to a
    specific kind of decision.
    """

    ARCHITECTURE = "architecture"
    LIBRARY = "library"
    PATTERN = "pattern"
    INTEGRATION = "integration"
    DATA_MODEL = "data-model"
    API_DESIGN = "api-design"
    SECURITY = "security"
    PERFORMANCE = "performance"
    GENERAL = "general"


DECISION_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c is not Category.GENERAL)


class StakeholderRole(StrEnum):
    """The stakeholder perspective an interview is conducted for."""

    TECH_LEAD = "tech-lead"
    QA = "qa"
    UX = "ux"
