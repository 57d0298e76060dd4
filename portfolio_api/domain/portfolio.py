"""Domain helpers for the portfolio document (projects and skills)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

SKILL_CATEGORY_LABELS = {
    "frontend": "Frontend",
    "backend": "Backend",
    "security": "Security",
    "blockchain": "Blockchain",
    "database": "Database",
    "devops": "DevOps",
}


def skill_category_label(category: str | None) -> str:
    """Display label for a skill category; unknown values pass through untouched."""
    if category is None:
        return ""
    return SKILL_CATEGORY_LABELS.get(category, category)


def skill_matches_category(skill: Mapping[str, Any], wanted: str) -> bool:
    """Match against the raw category key or its label, ignoring case."""
    target = (wanted or "").strip().lower()
    if not target:
        return True
    raw = skill.get("category") if isinstance(skill, Mapping) else None
    if not isinstance(raw, str):
        return False
    return target in {raw.lower(), skill_category_label(raw).lower()}


@dataclass
class PortfolioDocument:
    """Projects and skills as stored; entries are passed through unchanged."""

    projects: List[Any] = field(default_factory=list)
    skills: List[Any] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Any) -> "PortfolioDocument":
        if not isinstance(raw, Mapping):
            raise ValueError("portfolio document must be a JSON object")
        return cls(
            projects=raw.get("projects") or [],
            skills=raw.get("skills") or [],
        )
