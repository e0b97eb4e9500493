from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from northcheck.errors import ValidationError
from northcheck.validation import validate_hash


class RiskLevel(str, Enum):
    VERY_HIGH = "Very High"
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"
    VERY_LOW = "Very Low"

    @classmethod
    def from_score(cls, score: float) -> RiskLevel:
        if score >= 90:
            return cls.VERY_HIGH
        if score >= 70:
            return cls.HIGH
        if score >= 40:
            return cls.MODERATE
        if score >= 10:
            return cls.LOW
        return cls.VERY_LOW


@dataclass(frozen=True)
class UrlCheck:
    url: str

    def payload(self) -> dict[str, Any]:
        return {"url": self.url}


@dataclass(frozen=True)
class FileCheck:
    sha256: str
    size: int = 0
    name: str = "unknown"

    def __post_init__(self) -> None:
        if not validate_hash(self.sha256):
            raise ValidationError(
                "Invalid SHA256 hash format. Hash must be 64 hexadecimal characters."
            )
        if self.size < 0:
            raise ValidationError(f"Size must be a non-negative integer, got {self.size}")

    def payload(self) -> dict[str, Any]:
        return {"sha256": self.sha256, "size": self.size, "name": self.name}


CheckRequest = Union[UrlCheck, FileCheck]


@dataclass
class RiskAssessment:
    score: float | None = None
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, body: Any) -> RiskAssessment | None:
        """Extract ``data.risk`` from a checker response, or None if it is missing."""
        if not isinstance(body, dict):
            return None
        data = body.get("data")
        if not isinstance(data, dict):
            return None
        risk = data.get("risk")
        if not isinstance(risk, dict):
            return None

        score = risk.get("score")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            score = None
        categories = risk.get("categories") or []
        if not isinstance(categories, list):
            categories = []
        return cls(score=score, categories=[str(c) for c in categories])

    @property
    def level(self) -> RiskLevel | None:
        if self.score is None:
            return None
        return RiskLevel.from_score(self.score)

    @property
    def category_label(self) -> str:
        if not self.categories:
            return "Unknown"
        return ", ".join(self.categories)
