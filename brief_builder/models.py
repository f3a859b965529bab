from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class ContentRole(str, Enum):
    introduction = "introduction"
    conclusion = "conclusion"
    comparison_points = "comparison_points"
    comparison_table = "comparison_table"
    conditional_recommendation = "conditional_recommendation"
    faq = "faq"
    caution = "caution"
    summary = "summary"


@dataclass(frozen=True)
class Competitor:
    rank: int
    url: str
    title: str = ""
    word_count: int = 0
    headers: Tuple[Tuple[str, str], ...] = ()


@dataclass(frozen=True)
class SerpProfile:
    keyword: str
    intent_stats: Mapping[str, float] = field(hash=False)
    language: str = ""
    engine: str = ""
    top_intent: str = ""
    top_content_type: str = "other"
    content_type_stats: Mapping[str, float] = field(default_factory=dict, hash=False)
    target_word_count: int = 0
    competitors: Tuple[Competitor, ...] = ()
    people_also_ask: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # 分布は読み取り専用のコピーとして持つ
        object.__setattr__(self, "intent_stats", MappingProxyType(dict(self.intent_stats)))
        object.__setattr__(self, "content_type_stats", MappingProxyType(dict(self.content_type_stats)))

    @property
    def informational(self) -> float:
        return self.intent_stats.get("informational", 0.0)

    @property
    def transactional(self) -> float:
        return self.intent_stats.get("transactional", 0.0)


@dataclass(frozen=True)
class Section:
    h2: str
    role: ContentRole
    h3s: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ArticleStructure:
    title: str
    sections: Tuple[Section, ...]

    def roles(self) -> Tuple[ContentRole, ...]:
        return tuple(section.role for section in self.sections)

    def find(self, role: ContentRole) -> Section | None:
        for section in self.sections:
            if section.role == role:
                return section
        return None


@dataclass(frozen=True)
class CommonHeading:
    text: str
    count: int


@dataclass(frozen=True)
class GenerationStep:
    section_index: int
    h2: str
    role: ContentRole
    content: str
