"""SERP分析JSONの入力スキーマ。"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import Competitor, SerpProfile


class ProfileValidationError(ValueError):
    """SERP分析JSONが想定の形式を満たさない場合の例外。"""


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class IntentStats(BaseModel):
    model_config = ConfigDict(extra="allow")

    informational: float
    transactional: float


class WordCount(_Payload):
    target: int = 0


class PeopleAlsoAsk(_Payload):
    q: str


class Ideas(_Payload):
    people_also_ask: List[PeopleAlsoAsk] = Field(default_factory=list)


class CompetitorPayload(_Payload):
    rank: int = Field(..., ge=1)
    url: str
    title: str = ""
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    word_count: int = 0

    def to_competitor(self) -> Competitor:
        return Competitor(
            rank=self.rank,
            url=self.url,
            title=self.title,
            word_count=self.word_count,
            headers=tuple(self.headers),
        )


class SerpProfilePayload(_Payload):
    keyword: str
    language: str = ""
    engine: str = ""
    top_intent: str = ""
    intent_stats: IntentStats
    top_content_type: str = "other"
    content_type_stats: Dict[str, float] = Field(default_factory=dict)
    word_count: WordCount = Field(default_factory=WordCount)
    competitors: List[CompetitorPayload] = Field(default_factory=list)
    ideas: Ideas = Field(default_factory=Ideas)

    @field_validator("keyword")
    @classmethod
    def _keyword_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("keyword が空です")
        return value

    def to_profile(self) -> SerpProfile:
        return SerpProfile(
            keyword=self.keyword,
            intent_stats=self.intent_stats.model_dump(),
            language=self.language,
            engine=self.engine,
            top_intent=self.top_intent,
            top_content_type=self.top_content_type,
            content_type_stats=dict(self.content_type_stats),
            target_word_count=self.word_count.target,
            competitors=tuple(entry.to_competitor() for entry in self.competitors),
            people_also_ask=tuple(item.q for item in self.ideas.people_also_ask),
        )
