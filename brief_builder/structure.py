import logging
from typing import Callable, Dict, List, Optional

from .config import StructureConfig
from .models import ArticleStructure, ContentRole, SerpProfile, Section

LOGGER = logging.getLogger(__name__)

BASE_ROLE_ORDER = (
    ContentRole.introduction,
    ContentRole.comparison_points,
    ContentRole.comparison_table,
    ContentRole.conditional_recommendation,
    ContentRole.faq,
    ContentRole.caution,
    ContentRole.conclusion,
    ContentRole.summary,
)

H2_RULES: Dict[ContentRole, Callable[[str], str]] = {
    ContentRole.introduction: lambda keyword: f"{keyword}とは？基本知識を解説",
    ContentRole.comparison_points: lambda keyword: f"{keyword}選びで失敗しないための比較ポイント",
    ContentRole.comparison_table: lambda keyword: f"{keyword}のおすすめ比較一覧表",
    ContentRole.conditional_recommendation: lambda keyword: "【目的別】あなたにぴったりの選び方",
    ContentRole.faq: lambda keyword: "よくある質問（FAQ）",
    ContentRole.caution: lambda keyword: "利用前に知っておきたい注意点・リスク",
    ContentRole.conclusion: lambda keyword: "まとめ：最適な選択をするために",
    ContentRole.summary: lambda keyword: "最後に",
}

_missing = set(ContentRole) - set(H2_RULES)
if _missing:
    raise RuntimeError(f"H2生成ルールが未定義のロールがあります: {sorted(r.value for r in _missing)}")


class StructureBuilder:
    def __init__(self, config: Optional[StructureConfig] = None) -> None:
        self._config = config or StructureConfig()

    def build(self, profile: SerpProfile) -> ArticleStructure:
        title = self.build_title(profile)
        roles = self.order_roles(profile)
        sections = tuple(self._build_section(role, profile) for role in roles)
        LOGGER.debug("構成案ドラフト: %s (%s)", title, ", ".join(role.value for role in roles))
        return ArticleStructure(title=title, sections=sections)

    def build_title(self, profile: SerpProfile) -> str:
        if profile.top_content_type == "comparison":
            return self._config.comparison_title_template.format(keyword=profile.keyword)
        return profile.keyword

    def order_roles(self, profile: SerpProfile) -> List[ContentRole]:
        roles = list(BASE_ROLE_ORDER)
        if profile.transactional > profile.informational:
            # 購入意図が強い検索では結論を導入の直後に置く
            roles.remove(ContentRole.conclusion)
            roles.insert(1, ContentRole.conclusion)
        return roles

    def _build_section(self, role: ContentRole, profile: SerpProfile) -> Section:
        h2 = H2_RULES[role](profile.keyword)
        h3s: tuple = ()
        if role is ContentRole.faq:
            h3s = tuple(profile.people_also_ask[: self._config.max_faq_questions])
        return Section(h2=h2, role=role, h3s=h3s)


def build_structure(profile: SerpProfile, config: Optional[StructureConfig] = None) -> ArticleStructure:
    return StructureBuilder(config).build(profile)
