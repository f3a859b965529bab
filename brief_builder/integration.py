import dataclasses
import logging
from typing import List, Optional

from .analysis import HeadingAggregator
from .config import AppConfig
from .models import ArticleStructure, ContentRole, SerpProfile

LOGGER = logging.getLogger(__name__)


def integrate_competitor_headings(
    profile: SerpProfile,
    structure: ArticleStructure,
    config: Optional[AppConfig] = None,
) -> ArticleStructure:
    """競合の共通H2見出しを、構成案のH3として差し込む。

    差し込み先は comparison_points セクション（なければ先頭セクション）のみ。
    既存H2と部分一致する見出しは重複とみなして除外し、H3が上限に達した後の見出しは捨てる。
    """
    config = config or AppConfig()
    common = HeadingAggregator(config.analysis).common_headings(profile.competitors)
    if not common or not structure.sections:
        return structure

    h2_texts = [section.h2 for section in structure.sections]
    target_index = _target_index(structure)
    h3s: List[str] = list(structure.sections[target_index].h3s)
    limit = config.structure.max_h3_per_section

    for heading in common:
        if any(heading.text in h2 or h2 in heading.text for h2 in h2_texts):
            LOGGER.debug("既存H2と重複するためスキップ: %s", heading.text)
            continue
        if len(h3s) >= limit:
            LOGGER.debug("H3の上限(%d)に達したため破棄: %s", limit, heading.text)
            continue
        h3s.append(heading.text)

    sections = list(structure.sections)
    sections[target_index] = dataclasses.replace(sections[target_index], h3s=tuple(h3s))
    return dataclasses.replace(structure, sections=tuple(sections))


def _target_index(structure: ArticleStructure) -> int:
    for index, section in enumerate(structure.sections):
        if section.role is ContentRole.comparison_points:
            return index
    return 0
