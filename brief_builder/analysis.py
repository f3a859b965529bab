import collections
import logging
from typing import List, Optional, Sequence

from .config import AnalysisConfig
from .models import CommonHeading, Competitor
from .normalizer import normalize_header

LOGGER = logging.getLogger(__name__)


class HeadingAggregator:
    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self._config = config or AnalysisConfig()

    def count(self, competitors: Sequence[Competitor], level: Optional[str] = None) -> collections.Counter:
        """正規化した見出しごとに、使用している競合サイト数を数える。"""
        level = level or self._config.heading_level
        counter: collections.Counter = collections.Counter()
        for competitor in competitors:
            seen = set()
            for tag, text in competitor.headers:
                if tag != level:
                    continue
                normalized = normalize_header(text)
                if len(normalized) < self._config.min_heading_length or normalized in seen:
                    continue
                seen.add(normalized)
                counter[normalized] += 1
        return counter

    def common_headings(
        self, competitors: Sequence[Competitor], level: Optional[str] = None
    ) -> List[CommonHeading]:
        if not competitors:
            LOGGER.debug("競合データがないため共通見出しの集計をスキップします")
            return []
        counter = self.count(competitors, level)
        threshold = self._config.coverage_ratio * len(competitors)
        # most_common は安定ソートなので同数の見出しは初出順のまま
        common = [
            CommonHeading(text=text, count=count)
            for text, count in counter.most_common()
            if count >= threshold
        ]
        LOGGER.debug(
            "共通見出し: %d件 / 候補 %d件 (閾値 %.1f, 競合 %d件)",
            len(common),
            len(counter),
            threshold,
            len(competitors),
        )
        return common


def aggregate_common_headings(
    competitors: Sequence[Competitor],
    level: str = "h2",
    config: Optional[AnalysisConfig] = None,
) -> List[CommonHeading]:
    return HeadingAggregator(config).common_headings(competitors, level)
