import logging
import time
from typing import Iterator, Optional

from .config import GeneratorConfig
from .models import ArticleStructure, GenerationStep, SerpProfile, Section

LOGGER = logging.getLogger(__name__)


class ContentStepGenerator:
    """構成案のセクションごとに本文生成ステップを1つずつ返す。

    実際の本文は呼び出し側が外部のLLMで生成する。ここではその入力となるプレースホルダを作る。
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self._config = config or GeneratorConfig()

    def iterate(self, profile: SerpProfile, structure: ArticleStructure) -> Iterator[GenerationStep]:
        for index, section in enumerate(structure.sections):
            if self._config.step_delay > 0:
                time.sleep(self._config.step_delay)
            LOGGER.debug("本文ステップ %d/%d: %s", index + 1, len(structure.sections), section.h2)
            yield GenerationStep(
                section_index=index,
                h2=section.h2,
                role=section.role,
                content=self._compose_placeholder(profile.keyword, section),
            )

    def _compose_placeholder(self, keyword: str, section: Section) -> str:
        role = section.role.value
        content = (
            f"（{section.h2} の本文を生成中... role: {role} に基づき"
            f"約{self._config.section_char_target}文字程度を執筆します。）\n\n"
            f"ここでは {keyword} に関する詳細な情報を {role} の役割に従って展開します。\n"
        )
        if section.h3s:
            content += "見出し：\n- " + "\n- ".join(section.h3s)
        return content
