"""構成案生成の設定値。"""

from __future__ import annotations

import os
from dataclasses import dataclass

COMPARISON_TITLE_TEMPLATE = "{keyword}比較・おすすめランキング15選【2026年最新】"


@dataclass(frozen=True)
class AnalysisConfig:
    heading_level: str = "h2"
    min_heading_length: int = 2
    coverage_ratio: float = 0.3


@dataclass(frozen=True)
class StructureConfig:
    max_faq_questions: int = 3
    max_h3_per_section: int = 5
    comparison_title_template: str = COMPARISON_TITLE_TEMPLATE


@dataclass(frozen=True)
class GeneratorConfig:
    step_delay: float = 0.0
    section_char_target: int = 1500


@dataclass(frozen=True)
class AppConfig:
    analysis: AnalysisConfig = AnalysisConfig()
    structure: StructureConfig = StructureConfig()
    generator: GeneratorConfig = GeneratorConfig()


def load_config() -> AppConfig:
    """環境変数を考慮して設定を読み込む。"""

    analysis = AnalysisConfig(
        coverage_ratio=_env_number("BRIEF_BUILDER_COVERAGE_RATIO", AnalysisConfig.coverage_ratio, float),
    )
    structure = StructureConfig(
        max_h3_per_section=_env_number("BRIEF_BUILDER_MAX_H3", StructureConfig.max_h3_per_section, int),
    )
    generator = GeneratorConfig(
        step_delay=_env_number("BRIEF_BUILDER_STEP_DELAY", GeneratorConfig.step_delay, float),
        section_char_target=_env_number(
            "BRIEF_BUILDER_SECTION_CHARS", GeneratorConfig.section_char_target, int
        ),
    )
    return AppConfig(analysis=analysis, structure=structure, generator=generator)


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"環境変数 {name} の値が不正です: {raw!r}") from None
