import json
import logging
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError

from .config import AppConfig
from .generator import ContentStepGenerator
from .integration import integrate_competitor_headings
from .models import ArticleStructure, GenerationStep, SerpProfile
from .schema import ProfileValidationError, SerpProfilePayload
from .structure import StructureBuilder

LOGGER = logging.getLogger(__name__)


def synthesize_structure(profile: SerpProfile, config: Optional[AppConfig] = None) -> ArticleStructure:
    config = config or AppConfig()
    LOGGER.info("構成案を生成します: %s (競合 %d件)", profile.keyword, len(profile.competitors))
    draft = StructureBuilder(config.structure).build(profile)
    return integrate_competitor_headings(profile, draft, config)


def iterate_content_steps(
    profile: SerpProfile,
    structure: ArticleStructure,
    config: Optional[AppConfig] = None,
) -> Iterator[GenerationStep]:
    config = config or AppConfig()
    return ContentStepGenerator(config.generator).iterate(profile, structure)


def load_profile(raw: str | bytes | Dict[str, Any]) -> SerpProfile:
    payload: Any
    if isinstance(raw, (str, bytes)):
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ProfileValidationError(f"SERP分析JSONを解析できませんでした: {exc}") from exc
    else:
        payload = raw
    if not isinstance(payload, dict):
        raise ProfileValidationError(
            f"SERP分析JSONはオブジェクトである必要があります: {type(payload).__name__}"
        )
    try:
        return SerpProfilePayload.model_validate(payload).to_profile()
    except ValidationError as exc:
        raise ProfileValidationError(f"SERP分析JSONの形式が不正です:\n{exc}") from exc
