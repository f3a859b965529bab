"""SERP分析JSONから記事構成案（H1/H2/H3）を組み立てるパッケージ。"""

from .models import ArticleStructure, CommonHeading, Competitor, ContentRole, GenerationStep, SerpProfile, Section
from .pipeline import iterate_content_steps, load_profile, synthesize_structure
from .schema import ProfileValidationError

__all__ = [
    "ArticleStructure",
    "CommonHeading",
    "Competitor",
    "ContentRole",
    "GenerationStep",
    "ProfileValidationError",
    "SerpProfile",
    "Section",
    "iterate_content_steps",
    "load_profile",
    "synthesize_structure",
]
