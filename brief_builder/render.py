from typing import Any, Dict, List

from .models import ArticleStructure, GenerationStep


def structure_to_dict(structure: ArticleStructure) -> Dict[str, Any]:
    return {
        "title": structure.title,
        "sections": [
            {"h2": section.h2, "role": section.role.value, "h3s": list(section.h3s)}
            for section in structure.sections
        ],
    }


def step_to_dict(step: GenerationStep) -> Dict[str, Any]:
    return {
        "section_index": step.section_index,
        "h2": step.h2,
        "role": step.role.value,
        "content": step.content,
    }


def render_markdown(structure: ArticleStructure) -> str:
    """構成案を見出しだけのMarkdownにする。"""
    lines: List[str] = [f"# {structure.title}"]
    for section in structure.sections:
        lines.append("")
        lines.append(f"## {section.h2}")
        for h3 in section.h3s:
            lines.append(f"### {h3}")
    return "\n".join(lines) + "\n"
